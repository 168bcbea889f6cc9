"""Stable key names for the property map consumed by the WDL templates.

These names become variable names in the generated WDL and JSON, so they must not
change and must not collide with WDL reserved words.
"""

from __future__ import annotations

# top level
WORK_UNIT_NAME = "name"
WORK_UNIT_SUMMARY = "summary"
ARGUMENTS = "arguments"

# single argument map
ARGUMENT_NAME = "name"
ARGUMENT_TYPE = "type"
ARGUMENT_DEFAULT_VALUE = "defaultValue"
ARGUMENT_REQUIRED = "required"
ARGUMENT_SUMMARY = "summary"
ARGUMENT_COLLECTION = "collection"
ARGUMENT_POSITIONAL = "positional"
WDL_ARGUMENT_ACTUAL_NAME = "actualArgName"
WDL_ARGUMENT_INPUT_TYPE = "wdlinputtype"

# placeholder name for the positional argument group; the templates use the same name
POSITIONAL_ARGS = "positionalArgs"

WDL_RUNTIME_OUTPUTS = "runtimeOutputs"
WDL_REQUIRED_OUTPUTS = "requiredOutputs"
WDL_REQUIRED_COMPANIONS = "requiredCompanions"
WDL_OPTIONAL_COMPANIONS = "optionalCompanions"

WDL_WORKFLOW_PROPERTIES = "workflowProperties"
WDL_WORKFLOW_MEMORY = "memoryRequirements"
WDL_WORKFLOW_DISKS = "diskRequirements"
WDL_WORKFLOW_CPU = "cpuRequirements"
WDL_WORKFLOW_PREEMPTIBLE = "preemptibleRequirements"
WDL_WORKFLOW_BOOT_DISK_SIZE_GB = "bootdisksizegbRequirements"
