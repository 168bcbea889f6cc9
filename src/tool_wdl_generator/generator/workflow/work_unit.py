"""Drive one WDL generation pass over the arguments of a single work unit."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from tool_wdl_generator.generator import template_properties as props
from tool_wdl_generator.generator.arguments.model import (
    ArgumentDefinition,
    RuntimeProperties,
    WorkflowResource,
    WorkUnit,
)
from tool_wdl_generator.generator.conversion.defaults import to_json_default
from tool_wdl_generator.generator.conversion.names import wdl_option_name
from tool_wdl_generator.generator.conversion.resolver import WDLTypeResolver
from tool_wdl_generator.generator.errors import (
    InvalidResourceMetadataError,
    WDLGenerationError,
)
from tool_wdl_generator.generator.workflow.propagator import (
    ResolvedArgument,
    WorkflowOutputManifest,
    WorkflowOutputPropagator,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorkUnitProperties:
    """Everything the WDL and inputs templates need for one work unit."""

    name: str
    summary: str
    arguments: Mapping[str, ResolvedArgument]
    outputs: WorkflowOutputManifest
    workflow_properties: Mapping[str, str] | None = None

    def to_json(self) -> dict[str, object]:
        out: dict[str, object] = {
            props.WORK_UNIT_NAME: self.name,
            props.WORK_UNIT_SUMMARY: self.summary,
            props.ARGUMENTS: {name: arg.to_json() for name, arg in self.arguments.items()},
        }
        out.update(self.outputs.to_json())
        if self.workflow_properties is not None:
            out[props.WDL_WORKFLOW_PROPERTIES] = dict(self.workflow_properties)
        return out


def workflow_properties_map(runtime: RuntimeProperties) -> dict[str, str]:
    return {
        props.WDL_WORKFLOW_MEMORY: runtime.memory,
        props.WDL_WORKFLOW_DISKS: runtime.disks,
        props.WDL_WORKFLOW_CPU: str(runtime.cpu),
        props.WDL_WORKFLOW_PREEMPTIBLE: str(runtime.preemptible),
        props.WDL_WORKFLOW_BOOT_DISK_SIZE_GB: str(runtime.boot_disk_size_gb),
    }


class WorkUnitHandler:
    """Convert the arguments of one work unit into WDL template properties.

    Named arguments are processed in declaration order, followed by the positional
    argument group (if any). A handler is single use; :meth:`process` may only be
    called once.
    """

    def __init__(self, work_unit: WorkUnit) -> None:
        self.work_unit = work_unit
        self._resolver = WDLTypeResolver(work_unit.name)
        self._propagator = WorkflowOutputPropagator(work_unit.name)

    def process(self) -> WorkUnitProperties:
        """Run the pass and publish the resulting properties.

        Raises:
            WDLGenerationError: On the first argument that can't be converted. No
                properties are returned for the work unit in that case.
        """

        logger.info(
            "Processing work unit",
            extra={"work_unit": self.work_unit.name, "arguments": len(self.work_unit.arguments)},
        )
        arguments: dict[str, ResolvedArgument] = {}

        for arg in self.work_unit.named_arguments:
            # built-in flags like --help/--version don't belong in the WDL or its inputs
            if arg.special:
                logger.debug(
                    "Skipping special argument",
                    extra={"work_unit": self.work_unit.name, "argument": arg.name},
                )
                continue
            resolved = self.process_named_argument(arg)
            arguments[resolved.wdl_name] = resolved

        positional = self.work_unit.positional_argument
        if positional is not None and not positional.special:
            resolved = self.process_positional_argument(positional)
            arguments[resolved.wdl_name] = resolved

        outputs = self._propagator.publish()
        runtime = self.work_unit.runtime_properties
        return WorkUnitProperties(
            name=self.work_unit.name,
            summary=self.work_unit.summary,
            arguments=MappingProxyType(arguments),
            outputs=outputs,
            workflow_properties=(
                MappingProxyType(workflow_properties_map(runtime)) if runtime is not None else None
            ),
        )

    def process_named_argument(self, arg: ArgumentDefinition) -> ResolvedArgument:
        try:
            wdl_name = wdl_option_name(arg.name)
        except ValueError as e:
            raise WDLGenerationError(
                str(e), work_unit=self.work_unit.name, argument=arg.name
            ) from e
        return self._process(arg, wdl_name)

    def process_positional_argument(self, arg: ArgumentDefinition) -> ResolvedArgument:
        # positional args are a single group under a fixed template name
        return self._process(arg, props.POSITIONAL_ARGS)

    def workflow_resource(self, arg: ArgumentDefinition) -> WorkflowResource | None:
        """Return the argument's validated workflow resource, if it has one."""

        resource = arg.resource
        if resource is not None and not resource.has_direction:
            raise InvalidResourceMetadataError(
                "WorkflowResource must be marked as either an input or an output",
                work_unit=self.work_unit.name,
                argument=arg.name,
            )
        return resource

    def _process(self, arg: ArgumentDefinition, wdl_name: str) -> ResolvedArgument:
        resource = self.workflow_resource(arg)
        types = self._resolver.resolve(arg, resource, arg.doc_type)
        resolved = ResolvedArgument(
            wdl_name=wdl_name,
            actual_name=arg.name,
            logical_type=types.logical_type,
            input_type=types.input_type,
            json_default=to_json_default(types.input_type, arg.default_value),
            required=arg.required,
            summary=arg.summary,
            collection=arg.is_collection,
            positional=arg.positional,
        )
        self._propagator.record_argument(resolved, resource, arg.required)
        logger.debug(
            "Resolved argument",
            extra={
                "work_unit": self.work_unit.name,
                "argument": arg.name,
                "wdl_name": wdl_name,
                "wdl_type": types.logical_type,
                "wdl_input_type": types.input_type,
            },
        )
        return resolved
