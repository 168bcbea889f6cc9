#!/usr/bin/env python3
"""Programmatic WDL property generation example.

This demonstrates using the generator components directly:

* build a tool's argument model with explicit constructor calls
* resolve WDL types, names and defaults for every argument
* print the template properties and the default inputs JSON

The output directory is taken from settings (`.env` / WDLGEN_OUTPUT_DIR) when
`--write` is given.
"""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from tool_wdl_generator.generator.arguments.model import (
    ArgumentDefinition,
    RuntimeProperties,
    TypeDescriptor,
    WorkflowResource,
    WorkUnit,
)
from tool_wdl_generator.generator.config import GeneratorSettings
from tool_wdl_generator.generator.errors import WDLGenerationError
from tool_wdl_generator.generator.logging import configure_logging
from tool_wdl_generator.generator.main import write_outputs
from tool_wdl_generator.generator.workflow.inputs_manifest import render_inputs_manifest
from tool_wdl_generator.generator.workflow.work_unit import WorkUnitHandler


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate WDL properties (programmatic example).")
    parser.add_argument("--name", default="HaplotypeCaller", help="Work unit (tool) name")
    parser.add_argument(
        "--write",
        action="store_true",
        help="Write the generated files to the configured output directory",
    )
    return parser.parse_args(argv)


def build_work_unit(name: str) -> WorkUnit:
    return WorkUnit(
        name=name,
        summary="Call germline SNPs and indels",
        runtime_properties=RuntimeProperties(memory="8G", cpu=2),
        arguments=(
            ArgumentDefinition(
                name="--input",
                declared_type="List[File]",
                is_collection=True,
                required=True,
                summary="BAM/SAM/CRAM file containing reads",
                resource=WorkflowResource(is_input=True, optional_companions=("input-index",)),
            ),
            ArgumentDefinition(
                name="--reference",
                declared_type="File",
                required=True,
                summary="Reference sequence file",
                resource=WorkflowResource(
                    is_input=True, required_companions=("reference-dictionary", "reference-index")
                ),
            ),
            ArgumentDefinition(
                name="--output",
                declared_type="File",
                required=True,
                summary="File to which variants should be written",
                resource=WorkflowResource(is_output=True, required_companions=("output-index",)),
            ),
            ArgumentDefinition(
                name="--intervals",
                declared_type="List[String]",
                is_collection=True,
                default_value="[]",
            ),
            ArgumentDefinition(
                name="--emit-ref-confidence",
                declared_type=TypeDescriptor(name="ReferenceConfidenceMode", is_enum=True),
                default_value="NONE",
            ),
            ArgumentDefinition(
                name="--standard-min-confidence-threshold-for-calling",
                declared_type="double",
                default_value="30.0",
            ),
            ArgumentDefinition(name="--help", declared_type="boolean", special=True),
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = GeneratorSettings()
    configure_logging(settings.log_level)

    try:
        properties = WorkUnitHandler(build_work_unit(args.name)).process()
    except WDLGenerationError as exc:
        print(str(exc))
        return 3

    print(json.dumps(properties.to_json(), indent=settings.json_indent))
    print(render_inputs_manifest(properties, indent=settings.json_indent))

    if args.write:
        for path in write_outputs([properties], settings):
            print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
