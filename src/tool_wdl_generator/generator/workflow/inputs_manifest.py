"""Render the default inputs JSON for a processed work unit.

The JSON defaults are already literals, so the document is assembled as text to
keep them exactly as serialized and in declaration order.
"""

from __future__ import annotations

import json

from tool_wdl_generator.generator.conversion.defaults import JSON_NULL
from tool_wdl_generator.generator.conversion.names import LONG_OPTION_PREFIX
from tool_wdl_generator.generator.workflow.work_unit import WorkUnitProperties


def input_key(work_unit: str, wdl_name: str) -> str:
    return f"{work_unit}.{wdl_name.removeprefix(LONG_OPTION_PREFIX)}"


def manifest_entries(properties: WorkUnitProperties) -> list[tuple[str, str]]:
    """Ordered (key, JSON literal) pairs of the inputs manifest."""

    outputs = properties.outputs
    entries: list[tuple[str, str]] = []
    for wdl_name, resolved in properties.arguments.items():
        entries.append((input_key(properties.name, wdl_name), resolved.json_default))
        companions = (
            *outputs.required_companions.get(wdl_name, ()),
            *outputs.optional_companions.get(wdl_name, ()),
        )
        for companion in companions:
            entries.append((input_key(properties.name, companion.name), JSON_NULL))

    for key, value in (properties.workflow_properties or {}).items():
        literal = value if value.isdigit() else json.dumps(value)
        entries.append((input_key(properties.name, key), literal))
    return entries


def render_inputs_manifest(properties: WorkUnitProperties, indent: int = 2) -> str:
    entries = manifest_entries(properties)
    if not entries:
        return "{}\n"
    pad = " " * indent
    lines = [f"{pad}{json.dumps(key)}: {literal}" for key, literal in entries]
    return "{\n" + ",\n".join(lines) + "\n}\n"
