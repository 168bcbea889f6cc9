"""Conversion of display default values into JSON literals for the inputs file."""

from __future__ import annotations

import json

from tool_wdl_generator.generator.conversion.type_table import (
    WDL_ARRAY,
    WDL_FILE,
    WDL_FLOAT,
    WDL_STRING,
)

JSON_NULL = "null"
_PASS_THROUGH = {JSON_NULL, '""', "[]"}
# File values are paths, which JSON carries as strings
_QUOTED_TYPES = {WDL_STRING, WDL_FILE}
_QUOTED_ARRAY_TYPES = {f"{WDL_ARRAY}[{name}]" for name in _QUOTED_TYPES}
# JSON has no literal for these
_NON_FINITE = {"infinity", "-infinity", "nan"}


def to_json_default(wdl_type: str, display_default: str) -> str:
    """Return the JSON literal used to seed an argument of type ``wdl_type``.

    String and File values are quoted, and so are the elements of String and File
    arrays. The rules are order sensitive: an array literal must be recognized
    before the plain String rule would quote it as a whole.
    """

    value = display_default.strip()

    if value in _PASS_THROUGH:
        return JSON_NULL if value == "[]" else value

    if wdl_type in _QUOTED_ARRAY_TYPES and _is_array_literal(value):
        elements = split_top_level(value[1:-1])
        return "[" + ",".join(json.dumps(element) for element in elements) + "]"

    if wdl_type in _QUOTED_TYPES:
        return json.dumps(value)

    if wdl_type == WDL_FLOAT and value.lower() in _NON_FINITE:
        return json.dumps(value)

    return value


def _is_array_literal(value: str) -> bool:
    return value.startswith("[") and value.endswith("]")


def split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested inside brackets; elements are trimmed."""

    elements: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
        elif char == "," and depth == 0:
            elements.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    last = "".join(current).strip()
    if last or elements:
        elements.append(last)
    return elements
