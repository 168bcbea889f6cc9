"""Conversion of argument types, names and default values to their WDL forms."""

from tool_wdl_generator.generator.conversion.defaults import to_json_default
from tool_wdl_generator.generator.conversion.names import mangle
from tool_wdl_generator.generator.conversion.resolver import ResolvedTypes, WDLTypeResolver

__all__ = [
    "ResolvedTypes",
    "WDLTypeResolver",
    "mangle",
    "to_json_default",
]
