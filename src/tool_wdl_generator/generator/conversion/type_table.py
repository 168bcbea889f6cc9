"""Fixed association between source type names and WDL type names."""

from __future__ import annotations

from dataclasses import dataclass

WDL_STRING = "String"
WDL_FILE = "File"
WDL_INT = "Int"
WDL_FLOAT = "Float"
WDL_BOOLEAN = "Boolean"
WDL_ARRAY = "Array"


@dataclass(frozen=True, slots=True)
class TypeMapping:
    """The source type text to replace, and the WDL type text to substitute."""

    source: str
    target: str


_SCALAR_TYPES: dict[str, str] = {
    "String": WDL_STRING,
    "str": WDL_STRING,
    # WDL has no URI type
    "URI": WDL_STRING,
    "boolean": WDL_BOOLEAN,
    "Boolean": WDL_BOOLEAN,
    "bool": WDL_BOOLEAN,
    "byte": WDL_INT,
    "Byte": WDL_INT,
    "short": WDL_INT,
    "Short": WDL_INT,
    "int": WDL_INT,
    "Integer": WDL_INT,
    "long": WDL_INT,
    "Long": WDL_INT,
    "float": WDL_FLOAT,
    "Float": WDL_FLOAT,
    "double": WDL_FLOAT,
    "Double": WDL_FLOAT,
    "BigDecimal": WDL_FLOAT,
    "Decimal": WDL_FLOAT,
    "File": WDL_FILE,
    "Path": WDL_FILE,
    "GATKPath": WDL_FILE,
}

_COLLECTION_TYPES: dict[str, str] = {
    "List": WDL_ARRAY,
    "list": WDL_ARRAY,
    "ArrayList": WDL_ARRAY,
    "Set": WDL_ARRAY,
    "set": WDL_ARRAY,
    "HashSet": WDL_ARRAY,
    "LinkedHashSet": WDL_ARRAY,
    "EnumSet": WDL_ARRAY,
}


def transform_to_wdl_type(source: str) -> TypeMapping | None:
    """Return the mapping for a scalar source type, or None if there is none."""

    target = _SCALAR_TYPES.get(source)
    return TypeMapping(source=source, target=target) if target is not None else None


def transform_to_wdl_collection_type(source: str) -> TypeMapping | None:
    """Return the mapping for a collection wrapper (``List`` -> ``Array``), or None."""

    target = _COLLECTION_TYPES.get(source)
    return TypeMapping(source=source, target=target) if target is not None else None


def target_for(source: str) -> str | None:
    return _SCALAR_TYPES.get(source, _COLLECTION_TYPES.get(source))


def sources_for(target: str) -> tuple[str, ...]:
    """All source type names mapping to ``target``, in table order."""

    return tuple(
        source
        for table in (_SCALAR_TYPES, _COLLECTION_TYPES)
        for source, mapped in table.items()
        if mapped == target
    )
