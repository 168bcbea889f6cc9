"""WDL-safe identifiers for argument names."""

from __future__ import annotations

import re

LONG_OPTION_PREFIX = "--"
RESERVED_WORD_SUFFIX = "_arg"
# WDL identifiers must start with a letter
NON_LETTER_PREFIX = "arg_"

# WDL keywords and built-in type names; none of them ends with RESERVED_WORD_SUFFIX,
# which keeps mangle() idempotent.
WDL_RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "alias",
        "Array",
        "as",
        "Boolean",
        "call",
        "command",
        "else",
        "false",
        "File",
        "Float",
        "if",
        "import",
        "in",
        "input",
        "Int",
        "left",
        "Map",
        "meta",
        "null",
        "object",
        "Object",
        "output",
        "Pair",
        "parameter_meta",
        "right",
        "runtime",
        "scatter",
        "String",
        "struct",
        "task",
        "then",
        "true",
        "version",
        "workflow",
    }
)

_ILLEGAL_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")
_LEADING_LETTER = re.compile(r"[A-Za-z]")


def mangle(source_name: str) -> str:
    """Return a WDL identifier for ``source_name``.

    The option prefix is stripped, characters WDL does not allow in identifiers
    (most commonly the hyphens of kebab-case names) become underscores, and WDL
    reserved words get a fixed suffix. A name that does not start with a letter
    gets a fixed prefix::

        >>> mangle("--output")
        'output_arg'
        >>> mangle("--max-reads")
        'max_reads'
        >>> mangle("--1st-pass")
        'arg_1st_pass'
    """

    bare = source_name.lstrip("-")
    if not bare:
        raise ValueError(f"Argument name {source_name!r} has no characters after its prefix")

    name = _ILLEGAL_IDENTIFIER_CHARS.sub("_", bare)
    if not _LEADING_LETTER.match(name):
        name = NON_LETTER_PREFIX + name
    if name in WDL_RESERVED_WORDS:
        name += RESERVED_WORD_SUFFIX
    return name


def wdl_option_name(source_name: str) -> str:
    """Mangled name with the long option prefix, as published in the property map."""

    return LONG_OPTION_PREFIX + mangle(source_name)
