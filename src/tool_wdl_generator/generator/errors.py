"""Errors raised while translating a work unit into WDL template properties.

Every error is fatal for the work unit being processed; nothing is retried and no
partial property map is published.
"""

from __future__ import annotations


class WDLGenerationError(Exception):
    """Base class for WDL generation failures.

    The owning work unit and argument (when known) are kept as attributes and are
    folded into the message so callers can report them without extra context.
    """

    def __init__(
        self, message: str, *, work_unit: str | None = None, argument: str | None = None
    ) -> None:
        self.work_unit = work_unit
        self.argument = argument
        location = []
        if argument is not None:
            location.append(f"argument {argument}")
        if work_unit is not None:
            location.append(f"work unit {work_unit}")
        if location:
            message = f"{message} ({' in '.join(location)})"
        super().__init__(message)


class UnsupportedTypeError(WDLGenerationError):
    """A declared type has no WDL mapping and is not an enum."""


class UnsupportedGenericShapeError(WDLGenerationError):
    """A collection type carries more than one type parameter or is nested too deeply."""


class InvalidResourceMetadataError(WDLGenerationError):
    """Workflow resource metadata declares neither an input nor an output."""


class ProtocolStateError(WDLGenerationError):
    """The output propagator was used after its results were published."""
