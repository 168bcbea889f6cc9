"""Resolution of argument types to WDL types.

Each argument gets two WDL types:

* the *logical* type, the argument's real WDL type, used wherever the template
  refers to the argument;
* the *input* type, used only where the argument is declared as a workflow/task
  input. It differs from the logical type only for workflow outputs of type File,
  which are declared as String so the workflow manager does not try to localize a
  file that has not been created yet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tool_wdl_generator.generator.arguments.model import (
    ArgumentDefinition,
    TypeDescriptor,
    WorkflowResource,
)
from tool_wdl_generator.generator.conversion.type_table import (
    WDL_FILE,
    WDL_STRING,
    transform_to_wdl_collection_type,
    transform_to_wdl_type,
)
from tool_wdl_generator.generator.errors import (
    UnsupportedGenericShapeError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedTypes:
    logical_type: str
    input_type: str


class WDLTypeResolver:
    """Resolve WDL types for the arguments of one work unit."""

    def __init__(self, work_unit: str) -> None:
        self.work_unit = work_unit

    def resolve(
        self,
        argument: ArgumentDefinition,
        resource: WorkflowResource | None = None,
        display_type: str | None = None,
    ) -> ResolvedTypes:
        """Return both the logical and the input WDL type for ``argument``.

        The logical type is always resolved without the workflow resource so it
        never carries the output File -> String substitution.
        """

        logical_type = self.wdl_type_for_argument(argument, None, display_type)
        input_type = self.wdl_type_for_argument(argument, resource, display_type)
        return ResolvedTypes(logical_type=logical_type, input_type=input_type)

    def wdl_type_for_argument(
        self,
        argument: ArgumentDefinition,
        resource: WorkflowResource | None,
        display_type: str | None = None,
    ) -> str:
        """Return the WDL type for ``argument``.

        Args:
            argument: The argument being converted.
            resource: Workflow resource metadata; when it marks the argument as an
                output, File resolves to String.
            display_type: Type text chosen by the documentation system; only
                reported in debug logs. The WDL type always comes from the declared
                type.

        Raises:
            UnsupportedTypeError: The type (or collection wrapper) has no WDL mapping.
            UnsupportedGenericShapeError: The collection's type parameters cannot be
                expressed as a one dimensional WDL Array.
        """

        doc_type = display_type if display_type is not None else argument.doc_type
        declared = argument.declared_type

        if not argument.is_collection:
            wdl_type = self._convert(resource, declared, argument)
            logger.debug(
                "Resolved scalar type",
                extra={"argument": argument.name, "doc_type": doc_type, "wdl_type": wdl_type},
            )
            return wdl_type

        wrapper = transform_to_wdl_collection_type(declared.name)
        if wrapper is None:
            raise UnsupportedTypeError(
                f"Unrecognized collection type {declared.name}; "
                "argument collection types must be a list or a set",
                work_unit=self.work_unit,
                argument=argument.name,
            )

        # List[T] and List[Wrapper[T]] both resolve through T; the wrapper's own
        # name never reaches the WDL type.
        element = self._element_type(argument)
        element_type = self._convert(resource, element, argument)
        wdl_type = f"{wrapper.target}[{element_type}]"
        logger.debug(
            "Resolved collection type",
            extra={"argument": argument.name, "doc_type": doc_type, "wdl_type": wdl_type},
        )
        return wdl_type

    def _element_type(self, argument: ArgumentDefinition) -> TypeDescriptor:
        declared = argument.declared_type
        if not declared.parameters:
            raise UnsupportedGenericShapeError(
                f"Collection type {declared.name} must declare its element type",
                work_unit=self.work_unit,
                argument=argument.name,
            )
        if len(declared.parameters) != 1:
            raise UnsupportedGenericShapeError(
                f"Types with multiple type parameters are not supported "
                f"({declared.render()} has {len(declared.parameters)})",
                work_unit=self.work_unit,
                argument=argument.name,
            )

        element = declared.parameters[0]
        if not element.parameters:
            return element
        if len(element.parameters) != 1:
            raise UnsupportedGenericShapeError(
                f"Types with multiple type parameters are not supported "
                f"({element.render()} has {len(element.parameters)})",
                work_unit=self.work_unit,
                argument=argument.name,
            )

        inner = element.parameters[0]
        if inner.parameters:
            raise UnsupportedGenericShapeError(
                f"Generic types nested more than two levels deep are not supported "
                f"({declared.render()})",
                work_unit=self.work_unit,
                argument=argument.name,
            )
        return inner

    def _convert(
        self,
        resource: WorkflowResource | None,
        declared: TypeDescriptor,
        argument: ArgumentDefinition,
    ) -> str:
        mapping = transform_to_wdl_type(declared.name)
        if mapping is not None:
            target = mapping.target
        elif declared.is_enum:
            target = WDL_STRING
        else:
            raise UnsupportedTypeError(
                f"Don't know how to convert type {declared.render()} to a WDL type",
                work_unit=self.work_unit,
                argument=argument.name,
            )

        return transform_output_type_to_input_type(resource, target)


def transform_output_type_to_input_type(resource: WorkflowResource | None, wdl_type: str) -> str:
    """Use String in place of File for arguments that are workflow outputs."""

    if resource is not None and resource.is_output and wdl_type == WDL_FILE:
        return WDL_STRING
    return wdl_type
