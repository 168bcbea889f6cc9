"""Validated argument model for a single work unit (tool).

The upstream extractor builds these objects explicitly (or they are loaded from
JSON); nothing here inspects live Python classes. All models are frozen once
constructed.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tool_wdl_generator.generator.errors import InvalidResourceMetadataError

_TYPE_TOKEN = re.compile(r"[^\[\],\s]+|[\[\],]")
_TYPE_PUNCTUATION = {"[", "]", ","}


class TypeDescriptor(BaseModel):
    """Declared type of an argument: a simple name plus nested type parameters.

    ``List[FeatureInput[File]]`` is a ``List`` with one parameter, which is itself a
    ``FeatureInput`` with one ``File`` parameter.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    is_enum: bool = False
    parameters: tuple[TypeDescriptor, ...] = ()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("type name must not be empty")
        return value.strip()

    @field_validator("parameters", mode="before")
    @classmethod
    def _parse_parameters(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(cls.parse(v) if isinstance(v, str) else v for v in value)
        return value

    @classmethod
    def parse(cls, text: str) -> TypeDescriptor:
        """Parse the compact textual form, e.g. ``List[Integer]``.

        Angle brackets are accepted as well (``List<Integer>``).
        """

        normalized = text.replace("<", "[").replace(">", "]")
        tokens = _TYPE_TOKEN.findall(normalized)
        descriptor, pos = _parse_tokens(tokens, 0, text)
        if pos != len(tokens):
            raise ValueError(f"Unexpected trailing text in type {text!r}")
        return descriptor

    def render(self) -> str:
        if not self.parameters:
            return self.name
        return f"{self.name}[{', '.join(p.render() for p in self.parameters)}]"


def _parse_tokens(tokens: list[str], pos: int, text: str) -> tuple[TypeDescriptor, int]:
    if pos >= len(tokens) or tokens[pos] in _TYPE_PUNCTUATION:
        raise ValueError(f"Expected a type name in {text!r}")
    name = tokens[pos]
    pos += 1

    parameters: list[TypeDescriptor] = []
    if pos < len(tokens) and tokens[pos] == "[":
        pos += 1
        while True:
            parameter, pos = _parse_tokens(tokens, pos, text)
            parameters.append(parameter)
            if pos >= len(tokens):
                raise ValueError(f"Unbalanced brackets in type {text!r}")
            if tokens[pos] == ",":
                pos += 1
                continue
            if tokens[pos] == "]":
                pos += 1
                break
            raise ValueError(f"Unexpected {tokens[pos]!r} in type {text!r}")

    return TypeDescriptor(name=name, parameters=tuple(parameters)), pos


class WorkflowResource(BaseModel):
    """Workflow input/output intent attached to one argument.

    Companion names are bare (no option prefix); the propagator adds the prefix
    when it synthesizes the companion parameters.
    """

    model_config = ConfigDict(frozen=True)

    is_input: bool = False
    is_output: bool = False
    required_companions: tuple[str, ...] = ()
    optional_companions: tuple[str, ...] = ()

    @field_validator("required_companions", "optional_companions")
    @classmethod
    def _companions_not_blank(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not companion.strip() for companion in value):
            raise ValueError("companion names must not be empty")
        return value

    @property
    def has_direction(self) -> bool:
        return self.is_input or self.is_output


class ArgumentDefinition(BaseModel):
    """One command line argument of a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    declared_type: TypeDescriptor
    display_type: str | None = Field(
        default=None,
        description="Type text chosen by the documentation system; defaults to the declared type",
    )
    is_collection: bool = False
    required: bool = False
    default_value: str = Field(default="null", description="Default value in display form")
    positional: bool = False
    special: bool = Field(
        default=False,
        description="Built-in flag (help, version, ...) excluded from WDL generation",
    )
    summary: str = ""
    resource: WorkflowResource | None = None

    @field_validator("declared_type", mode="before")
    @classmethod
    def _parse_declared_type(cls, value: object) -> object:
        if isinstance(value, str):
            return TypeDescriptor.parse(value)
        return value

    @property
    def doc_type(self) -> str:
        return self.display_type if self.display_type is not None else self.declared_type.render()


class RuntimeProperties(BaseModel):
    """Tool level runtime requirements forwarded to the workflow."""

    model_config = ConfigDict(frozen=True)

    memory: str = "2G"
    disks: str = "local-disk 40 HDD"
    cpu: int = Field(default=1, ge=0)
    preemptible: int = Field(default=0, ge=0)
    boot_disk_size_gb: int = Field(default=15, ge=0)


class WorkUnit(BaseModel):
    """A documented tool whose arguments are translated into one WDL task/workflow."""

    model_config = ConfigDict(frozen=True)

    name: str
    summary: str = ""
    arguments: tuple[ArgumentDefinition, ...] = ()
    runtime_properties: RuntimeProperties | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("work unit name must not be empty")
        return value

    @model_validator(mode="after")
    def _resources_have_direction(self) -> WorkUnit:
        # not a ValueError, so pydantic propagates it unwrapped
        for arg in self.arguments:
            if arg.resource is not None and not arg.resource.has_direction:
                raise InvalidResourceMetadataError(
                    "WorkflowResource must be marked as either an input or an output",
                    work_unit=self.name,
                    argument=arg.name,
                )
        return self

    @model_validator(mode="after")
    def _single_positional_group(self) -> WorkUnit:
        positional = [arg.name for arg in self.arguments if arg.positional]
        if len(positional) > 1:
            raise ValueError(
                f"Work unit {self.name} declares more than one positional argument group: "
                f"{positional}"
            )
        return self

    @property
    def named_arguments(self) -> list[ArgumentDefinition]:
        return [arg for arg in self.arguments if not arg.positional]

    @property
    def positional_argument(self) -> ArgumentDefinition | None:
        for arg in self.arguments:
            if arg.positional:
                return arg
        return None
