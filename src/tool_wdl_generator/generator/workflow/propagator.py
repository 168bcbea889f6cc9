"""Accumulate workflow outputs and companion resources for one work unit."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from tool_wdl_generator.generator import template_properties as props
from tool_wdl_generator.generator.arguments.model import WorkflowResource
from tool_wdl_generator.generator.conversion.names import wdl_option_name
from tool_wdl_generator.generator.errors import ProtocolStateError, WDLGenerationError

logger = logging.getLogger(__name__)


class PropagatorState(str, Enum):
    ACCUMULATING = "accumulating"
    PUBLISHED = "published"


ALLOWED_TRANSITIONS: dict[PropagatorState, set[PropagatorState]] = {
    PropagatorState.ACCUMULATING: {PropagatorState.PUBLISHED},
    PropagatorState.PUBLISHED: set(),
}


@dataclass(frozen=True, slots=True)
class ResolvedArgument:
    """An argument after type resolution, name mangling and default serialization."""

    wdl_name: str
    actual_name: str
    logical_type: str
    input_type: str
    json_default: str
    required: bool
    summary: str = ""
    collection: bool = False
    positional: bool = False

    def to_json(self) -> dict[str, object]:
        return {
            props.ARGUMENT_NAME: self.wdl_name,
            props.WDL_ARGUMENT_ACTUAL_NAME: self.actual_name,
            props.ARGUMENT_TYPE: self.logical_type,
            props.WDL_ARGUMENT_INPUT_TYPE: self.input_type,
            props.ARGUMENT_DEFAULT_VALUE: self.json_default,
            props.ARGUMENT_REQUIRED: self.required,
            props.ARGUMENT_SUMMARY: self.summary,
            props.ARGUMENT_COLLECTION: self.collection,
            props.ARGUMENT_POSITIONAL: self.positional,
        }


@dataclass(frozen=True, slots=True)
class CompanionResource:
    """A synthesized parameter for a file that travels with its parent argument.

    Companions share the parent's resolved types.
    """

    name: str
    summary: str
    logical_type: str
    input_type: str
    required: bool

    def to_json(self) -> dict[str, object]:
        return {
            props.ARGUMENT_NAME: self.name,
            props.ARGUMENT_SUMMARY: self.summary,
            props.ARGUMENT_TYPE: self.logical_type,
            props.WDL_ARGUMENT_INPUT_TYPE: self.input_type,
            props.ARGUMENT_REQUIRED: self.required,
        }


@dataclass(frozen=True, slots=True)
class WorkflowOutputManifest:
    """Read-only outputs and companions published for one work unit."""

    runtime_outputs: Mapping[str, str]
    required_outputs: Mapping[str, str]
    required_companions: Mapping[str, tuple[CompanionResource, ...]]
    optional_companions: Mapping[str, tuple[CompanionResource, ...]]

    def to_json(self) -> dict[str, object]:
        return {
            props.WDL_RUNTIME_OUTPUTS: dict(self.runtime_outputs),
            props.WDL_REQUIRED_OUTPUTS: dict(self.required_outputs),
            props.WDL_REQUIRED_COMPANIONS: _companions_to_json(self.required_companions),
            props.WDL_OPTIONAL_COMPANIONS: _companions_to_json(self.optional_companions),
        }


def _companions_to_json(
    companions: Mapping[str, tuple[CompanionResource, ...]],
) -> dict[str, list[dict[str, object]]]:
    return {name: [c.to_json() for c in records] for name, records in companions.items()}


def companion_summary(parent: ResolvedArgument) -> str:
    summary = f"Companion resource for {parent.actual_name}"
    return f"{summary}: {parent.summary}" if parent.summary else summary


class WorkflowOutputPropagator:
    """Record output and companion bookkeeping for each processed argument.

    Insertion order is kept everywhere; it becomes the declaration order in the
    generated WDL. Argument and companion names share one namespace, so any name
    recorded twice raises :class:`WDLGenerationError`. The propagator is single
    use: after :meth:`publish` every call raises :class:`ProtocolStateError`.
    """

    def __init__(self, work_unit: str) -> None:
        self.work_unit = work_unit
        self._state = PropagatorState.ACCUMULATING
        self._runtime_outputs: dict[str, str] = {}
        self._required_outputs: dict[str, str] = {}
        self._required_companions: dict[str, list[CompanionResource]] = {}
        self._optional_companions: dict[str, list[CompanionResource]] = {}
        # published name -> what claimed it
        self._claimed: dict[str, str] = {}

    @property
    def state(self) -> PropagatorState:
        return self._state

    def record_argument(
        self,
        resolved: ResolvedArgument,
        resource: WorkflowResource | None,
        arg_is_required: bool,
    ) -> None:
        self._require_state(PropagatorState.ACCUMULATING, action="record_argument")
        self._claim(resolved.wdl_name, resolved.actual_name, resolved)
        if resource is None:
            return

        if resource.is_output:
            self._add_output(resolved.wdl_name, resolved.logical_type, arg_is_required)

        # A required companion of an optional argument is demoted; it can't be
        # more required than its parent.
        for companion in resource.required_companions:
            record = self._companion(resolved, companion, required=arg_is_required)
            self._claim(record.name, f"companion of {resolved.actual_name}", resolved)
            target = self._required_companions if arg_is_required else self._optional_companions
            target.setdefault(resolved.wdl_name, []).append(record)
            if resource.is_output:
                self._add_output(record.name, record.logical_type, arg_is_required)

        for companion in resource.optional_companions:
            record = self._companion(resolved, companion, required=False)
            self._claim(record.name, f"companion of {resolved.actual_name}", resolved)
            self._optional_companions.setdefault(resolved.wdl_name, []).append(record)
            if resource.is_output:
                self._add_output(record.name, record.logical_type, required=False)

        logger.debug(
            "Recorded workflow resource",
            extra={
                "work_unit": self.work_unit,
                "argument": resolved.wdl_name,
                "output": resource.is_output,
                "companions": len(resource.required_companions)
                + len(resource.optional_companions),
            },
        )

    def publish(self) -> WorkflowOutputManifest:
        """Freeze and return the accumulated maps."""

        self._transition(PropagatorState.PUBLISHED, action="publish")
        manifest = WorkflowOutputManifest(
            runtime_outputs=MappingProxyType(dict(self._runtime_outputs)),
            required_outputs=MappingProxyType(dict(self._required_outputs)),
            required_companions=MappingProxyType(
                {k: tuple(v) for k, v in self._required_companions.items()}
            ),
            optional_companions=MappingProxyType(
                {k: tuple(v) for k, v in self._optional_companions.items()}
            ),
        )
        logger.info(
            "Published workflow outputs",
            extra={
                "work_unit": self.work_unit,
                "runtime_outputs": len(manifest.runtime_outputs),
                "required_outputs": len(manifest.required_outputs),
            },
        )
        return manifest

    def _claim(self, name: str, owner: str, parent: ResolvedArgument) -> None:
        if name in self._claimed:
            raise WDLGenerationError(
                f"WDL name {name} is already used by {self._claimed[name]}",
                work_unit=self.work_unit,
                argument=parent.actual_name,
            )
        self._claimed[name] = owner

    def _add_output(self, name: str, wdl_type: str, required: bool) -> None:
        self._runtime_outputs[name] = wdl_type
        if required:
            self._required_outputs[name] = wdl_type

    @staticmethod
    def _companion(
        parent: ResolvedArgument, companion: str, *, required: bool
    ) -> CompanionResource:
        return CompanionResource(
            name=wdl_option_name(companion),
            summary=companion_summary(parent),
            logical_type=parent.logical_type,
            input_type=parent.input_type,
            required=required,
        )

    def _require_state(self, expected: PropagatorState, *, action: str) -> None:
        if self._state != expected:
            raise ProtocolStateError(
                f"Cannot {action} in state {self._state.value}", work_unit=self.work_unit
            )

    def _transition(self, to: PropagatorState, *, action: str) -> None:
        if to not in ALLOWED_TRANSITIONS[self._state]:
            raise ProtocolStateError(
                f"Cannot {action}: illegal transition {self._state.value} -> {to.value}",
                work_unit=self.work_unit,
            )
        self._state = to
