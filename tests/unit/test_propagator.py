"""Unit tests for workflow output and companion propagation."""

from __future__ import annotations

import pytest

from tool_wdl_generator.generator.arguments.model import WorkflowResource
from tool_wdl_generator.generator.errors import ProtocolStateError, WDLGenerationError
from tool_wdl_generator.generator.workflow.propagator import (
    CompanionResource,
    PropagatorState,
    ResolvedArgument,
    WorkflowOutputPropagator,
)


def _resolved(name: str, wdl_type: str = "File", *, required: bool = True) -> ResolvedArgument:
    return ResolvedArgument(
        wdl_name=name,
        actual_name=name,
        logical_type=wdl_type,
        input_type="String" if wdl_type == "File" else wdl_type,
        json_default="null",
        required=required,
    )


def test_required_output_with_required_companion() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    resource = WorkflowResource(is_output=True, required_companions=("ref",))

    propagator.record_argument(_resolved("--out"), resource, True)
    manifest = propagator.publish()

    assert dict(manifest.runtime_outputs) == {"--out": "File", "--ref": "File"}
    assert dict(manifest.required_outputs) == {"--out": "File", "--ref": "File"}
    assert manifest.required_companions["--out"] == (
        CompanionResource(
            name="--ref",
            summary="Companion resource for --out",
            logical_type="File",
            input_type="String",
            required=True,
        ),
    )
    assert "--out" not in manifest.optional_companions


def test_required_companion_of_optional_output_is_demoted() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    resource = WorkflowResource(is_output=True, required_companions=("ref",))

    propagator.record_argument(_resolved("--out", required=False), resource, False)
    manifest = propagator.publish()

    assert dict(manifest.runtime_outputs) == {"--out": "File", "--ref": "File"}
    assert dict(manifest.required_outputs) == {}
    assert "--out" not in manifest.required_companions
    assert [c.name for c in manifest.optional_companions["--out"]] == ["--ref"]
    assert manifest.optional_companions["--out"][0].required is False


def test_optional_companions_are_never_required() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    resource = WorkflowResource(
        is_output=True, required_companions=("idx",), optional_companions=("md5",)
    )

    propagator.record_argument(_resolved("--out"), resource, True)
    manifest = propagator.publish()

    assert list(manifest.runtime_outputs) == ["--out", "--idx", "--md5"]
    assert list(manifest.required_outputs) == ["--out", "--idx"]
    assert [c.name for c in manifest.required_companions["--out"]] == ["--idx"]
    assert [c.name for c in manifest.optional_companions["--out"]] == ["--md5"]


def test_input_companions_are_not_outputs() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    resource = WorkflowResource(is_input=True, required_companions=("dict", "fai"))

    propagator.record_argument(_resolved("--reference"), resource, True)
    manifest = propagator.publish()

    assert dict(manifest.runtime_outputs) == {}
    assert [c.name for c in manifest.required_companions["--reference"]] == ["--dict", "--fai"]


def test_arguments_without_resource_are_ignored() -> None:
    propagator = WorkflowOutputPropagator("Tool")

    propagator.record_argument(_resolved("--verbosity", "String"), None, True)
    manifest = propagator.publish()

    assert manifest.to_json() == {
        "runtimeOutputs": {},
        "requiredOutputs": {},
        "requiredCompanions": {},
        "optionalCompanions": {},
    }


def test_output_order_follows_recording_order() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    for name in ("--zeta", "--alpha", "--mid"):
        propagator.record_argument(_resolved(name), WorkflowResource(is_output=True), True)

    assert list(propagator.publish().runtime_outputs) == ["--zeta", "--alpha", "--mid"]


def test_companion_summary_includes_parent_summary() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    parent = ResolvedArgument(
        wdl_name="--out",
        actual_name="--out",
        logical_type="File",
        input_type="String",
        json_default="null",
        required=True,
        summary="BAM output",
    )

    propagator.record_argument(
        parent, WorkflowResource(is_output=True, required_companions=("bai",)), True
    )

    companion = propagator.publish().required_companions["--out"][0]
    assert companion.summary == "Companion resource for --out: BAM output"


def test_published_maps_are_read_only() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    propagator.record_argument(_resolved("--out"), WorkflowResource(is_output=True), True)
    manifest = propagator.publish()

    with pytest.raises(TypeError):
        manifest.runtime_outputs["--other"] = "File"  # type: ignore[index]


def test_publish_twice_fails() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    propagator.publish()
    assert propagator.state == PropagatorState.PUBLISHED

    with pytest.raises(ProtocolStateError) as excinfo:
        propagator.publish()
    assert excinfo.value.work_unit == "Tool"


def test_record_after_publish_fails() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    propagator.publish()

    with pytest.raises(ProtocolStateError):
        propagator.record_argument(_resolved("--out"), None, True)


def test_companion_colliding_with_recorded_argument_is_rejected() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    propagator.record_argument(_resolved("--count", "Int"), WorkflowResource(is_output=True), True)

    with pytest.raises(WDLGenerationError, match="already used by --count") as excinfo:
        propagator.record_argument(
            _resolved("--out"),
            WorkflowResource(is_output=True, required_companions=("count",)),
            True,
        )

    assert excinfo.value.argument == "--out"


def test_companions_of_different_arguments_cannot_share_a_name() -> None:
    propagator = WorkflowOutputPropagator("Tool")
    propagator.record_argument(
        _resolved("--reads"), WorkflowResource(is_input=True, optional_companions=("idx",)), False
    )

    with pytest.raises(WDLGenerationError, match="companion of --reads"):
        propagator.record_argument(
            _resolved("--variants"),
            WorkflowResource(is_input=True, required_companions=("idx",)),
            True,
        )
