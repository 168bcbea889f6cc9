"""Test configuration and fixtures."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tool_wdl_generator.generator.arguments.model import (
    ArgumentDefinition,
    RuntimeProperties,
    WorkflowResource,
    WorkUnit,
)

_SETTINGS_ENV_VARS = ("LOG_LEVEL", "WDLGEN_OUTPUT_DIR", "WDLGEN_JSON_INDENT")


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no generator settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def output_resource() -> WorkflowResource:
    """Provide a workflow output resource without companions."""
    return WorkflowResource(is_output=True)


@pytest.fixture
def sample_work_unit(output_resource: WorkflowResource) -> WorkUnit:
    """A tool with a required File output and an optional Integer list input."""
    return WorkUnit(
        name="PrintReads",
        summary="Print reads",
        arguments=(
            ArgumentDefinition(
                name="--out",
                declared_type="File",
                required=True,
                summary="Output file",
                resource=output_resource,
            ),
            ArgumentDefinition(
                name="--vals",
                declared_type="List[Integer]",
                is_collection=True,
                default_value="[]",
                resource=WorkflowResource(is_input=True),
            ),
        ),
    )


@pytest.fixture
def work_unit_file(tmp_path: Path) -> Path:
    """Write a JSON work unit file with a positional group and runtime properties."""
    path = tmp_path / "work_units.json"
    payload = {
        "name": "IndexFeatures",
        "summary": "Index a feature file",
        "runtime_properties": RuntimeProperties(memory="4G", cpu=2).model_dump(),
        "arguments": [
            {"name": "--help", "declared_type": "boolean", "special": True},
            {
                "name": "--output",
                "declared_type": "File",
                "required": True,
                "resource": {"is_output": True, "required_companions": ["output-index"]},
            },
            {
                "name": "--mode",
                "declared_type": {"name": "IndexMode", "is_enum": True},
                "default_value": "FAST",
            },
            {
                "name": "positionalArgs",
                "declared_type": "List[File]",
                "is_collection": True,
                "positional": True,
                "resource": {"is_input": True},
            },
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
