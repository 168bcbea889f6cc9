"""Unit tests for the wdlgen command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tool_wdl_generator.generator.main import build_parser, main

pytestmark = pytest.mark.usefixtures("clean_env", "restore_root_logging")


def test_show_prints_properties(work_unit_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["show", str(work_unit_file)])

    assert exit_code == 0
    bag = json.loads(capsys.readouterr().out)
    assert bag["name"] == "IndexFeatures"
    assert list(bag["arguments"]) == ["--output_arg", "--mode", "positionalArgs"]
    assert bag["arguments"]["--mode"]["type"] == "String"
    assert bag["arguments"]["--mode"]["defaultValue"] == '"FAST"'
    assert bag["arguments"]["positionalArgs"]["type"] == "Array[File]"
    assert bag["runtimeOutputs"] == {"--output_arg": "File", "--output_index": "File"}
    assert bag["requiredOutputs"] == bag["runtimeOutputs"]
    assert [c["name"] for c in bag["requiredCompanions"]["--output_arg"]] == ["--output_index"]
    assert bag["workflowProperties"]["memoryRequirements"] == "4G"
    assert bag["workflowProperties"]["cpuRequirements"] == "2"


def test_generate_writes_properties_and_inputs(
    work_unit_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output_dir = tmp_path / "out"

    exit_code = main(["generate", str(work_unit_file), "--output-dir", str(output_dir)])

    assert exit_code == 0
    properties = json.loads((output_dir / "IndexFeatures.properties.json").read_text("utf-8"))
    assert properties["runtimeOutputs"]["--output_arg"] == "File"

    inputs = json.loads((output_dir / "IndexFeaturesInputs.json").read_text("utf-8"))
    assert inputs["IndexFeatures.output_arg"] is None
    assert inputs["IndexFeatures.output_index"] is None
    assert inputs["IndexFeatures.mode"] == "FAST"
    assert inputs["IndexFeatures.cpuRequirements"] == 2

    assert "Wrote" in capsys.readouterr().out


def test_generate_defaults_to_configured_output_dir(
    work_unit_file: Path, clean_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("WDLGEN_OUTPUT_DIR", "configured")

    assert main(["generate", str(work_unit_file)]) == 0

    assert (clean_env / "configured" / "IndexFeatures.properties.json").exists()


def test_generation_error_writes_nothing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "units.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Good", "arguments": [{"name": "--x", "declared_type": "File"}]},
                {"name": "Bad", "arguments": [{"name": "--y", "declared_type": "Interval"}]},
            ]
        ),
        encoding="utf-8",
    )
    output_dir = tmp_path / "out"

    exit_code = main(["generate", str(path), "--output-dir", str(output_dir)])

    assert exit_code == 3
    assert not output_dir.exists()
    err = capsys.readouterr().err
    assert "Interval" in err
    assert "work unit Bad" in err


def test_missing_file_is_a_usage_error(tmp_path: Path) -> None:
    assert main(["show", str(tmp_path / "missing.json")]) == 2


def test_invalid_work_unit_is_a_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "units.json"
    path.write_text(json.dumps({"arguments": []}), encoding="utf-8")

    assert main(["show", str(path)]) == 2


def test_configuration_error(
    work_unit_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("WDLGEN_JSON_INDENT", "not-a-number")

    assert main(["show", str(work_unit_file)]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
