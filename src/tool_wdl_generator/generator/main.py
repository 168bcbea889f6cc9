"""CLI entrypoint for the WDL generator.

Reads work unit argument models from JSON and emits the WDL template properties
and default inputs JSON for each work unit.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from tool_wdl_generator import __version__
from tool_wdl_generator.generator.arguments.loader import load_work_units
from tool_wdl_generator.generator.arguments.model import WorkUnit
from tool_wdl_generator.generator.config import GeneratorSettings
from tool_wdl_generator.generator.errors import WDLGenerationError
from tool_wdl_generator.generator.logging import configure_logging
from tool_wdl_generator.generator.workflow.inputs_manifest import render_inputs_manifest
from tool_wdl_generator.generator.workflow.work_unit import WorkUnitHandler, WorkUnitProperties

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wdlgen",
        description="Generate WDL template properties from command line tool argument models",
    )
    parser.add_argument(
        "--version", action="version", version=f"tool-wdl-generator {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser(
        "show", help="Print the WDL template properties of each work unit as JSON"
    )
    show.add_argument(
        "work_units",
        type=Path,
        help="JSON file holding one work unit or a list of work units",
    )

    generate = subparsers.add_parser(
        "generate",
        help="Write the template properties and default inputs JSON of each work unit",
    )
    generate.add_argument(
        "work_units",
        type=Path,
        help="JSON file holding one work unit or a list of work units",
    )
    generate.add_argument(
        "--output-dir",
        default=None,
        help="Directory for generated files (defaults to WDLGEN_OUTPUT_DIR)",
    )

    return parser


def process_work_units(work_units: list[WorkUnit]) -> list[WorkUnitProperties]:
    """Process every work unit with its own handler.

    Nothing is returned unless all work units convert cleanly.
    """

    return [WorkUnitHandler(work_unit).process() for work_unit in work_units]


def write_outputs(
    results: list[WorkUnitProperties], settings: GeneratorSettings
) -> list[Path]:
    settings.output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for properties in results:
        properties_path = settings.properties_file(properties.name)
        properties_path.write_text(
            json.dumps(properties.to_json(), indent=settings.json_indent, ensure_ascii=False)
            + "\n",
            encoding="utf-8",
        )
        inputs_path = settings.inputs_file(properties.name)
        inputs_path.write_text(
            render_inputs_manifest(properties, indent=settings.json_indent), encoding="utf-8"
        )
        written.extend([properties_path, inputs_path])
        logger.info(
            "Wrote work unit files",
            extra={"work_unit": properties.name, "output_dir": str(settings.output_dir)},
        )
    return written


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = GeneratorSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        work_units = load_work_units(args.work_units)
        results = process_work_units(work_units)

        if args.command == "show":
            payload = [properties.to_json() for properties in results]
            print(
                json.dumps(
                    payload[0] if len(payload) == 1 else payload,
                    indent=settings.json_indent,
                    ensure_ascii=False,
                )
            )
            return 0

        if args.command == "generate":
            if args.output_dir is not None:
                settings = settings.model_copy(update={"output_dir": Path(args.output_dir)})
            for path in write_outputs(results, settings):
                print(f"Wrote {path}")
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except WDLGenerationError as e:
        logger.warning(str(e), extra={"work_unit": e.work_unit, "argument": e.argument})
        print(str(e), file=sys.stderr)
        return 3

    except (OSError, ValueError) as e:
        # missing/unreadable file, malformed JSON or a work unit that fails validation
        logger.warning(
            "Invalid work unit file", extra={"path": str(args.work_units), "error": str(e)}
        )
        print(f"Invalid work unit file {args.work_units}:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
