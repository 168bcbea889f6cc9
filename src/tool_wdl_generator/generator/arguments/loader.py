"""Load work unit argument models from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from tool_wdl_generator.generator.arguments.model import WorkUnit

logger = logging.getLogger(__name__)

_WORK_UNITS = TypeAdapter(list[WorkUnit])


def load_work_units(path: Path) -> list[WorkUnit]:
    """Read one work unit object, or a list of them, from ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the content does not match the argument model.
    """

    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = [raw]

    work_units = _WORK_UNITS.validate_python(raw)
    logger.debug("Loaded work units", extra={"path": str(path), "count": len(work_units)})
    return work_units
