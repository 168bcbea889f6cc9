"""Console entrypoint; the CLI is implemented in `tool_wdl_generator.generator.main`."""

from __future__ import annotations

from tool_wdl_generator.generator.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
