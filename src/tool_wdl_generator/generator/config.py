"""Configuration for the WDL generator.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):
    """Settings for the WDL generator.

    Environment variables:
    - LOG_LEVEL            (optional)
    - WDLGEN_OUTPUT_DIR    (optional)
    - WDLGEN_JSON_INDENT   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `GeneratorSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    output_dir: Path = Field(
        default=Path("wdl"),
        validation_alias="WDLGEN_OUTPUT_DIR",
        description="Directory where generated properties and inputs files are written",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        validation_alias="WDLGEN_JSON_INDENT",
        description="Indentation used for generated JSON files",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _known_log_level(self) -> GeneratorSettings:
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL {self.log_level!r} is not a logging level")
        return self

    def properties_file(self, work_unit: str) -> Path:
        """Path where the template properties of ``work_unit`` are written."""

        return self.output_dir / f"{work_unit}.properties.json"

    def inputs_file(self, work_unit: str) -> Path:
        """Path where the default inputs JSON of ``work_unit`` is written."""

        return self.output_dir / f"{work_unit}Inputs.json"
