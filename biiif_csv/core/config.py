"""Configuration for the hierarchy builder."""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from biiif_csv.core.errors import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BuilderConfig(BaseModel):
    """Settings shared by every stage of a build run."""

    sidecar_filename: str = "info.yml"
    canvas_marker: str = "_"
    ignore_patterns: List[str] = Field(default_factory=lambda: ["*.yml", "thumb.*"])
    audio_parent_segment: str = "audio"
    ffprobe_path: Optional[str] = None
    probe_timeout_seconds: Optional[float] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level. Must be one of {VALID_LOG_LEVELS}")
        return level

    @field_validator("canvas_marker")
    @classmethod
    def validate_canvas_marker(cls, v):
        # The marker is stripped back off to recover the canvas index.
        if len(v) != 1 or v.isalnum() or v in ("/", "\\"):
            raise ValueError(
                "canvas_marker must be a single non-alphanumeric character other than a path separator"
            )
        return v

    @field_validator("sidecar_filename")
    @classmethod
    def validate_sidecar_filename(cls, v):
        if not v or "/" in v or "\\" in v:
            raise ValueError("sidecar_filename must be a plain file name")
        return v

    @field_validator("probe_timeout_seconds")
    @classmethod
    def validate_probe_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError("probe_timeout_seconds must be positive")
        return v

    @classmethod
    def load_from_file(cls, filename: str | Path) -> "BuilderConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file is missing, not JSON, or invalid.
        """
        path = Path(filename)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError("Configuration file not found", str(path)) from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read configuration file {path}", str(e)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a JSON object",
                type(data).__name__,
            )

        try:
            return cls(**data)
        except ValidationError as e:
            error_details = []
            for error in e.errors():
                field_path = " -> ".join(str(loc) for loc in error["loc"])
                error_details.append(f"Field '{field_path}': {error['msg']}")
            raise ConfigurationError(
                f"Invalid configuration in {path}", "; ".join(error_details)
            ) from e
