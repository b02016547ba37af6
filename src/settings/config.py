from __future__ import annotations

from pathlib import Path

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from remote.client import DEFAULT_BASE_URL

CONFIG_FILENAME = "docsnap.toml"

DEFAULT_SNAPSHOT_PATH = "snapshots/clojuredocs-snapshot-latest.json"


class RemoteConfig(BaseModel):
    """Settings for the documentation API used when building snapshots."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the documentation API",
    )
    timeout_s: float = Field(default=45, gt=0, description="Per-request timeout")
    max_retries: int = Field(
        default=4, ge=0, description="Retries for transient failures"
    )
    backoff_base_s: float = Field(
        default=1.0, ge=0, description="Base delay for exponential backoff"
    )


class DocsnapConfig(BaseModel):
    """Configuration for docsnap."""

    model_config = ConfigDict(extra="forbid")

    snapshot: str = Field(
        default=DEFAULT_SNAPSHOT_PATH,
        description="Snapshot file loaded when none is given on the command line",
    )
    screen_width: int = Field(
        default=72,
        description="Column width used when wrapping comments",
    )
    remote: RemoteConfig = Field(
        default_factory=RemoteConfig,
        description="Documentation API settings",
    )

    @field_validator("screen_width")
    @classmethod
    def validate_screen_width(cls, v: int) -> int:
        if v < 1:
            msg = f"screen_width must be a positive integer, got {v}"
            raise ValueError(msg)
        return v

    def snapshot_path(self, root: Path) -> Path:
        """Resolve the configured snapshot path against ``root``."""
        path = Path(self.snapshot).expanduser()
        if path.is_absolute():
            return path
        return (root / path).resolve()


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> DocsnapConfig:
    """Load configuration from docsnap.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return DocsnapConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DocsnapConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
