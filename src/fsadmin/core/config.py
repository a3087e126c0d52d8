"""
fsadmin configuration management.

Provides centralized configuration with validation using Pydantic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_enabled: bool = False
    console_enabled: bool = True
    json_format: bool = False
    log_directory: Path = Field(default_factory=lambda: Path.home() / ".fsadmin" / "logs")

    @field_validator("log_directory", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        return Path(v).expanduser().resolve()


class ToolsConfig(BaseModel):
    """Locations of the external filesystem tools."""

    tune2fs: str = "/sbin/tune2fs"
    e2label: str = "/sbin/e2label"
    e2fsck: str = "/sbin/e2fsck"
    resize2fs: str = "/sbin/resize2fs"
    # Used for journal devices; filesystem creation goes through mke2fs_candidates
    mke2fs: str = "/sbin/mke2fs"
    mke2fs_candidates: list[str] = Field(
        default_factory=lambda: ["/sbin/mke4fs", "/sbin/mke2fs"]
    )
    mkfs: str = "mkfs"
    blockdev: str = "blockdev"
    command_timeout_seconds: int | None = Field(default=None, ge=1)

    @field_validator("mke2fs_candidates")
    @classmethod
    def require_candidates(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one mke2fs candidate is required")
        return v


class FsAdminConfig(BaseModel):
    """Main fsadmin configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> FsAdminConfig:
        """Load configuration from file or create default."""
        if config_path is None:
            config_path = Path.home() / ".fsadmin" / "config.json"

        if config_path.exists():
            with open(config_path) as f:
                data = json.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = Path.home() / ".fsadmin" / "config.json"

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, default=str)

    def ensure_directories(self) -> None:
        """Create all required directories."""
        if self.logging.file_enabled:
            self.logging.log_directory.mkdir(parents=True, exist_ok=True)


def get_default_config() -> FsAdminConfig:
    """Get the default configuration."""
    return FsAdminConfig()


def load_config(config_path: Path | None = None) -> FsAdminConfig:
    """Load or create configuration."""
    config = FsAdminConfig.load(config_path)
    config.ensure_directories()
    return config
