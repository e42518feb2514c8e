# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Configuration for Dreamlog.

Settings live in ~/.dreamlog/config.json. A missing file means defaults:

    {
        "logging": {"debug": false, "log_retention_count": 7},
        "report": {"encoding": "utf-8"}
    }
"""

import codecs
import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigError(ValueError):
    """Raised when the config file exists but cannot be used."""


class LoggingConfig(BaseModel):
    """Logging settings."""

    debug: bool = False
    log_retention_count: int = Field(default=7, ge=1)


class ReportConfig(BaseModel):
    """Journal and report file settings."""

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        """Reject codec names Python doesn't know."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


class DreamlogConfig(BaseModel):
    """Top-level Dreamlog configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @staticmethod
    def get_config_path() -> Path:
        """Get the config file path."""
        return Path.home() / ".dreamlog" / "config.json"

    @classmethod
    def load(cls) -> "DreamlogConfig":
        """
        Load config from disk.

        Returns:
            Parsed config, or defaults if the file doesn't exist

        Raises:
            ConfigError: If the file is not valid JSON or has invalid values
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e


_config: Optional[DreamlogConfig] = None


def get_config() -> DreamlogConfig:
    """Get the cached config, loading it on first use."""
    global _config
    if _config is None:
        _config = DreamlogConfig.load()
    return _config


def reload_config() -> DreamlogConfig:
    """Drop the cached config and load it again."""
    global _config
    _config = None
    return get_config()
