# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Core types and configuration for Dreamlog."""

from dreamlog.core.types import (
    NO_TAG,
    AnalysisResult,
    DreamEntry,
    DreamRecord,
    DreamVariant,
    JournalSummary,
)
from dreamlog.core.config import (
    ConfigError,
    DreamlogConfig,
    get_config,
    reload_config,
)

__all__ = [
    "NO_TAG",
    "AnalysisResult",
    "DreamEntry",
    "DreamRecord",
    "DreamVariant",
    "JournalSummary",
    "ConfigError",
    "DreamlogConfig",
    "get_config",
    "reload_config",
]
