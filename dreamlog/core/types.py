# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Core types for dream journal analysis.

Raw records come out of the parser, scored entries come out of the
classifier, and the summary comes out of the aggregator.
"""

from dataclasses import dataclass, field
from enum import Enum


class DreamVariant(str, Enum):
    """How a dream was experienced."""

    ORDINARY = "ORDINARY"
    LUCID = "LUCID"  # Dreamer knew they were dreaming


@dataclass(frozen=True)
class DreamRecord:
    """A dated journal entry before scoring."""

    date: str  # YYYY-MM-DD
    body: str  # Entry lines, each followed by a single space


@dataclass(frozen=True)
class DreamEntry:
    """
    A scored dream entry.

    Created once by the classifier and never changed afterwards.
    Tags keep match order: "lucid" first (if lucid), then positive
    terms, then negative terms.
    """

    date: str
    text: str
    score: int
    tags: tuple[str, ...] = field(default_factory=tuple)
    variant: DreamVariant = DreamVariant.ORDINARY

    @property
    def is_lucid(self) -> bool:
        return self.variant == DreamVariant.LUCID

    @property
    def is_bad(self) -> bool:
        """A bad dream is one with a negative score."""
        return self.score < 0

    def format_line(self) -> str:
        """Render the entry as a single report line."""
        return f"[{self.date}] Score: {self.score} | Tags: {', '.join(self.tags)}"


# Sentinel reported when no tags were found at all
NO_TAG = "None"


@dataclass(frozen=True)
class JournalSummary:
    """Aggregate statistics over all analyzed entries."""

    count: int
    average_score: float
    most_common_tag: str
    bad_dream_count: int


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked entries plus their summary."""

    entries: list[DreamEntry]
    summary: JournalSummary
