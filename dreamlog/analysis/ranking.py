# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Ranking and aggregate statistics for scored dream entries."""

from collections import Counter
from typing import Iterable, Sequence

from dreamlog.core.types import NO_TAG, DreamEntry, JournalSummary


def rank(entries: Iterable[DreamEntry]) -> list[DreamEntry]:
    """
    Order entries by descending score.

    The sort is stable, so entries with equal scores keep their
    original relative order.
    """
    return sorted(entries, key=lambda entry: entry.score, reverse=True)


def count_bad_dreams(entries: Iterable[DreamEntry]) -> int:
    """Count entries with a negative score."""
    return sum(1 for entry in entries if entry.is_bad)


def most_common_tag(entries: Iterable[DreamEntry]) -> str:
    """
    Find the tag that occurs most often across all entries.

    Every occurrence counts, including repeats within one entry.
    Ties go to the tag seen first.

    Returns:
        The most common tag, or "None" if no entry has tags
    """
    counts = Counter(tag for entry in entries for tag in entry.tags)
    if not counts:
        return NO_TAG
    # most_common() keeps first-insertion order among equal counts
    return counts.most_common(1)[0][0]


def summarize(entries: Sequence[DreamEntry]) -> JournalSummary:
    """Compute aggregate statistics. Input order does not matter."""
    count = len(entries)
    total = sum(entry.score for entry in entries)
    average = total / count if count > 0 else 0.0

    return JournalSummary(
        count=count,
        average_score=average,
        most_common_tag=most_common_tag(entries),
        bad_dream_count=count_bad_dreams(entries),
    )
