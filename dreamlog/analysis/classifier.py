# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Dream classification - lucid detection and emotional keyword scoring.

Matching is plain substring search on the lower-cased entry text, so
"light" also matches inside "sunlight" and "delight". Each term counts at
most once per entry no matter how often it appears.

Score:
- +1 for each positive term found
- -1 for each negative term found
- +3 flat bonus for lucid dreams
"""

from typing import Iterable

from dreamlog.core.types import DreamEntry, DreamRecord, DreamVariant

POSITIVE_TERMS: tuple[str, ...] = (
    "happy",
    "free",
    "peaceful",
    "love",
    "bright",
    "joy",
    "safe",
    "flying",
    "floating",
    "light",
    "calm",
    "laugh",
    "smile",
    "hug",
    "sunlight",
    "explore",
    "beautiful",
    "dance",
    "play",
    "fun",
    "gentle",
    "rainbow",
    "glow",
    "comfort",
    "positive",
    "success",
    "victory",
    "celebrate",
    "relief",
    "breeze",
)

NEGATIVE_TERMS: tuple[str, ...] = (
    "sad",
    "fear",
    "dark",
    "trapped",
    "falling",
    "lost",
    "alone",
    "angry",
    "cry",
    "storm",
    "chase",
    "hide",
    "scream",
    "hurt",
    "pain",
    "fail",
    "cold",
    "drown",
    "anxious",
    "nightmare",
    "monster",
    "bleed",
    "broken",
    "die",
    "death",
    "scared",
    "panic",
    "freeze",
    "shadow",
)

LUCID_PHRASES: tuple[str, ...] = (
    "i knew i was dreaming",
    "i realized i was dreaming",
    "i could control the dream",
    "became aware i was dreaming",
    "conscious while dreaming",
)

LUCID_TAG = "lucid"
LUCID_BONUS = 3


def detect_variant(text: str) -> DreamVariant:
    """
    Decide whether a dream was lucid.

    Args:
        text: Entry text (any case)

    Returns:
        LUCID if any lucid phrase appears, ORDINARY otherwise
    """
    text_lower = text.lower()
    if any(phrase in text_lower for phrase in LUCID_PHRASES):
        return DreamVariant.LUCID
    return DreamVariant.ORDINARY


def score_keywords(text: str) -> tuple[int, list[str]]:
    """
    Score text by emotional keywords alone (no lucid bonus).

    Returns:
        (score, tags) with tags in positive-then-negative declared order
    """
    text_lower = text.lower()
    score = 0
    tags: list[str] = []

    for term in POSITIVE_TERMS:
        if term in text_lower:
            score += 1
            tags.append(term)

    for term in NEGATIVE_TERMS:
        if term in text_lower:
            score -= 1
            tags.append(term)

    return score, tags


def classify(record: DreamRecord) -> DreamEntry:
    """Turn a raw record into a fully scored entry."""
    variant = detect_variant(record.body)
    score, keyword_tags = score_keywords(record.body)

    tags: list[str] = []
    if variant == DreamVariant.LUCID:
        tags.append(LUCID_TAG)
        score += LUCID_BONUS
    tags.extend(keyword_tags)

    return DreamEntry(
        date=record.date,
        text=record.body,
        score=score,
        tags=tuple(tags),
        variant=variant,
    )


def classify_all(records: Iterable[DreamRecord]) -> list[DreamEntry]:
    """Classify records, keeping their order."""
    return [classify(record) for record in records]
