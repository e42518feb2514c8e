# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Tests for dream classification and scoring."""

from dreamlog.analysis.classifier import (
    LUCID_BONUS,
    LUCID_PHRASES,
    NEGATIVE_TERMS,
    POSITIVE_TERMS,
    classify,
    classify_all,
    detect_variant,
    score_keywords,
)
from dreamlog.core.types import DreamRecord, DreamVariant


class TestTermLists:
    """Sanity checks on the fixed keyword lists."""

    def test_list_sizes(self):
        """Lists keep their full membership."""
        assert len(POSITIVE_TERMS) == 30
        assert len(NEGATIVE_TERMS) == 29
        assert len(LUCID_PHRASES) == 5

    def test_positive_terms(self):
        """Positive terms, in the order that drives tag order."""
        assert POSITIVE_TERMS == (
            "happy", "free", "peaceful", "love", "bright", "joy", "safe", "flying", "floating", "light",
            "calm", "laugh", "smile", "hug", "sunlight", "explore", "beautiful", "dance", "play", "fun",
            "gentle", "rainbow", "glow", "comfort", "positive", "success", "victory", "celebrate", "relief", "breeze",
        )

    def test_negative_terms(self):
        """Negative terms, in the order that drives tag order."""
        assert NEGATIVE_TERMS == (
            "sad", "fear", "dark", "trapped", "falling", "lost", "alone", "angry", "cry", "storm",
            "chase", "hide", "scream", "hurt", "pain", "fail", "cold", "drown", "anxious", "nightmare",
            "monster", "bleed", "broken", "die", "death", "scared", "panic", "freeze", "shadow",
        )

    def test_lucid_phrases(self):
        """Lucid indicator phrases."""
        assert LUCID_PHRASES == (
            "i knew i was dreaming",
            "i realized i was dreaming",
            "i could control the dream",
            "became aware i was dreaming",
            "conscious while dreaming",
        )

    def test_terms_are_lower_case(self):
        """Terms are matched against lower-cased text."""
        for term in POSITIVE_TERMS + NEGATIVE_TERMS + LUCID_PHRASES:
            assert term == term.lower()


class TestDetectVariant:
    """Tests for lucid detection."""

    def test_each_phrase_is_lucid(self):
        """Every lucid phrase triggers the LUCID variant."""
        for phrase in LUCID_PHRASES:
            assert detect_variant(f"Then {phrase}.") == DreamVariant.LUCID

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert detect_variant("I KNEW I WAS DREAMING") == DreamVariant.LUCID

    def test_ordinary(self):
        """No phrase means ORDINARY."""
        assert detect_variant("I was dreaming about cats") == DreamVariant.ORDINARY

    def test_empty(self):
        """Empty text is ORDINARY."""
        assert detect_variant("") == DreamVariant.ORDINARY


class TestScoreKeywords:
    """Tests for keyword scoring."""

    def test_positive_and_negative(self):
        """Positive add, negative subtract."""
        score, tags = score_keywords("happy but sad")
        assert score == 0
        assert tags == ["happy", "sad"]

    def test_tag_order_follows_declared_order(self):
        """Tags follow list order, not text order."""
        score, tags = score_keywords("safe and happy, then dark and sad")
        assert tags == ["happy", "safe", "sad", "dark"]
        assert score == 0

    def test_term_counted_once(self):
        """Repeating a term in the text does not repeat it in the tags."""
        score, tags = score_keywords("happy happy happy")
        assert score == 1
        assert tags == ["happy"]

    def test_substring_matches(self):
        """Terms match inside longer words."""
        score, tags = score_keywords("sunlight")
        # "light" and "sunlight" both match
        assert tags == ["light", "sunlight"]
        assert score == 2

    def test_uppercase_text(self):
        """Text case does not matter."""
        score, tags = score_keywords("HAPPY")
        assert (score, tags) == (1, ["happy"])

    def test_no_matches(self):
        """Unmatched text scores zero with no tags."""
        assert score_keywords("went to the office") == (0, [])


class TestClassify:
    """Tests for classify."""

    def test_ordinary_entry(self):
        """Scenario: happy and safe scores 2."""
        entry = classify(DreamRecord(date="2024-01-01", body="I felt happy and safe "))
        assert entry.variant == DreamVariant.ORDINARY
        assert entry.score == 2
        assert entry.tags == ("happy", "safe")
        assert entry.date == "2024-01-01"
        assert entry.text == "I felt happy and safe "

    def test_negative_entry(self):
        """Scenario: falling and scared scores -2."""
        entry = classify(DreamRecord(date="2024-01-02", body="I was falling and scared "))
        assert entry.score == -2
        assert entry.tags == ("falling", "scared")
        assert entry.is_bad is True

    def test_lucid_entry(self):
        """Lucid dreams get the tag first and a +3 bonus."""
        entry = classify(DreamRecord(date="2024-01-01", body="I knew I was dreaming and it was peaceful "))
        assert entry.variant == DreamVariant.LUCID
        assert entry.is_lucid is True
        assert entry.tags == ("lucid", "peaceful")
        assert entry.score == 4

    def test_lucid_bonus_is_additive(self):
        """The bonus applies even when keywords are negative."""
        body = "I realized I was dreaming but it was dark and cold and scary"
        keyword_score, keyword_tags = score_keywords(body)
        entry = classify(DreamRecord(date="2024-01-01", body=body))
        assert entry.score == keyword_score + LUCID_BONUS
        assert list(entry.tags) == ["lucid"] + keyword_tags

    def test_lucid_without_keywords(self):
        """A lucid dream with no keywords scores exactly the bonus."""
        entry = classify(DreamRecord(date="2024-01-01", body="conscious while dreaming "))
        assert entry.score == 3
        assert entry.tags == ("lucid",)

    def test_empty_body(self):
        """Empty body is a valid zero-score ordinary entry."""
        entry = classify(DreamRecord(date="2024-01-01", body=""))
        assert entry.score == 0
        assert entry.tags == ()
        assert entry.variant == DreamVariant.ORDINARY
        assert entry.is_bad is False

    def test_deterministic(self):
        """Classifying the same record twice gives the same result."""
        record = DreamRecord(date="2024-01-01", body="A storm, then a rainbow and a hug ")
        assert classify(record) == classify(record)


class TestClassifyAll:
    """Tests for classify_all."""

    def test_keeps_order(self):
        """Entries come back in record order."""
        records = [
            DreamRecord(date="2024-01-02", body="sad "),
            DreamRecord(date="2024-01-01", body="happy "),
        ]
        entries = classify_all(records)
        assert [e.date for e in entries] == ["2024-01-02", "2024-01-01"]

    def test_empty(self):
        """No records, no entries."""
        assert classify_all([]) == []
