"""
Unit tests for text normalisation and statistics
"""
from textnorm import TextStats, compute_text_stats, normalize_text


class TestNormalizeText:
    """Tests for normalize_text"""

    def test_bullets_and_dashes(self):
        assert normalize_text("• Python – 3 years") == "- Python - 3 years"

    def test_quotes(self):
        assert normalize_text("“we’re hiring”") == "\"we're hiring\""

    def test_length_preserved(self):
        text = "• 5–7 years of Python — remote"
        assert len(normalize_text(text)) == len(text)

    def test_plain_text_unchanged(self):
        assert normalize_text("Python and SQL") == "Python and SQL"

    def test_empty(self):
        assert normalize_text("") == ""
        assert normalize_text(None) == ""


class TestComputeTextStats:
    """Tests for compute_text_stats"""

    def test_counts(self):
        stats = compute_text_stats("One. Two three.")
        assert stats == TextStats(word_count=3, sentence_count=2, character_count=15)

    def test_blank(self):
        assert compute_text_stats("   ") == TextStats(character_count=3)
        assert compute_text_stats("") == TextStats()

    def test_longer_than_default_cap(self):
        stats = compute_text_stats("One two. " * 120000)
        assert stats.sentence_count == 120000
        assert stats.word_count == 240000

    def test_reading_minutes(self):
        assert compute_text_stats("word " * 401).reading_minutes == 3
        assert TextStats().reading_minutes == 0
