"""
Tests for matching a saved skill list against a job
"""
from profile_match import (
    MAX_RATIONALE_CHARS,
    NO_SKILLS_RATIONALE,
    _truncate,
    match_profile_skills,
)

DESCRIPTION = "Requirements: Python, SQL, AWS. Nice to have: Kubernetes."


class TestMatchProfileSkills:
    """Tests for match_profile_skills"""

    def test_no_skills(self):
        result = match_profile_skills([], "Data Engineer", DESCRIPTION)
        assert result.percentage == 0
        assert result.rationale == NO_SKILLS_RATIONALE
        assert result.confidence == "low"
        assert result.matched_skills == ()

    def test_blank_skills_are_ignored(self):
        result = match_profile_skills(["", "   "], "Data Engineer", DESCRIPTION)
        assert result.rationale == NO_SKILLS_RATIONALE

    def test_partial_match(self):
        result = match_profile_skills(["Python", "SQL"], "Data Engineer", DESCRIPTION)
        assert result.percentage == 67
        assert result.matched_skills == ("Python", "SQL")
        assert result.missing_skills == ("AWS", "Kubernetes")
        assert result.confidence == "medium"
        assert result.rationale.startswith("Matches 2 of 3 required skills; missing AWS, Kubernetes.")
        assert len(result.rationale) <= MAX_RATIONALE_CHARS

    def test_requirements_are_included(self):
        result = match_profile_skills(["Docker"], "Platform Engineer", "Build our platform.", "Docker and Terraform")
        assert result.matched_skills == ("Docker",)
        assert result.missing_skills == ("Terraform",)

    def test_job_without_known_skills(self):
        result = match_profile_skills(["Python"], "Barista", "Make great coffee.")
        assert result.percentage == 0
        assert result.confidence == "low"
        assert "could not be measured" in result.rationale

    def test_only_nice_to_have_skills(self):
        result = match_profile_skills(["Python"], "Data Engineer", "Nice to have: Kafka.")
        assert result.percentage == 0
        assert result.confidence == "low"
        assert result.rationale == "The posting only lists nice-to-have skills; missing Kafka."

    def test_to_dict(self):
        payload = match_profile_skills(["Python"], "Data Engineer", DESCRIPTION).to_dict()
        assert set(payload) == {"percentage", "matched_skills", "missing_skills", "rationale", "confidence"}
        assert isinstance(payload["matched_skills"], list)


class TestTruncate:
    """Tests for rationale truncation"""

    def test_short_text_unchanged(self):
        assert _truncate("short") == "short"

    def test_long_text_cut_at_word(self):
        text = "word " * 100
        truncated = _truncate(text)
        assert len(truncated) <= MAX_RATIONALE_CHARS
        assert truncated.endswith("word...")

    def test_unbroken_text_still_marked(self):
        truncated = _truncate("x" * 400)
        assert len(truncated) == MAX_RATIONALE_CHARS
        assert truncated.endswith("...")
