"""
Tests for decoding a single job posting
"""
import json

from analyzer import (
    BASELINE_SCORE,
    NO_SALARY_RECOMMENDATION,
    NO_SIGNALS_SUMMARY,
    AnalysisMode,
    Confidence,
    analyze_single_text,
    pattern_confidence,
)
from job_signals import NO_SALARY_HINT

GOOD_POSTING = (
    "We are hiring a data engineer with 5+ years of experience in Python. "
    "We offer a competitive salary and this role is fully remote."
)

WORRYING_POSTING = (
    "We need a rockstar ninja developer for our small team. "
    "It's fast-paced and we're like a family."
)


class TestGoodPosting:
    """A clear posting with a perk and an explicit seniority"""

    def setup_method(self):
        self.result = analyze_single_text(GOOD_POSTING)

    def test_mode(self):
        assert self.result.mode is AnalysisMode.JOB_POSTING

    def test_experience_level(self):
        experience = self.result.experience
        assert experience.level == "Senior"
        assert experience.years_range == "5-10 years"
        assert experience.confidence is Confidence.HIGH
        assert experience.matched_text == "5+ year"

    def test_skills(self):
        assert [f.name for f in self.result.required_skills] == ["Python"]
        assert self.result.nice_to_have_skills == ()

    def test_salary_and_benefits(self):
        assert [h.hint for h in self.result.salary_hints] == ["Competitive salary mentioned"]
        assert [b.name for b in self.result.benefits] == ["Remote Work"]
        assert self.result.red_flags == ()

    def test_score(self):
        assert self.result.score == 75
        assert self.result.score > 50
        assert self.result.score_label == "Looks Good"

    def test_summary(self):
        assert self.result.summary.startswith("This appears to be a senior position (5-10 years).")
        assert "No significant red flags were detected." in self.result.summary

    def test_recommendations_start_with_core_skills(self):
        assert self.result.recommendations[0] == (
            "Prepare concrete examples that demonstrate the core skills: Python."
        )


class TestWorryingPosting:
    """A posting full of red-flag language"""

    def setup_method(self):
        self.result = analyze_single_text(WORRYING_POSTING)

    def test_red_flags_sorted_by_severity(self):
        """Medium flags come before low ones, catalog order within a severity"""
        assert [f.name for f in self.result.red_flags] == [
            "Unrealistic expectations",
            "Work-life balance concerns",
            "Family language",
            "Potential understaffing",
        ]

    def test_red_flag_explanation_in_payload(self):
        flags = self.result.to_dict()["red_flags"]
        assert flags[0]["explanation"]
        assert flags[0]["tier"] == "medium"

    def test_score(self):
        assert self.result.score == 22
        assert self.result.score < 50
        assert self.result.score_label == "Caution Advised"

    def test_no_salary_fallback(self):
        assert [h.hint for h in self.result.salary_hints] == [NO_SALARY_HINT]
        assert self.result.salary_hints[0].discloses_range is False

    def test_experience_unknown(self):
        assert self.result.experience is None

    def test_recommendations(self):
        assert list(self.result.recommendations) == [
            "Proceed with caution - weigh the concerns below carefully before applying.",
            NO_SALARY_RECOMMENDATION,
            "Ask the employer about the flagged areas: Unrealistic expectations, "
            "Work-life balance concerns, Family language.",
            "The seniority level is unclear - ask the recruiter what experience they expect.",
            "No benefits were mentioned - request details of the full package.",
        ]


class TestSkillSplit:
    """Required versus nice-to-have skills"""

    TEXT = "Requirements: Python and SQL. Nice to have: Kubernetes."

    def test_split(self):
        result = analyze_single_text(self.TEXT)
        assert [f.name for f in result.required_skills] == ["Python", "SQL"]
        assert [f.name for f in result.nice_to_have_skills] == ["Kubernetes"]

    def test_categories_use_catalog_totals(self):
        result = analyze_single_text(self.TEXT)
        coverage = {b.category: b.coverage_percent for b in result.categories}
        # 2 of 11 languages, 1 of 8 MLOps tools (12.5 rounds up)
        assert coverage == {"Programming Languages": 18, "MLOps & DevOps": 13}

    def test_recommendation_order(self):
        recommendations = analyze_single_text(self.TEXT).recommendations
        assert recommendations[0] == "Prepare concrete examples that demonstrate the core skills: Python, SQL."
        assert recommendations[-1].startswith("Nice-to-have skills (Kubernetes) are not deal-breakers")

    def test_one_finding_per_skill(self):
        result = analyze_single_text("Python, python, PYTHON and more Python. SQL and postgres.")
        names = [f.name for f in result.skill_findings]
        assert len(names) == len(set(names))
        assert names.count("Python") == 1


class TestExperienceLevel:
    """Experience level detection"""

    def test_medium_confidence_from_title(self):
        experience = analyze_single_text("Senior engineer wanted").experience
        assert experience.level == "Senior"
        assert experience.confidence is Confidence.MEDIUM

    def test_higher_confidence_replaces_earlier_level(self):
        experience = analyze_single_text("Team lead role requiring 3+ years.").experience
        assert experience.level == "Mid-Level"
        assert experience.confidence is Confidence.HIGH

    def test_unicode_dash_is_normalised(self):
        experience = analyze_single_text("Looking for 5–7 years in data roles").experience
        assert experience.level == "Senior"
        assert experience.matched_text == "5-7 year"

    def test_pattern_confidence(self):
        assert pattern_confidence("5+ year") is Confidence.HIGH
        assert pattern_confidence("3-5 year") is Confidence.HIGH
        assert pattern_confidence("senior") is Confidence.MEDIUM
        assert pattern_confidence("tech lead") is Confidence.MEDIUM
        assert pattern_confidence("graduate") is Confidence.LOW


class TestScoreBounds:
    """Scores are clamped to 0-100"""

    def test_clamped_high(self):
        text = (
            "Senior engineer, 5+ years. Salary range $150k-$180k. Remote, flexible hours, "
            "learning budget, health insurance, parental leave."
        )
        result = analyze_single_text(text)
        assert len(result.benefits) == 5
        assert any(h.discloses_range for h in result.salary_hints)
        assert result.score == 100

    def test_clamped_low(self):
        text = (
            "Rockstar wanted for a fast-paced small team where you wear many hats. "
            "We're a family, so go above and beyond. Start asap. "
            "PhD required and you must have all the skills."
        )
        result = analyze_single_text(text)
        assert len(result.red_flags) == 9
        assert result.score == 0


class TestEmptyInput:
    """Blank text gives the baseline result"""

    def test_blank(self):
        result = analyze_single_text("   \n ")
        assert result.score == BASELINE_SCORE
        assert result.summary == NO_SIGNALS_SUMMARY
        assert result.skill_findings == ()
        assert result.red_flags == ()
        assert result.salary_hints == ()
        assert result.experience is None
        assert result.stats.word_count == 0

    def test_none(self):
        assert analyze_single_text(None).score == BASELINE_SCORE


class TestDeterminism:
    """Identical input gives identical output"""

    def test_same_result(self):
        assert analyze_single_text(WORRYING_POSTING) == analyze_single_text(WORRYING_POSTING)

    def test_same_payload(self):
        first = json.dumps(analyze_single_text(GOOD_POSTING).to_dict(), sort_keys=True)
        second = json.dumps(analyze_single_text(GOOD_POSTING).to_dict(), sort_keys=True)
        assert first == second

    def test_payload_is_json_ready(self):
        payload = analyze_single_text(GOOD_POSTING).to_dict()
        decoded = json.loads(json.dumps(payload))
        assert decoded["mode"] == "job-posting"
        assert decoded["experience"]["confidence"] == "high"
        assert decoded["stats"]["word_count"] == len(GOOD_POSTING.split())


class TestLongInput:
    """Inputs past spaCy's default length cap"""

    def test_long_posting(self):
        text = "Python developer needed. " * 45000
        result = analyze_single_text(text)
        assert [f.name for f in result.required_skills] == ["Python"]
        assert result.stats.character_count == len(text)
