"""
Tests for the resume versus job posting comparison
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from analyzer import (
    NICE_TO_HAVE_REASON,
    NO_REQUIREMENTS_SUMMARY,
    NO_SIGNALS_SUMMARY,
    REQUIRED_REASON,
    AnalysisMode,
    Priority,
    analyze_two_texts,
    determine_priority,
)
from catalog import Importance

RESUME = "5 years of Python and SQL"
JOB = "Requirements: Python, SQL, AWS. Nice to have: Kubernetes."


class TestBasicComparison:
    """Resume with two of four requested skills"""

    def setup_method(self):
        self.result = analyze_two_texts(RESUME, JOB)

    def test_mode(self):
        assert self.result.mode is AnalysisMode.SKILLS_GAP

    def test_matched(self):
        assert [m.name for m in self.result.matched] == ["Python", "SQL"]

    def test_gaps_sorted_by_priority(self):
        assert [(g.name, g.priority) for g in self.result.gaps] == [
            ("AWS", Priority.HIGH),
            ("Kubernetes", Priority.LOW),
        ]

    def test_gap_reasons(self):
        reasons = {g.name: g.reason for g in self.result.gaps}
        assert reasons == {"AWS": REQUIRED_REASON, "Kubernetes": NICE_TO_HAVE_REASON}

    def test_score(self):
        assert self.result.score == 67
        assert self.result.score_label == "Good Match"

    def test_optional_gap_not_counted(self):
        """Nice-to-have gaps are listed but left out of the score"""
        assert self.result.job_skill_count == 3
        assert self.result.to_dict()["job_skill_count"] == 3

    def test_categories_weakest_first(self):
        assert [(b.category, b.coverage_percent) for b in self.result.categories] == [
            ("Cloud Platforms", 0),
            ("MLOps & DevOps", 0),
            ("Programming Languages", 100),
        ]

    def test_unmentioned_categories_omitted(self):
        names = {b.category for b in self.result.categories}
        assert "Databases" not in names
        assert "Soft Skills" not in names

    def test_summary(self):
        assert self.result.summary.startswith("Good match! You have 2 matching skills.")

    def test_recommendations(self):
        assert list(self.result.recommendations) == [
            "Focus on learning these high-priority skills first: AWS",
            "Highlight your matching skills prominently in your resume and cover letter",
            "Your weakest area is Cloud Platforms (0% coverage) - prioritise it when planning your learning",
            "Check out the learning resources below to start building the missing skills",
        ]

    def test_learning_resources_in_payload(self):
        gaps = self.result.to_dict()["gaps"]
        aws = next(g for g in gaps if g["name"] == "AWS")
        assert aws["learning_resources"]
        assert aws["tier"] == "essential"
        assert aws["priority"] == "high"

    def test_no_extras(self):
        assert self.result.extras == ()


class TestPriorityTable:
    """Priority of a missing skill from its importance and emphasis"""

    @pytest.mark.parametrize(
        "tier, emphasized, expected",
        [
            (Importance.ESSENTIAL, True, Priority.HIGH),
            (Importance.IMPORTANT, True, Priority.HIGH),
            (Importance.NICE_TO_HAVE, True, Priority.MEDIUM),
            (None, True, Priority.MEDIUM),
            (Importance.ESSENTIAL, False, Priority.MEDIUM),
            (Importance.IMPORTANT, False, Priority.LOW),
            (Importance.NICE_TO_HAVE, False, Priority.LOW),
            (None, False, Priority.LOW),
        ],
    )
    def test_determine_priority(self, tier, emphasized, expected):
        assert determine_priority(tier, emphasized) is expected

    def test_de_emphasized_essential_is_medium(self):
        result = analyze_two_texts("", "Nice to have: Docker.")
        assert [(g.name, g.priority) for g in result.gaps] == [("Docker", Priority.MEDIUM)]

    def test_de_emphasized_nice_to_have_is_low(self):
        result = analyze_two_texts("", "Nice to have: Kafka.")
        assert [(g.name, g.priority) for g in result.gaps] == [("Kafka", Priority.LOW)]

    def test_emphasized_nice_to_have_is_medium(self):
        result = analyze_two_texts("", "Must know Kafka.")
        assert [(g.name, g.priority) for g in result.gaps] == [("Kafka", Priority.MEDIUM)]

    def test_phrase_beyond_window_keeps_emphasis(self):
        job = "Nice to have extras. " + "Lorem ipsum " * 15 + "Docker is required."
        result = analyze_two_texts("", job)
        assert [(g.name, g.priority) for g in result.gaps] == [("Docker", Priority.HIGH)]


class TestExtras:
    """Resume skills the job never mentions"""

    def test_extras_and_note(self):
        result = analyze_two_texts("Python, Docker and Terraform", "We need Python.")
        assert [f.name for f in result.extras] == ["Docker", "Terraform"]
        assert result.score == 100
        assert result.score_label == "Excellent Match"
        assert result.recommendations[-1].startswith("Your additional skills not mentioned")
        assert "Docker, Terraform" in result.recommendations[-1]


class TestEdgeCases:
    """Inputs with no comparable skills"""

    def test_job_without_skills(self):
        result = analyze_two_texts("Python expert", "We are a friendly company.")
        assert result.score == 0
        assert result.summary == NO_REQUIREMENTS_SUMMARY
        assert result.categories == ()
        assert result.recommendations == ()
        assert [f.name for f in result.extras] == ["Python"]

    def test_both_blank(self):
        result = analyze_two_texts("", "  ")
        assert result.score == 0
        assert result.summary == NO_SIGNALS_SUMMARY
        assert result.matched == ()
        assert result.gaps == ()

    def test_empty_resume(self):
        result = analyze_two_texts("", JOB)
        assert result.score == 0
        assert result.matched == ()
        assert len(result.gaps) == 4

    def test_score_rounds_half_up(self):
        # 1 of 8 job skills is 12.5
        job = "Python, SQL, AWS, Docker, Kafka, Airflow, Snowflake and Redis"
        result = analyze_two_texts("Python", job)
        assert len(result.matched) + len(result.gaps) == 8
        assert result.score == 13


class TestDeterminism:
    """Repeated and concurrent calls agree"""

    def test_repeatable(self):
        assert analyze_two_texts(RESUME, JOB).to_dict() == analyze_two_texts(RESUME, JOB).to_dict()

    def test_concurrent_calls(self):
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: analyze_two_texts(RESUME, JOB).to_dict(), range(8)))
        assert all(result == results[0] for result in results)


class TestRequiredSkillCount:
    """Which job skills the gap score is measured against"""

    def test_only_optional_gaps(self):
        result = analyze_two_texts("Python", "Python required. Nice to have: Kafka.")
        assert [(g.name, g.priority) for g in result.gaps] == [("Kafka", Priority.LOW)]
        assert result.job_skill_count == 1
        assert result.score == 100

    def test_matched_optional_skill_counts(self):
        result = analyze_two_texts("Kafka", "Nice to have: Kafka.")
        assert result.job_skill_count == 1
        assert result.score == 100

    def test_every_gap_optional(self):
        result = analyze_two_texts("Python", "Nice to have: Kafka.")
        assert result.job_skill_count == 0
        assert result.score == 0
        assert [g.name for g in result.gaps] == ["Kafka"]


class TestLongInput:
    """Inputs past spaCy's default length cap"""

    def test_long_job_text(self):
        job = "Python developer needed. " * 45000
        result = analyze_two_texts("Python", job)
        assert result.score == 100
        assert result.secondary_stats.sentence_count == 45000
