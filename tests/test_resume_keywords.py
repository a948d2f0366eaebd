"""
Tests for scanning a resume for weighted ATS keywords
"""
import json

import pytest

from analyzer import (
    MAX_TOP_MISSING,
    NO_SIGNALS_SUMMARY,
    AnalysisMode,
    analyze_resume_keywords,
    resume_keywords_label,
    score_resume_keywords,
)
from catalog import CatalogSelector, load_catalog

RESUME = "Python and SQL with PyTorch, Docker and Kubernetes. Strong Communication."


class TestWorkedExample:
    """A resume with six keywords across four categories"""

    def setup_method(self):
        self.result = analyze_resume_keywords(RESUME)

    def test_mode(self):
        assert self.result.mode is AnalysisMode.RESUME_KEYWORDS
        assert self.result.catalog is CatalogSelector.RESUME_KEYWORDS

    def test_keywords_in_catalog_order(self):
        assert [f.entry.name for f in self.result.keywords] == [
            "Python", "SQL", "PyTorch", "Docker", "Kubernetes", "Communication",
        ]

    def test_weighted_score(self):
        assert self.result.points == pytest.approx(8.8)
        assert self.result.max_points == pytest.approx(130.5)
        assert self.result.score == 7
        assert self.result.score_label == "Needs Improvement"

    def test_summary(self):
        assert self.result.summary == "Found 6 of 85 tracked keywords, covering 4 of 7 categories."

    def test_top_missing_heaviest_first(self):
        assert list(self.result.top_missing) == [
            "TensorFlow", "Keras", "Scikit-learn", "XGBoost", "LightGBM",
            "Hugging Face", "OpenCV", "NLTK", "spaCy", "Pandas",
        ]

    def test_recommendations(self):
        assert list(self.result.recommendations) == [
            "Your resume needs more technical keywords. Review the missing keywords below and add relevant ones "
            "that match your actual experience.",
            "Only add keywords you can back up - the most valuable missing ones are: TensorFlow, Keras, Scikit-learn",
        ]

    def test_every_category_reported(self):
        buckets = {b.category: b for b in self.result.categories}
        assert len(buckets) == 7
        languages = buckets["Programming Languages"]
        assert [f.entry.name for f in languages.matched] == ["Python", "SQL"]
        assert languages.points == 3.0
        assert languages.max_points == 15.0
        assert languages.coverage_percent == 20
        assert buckets["Data & Analytics"].matched == ()
        assert len(buckets["Data & Analytics"].missing) == 12

    def test_payload(self):
        payload = json.loads(json.dumps(self.result.to_dict()))
        assert payload["mode"] == "resume-keywords"
        assert payload["keywords_found"] == 6
        assert payload["keywords_possible"] == 85
        assert payload["top_missing_keywords"][0] == "TensorFlow"
        assert payload["keywords"][0]["occurrences"] == 1
        assert "missing" in payload["categories"][0]


class TestMatching:
    """Whole-word keyword matching"""

    def test_no_partial_words(self):
        result = analyze_resume_keywords("Researcher at React labs")
        assert result.keywords == ()

    def test_symbols_in_keywords(self):
        result = analyze_resume_keywords("C++ and CI/CD")
        assert [f.entry.name for f in result.keywords] == ["C++", "CI/CD"]

    def test_occurrences_counted(self):
        result = analyze_resume_keywords("Python, python and PYTHON")
        assert len(result.keywords) == 1
        assert result.keywords[0].occurrences == 3


class TestScoreBands:
    """Score labels and band advice"""

    def test_every_keyword(self):
        names = [entry.name for entry in load_catalog(CatalogSelector.RESUME_KEYWORDS).entries]
        result = analyze_resume_keywords(", ".join(names))
        assert result.score == 100
        assert result.score_label == "Excellent"
        assert result.top_missing == ()
        assert len(result.recommendations) == 1
        assert result.recommendations[0].startswith("Excellent!")

    def test_few_keywords(self):
        result = analyze_resume_keywords("Python only")
        assert result.score == 1
        assert result.recommendations[0].startswith("Your resume appears to lack AI/ML-specific keywords")
        assert len(result.top_missing) == MAX_TOP_MISSING

    @pytest.mark.parametrize(
        "score, expected",
        [(100, "Excellent"), (70, "Excellent"), (69, "Good"), (50, "Good"), (30, "Fair"), (29, "Needs Improvement")],
    )
    def test_labels(self, score, expected):
        assert resume_keywords_label(score) == expected

    def test_score_rounds_half_up(self):
        assert score_resume_keywords(1, 8) == 13
        assert score_resume_keywords(0, 0) == 0


class TestEmptyInput:
    """Blank resumes"""

    def test_blank(self):
        result = analyze_resume_keywords("  \n")
        assert result.score == 0
        assert result.summary == NO_SIGNALS_SUMMARY
        assert result.keywords == ()
        assert result.to_dict()["keywords_possible"] == 85

    def test_none(self):
        assert analyze_resume_keywords(None).score == 0


class TestDeterminism:
    """Identical input gives identical output"""

    def test_same_payload(self):
        assert analyze_resume_keywords(RESUME).to_dict() == analyze_resume_keywords(RESUME).to_dict()
