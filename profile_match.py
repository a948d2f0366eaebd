"""Score a saved profile skill list against a job posting."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from analyzer import analyze_two_texts

logger = logging.getLogger(__name__)

MAX_RATIONALE_CHARS = 350
MAX_LISTED_SKILLS = 5
NO_SKILLS_RATIONALE = "No skills provided. Add skills to your profile to see how well you match this role."


@dataclass(frozen=True)
class SkillsMatch:
    percentage: int
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    rationale: str = ""
    confidence: str = "low"

    def to_dict(self):
        return {
            "percentage": self.percentage,
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "rationale": self.rationale,
            "confidence": self.confidence,
        }


def _truncate(text: str, limit: int = MAX_RATIONALE_CHARS) -> str:
    if len(text) <= limit:
        return text
    cut = text[: limit - 3]
    return (re.sub(r"\s+\S*$", "", cut) or cut) + "..."


def _confidence(job_skill_count: int) -> str:
    if job_skill_count >= 5:
        return "high"
    if job_skill_count >= 2:
        return "medium"
    return "low"


def _job_content(job_title: str, job_description: str, job_requirements: Optional[str]) -> str:
    parts = [f"Job Title: {job_title}", "", "Job Description:", job_description]
    if job_requirements:
        parts.extend(["", "Requirements:", job_requirements])
    return "\n".join(parts).strip()


def match_profile_skills(
    user_skills: Sequence[str],
    job_title: str,
    job_description: str,
    job_requirements: Optional[str] = None,
) -> SkillsMatch:
    skills = [skill.strip() for skill in user_skills if skill and skill.strip()]
    if not skills:
        return SkillsMatch(percentage=0, rationale=NO_SKILLS_RATIONALE, confidence="low")

    result = analyze_two_texts(", ".join(skills), _job_content(job_title, job_description, job_requirements))
    job_skill_count = result.job_skill_count

    matched = tuple(m.name for m in result.matched)[:MAX_LISTED_SKILLS]
    missing = tuple(gap.name for gap in result.gaps)[:MAX_LISTED_SKILLS]

    if not result.matched and not result.gaps:
        rationale = "The posting does not name any skills we recognise, so the match could not be measured."
    elif not job_skill_count:
        rationale = f"The posting only lists nice-to-have skills; missing {', '.join(missing[:3])}."
    elif missing:
        rationale = (
            f"Matches {len(result.matched)} of {job_skill_count} required skills; "
            f"missing {', '.join(missing[:3])}. {result.summary}"
        )
    else:
        rationale = result.summary

    logger.debug("Profile match for %r: %d%%", job_title, result.score)
    return SkillsMatch(
        percentage=result.score,
        matched_skills=matched,
        missing_skills=missing,
        rationale=_truncate(rationale),
        confidence=_confidence(job_skill_count),
    )
