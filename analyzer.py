"""Rule-based signal extraction and scoring for job postings and resumes."""

import dataclasses
import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from catalog import (
    CatalogEntry,
    CatalogSelector,
    Importance,
    Severity,
    load_catalog,
    load_signal_tables,
)
from job_signals import NO_SALARY_HINT, NO_SALARY_INTERPRETATION, PAY_RANGE_CATEGORY
from matcher import (
    DECODER_CONTEXT_WINDOW,
    GAP_CONTEXT_WINDOW,
    Finding,
    count_occurrences,
    match,
    match_all,
    search,
)
from textnorm import TextStats, compute_text_stats, normalize_text

logger = logging.getLogger(__name__)

# --- Constants -----------------------------------------------------------------

BASELINE_SCORE = 50
POINTS_PER_BENEFIT = 10
MAX_BENEFIT_POINTS = 40
SALARY_RANGE_BONUS = 15
HIGH_CLARITY_BONUS = 15
LEVEL_DETECTED_BONUS = 10
RED_FLAG_PENALTIES = {Severity.HIGH: 15, Severity.MEDIUM: 8, Severity.LOW: 4}

SEVERITY_ORDER = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}

MAX_LISTED_NAMES = 3
MAX_TOP_MISSING = 10

NO_SIGNALS_SUMMARY = "No signals were found in the supplied text."
NO_REQUIREMENTS_SUMMARY = (
    "No recognisable skill requirements were found in the job description, so no match score could be calculated."
)
NO_SALARY_RECOMMENDATION = (
    "No salary was disclosed - research market rates and ask for the range before the first interview."
)

REQUIRED_REASON = "Required in job description"
NICE_TO_HAVE_REASON = "Nice-to-have in job description"

CONFIDENCE_HINTS_MEDIUM = ("senior", "junior", "lead")


class AnalysisMode(str, Enum):
    JOB_POSTING = "job-posting"
    SKILLS_GAP = "skills-gap"
    RESUME_KEYWORDS = "resume-keywords"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_CONFIDENCE_RANK = {Confidence.LOW: 1, Confidence.MEDIUM: 2, Confidence.HIGH: 3}
PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


# --- Result types --------------------------------------------------------------

@dataclass(frozen=True)
class ExperienceLevel:
    level: str
    years_range: str
    confidence: Confidence
    matched_text: str = ""


@dataclass(frozen=True)
class SalaryHint:
    hint: str
    interpretation: str
    matched_text: str = ""
    discloses_range: bool = False


@dataclass(frozen=True)
class SkillMatch:
    entry: CatalogEntry
    primary: Finding
    secondary: Finding

    @property
    def name(self) -> str:
        return self.entry.name


@dataclass(frozen=True)
class SkillGap:
    entry: CatalogEntry
    priority: Priority
    reason: str
    finding: Finding

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def resources(self):
        return self.entry.resources


@dataclass(frozen=True)
class CategoryBucket:
    category: str
    matched: Tuple[Finding, ...] = ()
    gaps: Tuple[SkillGap, ...] = ()
    coverage_percent: int = 0
    missing: Tuple[CatalogEntry, ...] = ()
    points: float = 0.0
    max_points: float = 0.0


@dataclass(frozen=True)
class AnalysisResult:
    mode: AnalysisMode
    catalog: CatalogSelector
    catalog_version: str
    score: int
    score_label: str
    summary: str
    recommendations: Tuple[str, ...] = ()
    stats: TextStats = field(default_factory=TextStats)
    secondary_stats: Optional[TextStats] = None
    categories: Tuple[CategoryBucket, ...] = ()
    # job-posting mode
    required_skills: Tuple[Finding, ...] = ()
    nice_to_have_skills: Tuple[Finding, ...] = ()
    experience: Optional[ExperienceLevel] = None
    salary_hints: Tuple[SalaryHint, ...] = ()
    red_flags: Tuple[Finding, ...] = ()
    benefits: Tuple[Finding, ...] = ()
    # skills-gap mode
    matched: Tuple[SkillMatch, ...] = ()
    gaps: Tuple[SkillGap, ...] = ()
    extras: Tuple[Finding, ...] = ()
    job_skill_count: int = 0
    # resume-keyword mode
    keywords: Tuple[Finding, ...] = ()
    top_missing: Tuple[str, ...] = ()
    points: float = 0.0
    max_points: float = 0.0

    @property
    def skill_findings(self) -> Tuple[Finding, ...]:
        if self.mode is AnalysisMode.JOB_POSTING:
            return self.required_skills + self.nice_to_have_skills
        if self.mode is AnalysisMode.RESUME_KEYWORDS:
            return self.keywords
        return tuple(m.secondary for m in self.matched) + tuple(g.finding for g in self.gaps) + self.extras

    def to_dict(self) -> Dict[str, object]:
        """JSON-ready view of the result."""
        payload: Dict[str, object] = {
            "mode": self.mode.value,
            "catalog": self.catalog.value,
            "catalog_version": self.catalog_version,
            "score": self.score,
            "score_label": self.score_label,
            "summary": self.summary,
            "recommendations": list(self.recommendations),
            "stats": _stats_to_dict(self.stats),
            "categories": [_bucket_to_dict(bucket) for bucket in self.categories],
        }
        if self.mode is AnalysisMode.JOB_POSTING:
            payload.update(
                {
                    "required_skills": [_finding_to_dict(f) for f in self.required_skills],
                    "nice_to_have_skills": [_finding_to_dict(f) for f in self.nice_to_have_skills],
                    "experience": _experience_to_dict(self.experience),
                    "salary_hints": [
                        {
                            "hint": hint.hint,
                            "interpretation": hint.interpretation,
                            "matched_text": hint.matched_text,
                            "discloses_range": hint.discloses_range,
                        }
                        for hint in self.salary_hints
                    ],
                    "red_flags": [
                        dict(_finding_to_dict(f), explanation=f.entry.detail) for f in self.red_flags
                    ],
                    "benefits": [_finding_to_dict(f) for f in self.benefits],
                }
            )
        elif self.mode is AnalysisMode.SKILLS_GAP:
            payload.update(
                {
                    "secondary_stats": _stats_to_dict(self.secondary_stats or TextStats()),
                    "matched": [
                        {
                            "name": m.name,
                            "category": m.entry.category,
                            "primary": _finding_to_dict(m.primary),
                            "secondary": _finding_to_dict(m.secondary),
                        }
                        for m in self.matched
                    ],
                    "gaps": [_gap_to_dict(gap) for gap in self.gaps],
                    "extras": [_finding_to_dict(f) for f in self.extras],
                    "job_skill_count": self.job_skill_count,
                }
            )
        else:
            payload.update(
                {
                    "keywords": [_finding_to_dict(f) for f in self.keywords],
                    "keywords_found": len(self.keywords),
                    "keywords_possible": sum(len(b.matched) + len(b.missing) for b in self.categories),
                    "top_missing_keywords": list(self.top_missing),
                    "points": self.points,
                    "max_points": self.max_points,
                }
            )
        return payload


def _tier_value(entry: CatalogEntry) -> Optional[str]:
    return entry.tier.value if entry.tier is not None else None


def _finding_to_dict(finding: Finding) -> Dict[str, object]:
    return {
        "name": finding.entry.name,
        "category": finding.entry.category,
        "tier": _tier_value(finding.entry),
        "matched_text": finding.matched_text,
        "position": finding.position,
        "is_emphasized": finding.is_emphasized,
        "context": finding.context,
        "occurrences": finding.occurrences,
    }


def _gap_to_dict(gap: SkillGap) -> Dict[str, object]:
    return {
        "name": gap.name,
        "category": gap.entry.category,
        "tier": _tier_value(gap.entry),
        "priority": gap.priority.value,
        "reason": gap.reason,
        "matched_text": gap.finding.matched_text,
        "learning_resources": [
            {
                "name": res.name,
                "type": res.kind,
                "url": res.url,
                "provider": res.provider,
                "is_free": res.is_free,
            }
            for res in gap.resources
        ],
    }


def _bucket_to_dict(bucket: CategoryBucket) -> Dict[str, object]:
    return {
        "category": bucket.category,
        "matched": [f.entry.name for f in bucket.matched],
        "gaps": [{"name": gap.name, "priority": gap.priority.value} for gap in bucket.gaps],
        "coverage_percent": bucket.coverage_percent,
        "missing": [entry.name for entry in bucket.missing],
        "points": bucket.points,
        "max_points": bucket.max_points,
    }


def _experience_to_dict(experience: Optional[ExperienceLevel]) -> Optional[Dict[str, object]]:
    if experience is None:
        return None
    return {
        "level": experience.level,
        "years_range": experience.years_range,
        "confidence": experience.confidence.value,
        "matched_text": experience.matched_text,
    }


def _stats_to_dict(stats: TextStats) -> Dict[str, int]:
    return {
        "word_count": stats.word_count,
        "sentence_count": stats.sentence_count,
        "character_count": stats.character_count,
        "reading_minutes": stats.reading_minutes,
    }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _names(items: Sequence, limit: int = MAX_LISTED_NAMES) -> str:
    return ", ".join(item.name for item in items[:limit])


# --- Job-posting detectors -----------------------------------------------------

def pattern_confidence(source: str) -> Confidence:
    """How specific an experience pattern is, judged from its source text."""
    lowered = source.lower()
    if "year" in lowered or "+" in lowered:
        return Confidence.HIGH
    if any(hint in lowered for hint in CONFIDENCE_HINTS_MEDIUM):
        return Confidence.MEDIUM
    return Confidence.LOW


def detect_experience_level(text: str, levels: Sequence[CatalogEntry]) -> Optional[ExperienceLevel]:
    """Pick the level whose pattern first reaches the highest confidence."""
    best: Optional[ExperienceLevel] = None
    best_rank = 0
    for entry in levels:
        for compiled in entry.compiled:
            span = search(text, compiled)
            if span is None:
                continue
            confidence = pattern_confidence(compiled.spec.source)
            rank = _CONFIDENCE_RANK[confidence]
            if rank > best_rank:
                best_rank = rank
                best = ExperienceLevel(
                    level=entry.name,
                    years_range=entry.detail,
                    confidence=confidence,
                    matched_text=text[span[0]:span[1]],
                )
    return best


def detect_salary_hints(text: str, hints: Sequence[CatalogEntry]) -> List[SalaryHint]:
    detected = [
        SalaryHint(
            hint=finding.entry.name,
            interpretation=finding.entry.detail,
            matched_text=finding.matched_text,
            discloses_range=finding.entry.category == PAY_RANGE_CATEGORY,
        )
        for finding in match_all(text, hints)
    ]
    if not detected:
        detected.append(SalaryHint(hint=NO_SALARY_HINT, interpretation=NO_SALARY_INTERPRETATION))
    return detected


def _severity_rank(finding: Finding) -> int:
    return SEVERITY_ORDER.get(finding.entry.tier, len(SEVERITY_ORDER))  # type: ignore[arg-type]


def detect_red_flags(text: str, flags: Sequence[CatalogEntry]) -> List[Finding]:
    """Red flags ordered high to medium to low, catalog order within a tier."""
    return sorted(match_all(text, flags), key=_severity_rank)


def _skill_buckets(findings: Sequence[Finding], entries: Sequence[CatalogEntry]) -> List[CategoryBucket]:
    totals: Dict[str, int] = defaultdict(int)
    order: List[str] = []
    for entry in entries:
        if entry.category not in totals:
            order.append(entry.category)
        totals[entry.category] += 1

    grouped: Dict[str, List[Finding]] = defaultdict(list)
    for finding in findings:
        grouped[finding.entry.category].append(finding)

    buckets = []
    for category in order:
        found = grouped.get(category)
        if not found:
            continue
        buckets.append(
            CategoryBucket(
                category=category,
                matched=tuple(found),
                coverage_percent=_round_half_up(100 * len(found) / totals[category]),
            )
        )
    return buckets


# --- Skills-gap helpers --------------------------------------------------------

def determine_priority(tier: Optional[object], is_emphasized: bool) -> Priority:
    """Fixed decision table for a skill the job asks for but the resume lacks."""
    if is_emphasized and tier in (Importance.ESSENTIAL, Importance.IMPORTANT):
        return Priority.HIGH
    if is_emphasized:
        return Priority.MEDIUM
    if tier is Importance.ESSENTIAL:
        return Priority.MEDIUM
    return Priority.LOW


def _coverage_buckets(
    matched: Sequence[SkillMatch], gaps: Sequence[SkillGap], category_order: Sequence[str]
) -> List[CategoryBucket]:
    """Coverage per category; categories the job never mentions are left out."""
    buckets = []
    for category in category_order:
        category_matches = tuple(m.secondary for m in matched if m.entry.category == category)
        category_gaps = tuple(g for g in gaps if g.entry.category == category)
        relevant = len(category_matches) + len(category_gaps)
        if relevant == 0:
            continue
        buckets.append(
            CategoryBucket(
                category=category,
                matched=category_matches,
                gaps=category_gaps,
                coverage_percent=_round_half_up(100 * len(category_matches) / relevant),
            )
        )
    # weakest areas first; sorted() keeps catalog order on ties
    return sorted(buckets, key=lambda bucket: bucket.coverage_percent)


# --- Resume-keyword helpers ----------------------------------------------------

def _keyword_buckets(findings: Sequence[Finding], entries: Sequence[CatalogEntry]) -> List[CategoryBucket]:
    """Every category in catalog order, with found and missing keywords and weighted points."""
    found_names = {finding.entry.name for finding in findings}
    order: List[str] = []
    grouped: Dict[str, List[CatalogEntry]] = defaultdict(list)
    for entry in entries:
        if entry.category not in grouped:
            order.append(entry.category)
        grouped[entry.category].append(entry)

    buckets = []
    for category in order:
        members = grouped[category]
        found = tuple(f for f in findings if f.entry.category == category)
        missing = tuple(entry for entry in members if entry.name not in found_names)
        buckets.append(
            CategoryBucket(
                category=category,
                matched=found,
                coverage_percent=_round_half_up(100 * len(found) / len(members)),
                missing=missing,
                points=sum(f.entry.weight for f in found),
                max_points=sum(entry.weight for entry in members),
            )
        )
    return buckets


def top_missing_keywords(buckets: Sequence[CategoryBucket], limit: int = MAX_TOP_MISSING) -> List[str]:
    """Missing keywords, heaviest categories first; catalog order breaks ties."""
    missing = [entry for bucket in buckets for entry in bucket.missing]
    missing.sort(key=lambda entry: -entry.weight)
    return [entry.name for entry in missing[:limit]]


# --- Scoring -------------------------------------------------------------------

def score_job_posting(
    benefit_count: int,
    salary_hints: Sequence[SalaryHint],
    experience: Optional[ExperienceLevel],
    red_flags: Sequence[Finding],
) -> int:
    benefit_score = min(benefit_count * POINTS_PER_BENEFIT, MAX_BENEFIT_POINTS)
    salary_bonus = SALARY_RANGE_BONUS if any(hint.discloses_range for hint in salary_hints) else 0
    if experience is None:
        clarity_bonus = 0
    elif experience.confidence is Confidence.HIGH:
        clarity_bonus = HIGH_CLARITY_BONUS
    else:
        clarity_bonus = LEVEL_DETECTED_BONUS
    penalty = sum(RED_FLAG_PENALTIES.get(flag.entry.tier, 0) for flag in red_flags)  # type: ignore[arg-type]

    score = BASELINE_SCORE + benefit_score + salary_bonus + clarity_bonus - penalty
    return max(0, min(100, score))


def count_relevant_job_skills(matched: Sequence[SkillMatch], gaps: Sequence[SkillGap]) -> int:
    """Skills the job actually asks for: every match plus the gaps it does not call optional."""
    return len(matched) + sum(1 for gap in gaps if gap.finding.is_emphasized)


def score_skills_gap(matched_count: int, job_skill_count: int) -> int:
    if job_skill_count <= 0:
        return 0
    return _round_half_up(100 * matched_count / job_skill_count)


def job_posting_label(score: int) -> str:
    if score >= 75:
        return "Looks Good"
    if score >= 50:
        return "Moderate"
    if score >= 30:
        return "Some Concerns"
    return "Caution Advised"


def skills_gap_label(score: int) -> str:
    if score >= 80:
        return "Excellent Match"
    if score >= 60:
        return "Good Match"
    if score >= 40:
        return "Moderate Match"
    if score >= 20:
        return "Stretch Role"
    return "Skills Gap"


def score_resume_keywords(points: float, max_points: float) -> int:
    if max_points <= 0:
        return 0
    return _round_half_up(100 * points / max_points)


def resume_keywords_label(score: int) -> str:
    if score >= 70:
        return "Excellent"
    if score >= 50:
        return "Good"
    if score >= 30:
        return "Fair"
    return "Needs Improvement"


# --- Summaries & recommendations -----------------------------------------------

def summarize_job_posting(
    skill_count: int,
    red_flag_count: int,
    benefit_count: int,
    experience: Optional[ExperienceLevel],
) -> str:
    parts: List[str] = []

    if experience is not None:
        parts.append(f"This appears to be a {experience.level.lower()} position ({experience.years_range}).")

    if skill_count > 15:
        parts.append(f"The job requires a broad skillset with {skill_count} technical skills mentioned.")
    elif skill_count > 8:
        parts.append(f"The role requires a solid technical foundation with {skill_count} skills mentioned.")
    elif skill_count > 0:
        parts.append(f"The job has focused requirements with {skill_count} key skills.")

    if red_flag_count == 0:
        parts.append("No significant red flags were detected.")
    elif red_flag_count <= 2:
        parts.append(
            f"A few potential concerns were noted ({red_flag_count}) - worth asking about in the interview."
        )
    else:
        parts.append(
            f"Several red flags were detected ({red_flag_count}) - proceed with caution and ask clarifying questions."
        )

    if benefit_count >= 5:
        parts.append("The benefits package appears comprehensive.")
    elif benefit_count > 0:
        parts.append(f"{benefit_count} benefits/perks were mentioned.")

    return " ".join(parts)


def recommend_for_job_posting(
    score: int,
    required_skills: Sequence[Finding],
    nice_to_have_skills: Sequence[Finding],
    experience: Optional[ExperienceLevel],
    salary_hints: Sequence[SalaryHint],
    red_flags: Sequence[Finding],
    benefits: Sequence[Finding],
) -> List[str]:
    recommendations: List[str] = []

    if required_skills:
        recommendations.append(
            f"Prepare concrete examples that demonstrate the core skills: {_names(required_skills)}."
        )

    if score >= 75:
        recommendations.append("This posting looks solid - tailor your application to the required skills and apply.")
    elif score >= 50:
        recommendations.append("A reasonable opportunity - clarify the open questions below before committing.")
    elif score >= 30:
        recommendations.append("Some concerns were detected - raise them early in the interview process.")
    else:
        recommendations.append("Proceed with caution - weigh the concerns below carefully before applying.")

    if any(hint.hint == NO_SALARY_HINT for hint in salary_hints):
        recommendations.append(NO_SALARY_RECOMMENDATION)
    serious = [flag for flag in red_flags if flag.entry.tier in (Severity.HIGH, Severity.MEDIUM)]
    if serious:
        recommendations.append(f"Ask the employer about the flagged areas: {_names(serious)}.")
    if experience is None:
        recommendations.append("The seniority level is unclear - ask the recruiter what experience they expect.")
    if not benefits:
        recommendations.append("No benefits were mentioned - request details of the full package.")

    if nice_to_have_skills:
        recommendations.append(
            f"Nice-to-have skills ({_names(nice_to_have_skills)}) are not deal-breakers - "
            "apply even if you lack some of them."
        )

    return recommendations


def summarize_skills_gap(score: int, match_count: int, gap_count: int) -> str:
    if match_count + gap_count == 0:
        return NO_REQUIREMENTS_SUMMARY
    if score >= 80:
        return (
            f"Excellent match! Your resume covers {match_count} of the skills mentioned in this job description. "
            "You're well-positioned for this role."
        )
    if score >= 60:
        return (
            f"Good match! You have {match_count} matching skills. There are {gap_count} skills you could develop "
            "to strengthen your application."
        )
    if score >= 40:
        return (
            f"Moderate match with {match_count} matching skills. Consider addressing the {gap_count} skill gaps "
            "before applying, or highlight transferable experience in your cover letter."
        )
    if score >= 20:
        return (
            f"This role requires skills you're still developing. You match {match_count} skills but are missing "
            f"{gap_count}. This could be a stretch role to grow into."
        )
    return (
        "This role appears to be a significant stretch based on current skills. Consider building foundational "
        "skills first or looking for more aligned roles."
    )


def recommend_for_skills_gap(
    score: int,
    gaps: Sequence[SkillGap],
    extras: Sequence[Finding],
    buckets: Sequence[CategoryBucket],
    mentioned_count: int,
) -> List[str]:
    recommendations: List[str] = []
    if mentioned_count == 0:
        return recommendations

    high_priority = [gap for gap in gaps if gap.priority is Priority.HIGH]
    if high_priority:
        recommendations.append(f"Focus on learning these high-priority skills first: {_names(high_priority)}")

    if score < 50:
        recommendations.append(
            "Consider taking an online course to build foundational skills in the areas you're missing"
        )
    elif score < 80:
        recommendations.append("Highlight your matching skills prominently in your resume and cover letter")
    else:
        recommendations.append("Lead with your strongest matching skills - you cover most of what this role asks for")

    weak = [bucket for bucket in buckets if bucket.gaps and bucket.coverage_percent < 50]
    if weak:
        weakest = weak[0]
        recommendations.append(
            f"Your weakest area is {weakest.category} ({weakest.coverage_percent}% coverage) - "
            "prioritise it when planning your learning"
        )
    if any(gap.resources for gap in gaps):
        recommendations.append("Check out the learning resources below to start building the missing skills")

    if extras:
        recommendations.append(
            "Your additional skills not mentioned in the job description could differentiate you - "
            f"consider highlighting relevant ones ({_names(extras)})"
        )

    return recommendations


def summarize_resume_keywords(found: int, possible: int, buckets: Sequence[CategoryBucket]) -> str:
    covered = sum(1 for bucket in buckets if bucket.matched)
    return (
        f"Found {found} of {possible} tracked keywords, covering {covered} of {len(buckets)} categories."
    )


def recommend_for_resume_keywords(score: int, found: int, top_missing: Sequence[str]) -> List[str]:
    if score >= 70:
        band = (
            "Excellent! Your resume is well-optimised for AI/ML roles. It contains strong technical keywords "
            "that ATS systems and recruiters look for."
        )
    elif score >= 50:
        band = (
            "Good start! Your resume has decent keyword coverage, but adding 5-7 more relevant technical terms "
            "could significantly improve your ATS compatibility."
        )
    elif score >= 30:
        band = (
            "Your resume could benefit from more AI/ML keywords. Consider adding relevant frameworks, tools, "
            "and techniques you've worked with to improve visibility."
        )
    elif found >= 5:
        band = (
            "Your resume needs more technical keywords. Review the missing keywords below and add relevant ones "
            "that match your actual experience."
        )
    else:
        band = (
            "Your resume appears to lack AI/ML-specific keywords. Make sure to include programming languages, "
            "frameworks, and techniques you've used in your projects."
        )

    recommendations = [band]
    if top_missing:
        recommendations.append(
            "Only add keywords you can back up - the most valuable missing ones are: "
            f"{', '.join(top_missing[:MAX_LISTED_NAMES])}"
        )
    return recommendations


# --- Main analysis entry points ------------------------------------------------

def analyze_single_text(
    text: str, catalog: CatalogSelector = CatalogSelector.JOB_SIGNALS
) -> AnalysisResult:
    """Decode one job posting into skills, signals, a score and advice."""
    selector = CatalogSelector(catalog)
    skills_catalog = load_catalog(selector)
    raw_text = text or ""
    stats = compute_text_stats(raw_text)

    if not raw_text.strip():
        return AnalysisResult(
            mode=AnalysisMode.JOB_POSTING,
            catalog=selector,
            catalog_version=skills_catalog.version,
            score=BASELINE_SCORE,
            score_label=job_posting_label(BASELINE_SCORE),
            summary=NO_SIGNALS_SUMMARY,
            stats=stats,
        )

    tables = load_signal_tables()
    normalized = normalize_text(raw_text)

    skill_findings = match_all(normalized, skills_catalog.entries, DECODER_CONTEXT_WINDOW)
    required = tuple(f for f in skill_findings if f.is_emphasized)
    nice_to_have = tuple(f for f in skill_findings if not f.is_emphasized)

    experience = detect_experience_level(normalized, tables.experience_levels)
    salary_hints = tuple(detect_salary_hints(normalized, tables.salary_hints))
    red_flags = tuple(detect_red_flags(normalized, tables.red_flags))
    benefits = tuple(match_all(normalized, tables.benefits))

    score = score_job_posting(len(benefits), salary_hints, experience, red_flags)
    logger.debug(
        "Job posting analysed: %d skills, %d red flags, %d benefits, score=%d",
        len(skill_findings),
        len(red_flags),
        len(benefits),
        score,
    )

    return AnalysisResult(
        mode=AnalysisMode.JOB_POSTING,
        catalog=selector,
        catalog_version=skills_catalog.version,
        score=score,
        score_label=job_posting_label(score),
        summary=summarize_job_posting(len(skill_findings), len(red_flags), len(benefits), experience),
        recommendations=tuple(
            recommend_for_job_posting(score, required, nice_to_have, experience, salary_hints, red_flags, benefits)
        ),
        stats=stats,
        categories=tuple(_skill_buckets(skill_findings, skills_catalog.entries)),
        required_skills=required,
        nice_to_have_skills=nice_to_have,
        experience=experience,
        salary_hints=salary_hints,
        red_flags=red_flags,
        benefits=benefits,
    )


def analyze_two_texts(
    primary_text: str,
    secondary_text: str,
    catalog: CatalogSelector = CatalogSelector.SKILLS_TAXONOMY,
) -> AnalysisResult:
    """Compare a resume (primary) against a job posting (secondary)."""
    selector = CatalogSelector(catalog)
    skills_catalog = load_catalog(selector)
    primary_raw = primary_text or ""
    secondary_raw = secondary_text or ""
    stats = compute_text_stats(primary_raw)
    secondary_stats = compute_text_stats(secondary_raw)

    if not primary_raw.strip() and not secondary_raw.strip():
        return AnalysisResult(
            mode=AnalysisMode.SKILLS_GAP,
            catalog=selector,
            catalog_version=skills_catalog.version,
            score=0,
            score_label=skills_gap_label(0),
            summary=NO_SIGNALS_SUMMARY,
            stats=stats,
            secondary_stats=secondary_stats,
        )

    primary = normalize_text(primary_raw)
    secondary = normalize_text(secondary_raw)

    matched: List[SkillMatch] = []
    gaps: List[SkillGap] = []
    extras: List[Finding] = []
    for entry in skills_catalog.entries:
        in_primary = match(primary, entry, GAP_CONTEXT_WINDOW)
        in_secondary = match(secondary, entry, GAP_CONTEXT_WINDOW)
        if in_primary is not None and in_secondary is not None:
            matched.append(SkillMatch(entry, in_primary, in_secondary))
        elif in_secondary is not None:
            gaps.append(
                SkillGap(
                    entry=entry,
                    priority=determine_priority(entry.tier, in_secondary.is_emphasized),
                    reason=REQUIRED_REASON if in_secondary.is_emphasized else NICE_TO_HAVE_REASON,
                    finding=in_secondary,
                )
            )
        elif in_primary is not None:
            extras.append(in_primary)

    gaps.sort(key=lambda gap: PRIORITY_ORDER[gap.priority])
    buckets = _coverage_buckets(matched, gaps, skills_catalog.categories())
    job_skill_count = count_relevant_job_skills(matched, gaps)
    score = score_skills_gap(len(matched), job_skill_count)
    logger.debug(
        "Skills gap analysed: %d matched, %d gaps, %d extra, score=%d",
        len(matched),
        len(gaps),
        len(extras),
        score,
    )

    return AnalysisResult(
        mode=AnalysisMode.SKILLS_GAP,
        catalog=selector,
        catalog_version=skills_catalog.version,
        score=score,
        score_label=skills_gap_label(score),
        summary=summarize_skills_gap(score, len(matched), len(gaps)),
        recommendations=tuple(recommend_for_skills_gap(score, gaps, extras, buckets, len(matched) + len(gaps))),
        stats=stats,
        secondary_stats=secondary_stats,
        categories=tuple(buckets),
        matched=tuple(matched),
        gaps=tuple(gaps),
        extras=tuple(extras),
        job_skill_count=job_skill_count,
    )


def analyze_resume_keywords(
    text: str, catalog: CatalogSelector = CatalogSelector.RESUME_KEYWORDS
) -> AnalysisResult:
    """Scan one resume for weighted ATS keywords and report what is missing."""
    selector = CatalogSelector(catalog)
    keyword_catalog = load_catalog(selector)
    raw_text = text or ""
    stats = compute_text_stats(raw_text)
    max_points = sum(entry.weight for entry in keyword_catalog.entries)

    if not raw_text.strip():
        return AnalysisResult(
            mode=AnalysisMode.RESUME_KEYWORDS,
            catalog=selector,
            catalog_version=keyword_catalog.version,
            score=0,
            score_label=resume_keywords_label(0),
            summary=NO_SIGNALS_SUMMARY,
            stats=stats,
            categories=tuple(_keyword_buckets((), keyword_catalog.entries)),
            max_points=max_points,
        )

    normalized = normalize_text(raw_text)
    keywords = tuple(
        dataclasses.replace(finding, occurrences=count_occurrences(normalized, finding.entry))
        for finding in match_all(normalized, keyword_catalog.entries)
    )
    buckets = _keyword_buckets(keywords, keyword_catalog.entries)
    top_missing = tuple(top_missing_keywords(buckets))
    points = sum(bucket.points for bucket in buckets)
    score = score_resume_keywords(points, max_points)
    logger.debug("Resume keywords analysed: %d found, score=%d", len(keywords), score)

    return AnalysisResult(
        mode=AnalysisMode.RESUME_KEYWORDS,
        catalog=selector,
        catalog_version=keyword_catalog.version,
        score=score,
        score_label=resume_keywords_label(score),
        summary=summarize_resume_keywords(len(keywords), len(keyword_catalog.entries), buckets),
        recommendations=tuple(recommend_for_resume_keywords(score, len(keywords), top_missing)),
        stats=stats,
        categories=tuple(buckets),
        keywords=keywords,
        top_missing=top_missing,
        points=points,
        max_points=max_points,
    )
