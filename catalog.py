"""Pattern catalog types, compilation and one-time loading."""

import logging
import re
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

SHORT_ALIAS_MAX_LENGTH = 3


class PatternKind(str, Enum):
    LITERAL = "literal"
    REGEX = "regex"


class Importance(str, Enum):
    ESSENTIAL = "essential"
    IMPORTANT = "important"
    NICE_TO_HAVE = "nice-to-have"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CatalogSelector(str, Enum):
    """Closed set of catalogs callers may ask for."""

    JOB_SIGNALS = "job-signals"
    SKILLS_TAXONOMY = "skills-taxonomy"
    RESUME_KEYWORDS = "resume-keywords"


Tier = Union[Importance, Severity]


@dataclass(frozen=True)
class PatternSpec:
    source: str
    kind: PatternKind = PatternKind.LITERAL

    @property
    def is_short_literal(self) -> bool:
        return self.kind is PatternKind.LITERAL and len(self.source) <= SHORT_ALIAS_MAX_LENGTH


@dataclass(frozen=True)
class LearningResource:
    name: str
    kind: str
    url: str
    provider: str
    is_free: bool


@dataclass(frozen=True)
class CompiledPattern:
    spec: PatternSpec
    regex: re.Pattern = field(compare=False)


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    category: str
    patterns: Tuple[PatternSpec, ...]
    tier: Optional[Tier] = None
    detail: str = ""
    resources: Tuple[LearningResource, ...] = ()
    weight: float = 1.0
    compiled: Tuple[CompiledPattern, ...] = field(default=(), compare=False, repr=False)

    @property
    def aliases(self) -> Tuple[str, ...]:
        return tuple(p.source for p in self.patterns if p.kind is PatternKind.LITERAL)


@dataclass(frozen=True)
class Catalog:
    selector: CatalogSelector
    version: str
    entries: Tuple[CatalogEntry, ...]

    def categories(self) -> List[str]:
        seen: Dict[str, None] = {}
        for entry in self.entries:
            seen.setdefault(entry.category, None)
        return list(seen)


@dataclass(frozen=True)
class SignalTables:
    """Job-posting sub-catalogs that sit beside the skills table."""

    version: str
    experience_levels: Tuple[CatalogEntry, ...]
    salary_hints: Tuple[CatalogEntry, ...]
    red_flags: Tuple[CatalogEntry, ...]
    benefits: Tuple[CatalogEntry, ...]


def rx(source: str) -> PatternSpec:
    """Mark a catalog pattern as a regular expression."""
    return PatternSpec(source, PatternKind.REGEX)


def as_pattern(value: Union[str, PatternSpec]) -> PatternSpec:
    if isinstance(value, PatternSpec):
        return value
    return PatternSpec(value, PatternKind.LITERAL)


def compile_pattern(spec: PatternSpec) -> Optional[CompiledPattern]:
    """Compile one pattern case-insensitively; None if the source is malformed."""
    if not spec.source:
        return None
    if spec.kind is PatternKind.REGEX:
        source = spec.source
    elif spec.is_short_literal:
        source = rf"(?<!\w){re.escape(spec.source)}(?!\w)"
    else:
        source = re.escape(spec.source)
    try:
        return CompiledPattern(spec, re.compile(source, re.IGNORECASE))
    except re.error as exc:
        logger.warning("Skipping malformed pattern %r: %s", spec.source, exc)
        return None


def build_entry(
    name: str,
    category: str,
    patterns: Iterable[Union[str, PatternSpec]],
    tier: Optional[Tier] = None,
    detail: str = "",
    resources: Sequence[LearningResource] = (),
    weight: float = 1.0,
) -> Optional[CatalogEntry]:
    specs = tuple(as_pattern(p) for p in patterns)
    compiled = []
    for spec in specs:
        result = compile_pattern(spec)
        if result is None:
            logger.warning("Entry %r: pattern %r ignored", name, spec.source)
            continue
        compiled.append(result)
    if not compiled:
        logger.warning("Entry %r has no usable pattern and was dropped", name)
        return None
    return CatalogEntry(
        name=name,
        category=category,
        patterns=specs,
        tier=tier,
        detail=detail,
        resources=tuple(resources),
        weight=weight,
        compiled=tuple(compiled),
    )


def build_entries(rows: Iterable[Dict[str, object]]) -> Tuple[CatalogEntry, ...]:
    """Turn plain data rows into compiled entries, deduplicated by name."""
    entries: List[CatalogEntry] = []
    seen = set()
    for row in rows:
        name = str(row["name"])
        key = name.lower()
        if key in seen:
            logger.warning("Duplicate catalog entry %r ignored", name)
            continue
        entry = build_entry(
            name,
            str(row.get("category", "")),
            row.get("patterns", ()),  # type: ignore[arg-type]
            tier=row.get("tier"),  # type: ignore[arg-type]
            detail=str(row.get("detail", "")),
            resources=row.get("resources", ()),  # type: ignore[arg-type]
            weight=float(row.get("weight", 1.0)),  # type: ignore[arg-type]
        )
        if entry is None:
            continue
        seen.add(key)
        entries.append(entry)
    return tuple(entries)


# --- One-time loading ----------------------------------------------------------

_LOAD_LOCK = threading.Lock()
_CATALOGS: Dict[CatalogSelector, Catalog] = {}
_SIGNAL_TABLES: Optional[SignalTables] = None


def _build_catalog(selector: CatalogSelector) -> Catalog:
    if selector is CatalogSelector.SKILLS_TAXONOMY:
        import skills

        catalog = Catalog(selector, skills.CATALOG_VERSION, build_entries(skills.iter_skill_rows()))
    elif selector is CatalogSelector.RESUME_KEYWORDS:
        import resume_keywords

        catalog = Catalog(
            selector, resume_keywords.CATALOG_VERSION, build_entries(resume_keywords.iter_keyword_rows())
        )
    else:
        import job_signals

        catalog = Catalog(
            selector, job_signals.CATALOG_VERSION, build_entries(job_signals.SKILL_PATTERNS)
        )
    logger.info("Loaded %s catalog v%s with %d entries", selector.value, catalog.version, len(catalog.entries))
    return catalog


def load_catalog(selector: CatalogSelector) -> Catalog:
    selector = CatalogSelector(selector)
    catalog = _CATALOGS.get(selector)
    if catalog is not None:
        return catalog
    with _LOAD_LOCK:
        catalog = _CATALOGS.get(selector)
        if catalog is None:
            catalog = _build_catalog(selector)
            _CATALOGS[selector] = catalog
    return catalog


def load_signal_tables() -> SignalTables:
    global _SIGNAL_TABLES
    if _SIGNAL_TABLES is not None:
        return _SIGNAL_TABLES
    with _LOAD_LOCK:
        if _SIGNAL_TABLES is None:
            import job_signals

            _SIGNAL_TABLES = SignalTables(
                version=job_signals.CATALOG_VERSION,
                experience_levels=build_entries(job_signals.EXPERIENCE_PATTERNS),
                salary_hints=build_entries(job_signals.SALARY_HINTS),
                red_flags=build_entries(job_signals.RED_FLAGS),
                benefits=build_entries(job_signals.BENEFIT_PATTERNS),
            )
            logger.info("Loaded job signal tables v%s", _SIGNAL_TABLES.version)
    return _SIGNAL_TABLES


# --- Lookups -------------------------------------------------------------------

def get_entry(selector: CatalogSelector, name: str) -> Optional[CatalogEntry]:
    """Find an entry by canonical name or literal alias, ignoring case."""
    wanted = name.strip().lower()
    for entry in load_catalog(selector).entries:
        if entry.name.lower() == wanted or any(alias.lower() == wanted for alias in entry.aliases):
            return entry
    return None


def entries_in_category(selector: CatalogSelector, category: str) -> List[CatalogEntry]:
    wanted = category.strip().lower()
    return [entry for entry in load_catalog(selector).entries if entry.category.lower() == wanted]


def categories(selector: CatalogSelector) -> List[str]:
    return load_catalog(selector).categories()
