"""Context classifier and per-entry matcher."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from catalog import CatalogEntry, CompiledPattern
from job_signals import NICE_TO_HAVE_INDICATORS

logger = logging.getLogger(__name__)

DECODER_CONTEXT_WINDOW = 200
GAP_CONTEXT_WINDOW = 150
SNIPPET_RADIUS = 50


class Emphasis(str, Enum):
    EMPHASIZED = "emphasized"
    DE_EMPHASIZED = "de-emphasized"


@dataclass(frozen=True)
class Finding:
    entry: CatalogEntry
    matched_text: str
    position: int
    is_emphasized: bool = True
    context: str = ""
    occurrences: int = 1

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def category(self) -> str:
        return self.entry.category


def classify(
    text: str,
    position: int,
    window: int = DECODER_CONTEXT_WINDOW,
    phrases: Sequence[str] = NICE_TO_HAVE_INDICATORS,
) -> Emphasis:
    """Look at the window before a match; any de-emphasis phrase wins."""
    context_before = text[max(0, position - window):position].lower()
    for phrase in phrases:
        if phrase.lower() in context_before:
            return Emphasis.DE_EMPHASIZED
    return Emphasis.EMPHASIZED


def extract_context(text: str, start: int, end: int, radius: int = SNIPPET_RADIUS) -> str:
    left = max(0, start - radius)
    right = min(len(text), end + radius)
    snippet = text[left:right]
    if left > 0:
        snippet = "..." + snippet
    if right < len(text):
        snippet = snippet + "..."
    return snippet


def search(text: str, compiled: CompiledPattern) -> Optional[Tuple[int, int]]:
    """Span of the first occurrence of one compiled pattern, or None."""
    hit = compiled.regex.search(text)
    if hit is None:
        return None
    return hit.start(), hit.end()


def count_occurrences(text: str, entry: CatalogEntry) -> int:
    """Non-overlapping hits of the first pattern that matches at all."""
    for compiled in entry.compiled:
        hits = len(compiled.regex.findall(text))
        if hits:
            return hits
    return 0


def match(text: str, entry: CatalogEntry, window: int = DECODER_CONTEXT_WINDOW) -> Optional[Finding]:
    """First pattern of the entry that hits wins; None when nothing matches."""
    if not text:
        return None
    for compiled in entry.compiled:
        span = search(text, compiled)
        if span is None:
            continue
        start, end = span
        emphasis = classify(text, start, window)
        return Finding(
            entry=entry,
            matched_text=text[start:end],
            position=start,
            is_emphasized=emphasis is Emphasis.EMPHASIZED,
            context=extract_context(text, start, end),
        )
    return None


def match_all(
    text: str, entries: Iterable[CatalogEntry], window: int = DECODER_CONTEXT_WINDOW
) -> List[Finding]:
    """Run every entry against the text; at most one finding per entry name."""
    findings: List[Finding] = []
    seen = set()
    for entry in entries:
        if entry.name in seen:
            continue
        finding = match(text, entry, window)
        if finding is None:
            continue
        seen.add(entry.name)
        findings.append(finding)
    logger.debug("Matched %d entries", len(findings))
    return findings
