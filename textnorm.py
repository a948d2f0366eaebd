import logging
import math
import threading
from dataclasses import dataclass
from typing import Optional

import spacy
from spacy.language import Language

logger = logging.getLogger(__name__)

# One character in, one character out, so match offsets still index the
# caller's original text.
_CHAR_REPLACEMENTS = {
    "\u2022": "-",
    "\u2023": "-",
    "\u25e6": "-",
    "\u2043": "-",
    "\u2212": "-",
    "\u2013": "-",
    "\u2014": "-",
    "\u2010": "-",
    "\u2011": "-",
    "\u2012": "-",
    "\u2015": "-",
    "\uf0b7": "-",
    "\uf0d8": "-",
    "\uf0d9": "-",
    "\uf0da": "-",
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u00ad": "-",
    "\u00b7": "-",
    "\u00a0": " ",
    "\u202f": " ",
    "\u2024": ".",
}
_TRANSLATION_TABLE = str.maketrans(_CHAR_REPLACEMENTS)

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class TextStats:
    word_count: int = 0
    sentence_count: int = 0
    character_count: int = 0

    @property
    def reading_minutes(self) -> int:
        return math.ceil(self.word_count / WORDS_PER_MINUTE)


def normalize_text(text: Optional[str]) -> str:
    """Replace unicode bullets, dashes and quotes without changing length."""
    if not text:
        return ""
    return text.translate(_TRANSLATION_TABLE)


_SENTENCIZER: Optional[Language] = None
_SENTENCIZER_LOCK = threading.Lock()


def _load_sentencizer() -> Language:
    """Blank English pipeline with the rule-based sentencizer, built once."""
    global _SENTENCIZER
    if _SENTENCIZER is not None:
        return _SENTENCIZER
    with _SENTENCIZER_LOCK:
        if _SENTENCIZER is None:
            nlp = spacy.blank("en")
            nlp.add_pipe("sentencizer")
            _SENTENCIZER = nlp
            logger.debug("Initialised spaCy sentencizer")
    return _SENTENCIZER


def compute_text_stats(text: Optional[str]) -> TextStats:
    if not text or not text.strip():
        return TextStats(character_count=len(text or ""))
    nlp = _load_sentencizer()
    if len(text) >= nlp.max_length:
        # sentencizer-only pipeline, so the default length cap does not apply
        with _SENTENCIZER_LOCK:
            nlp.max_length = max(nlp.max_length, len(text) + 1)
    doc = nlp(text)
    sentence_count = sum(1 for sent in doc.sents if sent.text.strip())
    return TextStats(
        word_count=len(text.split()),
        sentence_count=sentence_count,
        character_count=len(text),
    )
