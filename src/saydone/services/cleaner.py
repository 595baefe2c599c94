"""Final description cleanup."""

import re

from ..config import ParserVocabulary
from .matching import collapse_whitespace, keyword_pattern

_EDGE_PUNCTUATION = re.compile(r"^[,.\-:;]+|[,.\-:;]+$")

MIN_DESCRIPTION_LENGTH = 3


def _remove_words(text: str, words: tuple[str, ...]) -> str:
    for word in words:
        text = keyword_pattern(word).sub(" ", text)
    return text


def _tidy(text: str) -> str:
    text = collapse_whitespace(text)
    text = _EDGE_PUNCTUATION.sub("", text).strip()
    return text[:1].upper() + text[1:]


def clean_description(text: str, vocabulary: ParserVocabulary, fallback: str = "") -> str:
    """
    Turn a stripped clause into a task description.

    Leftover stop words, timing words and duration phrases are removed.
    When that leaves fewer than three characters, the uncleaned text is
    used instead, then the fallback (normally the original clause).
    """
    cleaned = _remove_words(text, vocabulary.stop_words)
    cleaned = _remove_words(cleaned, vocabulary.timing_words)
    cleaned = _remove_words(cleaned, vocabulary.duration_phrases)
    cleaned = _tidy(cleaned)

    for candidate in (cleaned, _tidy(text), _tidy(fallback)):
        if len(candidate) >= MIN_DESCRIPTION_LENGTH:
            return candidate

    # Nothing usable survived; keep whatever is non-empty
    return _tidy(fallback) or _tidy(text) or fallback.strip() or text.strip()
