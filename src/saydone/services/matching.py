"""Whole-word keyword matching shared by the pipeline stages."""

import re
from functools import lru_cache

_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=512)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile a case-insensitive whole-word pattern for a keyword or phrase.

    Multi-word phrases match across any run of whitespace.
    """
    words = [re.escape(word) for word in keyword.split()]
    return re.compile(r"\b" + r"\s+".join(words) + r"\b", re.IGNORECASE)


def contains_keyword(text: str, keyword: str) -> bool:
    """Check whether text contains the keyword as a whole word or phrase."""
    return keyword_pattern(keyword).search(text) is not None


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def strip_pattern(pattern: re.Pattern[str], text: str) -> str:
    """Remove every match of pattern and collapse the leftover whitespace."""
    return collapse_whitespace(pattern.sub(" ", text))
