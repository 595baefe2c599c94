"""Priority extraction from urgency keywords."""

import logging
from dataclasses import dataclass

from ..config import ParserVocabulary
from ..models.task import Urgency
from .matching import collapse_whitespace, contains_keyword, keyword_pattern, strip_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriorityResult:
    """Priority tier and the clause with the winning keyword removed."""

    urgency: Urgency
    text: str
    keyword: str | None = None


class PriorityRule:
    """A keyword tier mapping to one urgency level."""

    def __init__(self, name: str, keywords: tuple[str, ...], urgency: Urgency):
        self.name = name
        self.keywords = keywords
        self.urgency = urgency

    def first_match(self, text: str) -> str | None:
        """Return the first keyword (in list order) present in text."""
        for keyword in self.keywords:
            if contains_keyword(text, keyword):
                return keyword
        return None


def build_priority_rules(vocabulary: ParserVocabulary) -> list[PriorityRule]:
    """Priority tiers in precedence order."""
    return [
        PriorityRule("urgent", vocabulary.urgent_keywords, Urgency.HIGH),
        PriorityRule("high", vocabulary.high_keywords, Urgency.HIGH),
        PriorityRule("low", vocabulary.low_keywords, Urgency.LOW),
    ]


def extract_priority(clause: str, vocabulary: ParserVocabulary) -> PriorityResult:
    """
    Assign a priority tier to a clause and strip the keyword that decided it.

    Tiers are tried in order and the first keyword hit wins; list order,
    not position in the clause, decides between competing keywords. Only
    the winning keyword is removed (every occurrence of it). Clauses with
    no hit default to Medium.
    """
    for rule in build_priority_rules(vocabulary):
        keyword = rule.first_match(clause)
        if keyword is not None:
            logger.debug(f"Priority rule '{rule.name}' matched '{keyword}'")
            return PriorityResult(
                urgency=rule.urgency,
                text=strip_pattern(keyword_pattern(keyword), clause),
                keyword=keyword,
            )

    return PriorityResult(urgency=Urgency.MEDIUM, text=collapse_whitespace(clause))


def boost_urgency(urgency: Urgency, clause: str, vocabulary: ParserVocabulary) -> Urgency:
    """Raise a Medium clause to High when it mentions pressing timing."""
    if urgency is Urgency.MEDIUM and any(
        contains_keyword(clause, keyword) for keyword in vocabulary.boost_keywords
    ):
        return Urgency.HIGH
    return urgency
