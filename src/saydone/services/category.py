"""Work/home classification by keyword scoring."""

from dataclasses import dataclass

from ..config import ParserVocabulary
from ..models.task import Category
from .matching import contains_keyword


@dataclass(frozen=True)
class CategoryResult:
    """Winning category with the scores that decided it."""

    category: Category
    work_score: int
    home_score: int


def score_keywords(text: str, keywords: tuple[str, ...]) -> int:
    """Count distinct keywords present in text (not occurrences)."""
    return sum(1 for keyword in set(keywords) if contains_keyword(text, keyword))


def classify(clause: str, vocabulary: ParserVocabulary) -> CategoryResult:
    """Classify a clause as Work or Home.

    Work needs a non-zero score strictly above Home; ties go to Home.
    The clause is not modified.
    """
    work_score = score_keywords(clause, vocabulary.work_keywords)
    home_score = score_keywords(clause, vocabulary.home_keywords)

    category = Category.HOME
    if work_score > 0 and work_score > home_score:
        category = Category.WORK

    return CategoryResult(category=category, work_score=work_score, home_score=home_score)
