"""Application configuration via environment variables and the parser vocabulary."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "saydone"

    # CORS
    cors_origins: list[str] = ["*"]

    # Task list storage
    db_path: Path = Path.home() / ".saydone" / "tasks.db"
    history_limit: int = 50  # Undo depth kept by the task store

    # Optional JSON file overriding the built-in keyword tables
    vocabulary_path: Path | None = None

    class Config:
        env_prefix = "SAYDONE_"
        env_file = ".env"
        case_sensitive = False


settings = Settings()


class ParserVocabulary(BaseModel):
    """Static keyword tables used by the extraction pipeline.

    Order inside each tuple is significant: the priority tiers are
    first-match-wins in list order, not in text order.
    """

    model_config = ConfigDict(frozen=True)

    # Normalization
    expansions: tuple[tuple[str, str], ...] = (
        ("mom", "mother"),
        ("dad", "father"),
        ("tmw", "tomorrow"),
    )
    filler_phrases: tuple[str, ...] = (
        "there is a need to",
        "there's a need to",
        "there is need to",
        "i need to",
        "i have to",
        "i want to",
        "i should",
        "we need to",
        "we have to",
        "we should",
        "please",
        "remind me to",
        "can you",
        "could you",
    )

    # Priority tiers (stripped from the clause on a hit)
    urgent_keywords: tuple[str, ...] = (
        "urgent",
        "asap",
        "immediately",
        "critical",
        "high priority",
        "must do",
        "critical issue",
    )
    high_keywords: tuple[str, ...] = (
        "important",
        "before it's",
        "overdue",
        "deadline",
    )
    low_keywords: tuple[str, ...] = (
        "whenever",
        "low priority",
        "maybe",
        "sometime",
        "eventually",
    )
    # Timing words that raise a Medium clause to High without being stripped
    boost_keywords: tuple[str, ...] = (
        "tonight",
        "end of day",
        "eod",
        "today",
        "urgent",
        "asap",
    )

    # Category vocabularies
    work_keywords: tuple[str, ...] = (
        "email", "meeting", "call", "presentation", "boss", "client", "code",
        "budget", "slide", "slides", "project", "deadline", "report", "office",
        "business", "interview", "hire", "deploy", "patch", "bug", "production",
        "expense", "agenda", "client meeting", "work", "conference",
    )
    home_keywords: tuple[str, ...] = (
        "mom", "dad", "mother", "father", "gym", "groceries", "kids", "dinner",
        "party", "doctor", "family", "wife", "husband", "son", "daughter",
        "parent", "brother", "sister", "laundry", "clean", "cook", "bank",
        "bill", "medicine", "workout", "trip", "vacation", "home", "house",
        "driving license", "credit card", "blood pressure", "appointment",
        "airport", "cab", "electricity", "workspace", "resume",
    )

    # Final cleaning
    stop_words: tuple[str, ...] = (
        "by", "on", "at", "in", "for", "the", "a", "an", "to", "of", "and", "or",
    )
    timing_words: tuple[str, ...] = (
        "this week", "next week", "morning", "afternoon", "evening", "night",
        "today", "tonight", "tomorrow", "this", "next", "weekend",
    )
    duration_phrases: tuple[str, ...] = (
        "before it's",
        "before its",
        "sometime",
        "eventually",
    )


DEFAULT_VOCABULARY = ParserVocabulary()


def load_vocabulary(path: Path) -> ParserVocabulary:
    """Load a vocabulary override from a JSON file.

    Keys missing from the file keep their built-in values. Lists are
    converted to tuples so the result stays immutable.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if "expansions" in data and isinstance(data["expansions"], dict):
        data["expansions"] = list(data["expansions"].items())
    vocabulary = ParserVocabulary.model_validate(data)
    logger.info(f"Loaded parser vocabulary from {path}")
    return vocabulary


@lru_cache(maxsize=1)
def get_vocabulary() -> ParserVocabulary:
    """Return the vocabulary for the configured settings (cached)."""
    if settings.vocabulary_path:
        return load_vocabulary(settings.vocabulary_path)
    return DEFAULT_VOCABULARY
