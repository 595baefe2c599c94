"""Rule-based task extraction from free-form utterances.

Pipeline: normalize -> segment -> (priority, category, date, clean) per clause.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from ..config import ParserVocabulary, get_vocabulary
from ..models.task import TaskRecord
from .category import classify
from .cleaner import clean_description
from .dates import resolve_date
from .normalizer import normalize
from .priority import boost_urgency, extract_priority
from .segmenter import segment

logger = logging.getLogger(__name__)


def parse_clause(
    clause: str,
    now: datetime | date,
    vocabulary: ParserVocabulary | None = None,
) -> TaskRecord:
    """
    Build one task record from a single clause.

    Category and date both read the clause after the priority keyword
    is gone; category classification strips nothing.
    """
    if vocabulary is None:
        vocabulary = get_vocabulary()

    priority = extract_priority(clause, vocabulary)
    category = classify(priority.text, vocabulary)
    resolved = resolve_date(priority.text, now)
    urgency = boost_urgency(priority.urgency, clause, vocabulary)
    description = clean_description(resolved.text, vocabulary, fallback=clause)

    logger.debug(
        f"Clause '{clause}': urgency={urgency.value} category={category.category.value} "
        f"(work={category.work_score}, home={category.home_score}) date_rule={resolved.rule}"
    )

    return TaskRecord(
        description=description,
        due_date=resolved.due_date,
        category=category.category,
        urgency=urgency,
    )


def parse_tasks(
    text: str,
    now: datetime | date | None = None,
    vocabulary: ParserVocabulary | None = None,
) -> list[TaskRecord]:
    """
    Extract task records from natural language.

    Args:
        text: Raw voice/text input like "call mom tonight, also email the client by friday"
        now: Reference moment for relative dates; the wall clock when omitted
        vocabulary: Keyword tables; the configured vocabulary when omitted

    Returns:
        Task records in the order their clauses appear (empty for empty input)
    """
    if vocabulary is None:
        vocabulary = get_vocabulary()
    if now is None:
        now = datetime.now()

    normalized = normalize(text, vocabulary)
    tasks = [parse_clause(clause, now, vocabulary) for clause in segment(normalized)]

    logger.debug(f"Extracted {len(tasks)} task(s) from {len(text)} chars of input")
    return tasks
