"""Task extraction pipeline and task list services."""

from .category import classify
from .cleaner import clean_description
from .dates import resolve_date
from .normalizer import normalize
from .priority import extract_priority
from .segmenter import segment
from .task_parser import parse_clause, parse_tasks
from .task_store import TaskNotFoundError, TaskStore

__all__ = [
    "parse_tasks",
    "parse_clause",
    "normalize",
    "segment",
    "extract_priority",
    "classify",
    "resolve_date",
    "clean_description",
    "TaskStore",
    "TaskNotFoundError",
]
