"""Voice-to-task capture: turn casual utterances into task records."""

from .services.task_parser import parse_tasks

__version__ = "0.1.0"

__all__ = ["parse_tasks"]
