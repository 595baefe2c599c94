"""API route handlers."""

from . import health, tasks

__all__ = ["health", "tasks"]
