"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ..config import get_vocabulary, settings
from ..services.task_store import TaskStore
from .tasks import get_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: TaskStore = Depends(get_store)) -> dict[str, str | int | bool]:
    """Report service status, the parser vocabulary in use and task list size."""
    vocabulary = get_vocabulary()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "vocabulary": str(settings.vocabulary_path) if settings.vocabulary_path else "built-in",
        "keywords": len(vocabulary.work_keywords) + len(vocabulary.home_keywords),
        "tasks": len(store.tasks),
        "can_undo": store.can_undo,
    }
