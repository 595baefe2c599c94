"""FastAPI application entrypoint with Lambda handler."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum

from .config import get_vocabulary, settings
from .routes import health, tasks
from .services.task_store import TaskNotFoundError

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the parser vocabulary up front so a bad override file fails at startup."""
    vocabulary = get_vocabulary()
    source = settings.vocabulary_path or "built-in tables"
    logger.info(
        f"Starting {settings.service_name} ({settings.environment}) with vocabulary from {source}: "
        f"{len(vocabulary.work_keywords)} work / {len(vocabulary.home_keywords)} home keywords"
    )
    yield
    logger.info(f"Shutting down {settings.service_name}, task list at {settings.db_path}")


app = FastAPI(
    title="SayDone",
    description="Split spoken or typed sentences into dated, prioritised tasks",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    """Unknown task ids on any task route become 404s."""
    logger.info(f"{request.method} {request.url.path}: no task {exc.args[0]}")
    return JSONResponse(status_code=404, content={"detail": f"Task not found: {exc.args[0]}"})


app.include_router(health.router)
app.include_router(tasks.router, prefix="/tasks")

# Lambda handler via Mangum
handler = Mangum(app, lifespan="off")
