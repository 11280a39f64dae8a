from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS
from .database import create_repository
from .logging_config import get_logger, setup_logging
from .routers import tasks
from .services import TaskService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire the configured repository on startup, close its client on shutdown."""
    mongo_client = None
    if getattr(app.state, "task_service", None) is None:
        repository, mongo_client = create_repository()
        app.state.task_service = TaskService(repository)

    try:
        yield
    finally:
        if mongo_client is not None:
            logger.info("Closing MongoDB client")
            await mongo_client.close()


def create_app(task_service: Optional[TaskService] = None) -> FastAPI:
    """Build the FastAPI app.

    When ``task_service`` is given it is used as-is and no storage is
    configured from the environment.
    """
    app = FastAPI(
        title="Todo API",
        description="Task storage API with in-memory and MongoDB backends",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.task_service = task_service

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tasks.router, prefix="/api", tags=["tasks"])

    @app.get("/")
    def read_root():
        return {"message": "Todo API"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app


setup_logging()
app = create_app()
