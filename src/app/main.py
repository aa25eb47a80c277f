import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.api.v1 import clients, detail, form
from src.app.config import get_settings
from src.app.containers import API_MODULES, Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - loads the client list from local storage on startup."""
    container: Container = app.state.container
    logger.info("Starting FitCRM API...")

    # The repository reads local storage exactly once, here
    repository = container.client_repository()
    store_path = container.local_store_settings().path
    logger.info("Client list ready (%d clients, store %s)", repository.count(), store_path)

    yield

    logger.info("Shutting down FitCRM API...")


def create_app(container: Container, lifespan=default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container holding settings, storage and session state.
        lifespan: Optional lifespan context manager. Defaults to default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=API_MODULES)

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    # Include routers
    app.include_router(clients.router, prefix="/api/v1")
    app.include_router(form.router, prefix="/api/v1")
    app.include_router(detail.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {"message": "Welcome to FitCRM API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
