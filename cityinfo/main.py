import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cityinfo.config import get_settings
from cityinfo.core.logging_config import setup_logging
from cityinfo.core.dependencies import get_city_repository
from cityinfo.api.errors import register_exception_handlers
from cityinfo.api.v1.routes.cities import router as cities_router
from cityinfo.api.v1.routes.points_of_interest import router as points_of_interest_router
from cityinfo.api.v1.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up application...")

    # Seed the repository now so bad seed data fails the boot, not a request
    repository = get_city_repository()
    logger.info(f"Serving {len(repository.list_cities())} cities")

    yield

    # Shutdown
    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(cities_router, prefix=settings.API_PREFIX)
    app.include_router(points_of_interest_router, prefix=settings.API_PREFIX)
    app.include_router(health_router)
    return app


app = create_app()
