"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from powerscore import __version__
from powerscore.config.settings import get_settings
from powerscore.core.error_handlers import domain_error_handler, request_validation_handler
from powerscore.core.exceptions import DomainError
from powerscore.core.logging import configure_logging, get_logger
from powerscore.middleware import RequestContextMiddleware
from powerscore.scoring import get_standards_loader

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()

    # Startup: load standards once so a broken file fails fast
    catalog = get_standards_loader().get_catalog()
    logger.info("startup_complete", standards_version=catalog.version, metrics=sorted(catalog.tables))

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Scores fitness assessments against age- and sex-normed standards",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        loader = get_standards_loader()
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "standards_version": loader.get_catalog().version,
        }

    # Import and include routers
    from powerscore.api.routes import assessments_router, standards_router

    app.include_router(assessments_router, prefix="/assessments", tags=["Assessments"])
    app.include_router(standards_router, prefix="/standards", tags=["Standards"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("powerscore.main:app", host="0.0.0.0", port=8000, reload=True)
