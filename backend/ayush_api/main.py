"""FastAPI application for the AYUSH Healthcare API."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ayush_api.api import diseases_router, fhir_router, health_router, patients_router
from ayush_api.api.responses import error_response, success_response
from ayush_api.core.config import Settings, settings as default_settings
from ayush_api.core.errors import REDACTED_ERROR, ApiError
from ayush_api.services import ClinicalStore, get_fhir_mapper, get_reference_catalog

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_response(message, error).model_dump(exclude_none=True),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Logs readiness once the catalog and store are in place. State is
    process-lifetime only, so there is nothing to close on shutdown.
    """
    startup_start = time.perf_counter()
    settings: Settings = app.state.settings

    catalog_stats = app.state.catalog.get_stats()
    logger.info(
        f"Disease catalog loaded: {catalog_stats['disease_count']} diseases "
        f"in {catalog_stats['category_count']} categories"
    )

    total_startup_ms = (time.perf_counter() - startup_start) * 1000
    logger.info(f"{settings.app_name} running on port {settings.port} (startup {total_startup_ms:.0f}ms)")
    logger.info(f"Health check: {settings.base_url}/health")
    logger.info(f"API Base URL: {settings.base_url}")

    yield

    logger.info(
        f"Shutting down: discarding {app.state.store.patient_count} patients "
        f"and {app.state.store.condition_count} conditions"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as the uniform response envelope."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _envelope(exc.status_code, exc.message, exc.error)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        detail = None
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            detail = f"{location}: {first.get('msg', 'invalid value')}"
        return _envelope(400, "Invalid request", detail)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return _envelope(404, f"Route {request.url.path} not found")
        return _envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        debug = request.app.state.settings.debug
        return _envelope(500, "Internal server error", str(exc) if debug else REDACTED_ERROR)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns its own clinical store, so separate apps never
    share patients or conditions.

    Args:
        settings: Optional configuration. If None, loads from environment.

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Clinical data API for AYUSH traditional-medicine diagnoses with FHIR R4 export and validation.",
        version=settings.version,
        lifespan=lifespan,
    )

    catalog = get_reference_catalog()
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.store = ClinicalStore(catalog)
    app.state.mapper = get_fhir_mapper()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(diseases_router, prefix=settings.api_prefix)
    app.include_router(patients_router, prefix=settings.api_prefix)
    app.include_router(fhir_router, prefix=settings.api_prefix)

    @app.get("/", tags=["Health"])
    def root() -> dict:
        """Root endpoint with API info."""
        return success_response(
            {
                "service": settings.app_name,
                "version": settings.version,
                "docs": "/docs",
                "health": f"{settings.api_prefix}/health",
            }
        ).model_dump(exclude_none=True)

    return app


# Default app instance for uvicorn
app = create_app()


def main() -> None:
    """Entry point for the ayush-api command."""
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "ayush_api.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )


if __name__ == "__main__":
    main()
