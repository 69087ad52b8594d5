from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException

from standards_compare.api.v1 import compare, documents, guidance, health, standards
from standards_compare.core.config import Settings, get_settings
from standards_compare.core.errors import BaseApplicationError
from standards_compare.core.logging import LogEvent, configure_logging, get_logger
from standards_compare.core.middleware import (
    RequestContextMiddleware,
    application_error_handler,
    http_error_handler,
    make_unhandled_error_handler,
)
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services import ServiceFactory

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, taxonomy: Optional[Taxonomy] = None) -> FastAPI:
    """
    Application factory and composition root.

    Services are built eagerly, so a broken taxonomy fails here rather than
    on the first comparison.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    services = ServiceFactory.build(settings, taxonomy=taxonomy)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            LogEvent.APP_STARTED,
            version=settings.version,
            api_prefix=settings.api_v1_prefix,
            topics=len(services.taxonomy),
        )
        try:
            yield
        finally:
            services.comparisons.dismiss()
            logger.info(LogEvent.APP_STOPPED)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.services = services

    # browsers refuse credentials together with a wildcard origin
    origins = settings.get_cors_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=settings.cors_allow_credentials and origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(BaseApplicationError, application_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(Exception, make_unhandled_error_handler(settings.is_development))

    prefix = settings.api_v1_prefix
    app.include_router(health.router, prefix=f"{prefix}/health", tags=["health"])
    app.include_router(standards.router, prefix=prefix)
    app.include_router(documents.router, prefix=prefix)
    app.include_router(compare.router, prefix=prefix)
    app.include_router(guidance.router, prefix=prefix)

    if settings.enable_metrics:
        Instrumentator().instrument(app).expose(app)

    @app.get("/")
    async def root():
        return {
            "name": settings.project_name,
            "version": settings.version,
            "docs": "/docs",
            "api_prefix": prefix,
        }

    @app.get(prefix)
    async def api_root():
        return {
            "version": "v1",
            "endpoints": {
                "health": f"{prefix}/health",
                "standards": f"{prefix}/standards",
                "documents": f"{prefix}/documents",
                "comparisons": f"{prefix}/comparisons",
                "guidance": f"{prefix}/guidance",
            },
        }

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "standards_compare.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
