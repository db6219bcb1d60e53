"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from abroad_budget.api.middleware import RequestIDMiddleware, MetricsMiddleware
from abroad_budget.api.v1 import catalog, estimate, images
from abroad_budget.infrastructure.observability.logging import setup_logging
from abroad_budget.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Study Abroad Budget Calculator",
        description="Destination catalog and study-abroad cost estimates",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])
    app.include_router(estimate.router, prefix="/v1", tags=["estimates"])
    app.include_router(images.router, prefix="/v1", tags=["images"])

    return app


app = create_app()
