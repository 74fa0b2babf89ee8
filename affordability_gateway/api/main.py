"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from affordability_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from affordability_gateway.api.dependencies import get_request_id
from affordability_gateway.api.v1 import affordability
from affordability_gateway.infrastructure.observability.logging import setup_logging
from affordability_gateway.infrastructure.observability.metrics import invalid_input_counter
from affordability_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """Malformed payloads are a client error with an empty body"""
    invalid_input_counter.inc()
    logging.warning(f"Invalid payload: {exc.errors()}", extra={"request_id": get_request_id(request)})
    return Response(status_code=400)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Affordability Gateway",
        description="Maximum mortgage loan and asking-price delta calculator",
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(affordability.router, prefix="/v1", tags=["affordability"])

    return app


app = create_app()
