"""FastAPI application factory"""

from typing import Optional
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decline_dashboard.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decline_dashboard.api.v1 import analytics
from decline_dashboard.infrastructure.data.store import TransactionStore
from decline_dashboard.infrastructure.observability.logging import setup_logging
from decline_dashboard.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: Optional[TransactionStore] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Decline Dashboard",
        description="Filtered approval/decline analytics over payment transactions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One store per app; handlers receive it through get_store
    app.state.store = store or TransactionStore()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "transactions_loaded": app.state.store.is_loaded,
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(analytics.router, prefix="/v1", tags=["analytics"])

    return app


app = create_app()
