"""Node Gateway Service - REST facade over a ledger node's RPC interface.

Exposes node identity, peer listing, a paged record query and a workflow
trigger under /demo.
"""

from __future__ import annotations

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ledger_service_libs.error_handling.fastapi import register_error_handlers
from ledger_service_libs.logging_utils import configure_service_logging, create_service_logger

from services.node_gateway_service.api import demo_router, health_router
from services.node_gateway_service.clients.node_rpc_client import NodeRPCError
from services.node_gateway_service.config import settings
from services.node_gateway_service.di import (
    GatewayProvider,
    NodeGatewayProvider,
    RequestContextProvider,
)
from services.node_gateway_service.middleware import CorrelationIDMiddleware

configure_service_logging(
    settings.SERVICE_NAME,
    environment=settings.ENVIRONMENT.value,
    log_level=settings.LOG_LEVEL,
)
logger = create_service_logger("node_gateway_service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="0.1.0",
        description="Node Gateway Service - REST facade over a ledger node",
        docs_url="/docs" if settings.is_development() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development() else None,
    )

    register_error_handlers(app, settings.SERVICE_NAME, external_errors=(NodeRPCError,))

    app.add_middleware(CorrelationIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(health_router)
    app.include_router(demo_router, prefix="/demo", tags=["Demo API"])

    container = make_async_container(
        NodeGatewayProvider(),
        GatewayProvider(),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    logger.info("Node gateway created", extra={"node_rpc_url": settings.NODE_RPC_URL})
    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.node_gateway_service.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
