"""Health routes for Node Gateway Service."""

from __future__ import annotations

from fastapi import APIRouter

from services.node_gateway_service.config import settings

router = APIRouter(tags=["Health"])


@router.get("/healthz")
async def health_check() -> dict[str, str | dict]:
    """Liveness document. The node is not contacted; it is checked on each request."""
    return {
        "service": "node_gateway_service",
        "status": "healthy",
        "message": "Node Gateway Service is healthy",
        "version": "0.1.0",
        "environment": settings.ENVIRONMENT.value,
        "dependencies": {
            "node_rpc": {
                "url": settings.NODE_RPC_URL,
                "note": "Node availability checked on request",
            }
        },
    }
