"""Node Gateway Service API module."""

from services.node_gateway_service.api.demo_routes import router as demo_router
from services.node_gateway_service.api.health_routes import router as health_router

__all__ = ["demo_router", "health_router"]
