"""Shared utilities for Node Gateway Service HTTP clients."""

from __future__ import annotations

from uuid import UUID

import httpx

from services.node_gateway_service.config import settings


def build_rpc_headers(correlation_id: UUID) -> dict[str, str]:
    """Build tracing headers for node RPC calls.

    Args:
        correlation_id: Request correlation ID for distributed tracing

    Returns:
        Headers dict with service ID and correlation ID
    """
    return {
        "X-Service-ID": settings.SERVICE_NAME,
        "X-Correlation-ID": str(correlation_id),
    }


def describe_rpc_failure(error: httpx.HTTPError) -> str:
    """Extract the most useful message from a failed node RPC call.

    The node reports failures as ``{"message": ...}``; that text is passed
    through unchanged when present.
    """
    if isinstance(error, httpx.HTTPStatusError):
        try:
            body = error.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Node RPC call failed with status {error.response.status_code}"
    return str(error) or type(error).__name__
