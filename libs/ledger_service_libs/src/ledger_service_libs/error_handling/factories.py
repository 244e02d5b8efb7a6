"""
Factory functions for structured errors.

``create_error_detail`` builds the data model; the ``raise_*`` helpers build
and raise a ``GatewayServiceError`` in one call so call sites stay short.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, NoReturn
from uuid import UUID

from ledger_service_libs.error_handling.error_models import ErrorCode, ErrorDetail
from ledger_service_libs.error_handling.gateway_error import GatewayServiceError


def create_error_detail(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: UUID,
    details: dict[str, Any] | None = None,
    stack_trace: str | None = None,
) -> ErrorDetail:
    """Build an ``ErrorDetail`` stamped with the current UTC time.

    Args:
        error_code: Error classification
        message: Human-readable message
        service: Service raising the error
        operation: Operation that failed
        correlation_id: Request correlation ID
        details: Additional structured context
        stack_trace: Formatted traceback of the originating exception

    Returns:
        Frozen ErrorDetail instance
    """
    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id,
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details or {},
        stack_trace=stack_trace,
    )


def raise_invalid_response(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    """Raise when a downstream service returns a payload that cannot be parsed."""
    raise GatewayServiceError(
        create_error_detail(
            error_code=ErrorCode.INVALID_RESPONSE,
            message=message,
            service=service,
            operation=operation,
            correlation_id=correlation_id,
            details=additional_context,
        )
    )
