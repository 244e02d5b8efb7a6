"""Exception carrying a structured ``ErrorDetail``."""

from __future__ import annotations

from typing import Any

from ledger_service_libs.error_handling.error_models import ErrorDetail


class GatewayServiceError(Exception):
    """Structured service error.

    ``str(error)`` renders as ``[CODE] message`` so plain log lines stay
    readable; the full detail is available on ``error_detail``.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        self.error_detail = error_detail
        super().__init__(f"[{error_detail.error_code.value}] {error_detail.message}")

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``error`` object of an API error response."""
        detail = self.error_detail
        return {
            "code": detail.error_code.value,
            "message": detail.message,
            "correlation_id": str(detail.correlation_id),
            "service": detail.service,
            "operation": detail.operation,
            "details": detail.details,
            "timestamp": detail.timestamp.isoformat(),
        }
