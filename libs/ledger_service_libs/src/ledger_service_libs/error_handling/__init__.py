"""Error handling utilities for ledger gateway services."""

from ledger_service_libs.error_handling.error_models import ErrorCode, ErrorDetail
from ledger_service_libs.error_handling.factories import (
    create_error_detail,
    raise_invalid_response,
)
from ledger_service_libs.error_handling.gateway_error import GatewayServiceError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "GatewayServiceError",
    "create_error_detail",
    "raise_invalid_response",
]
