"""FastAPI integration: render structured errors as JSON responses."""

from __future__ import annotations

import traceback
from uuid import UUID, uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledger_service_libs.error_handling.error_models import ErrorCode
from ledger_service_libs.error_handling.factories import create_error_detail
from ledger_service_libs.error_handling.gateway_error import GatewayServiceError
from ledger_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.fastapi")

ERROR_CODE_TO_STATUS: dict[str, int] = {
    ErrorCode.VALIDATION_ERROR.value: 400,
    ErrorCode.EXTERNAL_SERVICE_ERROR.value: 502,
    ErrorCode.INVALID_RESPONSE.value: 502,
    ErrorCode.CONNECTION_ERROR.value: 503,
    ErrorCode.TIMEOUT.value: 504,
}


def status_for_error_code(error_code: str) -> int:
    return ERROR_CODE_TO_STATUS.get(error_code, 500)


def _request_correlation_id(request: Request) -> UUID:
    return getattr(request.state, "correlation_id", None) or uuid4()


def register_error_handlers(
    app: FastAPI,
    service_name: str,
    external_errors: tuple[type[Exception], ...] = (),
) -> None:
    """Register exception handlers on ``app``.

    Args:
        app: Application to configure
        service_name: Reported as ``service`` in generated error documents
        external_errors: Exception types raised by downstream clients; when one
            escapes a route it is reported as EXTERNAL_SERVICE_ERROR (502)
    """

    @app.exception_handler(GatewayServiceError)
    async def handle_gateway_error(request: Request, exc: GatewayServiceError) -> JSONResponse:
        logger.error(
            "Service error",
            extra={
                "error_code": exc.error_code,
                "operation": exc.operation,
                "correlation_id": exc.correlation_id,
            },
        )
        return JSONResponse(
            status_code=status_for_error_code(exc.error_code),
            content={"error": exc.to_dict()},
        )

    async def handle_external_error(request: Request, exc: Exception) -> JSONResponse:
        error = GatewayServiceError(
            create_error_detail(
                error_code=ErrorCode.EXTERNAL_SERVICE_ERROR,
                message=str(exc),
                service=service_name,
                operation=request.url.path,
                correlation_id=_request_correlation_id(request),
                details={"exception_type": type(exc).__name__},
            )
        )
        logger.error(
            "Unhandled downstream error",
            extra={"error": str(exc), "correlation_id": error.correlation_id},
        )
        return JSONResponse(status_code=502, content={"error": error.to_dict()})

    for error_type in external_errors:
        app.add_exception_handler(error_type, handle_external_error)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        error = GatewayServiceError(
            create_error_detail(
                error_code=ErrorCode.UNKNOWN_ERROR,
                message="Internal server error",
                service=service_name,
                operation=request.url.path,
                correlation_id=_request_correlation_id(request),
                details={"exception_type": type(exc).__name__},
                stack_trace="".join(traceback.format_exception(exc)),
            )
        )
        logger.error("Unexpected error", exc_info=exc, extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={"error": error.to_dict()},
            headers={"X-Correlation-ID": error.correlation_id},
        )
