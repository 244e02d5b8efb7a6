"""Ledger node RPC client over the node's HTTP bridge."""

from __future__ import annotations

from typing import Any
from uuid import UUID

import httpx
from ledger_service_libs.error_handling import raise_invalid_response
from ledger_service_libs.logging_utils import create_service_logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from services.node_gateway_service.clients._utils import build_rpc_headers, describe_rpc_failure
from services.node_gateway_service.config import settings
from services.node_gateway_service.dto.node_v1 import (
    LinearStateQueryCriteria,
    NodeInfo,
    PageSpecification,
    SignedTransaction,
    VaultPage,
)

logger = create_service_logger("node_gateway.node_rpc_client")

_NODE_INFO_LIST = TypeAdapter(list[NodeInfo])


class NodeRPCError(Exception):
    """Communication with the node failed.

    Raised for connection failures, timeouts and non-2xx responses. The
    message is the node's own error text when it supplied one.
    """


class FlowHandle:
    """Handle to a workflow running on the node."""

    def __init__(self, client: NodeRPCClientImpl, flow_id: str, correlation_id: UUID) -> None:
        self.flow_id = flow_id
        self._client = client
        self._correlation_id = correlation_id

    async def return_value(self) -> SignedTransaction | None:
        """Block until the node reports the workflow's terminal result."""
        return await self._client.flow_return_value(self.flow_id, self._correlation_id)


class NodeRPCClientImpl:
    """HTTP client for the ledger node RPC bridge."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance, already carrying
                the RPC credentials
        """
        self._client = http_client

    async def _call(
        self,
        method: str,
        path: str,
        correlation_id: UUID,
        *,
        json: dict[str, Any] | None = None,
        timeout: httpx.Timeout | None = None,
    ) -> Any:
        url = f"{settings.NODE_RPC_URL}{path}"
        headers = build_rpc_headers(correlation_id)
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        try:
            response = await self._client.request(
                method, url, json=json, headers=headers, **extra
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            message = describe_rpc_failure(e)
            logger.warning(
                "Node RPC call failed",
                extra={"path": path, "error": message, "correlation_id": str(correlation_id)},
            )
            raise NodeRPCError(message) from e

        try:
            return response.json()
        except ValueError:
            raise_invalid_response(
                service=settings.SERVICE_NAME,
                operation=path,
                message="Node returned a non-JSON response",
                correlation_id=correlation_id,
            )

    def _parse(self, model: type[BaseModel], data: Any, path: str, correlation_id: UUID) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise_invalid_response(
                service=settings.SERVICE_NAME,
                operation=path,
                message=f"Node returned an unexpected payload: {e.error_count()} validation errors",
                correlation_id=correlation_id,
                model=model.__name__,
            )

    async def node_info(self, correlation_id: UUID) -> NodeInfo:
        path = "/rpc/node-info"
        data = await self._call("GET", path, correlation_id)
        return self._parse(NodeInfo, data, path, correlation_id)

    async def network_map_snapshot(self, correlation_id: UUID) -> list[NodeInfo]:
        path = "/rpc/network-map-snapshot"
        data = await self._call("GET", path, correlation_id)
        try:
            nodes = _NODE_INFO_LIST.validate_python(data)
        except ValidationError as e:
            raise_invalid_response(
                service=settings.SERVICE_NAME,
                operation=path,
                message=f"Node returned an unexpected payload: {e.error_count()} validation errors",
                correlation_id=correlation_id,
                model="list[NodeInfo]",
            )

        logger.debug(
            "Fetched network map snapshot",
            extra={"node_count": len(nodes), "correlation_id": str(correlation_id)},
        )
        return nodes

    async def vault_query_by_with_paging_spec(
        self,
        contract_state_type: str,
        criteria: LinearStateQueryCriteria,
        paging: PageSpecification,
        correlation_id: UUID,
    ) -> VaultPage:
        """Query one page of records from the node's vault.

        Raises:
            NodeRPCError: On transport failure or a node-side query error
        """
        path = "/rpc/vault-query"
        body = {
            "contract_state_type": contract_state_type,
            "criteria": criteria.model_dump(mode="json"),
            "paging": paging.model_dump(mode="json"),
        }
        data = await self._call("POST", path, correlation_id, json=body)
        page: VaultPage = self._parse(VaultPage, data, path, correlation_id)

        logger.info(
            "Fetched vault page",
            extra={
                "page_number": paging.page_number,
                "state_count": len(page.states),
                "total_states_available": page.total_states_available,
                "correlation_id": str(correlation_id),
            },
        )
        return page

    async def start_flow_dynamic(
        self,
        flow_name: str,
        args: list[Any],
        correlation_id: UUID,
    ) -> FlowHandle:
        """Start a workflow on the node.

        Returns:
            Handle whose ``return_value()`` awaits the terminal result
        """
        path = "/rpc/flows"
        data = await self._call(
            "POST", path, correlation_id, json={"flow_name": flow_name, "args": args}
        )
        flow_id = data.get("flow_id") if isinstance(data, dict) else None
        if not flow_id:
            raise_invalid_response(
                service=settings.SERVICE_NAME,
                operation=path,
                message="Node did not return a flow id",
                correlation_id=correlation_id,
            )

        logger.info(
            "Started flow",
            extra={"flow_name": flow_name, "flow_id": flow_id, "correlation_id": str(correlation_id)},
        )
        return FlowHandle(self, str(flow_id), correlation_id)

    async def flow_return_value(
        self, flow_id: str, correlation_id: UUID
    ) -> SignedTransaction | None:
        """Long-poll the node for a workflow's terminal result.

        The read timeout is disabled so the wait lasts as long as the workflow.
        """
        path = f"/rpc/flows/{flow_id}/return-value"
        unbounded = httpx.Timeout(None, connect=settings.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS)
        data = await self._call("GET", path, correlation_id, timeout=unbounded)

        result = data.get("result") if isinstance(data, dict) else None
        if result is None:
            return None
        return self._parse(SignedTransaction, result, path, correlation_id)
