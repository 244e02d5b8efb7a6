"""Test providers and fakes for Node Gateway Service tests.

Provides Dishka DI test providers and an in-memory node client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any, AsyncContextManager
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, provide

from services.node_gateway_service.clients.node_rpc_client import NodeRPCClientImpl
from services.node_gateway_service.config import NodeGatewaySettings
from services.node_gateway_service.dto.node_v1 import (
    Identity,
    LinearStateQueryCriteria,
    NodeInfo,
    PageSpecification,
    Party,
    SignedTransaction,
    VaultPage,
)
from services.node_gateway_service.protocols import NodeRPCClientProtocol

ClientFactory = Callable[[Provider], AsyncContextManager[httpx.AsyncClient]]


def make_identity(organisation: str, locality: str = "London", country: str = "GB") -> Identity:
    return Identity(organisation=organisation, locality=locality, country=country)


def make_node(organisation: str, locality: str = "London", country: str = "GB") -> NodeInfo:
    return NodeInfo(
        legal_identities=[Party(name=make_identity(organisation, locality, country))],
        addresses=[f"{organisation.lower()}:10005"],
        platform_version=4,
    )


def make_vault_page(*records: tuple[dict[str, Any], str]) -> VaultPage:
    """Build a vault page from (record data, status) pairs."""
    return VaultPage.model_validate(
        {
            "states": [{"state": {"data": data}} for data, _ in records],
            "states_metadata": [{"status": status} for _, status in records],
            "total_states_available": len(records),
        }
    )


class FakeFlowHandle:
    def __init__(
        self,
        flow_id: str,
        result: SignedTransaction | None = None,
        error: Exception | None = None,
    ) -> None:
        self.flow_id = flow_id
        self._result = result
        self._error = error

    async def return_value(self) -> SignedTransaction | None:
        if self._error is not None:
            raise self._error
        return self._result


class FakeNodeClient:
    """In-memory node client; every call is recorded in ``calls``."""

    def __init__(
        self,
        me: NodeInfo | None = None,
        network_map: list[NodeInfo] | None = None,
        pages: dict[int, VaultPage] | None = None,
        query_error: Exception | None = None,
        identity_error: Exception | None = None,
        flow_result: SignedTransaction | None = None,
        flow_start_error: Exception | None = None,
        flow_result_error: Exception | None = None,
    ) -> None:
        self.me = me or make_node("PartyA")
        self.network_map = network_map if network_map is not None else [self.me]
        self.pages = pages or {}
        self.query_error = query_error
        self.identity_error = identity_error
        self.flow_result = flow_result
        self.flow_start_error = flow_start_error
        self.flow_result_error = flow_result_error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def node_info(self, correlation_id: UUID) -> NodeInfo:
        self.calls.append(("node_info", ()))
        if self.identity_error is not None:
            raise self.identity_error
        return self.me

    async def network_map_snapshot(self, correlation_id: UUID) -> list[NodeInfo]:
        self.calls.append(("network_map_snapshot", ()))
        if self.identity_error is not None:
            raise self.identity_error
        return list(self.network_map)

    async def vault_query_by_with_paging_spec(
        self,
        contract_state_type: str,
        criteria: LinearStateQueryCriteria,
        paging: PageSpecification,
        correlation_id: UUID,
    ) -> VaultPage:
        self.calls.append(("vault_query", (contract_state_type, criteria, paging)))
        if self.query_error is not None:
            raise self.query_error
        return self.pages.get(paging.page_number, VaultPage())

    async def start_flow_dynamic(
        self, flow_name: str, args: list[Any], correlation_id: UUID
    ) -> FakeFlowHandle:
        self.calls.append(("start_flow", (flow_name, args)))
        if self.flow_start_error is not None:
            raise self.flow_start_error
        return FakeFlowHandle("flow-1", self.flow_result, self.flow_result_error)


class ContextTestProvider(Provider):
    """Replaces RequestContextProvider with a fixed correlation ID."""

    def __init__(self, correlation_id: UUID | None = None):
        super().__init__()
        self.correlation_id = correlation_id or uuid4()

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self) -> UUID:
        return self.correlation_id


class FakeNodeProvider(Provider):
    """Provides test settings and a FakeNodeClient as the node client."""

    scope = Scope.APP

    def __init__(self, node_client: FakeNodeClient, settings: NodeGatewaySettings | None = None):
        super().__init__()
        self._node_client = node_client
        self._settings = settings or NodeGatewaySettings(SERVICE_NAME="node_gateway_service_test")

    @provide
    def get_config(self) -> NodeGatewaySettings:
        return self._settings

    @provide
    def provide_node_client(self) -> NodeRPCClientProtocol:
        return self._node_client


class InfrastructureTestProvider(Provider):
    """Test provider wiring the real node client to a plain httpx client for respx mocking."""

    scope = Scope.APP

    def __init__(self, settings: NodeGatewaySettings | None = None):
        super().__init__()
        self._settings = settings or NodeGatewaySettings(SERVICE_NAME="node_gateway_service_test")

    @provide
    def get_config(self) -> NodeGatewaySettings:
        return self._settings

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        async with httpx.AsyncClient() as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_node_client(self, http_client: httpx.AsyncClient) -> NodeRPCClientProtocol:
        return NodeRPCClientImpl(http_client)
