"""Dependency Injection providers for Node Gateway Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, provide
from fastapi import Request

from services.node_gateway_service.clients.node_rpc_client import NodeRPCClientImpl
from services.node_gateway_service.config import NodeGatewaySettings, settings
from services.node_gateway_service.gateways import IdentityGateway, QueryGateway, WorkflowGateway
from services.node_gateway_service.protocols import NodeRPCClientProtocol


class NodeGatewayProvider(Provider):
    """Infrastructure provider for Node Gateway Service.

    Provides APP-scoped dependencies: config, HTTP client, node client, gateways.
    """

    scope = Scope.APP

    @provide
    def get_config(self) -> NodeGatewaySettings:
        """Provide settings singleton."""
        return settings

    @provide(scope=Scope.APP)
    async def get_http_client(self, config: NodeGatewaySettings) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client carrying the node RPC credentials."""
        async with httpx.AsyncClient(
            auth=httpx.BasicAuth(
                config.NODE_RPC_USERNAME, config.NODE_RPC_PASSWORD.get_secret_value()
            ),
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            ),
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_node_client(self, http_client: httpx.AsyncClient) -> NodeRPCClientProtocol:
        """Provide node RPC client singleton."""
        return NodeRPCClientImpl(http_client)


class GatewayProvider(Provider):
    """Gateways built on whichever node client the container provides."""

    scope = Scope.APP

    @provide
    def provide_query_gateway(
        self, node_client: NodeRPCClientProtocol, config: NodeGatewaySettings
    ) -> QueryGateway:
        return QueryGateway(
            node_client, state_type=config.RECORD_STATE_TYPE, page_size=config.PAGE_SIZE
        )

    @provide
    def provide_identity_gateway(
        self, node_client: NodeRPCClientProtocol, config: NodeGatewaySettings
    ) -> IdentityGateway:
        return IdentityGateway(node_client, service_organisations=config.SERVICE_ORGANISATIONS)

    @provide
    def provide_workflow_gateway(
        self, node_client: NodeRPCClientProtocol, config: NodeGatewaySettings
    ) -> WorkflowGateway:
        return WorkflowGateway(
            node_client, workflow_name=config.WORKFLOW_NAME, command=config.WORKFLOW_COMMAND
        )


class RequestContextProvider(Provider):
    """Request-scoped provider for the correlation ID set by CorrelationIDMiddleware.

    The Request itself comes from FastapiProvider.
    """

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state."""
        return getattr(request.state, "correlation_id", uuid4())
