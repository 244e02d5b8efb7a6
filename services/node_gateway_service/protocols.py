"""Protocol definitions for Node Gateway Service.

Defines the node RPC capability consumed by the gateways. Implementations
are assumed to be connected and authenticated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from services.node_gateway_service.dto.node_v1 import (
        LinearStateQueryCriteria,
        NodeInfo,
        PageSpecification,
        SignedTransaction,
        VaultPage,
    )


class FlowHandleProtocol(Protocol):
    """Handle to a workflow started on the node."""

    flow_id: str

    async def return_value(self) -> SignedTransaction | None:
        """Wait for the workflow's terminal result.

        There is no local timeout: the wait ends only when the node reports
        completion or failure.

        Returns:
            The terminal artifact, or None when the workflow completed
            without producing one
        """
        ...


class NodeRPCClientProtocol(Protocol):
    """Protocol for the ledger node's RPC interface."""

    async def node_info(self, correlation_id: UUID) -> NodeInfo:
        """Get the description of the node this gateway is connected to."""
        ...

    async def network_map_snapshot(self, correlation_id: UUID) -> list[NodeInfo]:
        """Get every node currently in the network map, including this one."""
        ...

    async def vault_query_by_with_paging_spec(
        self,
        contract_state_type: str,
        criteria: LinearStateQueryCriteria,
        paging: PageSpecification,
        correlation_id: UUID,
    ) -> VaultPage:
        """Query the node's vault for one page of records.

        Args:
            contract_state_type: Record type to query
            criteria: Query filter
            paging: Page number and size
            correlation_id: Request correlation ID for tracing

        Returns:
            Records and their statuses in node order
        """
        ...

    async def start_flow_dynamic(
        self,
        flow_name: str,
        args: list[Any],
        correlation_id: UUID,
    ) -> FlowHandleProtocol:
        """Start a workflow by name and return a handle to its result."""
        ...
