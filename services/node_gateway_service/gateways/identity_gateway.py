"""Node identity lookups."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from services.node_gateway_service.dto.node_v1 import Identity
from services.node_gateway_service.protocols import NodeRPCClientProtocol

ALL_NODES_KEY = "allnodes"
ME_KEY = "me"


class IdentityGateway:
    """Self and peer identities of the connected node.

    Node failures are not caught here.
    """

    def __init__(
        self,
        node_client: NodeRPCClientProtocol,
        *,
        service_organisations: Iterable[str],
    ) -> None:
        self._node = node_client
        self._service_organisations = frozenset(service_organisations)

    async def list_other_identities(self, correlation_id: UUID) -> dict[str, list[Identity]]:
        """Peers from the network map, minus this node and infrastructure services."""
        snapshot = await self._node.network_map_snapshot(correlation_id)
        me = (await self._node.node_info(correlation_id)).identity

        peers = [
            node.identity
            for node in snapshot
            if node.identity != me
            and node.identity.organisation not in self._service_organisations
        ]
        return {ALL_NODES_KEY: peers}

    async def get_self(self, correlation_id: UUID) -> dict[str, Identity]:
        node = await self._node.node_info(correlation_id)
        return {ME_KEY: node.identity}
