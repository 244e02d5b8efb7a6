"""Node Gateway Service clients module.

Contains the HTTP client for the ledger node's RPC bridge.
"""

from services.node_gateway_service.clients.node_rpc_client import (
    FlowHandle,
    NodeRPCClientImpl,
    NodeRPCError,
)

__all__ = ["FlowHandle", "NodeRPCClientImpl", "NodeRPCError"]
