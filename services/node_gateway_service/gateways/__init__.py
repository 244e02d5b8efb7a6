"""Gateways between the REST surface and the node RPC client."""

from services.node_gateway_service.gateways.envelope import Envelope
from services.node_gateway_service.gateways.identity_gateway import IdentityGateway
from services.node_gateway_service.gateways.query_gateway import QueryGateway
from services.node_gateway_service.gateways.workflow_gateway import WorkflowGateway

__all__ = ["Envelope", "IdentityGateway", "QueryGateway", "WorkflowGateway"]
