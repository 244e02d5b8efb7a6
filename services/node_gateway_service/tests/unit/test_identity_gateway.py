"""Unit tests for the identity gateway."""

from __future__ import annotations

from uuid import uuid4

import pytest

from services.node_gateway_service.clients.node_rpc_client import NodeRPCError
from services.node_gateway_service.gateways.identity_gateway import IdentityGateway
from services.node_gateway_service.tests.test_provider import (
    FakeNodeClient,
    make_identity,
    make_node,
)

CORRELATION_ID = uuid4()
SERVICES = ["Notary", "Oracle"]


def _gateway(node: FakeNodeClient) -> IdentityGateway:
    return IdentityGateway(node, service_organisations=SERVICES)


@pytest.mark.asyncio
async def test_peers_exclude_self_and_service_nodes() -> None:
    me = make_node("PartyA")
    node = FakeNodeClient(
        me=me,
        network_map=[
            make_node("Notary"),
            me,
            make_node("PartyB", "New York", "US"),
            make_node("Oracle"),
            make_node("PartyC", "Paris", "FR"),
        ],
    )

    result = await _gateway(node).list_other_identities(CORRELATION_ID)

    assert result == {
        "allnodes": [
            make_identity("PartyB", "New York", "US"),
            make_identity("PartyC", "Paris", "FR"),
        ]
    }


@pytest.mark.asyncio
async def test_peers_with_no_matches_to_exclude() -> None:
    me = make_node("PartyA")
    peers = [make_node("PartyB"), make_node("PartyC")]
    node = FakeNodeClient(me=me, network_map=peers)

    result = await _gateway(node).list_other_identities(CORRELATION_ID)

    assert result["allnodes"] == [p.identity for p in peers]


@pytest.mark.asyncio
async def test_peers_when_only_self_and_services() -> None:
    me = make_node("PartyA")
    node = FakeNodeClient(
        me=me, network_map=[me, make_node("Notary", "Zurich", "CH"), make_node("Notary")]
    )

    result = await _gateway(node).list_other_identities(CORRELATION_ID)

    assert result == {"allnodes": []}


@pytest.mark.asyncio
async def test_same_organisation_elsewhere_is_a_peer() -> None:
    """Only the exact self identity is excluded, not every node of the same organisation."""
    me = make_node("PartyA", "London", "GB")
    branch = make_node("PartyA", "Dublin", "IE")
    node = FakeNodeClient(me=me, network_map=[me, branch])

    result = await _gateway(node).list_other_identities(CORRELATION_ID)

    assert result["allnodes"] == [branch.identity]


@pytest.mark.asyncio
async def test_get_self() -> None:
    node = FakeNodeClient(me=make_node("PartyA"))

    result = await _gateway(node).get_self(CORRELATION_ID)

    assert result == {"me": make_identity("PartyA")}


@pytest.mark.asyncio
async def test_node_failures_propagate() -> None:
    node = FakeNodeClient(identity_error=NodeRPCError("node down"))
    gateway = _gateway(node)

    with pytest.raises(NodeRPCError, match="node down"):
        await gateway.list_other_identities(CORRELATION_ID)
    with pytest.raises(NodeRPCError, match="node down"):
        await gateway.get_self(CORRELATION_ID)
