"""Demo API routes.

Thin HTTP bindings over the gateways. Paged queries and workflow triggers
return an Envelope that is rendered as-is; identity lookups return plain
mappings and let node failures reach the app's error handlers.
"""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from services.node_gateway_service.dto.node_v1 import Identity
from services.node_gateway_service.gateways import IdentityGateway, QueryGateway, WorkflowGateway

router = APIRouter()

GREETING = "Hello! This Api Works! "


@router.get("/hello", response_class=PlainTextResponse)
async def say_hello() -> str:
    return GREETING


@router.get("/allNodes", response_model=dict[str, list[Identity]])
@inject
async def get_all_nodes(
    identity_gateway: FromDishka[IdentityGateway],
    correlation_id: FromDishka[UUID],
) -> dict[str, list[Identity]]:
    """Peers of this node, excluding itself and infrastructure services."""
    return await identity_gateway.list_other_identities(correlation_id)


@router.get("/me", response_model=dict[str, Identity])
@inject
async def get_my_identity(
    identity_gateway: FromDishka[IdentityGateway],
    correlation_id: FromDishka[UUID],
) -> dict[str, Identity]:
    return await identity_gateway.get_self(correlation_id)


@router.get("/getAllHello/{pageNumber}", response_model=None)
@inject
async def get_all_hello(
    pageNumber: int,
    query_gateway: FromDishka[QueryGateway],
    correlation_id: FromDishka[UUID],
) -> Response:
    """One page of records in every vault status.

    400 when the page is empty, 500 with the node's message on RPC failure.
    """
    envelope = await query_gateway.handle_paged_query(pageNumber, correlation_id)
    return envelope.to_response()


@router.get("/sayHelloTo", response_model=None)
@inject
async def say_hello_to(
    workflow_gateway: FromDishka[WorkflowGateway],
    correlation_id: FromDishka[UUID],
) -> Response:
    """Run the greeting workflow and return the resulting transaction id."""
    envelope = await workflow_gateway.trigger_workflow(correlation_id)
    return envelope.to_response()
