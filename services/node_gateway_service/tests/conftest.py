"""Shared fixtures for Node Gateway Service tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
from dishka import Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from ledger_service_libs.error_handling.fastapi import register_error_handlers

from services.node_gateway_service.api import demo_router, health_router
from services.node_gateway_service.clients.node_rpc_client import NodeRPCError
from services.node_gateway_service.di import GatewayProvider
from services.node_gateway_service.middleware import CorrelationIDMiddleware
from services.node_gateway_service.tests.test_provider import ClientFactory, ContextTestProvider


@asynccontextmanager
async def _app_client(node_provider: Provider) -> AsyncIterator[AsyncClient]:
    container = make_async_container(
        node_provider,
        GatewayProvider(),
        ContextTestProvider(),
        FastapiProvider(),
    )

    app = FastAPI(title="node_gateway_service_test")
    register_error_handlers(app, "node_gateway_service_test", external_errors=(NodeRPCError,))
    app.add_middleware(CorrelationIDMiddleware)
    app.include_router(health_router)
    app.include_router(demo_router, prefix="/demo", tags=["Demo API"])
    setup_dishka(container, app)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await container.close()


@pytest.fixture
def app_client() -> ClientFactory:
    """Factory: ``async with app_client(provider) as client`` builds a test app."""
    return _app_client
