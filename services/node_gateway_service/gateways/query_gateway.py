"""Paged record query over the node's vault.

Every status is requested, one fixed-size page at a time. The outcome is
branched on explicitly as ``Found`` or ``Empty``: the node does not signal
"no rows" with an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ledger_service_libs.error_handling import GatewayServiceError
from ledger_service_libs.logging_utils import create_service_logger

from services.node_gateway_service.clients.node_rpc_client import NodeRPCError
from services.node_gateway_service.dto.node_v1 import (
    LinearStateQueryCriteria,
    PageSpecification,
    RecordBO,
    RecordStatus,
)
from services.node_gateway_service.gateways.envelope import Envelope
from services.node_gateway_service.gateways.record_translator import to_bo
from services.node_gateway_service.protocols import NodeRPCClientProtocol

logger = create_service_logger("node_gateway.query_gateway")

EMPTY_PAGE_MESSAGE = "Please specify a page number above 0."


@dataclass(frozen=True)
class Found:
    records: list[RecordBO]


@dataclass(frozen=True)
class Empty:
    pass


QueryOutcome = Found | Empty


class QueryGateway:
    """Forwards paged record queries to the node and shapes the response."""

    def __init__(
        self,
        node_client: NodeRPCClientProtocol,
        *,
        state_type: str,
        page_size: int,
    ) -> None:
        self._node = node_client
        self._state_type = state_type
        self._page_size = page_size

    async def query_page(self, page_number: int, correlation_id: UUID) -> QueryOutcome:
        """Fetch and translate one page of records.

        Non-positive page numbers are ``Empty`` without a node call.

        Raises:
            NodeRPCError: On transport failure
            GatewayServiceError: When the node reply cannot be read
        """
        if page_number < 1:
            return Empty()

        criteria = LinearStateQueryCriteria(status=RecordStatus.ALL)
        paging = PageSpecification(page_number=page_number, page_size=self._page_size)
        page = await self._node.vault_query_by_with_paging_spec(
            self._state_type, criteria, paging, correlation_id
        )

        records: list[RecordBO] = []
        for record, status in page.records():
            logger.info(
                "Vault record",
                extra={
                    "record": record.model_dump(mode="json"),
                    "status": status.value,
                    "correlation_id": str(correlation_id),
                },
            )
            records.append(to_bo(record, status))

        return Found(records) if records else Empty()

    async def handle_paged_query(self, page_number: int, correlation_id: UUID) -> Envelope:
        """Run a paged query and map its outcome to an envelope.

        - Found: 200 with the ordered records
        - Empty (bad page number or past the end of data): 400 with a fixed message
        - Node transport failure or unreadable reply: 500 with the error message
        """
        try:
            outcome = await self.query_page(page_number, correlation_id)
        except (NodeRPCError, GatewayServiceError) as e:
            message = e.error_detail.message if isinstance(e, GatewayServiceError) else str(e)
            logger.error(
                "Error querying records",
                extra={
                    "error": message,
                    "page_number": page_number,
                    "correlation_id": str(correlation_id),
                },
            )
            return Envelope.internal_error(message)

        if isinstance(outcome, Found):
            return Envelope.ok(outcome.records)
        return Envelope.bad_request(EMPTY_PAGE_MESSAGE)
