"""Workflow trigger: start a named workflow and report its terminal outcome."""

from __future__ import annotations

from uuid import UUID

from ledger_service_libs.logging_utils import create_service_logger

from services.node_gateway_service.gateways.envelope import Envelope
from services.node_gateway_service.protocols import NodeRPCClientProtocol

logger = create_service_logger("node_gateway.workflow_gateway")

NO_COUNTERPARTY_MESSAGE = "No available Counter Party found! from list"


class WorkflowGateway:
    """Starts the configured workflow and waits for it without a timeout."""

    def __init__(
        self,
        node_client: NodeRPCClientProtocol,
        *,
        workflow_name: str,
        command: str,
    ) -> None:
        self._node = node_client
        self._workflow_name = workflow_name
        self._command = command

    async def trigger_workflow(self, correlation_id: UUID) -> Envelope:
        """Run the workflow to completion.

        - Artifact produced: 200 with the artifact id (transaction hash)
        - No artifact (no eligible counterparty): 400 with a fixed message
        - Any failure starting or awaiting: 500 with the error message
        """
        try:
            handle = await self._node.start_flow_dynamic(
                self._workflow_name, [{"command": self._command}], correlation_id
            )
            transaction = await handle.return_value()
        except Exception as e:
            logger.error(
                "Error running workflow",
                extra={
                    "workflow": self._workflow_name,
                    "error": str(e),
                    "correlation_id": str(correlation_id),
                },
            )
            return Envelope.internal_error(str(e))

        if transaction is None:
            logger.info(
                NO_COUNTERPARTY_MESSAGE,
                extra={"workflow": self._workflow_name, "correlation_id": str(correlation_id)},
            )
            return Envelope.bad_request(NO_COUNTERPARTY_MESSAGE)

        logger.info(
            "Workflow completed",
            extra={
                "workflow": self._workflow_name,
                "flow_id": handle.flow_id,
                "transaction_id": transaction.id,
                "correlation_id": str(correlation_id),
            },
        )
        return Envelope.ok(transaction.id)
