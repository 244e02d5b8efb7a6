"""Projection of node records into client-facing business objects."""

from __future__ import annotations

from services.node_gateway_service.dto.node_v1 import RecordBO, RecordState, RecordStatus


def to_bo(record: RecordState, status: RecordStatus) -> RecordBO:
    """Flatten a record and its vault status into a RecordBO.

    Payload fields are copied as-is. The identifying fields and the status
    take precedence over payload fields of the same name.
    """
    return RecordBO.model_validate(
        {
            **record.payload,
            "linear_id": str(record.linear_id.id),
            "external_id": record.linear_id.external_id,
            "status": status,
        }
    )
