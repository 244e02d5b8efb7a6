"""Unit tests for the record translator."""

from __future__ import annotations

from uuid import uuid4

import pytest

from services.node_gateway_service.dto.node_v1 import RecordState, RecordStatus
from services.node_gateway_service.gateways.record_translator import to_bo


def _record(**payload: object) -> RecordState:
    return RecordState.model_validate(payload)


def test_to_bo_copies_identifier_payload_and_status() -> None:
    record_id = uuid4()
    record = _record(
        linear_id={"external_id": "greeting-7", "id": str(record_id)},
        message="Hello",
        sender={"organisation": "PartyA", "locality": "London", "country": "GB"},
    )

    bo = to_bo(record, RecordStatus.UNCONSUMED)

    assert bo.linear_id == str(record_id)
    assert bo.external_id == "greeting-7"
    assert bo.status == RecordStatus.UNCONSUMED
    dumped = bo.model_dump(mode="json")
    assert dumped["message"] == "Hello"
    assert dumped["sender"]["organisation"] == "PartyA"


def test_to_bo_without_external_id() -> None:
    record = _record(linear_id={"id": str(uuid4())})

    bo = to_bo(record, RecordStatus.CONSUMED)

    assert bo.external_id is None
    assert bo.model_dump(mode="json")["status"] == "CONSUMED"


def test_identifying_fields_win_over_payload_fields() -> None:
    """A payload field named like an identifying field cannot mask the record's own value."""
    record_id = uuid4()
    record = _record(linear_id={"id": str(record_id)}, status="spoofed")

    bo = to_bo(record, RecordStatus.UNCONSUMED)

    assert bo.status == RecordStatus.UNCONSUMED
    assert bo.linear_id == str(record_id)


@pytest.mark.parametrize("status", list(RecordStatus))
def test_to_bo_is_deterministic(status: RecordStatus) -> None:
    record = _record(linear_id={"id": str(uuid4())}, message="Hi")

    assert to_bo(record, status) == to_bo(record, status)
