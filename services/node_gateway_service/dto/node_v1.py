"""Node Gateway v1 DTOs.

Two groups of models live here:
- Internal models deserialized from the node RPC bridge (NodeInfo, VaultPage, ...)
- Client-facing models returned by the REST API (Identity, RecordBO)

Identity is shared by both: the node's structured legal name is returned
to callers unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RecordStatus(str, Enum):
    """Vault status of a record as reported by the node."""

    ACTIVE = "ACTIVE"
    CONSUMED = "CONSUMED"
    UNCONSUMED = "UNCONSUMED"
    ALL = "ALL"


class Identity(BaseModel):
    """Structured (X.500) legal name of a network participant."""

    model_config = ConfigDict(frozen=True)

    organisation: str
    locality: str
    country: str
    common_name: str | None = None
    organisation_unit: str | None = None
    state: str | None = None


# --- Internal response models for node RPC deserialization ---


class Party(BaseModel):
    """A legal identity: name plus the key that signs for it."""

    name: Identity
    owning_key: str | None = None


class NodeInfo(BaseModel):
    """Node description from the network map.

    The first legal identity is the node's well-known identity.
    """

    legal_identities: list[Party] = Field(min_length=1)
    addresses: list[str] = Field(default_factory=list)
    platform_version: int = 0
    serial: int = 0

    @property
    def identity(self) -> Identity:
        return self.legal_identities[0].name


class UniqueIdentifier(BaseModel):
    """Linear identifier shared by every version of a linear record."""

    external_id: str | None = None
    id: UUID


class RecordState(BaseModel):
    """A linear record. Business payload fields are kept as extra fields."""

    model_config = ConfigDict(extra="allow")

    linear_id: UniqueIdentifier

    @property
    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class TransactionState(BaseModel):
    data: RecordState
    contract: str | None = None
    notary: Party | None = None


class StateRef(BaseModel):
    txhash: str
    index: int


class StateAndRef(BaseModel):
    state: TransactionState
    ref: StateRef | None = None


class StateMetadata(BaseModel):
    ref: StateRef | None = None
    contract_state_class_name: str | None = None
    status: RecordStatus


class VaultPage(BaseModel):
    """One page of a vault query.

    ``states`` and ``states_metadata`` are parallel lists in node order.
    """

    states: list[StateAndRef] = Field(default_factory=list)
    states_metadata: list[StateMetadata] = Field(default_factory=list)
    total_states_available: int = -1

    @model_validator(mode="after")
    def check_parallel_lists(self) -> VaultPage:
        if len(self.states) != len(self.states_metadata):
            raise ValueError("states and states_metadata must have the same length")
        return self

    def records(self) -> list[tuple[RecordState, RecordStatus]]:
        return [
            (state_and_ref.state.data, metadata.status)
            for state_and_ref, metadata in zip(self.states, self.states_metadata)
        ]


class SignedTransaction(BaseModel):
    """Terminal artifact of a workflow; only the id is consumed here."""

    model_config = ConfigDict(extra="allow")

    id: str


# --- Request models sent to the node ---


class LinearStateQueryCriteria(BaseModel):
    kind: str = "linear"
    status: RecordStatus = RecordStatus.ALL


class PageSpecification(BaseModel):
    page_number: int
    page_size: int


# --- Client-facing response models ---


class RecordBO(BaseModel):
    """Flattened projection of a record and its status.

    Payload fields of the record are carried as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    linear_id: str
    external_id: str | None = None
    status: RecordStatus
