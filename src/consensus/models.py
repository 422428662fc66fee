"""Pydantic models for beacon node API responses."""

from pydantic import BaseModel, ConfigDict, Field


class BeaconHeaderMessage(BaseModel):
    """Message of a signed beacon block header."""

    slot: str
    proposer_index: str | None = None

    model_config = ConfigDict(extra="allow")


class BeaconHeader(BaseModel):
    """Signed beacon block header."""

    message: BeaconHeaderMessage

    model_config = ConfigDict(extra="allow")


class BeaconHeaderData(BaseModel):
    """One entry of /eth/v1/beacon/headers."""

    root: str | None = None
    canonical: bool | None = None
    header: BeaconHeader


class BeaconHeadersResponse(BaseModel):
    """Response of /eth/v1/beacon/headers."""

    data: list[BeaconHeaderData] = Field(default_factory=list)


class ExecutionPayload(BaseModel):
    """Execution payload embedded in a post-merge beacon block body."""

    block_number: str = ""
    block_hash: str | None = None
    fee_recipient: str | None = None
    extra_data: str | None = None
    base_fee_per_gas: str | None = None
    gas_used: str | None = None

    model_config = ConfigDict(extra="allow")


class BeaconBlockBody(BaseModel):
    """Beacon block body; pre-merge forks carry no execution payload."""

    execution_payload: ExecutionPayload | None = None

    model_config = ConfigDict(extra="allow")


class BeaconBlockMessage(BaseModel):
    """Unsigned beacon block."""

    slot: str | None = None
    proposer_index: str | None = None
    body: BeaconBlockBody

    model_config = ConfigDict(extra="allow")


class SignedBeaconBlock(BaseModel):
    """Signed beacon block as returned under ``data``."""

    message: BeaconBlockMessage
    signature: str | None = None


class BeaconBlockResponse(BaseModel):
    """Response of /eth/v2/beacon/blocks/{slot}."""

    version: str | None = None
    execution_optimistic: bool | None = None
    finalized: bool | None = None
    data: SignedBeaconBlock

    @property
    def execution_block_number(self) -> str:
        """Decimal execution block number, empty when the block has no payload."""
        payload = self.data.message.body.execution_payload
        return payload.block_number if payload is not None else ""


class SyncCommittee(BaseModel):
    """Sync committee membership for a state."""

    validators: list[str] = Field(default_factory=list)
    validator_aggregates: list[list[str]] = Field(default_factory=list)


class SyncCommitteeResponse(BaseModel):
    """Response of /eth/v1/beacon/states/{state_id}/sync_committees."""

    execution_optimistic: bool | None = None
    finalized: bool | None = None
    data: SyncCommittee


__all__ = [
    "BeaconBlockBody",
    "BeaconBlockMessage",
    "BeaconBlockResponse",
    "BeaconHeader",
    "BeaconHeaderData",
    "BeaconHeaderMessage",
    "BeaconHeadersResponse",
    "ExecutionPayload",
    "SignedBeaconBlock",
    "SyncCommittee",
    "SyncCommitteeResponse",
]
