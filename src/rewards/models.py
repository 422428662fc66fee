"""Pydantic models for block reward results."""

from enum import StrEnum

from pydantic import BaseModel, Field


class BlockStatus(StrEnum):
    """How a block was most likely built."""

    VANILLA = "vanilla"
    RELAY = "relay"


class RewardResult(BaseModel):
    """Proposer priority-fee reward for one block."""

    status: BlockStatus
    reward_gwei: int = Field(..., ge=0, description="Priority-fee reward in gwei")

    def to_response(self) -> dict[str, str]:
        """Serialize for the HTTP boundary, reward as a decimal string."""
        return {"status": self.status.value, "reward": str(self.reward_gwei)}


__all__ = [
    "BlockStatus",
    "RewardResult",
]
