"""Pydantic models for execution layer JSON-RPC results."""

from pydantic import BaseModel, ConfigDict, Field


class ExecutionTransaction(BaseModel):
    """Full transaction object from eth_getBlockByNumber.

    ``gas`` and ``gas_price`` stay as raw hex strings; some transaction types
    or nodes omit ``gasPrice`` entirely, which the reward calculator tolerates.
    """

    hash: str | None = None
    type: str | None = None
    from_address: str | None = Field(default=None, alias="from")
    to: str | None = None
    gas: str | None = None
    gas_price: str | None = Field(default=None, alias="gasPrice")
    max_fee_per_gas: str | None = Field(default=None, alias="maxFeePerGas")
    max_priority_fee_per_gas: str | None = Field(
        default=None, alias="maxPriorityFeePerGas"
    )
    transaction_index: str | None = Field(default=None, alias="transactionIndex")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ExecutionBlock(BaseModel):
    """Execution block with full transaction objects."""

    number: str | None = None
    hash: str | None = None
    miner: str | None = None
    base_fee_per_gas: str | None = Field(default=None, alias="baseFeePerGas")
    extra_data: str | None = Field(default=None, alias="extraData")
    gas_used: str | None = Field(default=None, alias="gasUsed")
    transactions: list[ExecutionTransaction] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


__all__ = [
    "ExecutionBlock",
    "ExecutionTransaction",
]
