"""Pydantic models for JSON-RPC requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.helpers.constants import JSON_RPC_REQUEST_ID


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: str = Field(default="2.0", description="JSON-RPC version")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Method parameters"
    )
    id: int | str = Field(default=JSON_RPC_REQUEST_ID, description="Request ID")


class EthGetBlockByNumberRequest(JsonRpcRequest):
    """JSON-RPC request for eth_getBlockByNumber with full transaction objects."""

    method: str = Field(default="eth_getBlockByNumber", frozen=True)

    @classmethod
    def for_block(cls, block_number_hex: str) -> "EthGetBlockByNumberRequest":
        """Build the request for one block, asking for full transactions."""
        return cls(params=[block_number_hex, True])


class JsonRpcError(BaseModel):
    """Error member of a JSON-RPC 2.0 response."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response envelope."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None

    model_config = ConfigDict(extra="allow")


__all__ = [
    "EthGetBlockByNumberRequest",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
]
