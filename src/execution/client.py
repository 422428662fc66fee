"""Execution layer JSON-RPC client."""

import re

import httpx
from pydantic import ValidationError

from src.helpers.config import ClientConfig
from src.helpers.errors import InvalidInputError, NotFoundError, ParseError
from src.helpers.logging import get_logger
from src.helpers.rpc import RPCClient
from src.helpers.rpc_models import EthGetBlockByNumberRequest

from src.execution.models import ExecutionBlock


logger = get_logger(__name__)

_HEX_BLOCK_NUMBER = re.compile(r"0x[0-9a-fA-F]+")


class ExecutionClient:
    """Typed access to the execution node's JSON-RPC API."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client.

        Args:
            config: Endpoint and timeout; the endpoint is the JSON-RPC URL
        """
        self.rpc = RPCClient(config.endpoint, timeout=config.timeout)

    async def get_execution_block_by_number(
        self, client: httpx.AsyncClient, block_number_hex: str
    ) -> ExecutionBlock:
        """Fetch an execution block with full transaction objects.

        Args:
            client: HTTP client instance
            block_number_hex: ``0x``-prefixed hex block number

        Returns:
            The decoded execution block

        Raises:
            InvalidInputError: If the block number is not a hex quantity
            NotFoundError: If the node has no block for that number
            UpstreamError: On transport failure, non-2xx status or RPC error
            ParseError: If the result cannot be decoded
        """
        if not _HEX_BLOCK_NUMBER.fullmatch(block_number_hex):
            msg = f"block number must be a 0x-prefixed hex string: {block_number_hex!r}"
            raise InvalidInputError(msg)

        request = EthGetBlockByNumberRequest.for_block(block_number_hex)
        result = await self.rpc.send(client, request)

        # Nodes answer null for blocks they have not seen yet
        if result is None:
            msg = "block not found on execution layer"
            raise NotFoundError(msg)

        try:
            block = ExecutionBlock.model_validate(result)
        except ValidationError as e:
            msg = f"malformed execution block {block_number_hex}"
            raise ParseError(msg) from e

        if not block.number:
            msg = "block not found on execution layer"
            raise NotFoundError(msg)

        logger.debug(
            "Fetched execution block %s with %d transactions",
            block_number_hex,
            len(block.transactions),
        )
        return block


__all__ = [
    "ExecutionClient",
]
