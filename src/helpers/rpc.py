"""Ethereum JSON-RPC client utilities."""

from typing import Any

import httpx
from pydantic import ValidationError

from src.helpers.constants import DEFAULT_TIMEOUT
from src.helpers.errors import ParseError, UpstreamError
from src.helpers.http import post_json
from src.helpers.logging import get_logger
from src.helpers.rpc_models import JsonRpcRequest, JsonRpcResponse


logger = get_logger(__name__)


class RPCClient:
    """Ethereum JSON-RPC client."""

    def __init__(self, rpc_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize RPC client.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL
            timeout: Default timeout for requests in seconds

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = rpc_url
        self.timeout = timeout

    async def send(
        self,
        client: httpx.AsyncClient,
        request: JsonRpcRequest,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Send a prepared JSON-RPC request and return its ``result`` member.

        Args:
            client: HTTP client instance
            request: Request model to send
            timeout: Optional timeout override

        Returns:
            RPC result value (``None`` when the node returned a null result)

        Raises:
            UpstreamError: If the HTTP request fails or the response carries an error
            ParseError: If the response is not a JSON-RPC envelope
        """
        body = await post_json(
            client,
            self.rpc_url,
            request.model_dump(),
            timeout=timeout or self.timeout,
        )

        try:
            response = JsonRpcResponse.model_validate(body)
        except ValidationError as e:
            msg = f"invalid JSON-RPC response for {request.method}"
            raise ParseError(msg) from e

        if response.error is not None:
            logger.warning(
                "%s returned RPC error %d: %s",
                request.method,
                response.error.code,
                response.error.message,
            )
            msg = f"RPC error: {response.error.message}"
            raise UpstreamError(msg)

        return response.result

    async def call(
        self,
        client: httpx.AsyncClient,
        method: str,
        params: list[Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Make a single JSON-RPC call.

        Args:
            client: HTTP client instance
            method: RPC method name (e.g., "eth_getBlockByNumber")
            params: Method parameters list
            timeout: Optional timeout override

        Returns:
            RPC result value
        """
        request = JsonRpcRequest(method=method, params=params or [])
        return await self.send(client, request, timeout=timeout)


__all__ = [
    "RPCClient",
]
