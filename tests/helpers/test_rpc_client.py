"""Tests for RPC client."""

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from src.helpers.errors import ParseError, UpstreamError
from src.helpers.rpc import RPCClient


if TYPE_CHECKING:
    from pytest_httpx import HTTPXMock


RPC_URL = "https://test.rpc"


class TestRPCClient:
    """Tests for RPCClient class."""

    def test_init_with_valid_url(self) -> None:
        """Test RPCClient initialization with valid URL."""
        client = RPCClient(RPC_URL)

        assert client.rpc_url == RPC_URL
        assert client.timeout == 10.0

    def test_init_with_custom_timeout(self) -> None:
        """Test RPCClient initialization with custom timeout."""
        client = RPCClient(RPC_URL, timeout=3.0)

        assert client.timeout == 3.0

    def test_init_with_empty_url_raises(self) -> None:
        """Test that empty URL raises ValueError."""
        with pytest.raises(ValueError, match="RPC URL cannot be empty"):
            RPCClient("")

    @pytest.mark.asyncio
    async def test_call_sends_envelope(self, httpx_mock: "HTTPXMock") -> None:
        """Test that a call posts a JSON-RPC 2.0 envelope and returns the result."""
        httpx_mock.add_response(
            url=RPC_URL,
            method="POST",
            json={"jsonrpc": "2.0", "id": 1, "result": {"number": "0x1"}},
        )

        async with httpx.AsyncClient() as http_client:
            result = await RPCClient(RPC_URL).call(
                http_client, "eth_getBlockByNumber", ["0x1", True]
            )

        assert result == {"number": "0x1"}
        request = httpx_mock.get_request()
        assert request is not None
        assert json.loads(request.content) == {
            "jsonrpc": "2.0",
            "method": "eth_getBlockByNumber",
            "params": ["0x1", True],
            "id": 1,
        }

    @pytest.mark.asyncio
    async def test_call_with_rpc_error(self, httpx_mock: "HTTPXMock") -> None:
        """Test RPC call that returns an error member."""
        httpx_mock.add_response(
            url=RPC_URL,
            method="POST",
            json={
                "jsonrpc": "2.0",
                "id": 1,
                "error": {"code": -32000, "message": "Error message"},
            },
        )

        async with httpx.AsyncClient() as http_client:
            with pytest.raises(UpstreamError, match="RPC error: Error message"):
                await RPCClient(RPC_URL).call(http_client, "eth_blockNumber")

    @pytest.mark.asyncio
    async def test_call_with_non_envelope_body(self, httpx_mock: "HTTPXMock") -> None:
        """Test that a body that is not an envelope raises ParseError."""
        httpx_mock.add_response(url=RPC_URL, method="POST", json=["unexpected"])

        async with httpx.AsyncClient() as http_client:
            with pytest.raises(ParseError):
                await RPCClient(RPC_URL).call(http_client, "eth_blockNumber")

    @pytest.mark.asyncio
    async def test_call_with_http_error(self, httpx_mock: "HTTPXMock") -> None:
        """Test that a non-2xx answer raises UpstreamError."""
        httpx_mock.add_response(url=RPC_URL, method="POST", status_code=502)

        async with httpx.AsyncClient() as http_client:
            with pytest.raises(UpstreamError):
                await RPCClient(RPC_URL).call(http_client, "eth_blockNumber")
