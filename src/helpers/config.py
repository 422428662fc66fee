"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.helpers.constants import (
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DEFAULT_TIMEOUT,
)


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_node_endpoint(endpoint: str | None = None) -> str:
    """Get the node base URL from parameter or environment.

    The same URL serves both the beacon REST API and the execution JSON-RPC API.

    Args:
        endpoint: Optional endpoint URL to use directly

    Returns:
        Node endpoint URL without a trailing slash

    Raises:
        ValueError: If endpoint is not provided and NODE_ENDPOINT env var is not set

    Example:
        ```python
        from src.helpers.config import get_node_endpoint

        # Get from environment
        endpoint = get_node_endpoint()

        # Or provide explicitly
        endpoint = get_node_endpoint("https://example.quiknode.pro/token")
        ```
    """
    if not endpoint:
        endpoint = os.getenv("NODE_ENDPOINT")
    if not endpoint:
        msg = "NODE_ENDPOINT must be provided or set in environment variables"
        raise ValueError(msg)

    return endpoint.rstrip("/")


def get_request_timeout() -> float:
    """Get the upstream request timeout in seconds.

    Raises:
        ValueError: If REQUEST_TIMEOUT is not a positive number
    """
    raw = get_optional_env("REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        msg = f"REQUEST_TIMEOUT must be a number, got {raw!r}"
        raise ValueError(msg) from None

    if timeout <= 0:
        msg = f"REQUEST_TIMEOUT must be positive, got {raw!r}"
        raise ValueError(msg)
    return timeout


def get_env_flag(key: str, *, default: bool = False) -> bool:
    """Read a boolean flag ("1", "true", "yes", "on") from the environment."""
    raw = get_optional_env(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Settings passed to each upstream data client."""

    endpoint: str = Field(..., description="Node base URL")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Upstream timeout in seconds"
    )

    @field_validator("endpoint")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        if not value:
            msg = "endpoint cannot be empty"
            raise ValueError(msg)
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build client settings from NODE_ENDPOINT and REQUEST_TIMEOUT."""
        return cls(endpoint=get_node_endpoint(), timeout=get_request_timeout())


class ServerConfig(BaseModel):
    """Settings for the HTTP gateway process."""

    host: str = DEFAULT_SERVER_HOST
    port: int = Field(default=DEFAULT_SERVER_PORT, ge=1, le=65_535)
    log_level: str = "INFO"
    log_color: bool = False

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build server settings from SERVER_HOST, SERVER_PORT and LOG_* variables."""
        return cls(
            host=get_optional_env("SERVER_HOST", DEFAULT_SERVER_HOST)
            or DEFAULT_SERVER_HOST,
            port=int(
                get_optional_env("SERVER_PORT", str(DEFAULT_SERVER_PORT))
                or DEFAULT_SERVER_PORT
            ),
            log_level=(get_optional_env("LOG_LEVEL", "INFO") or "INFO").upper(),
            log_color=get_env_flag("LOG_COLOR"),
        )


__all__ = [
    "ClientConfig",
    "ServerConfig",
    "get_env_flag",
    "get_node_endpoint",
    "get_optional_env",
    "get_request_timeout",
]
