"""Common configuration constants used across the application."""

# Consensus Layer Constants
SLOTS_PER_EPOCH = 32
"""Number of slots in a single epoch on mainnet"""

MAX_SLOT = 2**64 - 1
"""Largest slot value representable by the beacon API (uint64)"""

# Unit Constants
GWEI = 1_000_000_000
"""Number of wei in one gwei"""

# Block Classification
RELAY_EXTRA_DATA_THRESHOLD = 20
"""Extra-data byte length above which a block is classified as relay-built"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 10.0
"""Default upstream request timeout in seconds"""

JSON_RPC_REQUEST_ID = 1
"""Request ID sent with single JSON-RPC calls"""

# Server Defaults
DEFAULT_SERVER_HOST = "0.0.0.0"  # noqa: S104
"""Default bind address for the HTTP gateway"""

DEFAULT_SERVER_PORT = 8080
"""Default port for the HTTP gateway"""


__all__ = [
    "DEFAULT_SERVER_HOST",
    "DEFAULT_SERVER_PORT",
    "DEFAULT_TIMEOUT",
    "GWEI",
    "JSON_RPC_REQUEST_ID",
    "MAX_SLOT",
    "RELAY_EXTRA_DATA_THRESHOLD",
    "SLOTS_PER_EPOCH",
]
