"""Error types shared by the data clients, the reward calculator and the API."""


class GatewayError(Exception):
    """Base class for all errors raised while answering a query.

    Args:
        message: Detail for the log; may carry upstream URLs or payloads
        public_message: Short text that is safe to return to the caller
    """

    def __init__(self, message: str = "", *, public_message: str | None = None) -> None:
        super().__init__(message)
        self.public_message = public_message


class InvalidInputError(GatewayError):
    """The caller supplied a value that cannot be parsed (e.g. a bad slot)."""


class FutureSlotError(GatewayError):
    """The requested slot is beyond the current head slot."""


class NotFoundError(GatewayError):
    """The upstream node has no data for the request (missed slot, no payload...)."""


class UpstreamError(GatewayError):
    """Transport failure, timeout or unexpected status from the upstream node."""


class ParseError(GatewayError):
    """A successful upstream response carried a malformed field."""


__all__ = [
    "FutureSlotError",
    "GatewayError",
    "InvalidInputError",
    "NotFoundError",
    "ParseError",
    "UpstreamError",
]
