"""Beacon node REST API client."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from src.helpers.config import ClientConfig
from src.helpers.errors import ParseError, UpstreamError
from src.helpers.http import get_json
from src.helpers.logging import get_logger
from src.helpers.parsers import epoch_start_slot, parse_decimal_quantity, slot_to_epoch

from src.consensus.models import (
    BeaconBlockResponse,
    BeaconHeadersResponse,
    SyncCommitteeResponse,
)


logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def _validate(model: type[M], body: Any, what: str) -> M:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        msg = f"malformed {what} response"
        raise ParseError(msg) from e


class ConsensusClient:
    """Typed access to the beacon API endpoints the gateway needs."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client.

        Args:
            config: Endpoint and timeout shared by every request of this client
        """
        self.endpoint = config.endpoint
        self.timeout = config.timeout

    async def get_head_slot(self, client: httpx.AsyncClient) -> int:
        """Get the slot of the most recent header known to the node.

        Raises:
            UpstreamError: On transport failure, non-2xx status or empty data
            ParseError: If the slot is not a decimal string
        """
        url = f"{self.endpoint}/eth/v1/beacon/headers"
        body = await get_json(client, url, timeout=self.timeout)
        headers = _validate(BeaconHeadersResponse, body, "beacon headers")

        if not headers.data:
            msg = "no header data returned"
            raise UpstreamError(msg)

        head_slot = parse_decimal_quantity(headers.data[0].header.message.slot)
        logger.debug("Head slot is %d", head_slot)
        return head_slot

    async def get_beacon_block_by_slot(
        self, client: httpx.AsyncClient, slot: int
    ) -> BeaconBlockResponse:
        """Fetch the beacon block proposed at ``slot``.

        Raises:
            NotFoundError: If no block exists for the slot (missed slot)
            UpstreamError: On any other failure
            ParseError: If the block cannot be decoded
        """
        url = f"{self.endpoint}/eth/v2/beacon/blocks/{slot}"
        body = await get_json(
            client, url, timeout=self.timeout, not_found_message="block not found"
        )
        return _validate(BeaconBlockResponse, body, "beacon block")

    async def get_sync_committee_duties(
        self, client: httpx.AsyncClient, slot: int
    ) -> list[str]:
        """Fetch the sync committee validator indices for the epoch of ``slot``.

        The state is queried at the first slot of the epoch so every slot of
        the same epoch resolves to the same committee.

        Raises:
            NotFoundError: If the node has no committee data for the state
            UpstreamError: On any other failure
            ParseError: If the response cannot be decoded
        """
        epoch = slot_to_epoch(slot)
        state_id = epoch_start_slot(epoch)
        url = f"{self.endpoint}/eth/v1/beacon/states/{state_id}/sync_committees"

        body = await get_json(
            client,
            url,
            params={"epoch": str(epoch)},
            timeout=self.timeout,
            not_found_message="sync committee duties not found for this slot",
        )
        committee = _validate(SyncCommitteeResponse, body, "sync committee")

        logger.debug(
            "Sync committee for slot %d (epoch %d, state %d): %d validators",
            slot,
            epoch,
            state_id,
            len(committee.data.validators),
        )
        return committee.data.validators


__all__ = [
    "ConsensusClient",
]
