"""Query orchestration between the beacon node, the execution node and the calculator."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from src.consensus.client import ConsensusClient
from src.execution.client import ExecutionClient
from src.helpers.config import ClientConfig
from src.helpers.errors import (
    FutureSlotError,
    NotFoundError,
    ParseError,
    UpstreamError,
)
from src.helpers.http import create_http_client
from src.helpers.logging import get_logger
from src.helpers.parsers import decimal_to_hex_quantity
from src.rewards.calculator import compute_block_reward
from src.rewards.models import RewardResult


logger = get_logger(__name__)


@contextmanager
def failure_stage(public_message: str) -> Iterator[None]:
    """Tag upstream and parse failures raised inside the block with a caller-safe message.

    A message already attached closer to the failure is kept.

    Args:
        public_message: Short description of the failed step, e.g. "failed to fetch head slot"

    Example:
        ```python
        with failure_stage("failed to get beacon block"):
            block = await consensus.get_beacon_block_by_slot(client, slot)
        ```
    """
    try:
        yield
    except (UpstreamError, ParseError) as e:
        if e.public_message is None:
            e.public_message = public_message
        raise


class RewardsService:
    """Answers block-reward and sync-duty queries for a slot.

    Every query opens its own HTTP client and re-fetches everything from the
    node; nothing is shared between queries.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the service and its data clients.

        Args:
            config: Upstream settings handed to both data clients
        """
        self.config = config
        self.consensus = ConsensusClient(config)
        self.execution = ExecutionClient(config)

    def _http_client(self) -> httpx.AsyncClient:
        return create_http_client(timeout=self.config.timeout)

    async def _ensure_not_future(
        self, client: httpx.AsyncClient, slot: int, message: str
    ) -> None:
        with failure_stage("failed to fetch head slot"):
            head_slot = await self.consensus.get_head_slot(client)
        if slot > head_slot:
            logger.info("Rejecting slot %d beyond head slot %d", slot, head_slot)
            raise FutureSlotError(message)

    async def get_block_reward(self, slot: int) -> RewardResult:
        """Compute the proposer reward of the block produced at ``slot``.

        Raises:
            FutureSlotError: If the slot is beyond the head slot
            NotFoundError: If the slot was missed, has no execution payload or
                the execution block is unknown to the node
            UpstreamError: On upstream failures
            ParseError: On malformed upstream data
        """
        async with self._http_client() as client:
            await self._ensure_not_future(
                client, slot, "requested slot is in the future"
            )

            try:
                with failure_stage("failed to get beacon block"):
                    beacon_block = await self.consensus.get_beacon_block_by_slot(
                        client, slot
                    )
            except NotFoundError:
                msg = "slot not found/missed"
                raise NotFoundError(msg) from None

            block_number = beacon_block.execution_block_number
            if not block_number:
                msg = "no execution payload for this slot"
                raise NotFoundError(msg)

            try:
                block_number_hex = decimal_to_hex_quantity(block_number)
            except ParseError as e:
                msg = "invalid block number format"
                raise ParseError(msg, public_message=msg) from e

            try:
                with failure_stage("failed to get execution block"):
                    execution_block = (
                        await self.execution.get_execution_block_by_number(
                            client, block_number_hex
                        )
                    )
            except NotFoundError:
                msg = "execution block not found"
                raise NotFoundError(msg) from None

        with failure_stage("failed to compute block reward"):
            result = compute_block_reward(execution_block)
        logger.info(
            "Slot %d (block %s): %s, %d gwei",
            slot,
            block_number,
            result.status.value,
            result.reward_gwei,
        )
        return result

    async def get_sync_duties(self, slot: int) -> list[str]:
        """Return the sync committee validator indices for the epoch of ``slot``.

        Raises:
            FutureSlotError: If the slot is beyond the head slot
            NotFoundError: If the node has no committee data
            UpstreamError: On upstream failures
            ParseError: On malformed upstream data
        """
        async with self._http_client() as client:
            await self._ensure_not_future(
                client, slot, "requested slot is too far in the future"
            )

            try:
                with failure_stage("failed to get sync committee duties"):
                    validators = await self.consensus.get_sync_committee_duties(
                        client, slot
                    )
            except NotFoundError:
                msg = "sync committee duties not found"
                raise NotFoundError(msg) from None

        logger.info("Slot %d: %d sync committee validators", slot, len(validators))
        return validators


__all__ = [
    "RewardsService",
    "failure_stage",
]
