"""Proposer priority-fee reward computation.

The reward of a block is the sum over its transactions of
``(gasPrice - baseFeePerGas) * gas`` for every transaction paying more than
the base fee, converted from wei to gwei with truncation. All arithmetic is
done on Python ints.

Transactions whose ``gas`` or ``gasPrice`` cannot be parsed are skipped rather
than failing the block: some transaction types and some nodes do not expose a
literal ``gasPrice``. A malformed base fee or extra data is fatal.
"""

from collections.abc import Iterable

from src.execution.models import ExecutionBlock, ExecutionTransaction
from src.helpers.constants import RELAY_EXTRA_DATA_THRESHOLD
from src.helpers.errors import ParseError
from src.helpers.logging import get_logger
from src.helpers.parsers import hex_data_length, parse_hex_quantity, wei_to_gwei

from src.rewards.models import BlockStatus, RewardResult


logger = get_logger(__name__)


def transaction_priority_reward(tx: ExecutionTransaction, base_fee: int) -> int | None:
    """Return the priority fee paid by one transaction, in wei.

    Returns ``None`` if the transaction cannot be parsed, and 0 if it pays no
    more than the base fee.
    """
    try:
        gas_price = parse_hex_quantity(tx.gas_price)
        gas = parse_hex_quantity(tx.gas)
    except ParseError:
        return None

    if gas_price <= base_fee:
        return 0
    return (gas_price - base_fee) * gas


def total_priority_fees(
    transactions: Iterable[ExecutionTransaction], base_fee: int
) -> int:
    """Sum the priority fees of ``transactions`` in wei."""
    total = 0
    skipped = 0
    for tx in transactions:
        reward = transaction_priority_reward(tx, base_fee)
        if reward is None:
            skipped += 1
            continue
        total += reward

    if skipped:
        logger.debug("Skipped %d transactions with unparseable gas fields", skipped)
    return total


def classify_block(
    extra_data: str | None, threshold: int = RELAY_EXTRA_DATA_THRESHOLD
) -> BlockStatus:
    """Classify a block as relay-built or vanilla from its extra data.

    Relay builders conventionally tag blocks with longer extra data than
    locally built blocks. This is a heuristic, not a proof of provenance.
    Missing or empty extra data counts as zero bytes.

    Raises:
        ParseError: If the extra data is not hex data
    """
    if not extra_data:
        return BlockStatus.VANILLA
    if hex_data_length(extra_data) > threshold:
        return BlockStatus.RELAY
    return BlockStatus.VANILLA


def compute_block_reward(
    block: ExecutionBlock, *, threshold: int = RELAY_EXTRA_DATA_THRESHOLD
) -> RewardResult:
    """Compute the proposer reward and build status of an execution block.

    Args:
        block: Execution block with full transaction objects
        threshold: Extra-data byte length above which the block counts as relay-built

    Returns:
        RewardResult with the reward in gwei

    Raises:
        ParseError: If the base fee or extra data is malformed
    """
    try:
        base_fee = parse_hex_quantity(block.base_fee_per_gas)
    except ParseError as e:
        msg = "invalid base fee"
        raise ParseError(msg, public_message=msg) from e

    total_wei = total_priority_fees(block.transactions, base_fee)
    status = classify_block(block.extra_data, threshold)

    logger.debug(
        "Block %s: %d wei priority fees over %d transactions (%s)",
        block.number,
        total_wei,
        len(block.transactions),
        status.value,
    )
    return RewardResult(status=status, reward_gwei=wei_to_gwei(total_wei))


__all__ = [
    "classify_block",
    "compute_block_reward",
    "total_priority_fees",
    "transaction_priority_reward",
]
