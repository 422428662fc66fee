"""Tests for the proposer reward calculator."""

import pytest

from src.execution.models import ExecutionBlock, ExecutionTransaction
from src.helpers.constants import GWEI
from src.helpers.errors import ParseError
from src.rewards.calculator import (
    classify_block,
    compute_block_reward,
    total_priority_fees,
    transaction_priority_reward,
)
from src.rewards.models import BlockStatus, RewardResult

from tests.factories import (
    BASE_FEE,
    RELAY_EXTRA_DATA,
    VANILLA_EXTRA_DATA,
    execution_block,
    reward_transactions,
    transaction,
)


def _block(**kwargs) -> ExecutionBlock:
    return ExecutionBlock.model_validate(execution_block(21_373_000, **kwargs))


def _tx(gas_price: int | None, gas: int) -> ExecutionTransaction:
    return ExecutionTransaction.model_validate(transaction(gas_price, gas))


class TestTransactionPriorityReward:
    """Tests for transaction_priority_reward function."""

    def test_pays_priority_fee(self) -> None:
        """Test that the fee above the base fee is multiplied by gas."""
        assert transaction_priority_reward(_tx(BASE_FEE + 2, 100), BASE_FEE) == 200

    def test_equal_to_base_fee_contributes_nothing(self) -> None:
        """Test that paying exactly the base fee contributes zero."""
        assert transaction_priority_reward(_tx(BASE_FEE, 21_000), BASE_FEE) == 0

    def test_below_base_fee_is_not_subtracted(self) -> None:
        """Test that underpaying transactions contribute zero, never a negative."""
        assert transaction_priority_reward(_tx(BASE_FEE - 5, 21_000), BASE_FEE) == 0

    def test_missing_gas_price_is_unparseable(self) -> None:
        """Test that a transaction without gasPrice is reported as unparseable."""
        assert transaction_priority_reward(_tx(None, 21_000), BASE_FEE) is None

    def test_malformed_gas_is_unparseable(self) -> None:
        """Test that a malformed gas field is reported as unparseable."""
        tx = ExecutionTransaction(gasPrice=hex(BASE_FEE + 1), gas="21000")
        assert transaction_priority_reward(tx, BASE_FEE) is None


class TestTotalPriorityFees:
    """Tests for total_priority_fees function."""

    def test_sums_in_wei(self) -> None:
        """Test the sum over the reference transactions."""
        txs = [ExecutionTransaction.model_validate(t) for t in reward_transactions()]

        assert total_priority_fees(txs, BASE_FEE) == 20_850 * GWEI + 21_000

    def test_no_overflow(self) -> None:
        """Test that sums beyond 64 bits are exact."""
        txs = [_tx(BASE_FEE + 10**30, 30_000_000) for _ in range(3)]

        assert total_priority_fees(txs, BASE_FEE) == 3 * 10**30 * 30_000_000


class TestClassifyBlock:
    """Tests for classify_block function."""

    @pytest.mark.parametrize(
        ("length", "expected"),
        [
            (0, BlockStatus.VANILLA),
            (19, BlockStatus.VANILLA),
            (20, BlockStatus.VANILLA),
            (21, BlockStatus.RELAY),
            (32, BlockStatus.RELAY),
        ],
    )
    def test_threshold(self, length: int, expected: BlockStatus) -> None:
        """Test that only extra data longer than 20 bytes counts as relay."""
        assert classify_block("0x" + "ab" * length) is expected

    def test_custom_threshold(self) -> None:
        """Test that the threshold can be overridden."""
        assert classify_block("0x" + "ab" * 10, threshold=5) is BlockStatus.RELAY

    @pytest.mark.parametrize("extra_data", [None, "", "0x"])
    def test_missing_extra_data_is_vanilla(self, extra_data: str | None) -> None:
        """Test that absent or empty extra data counts as zero bytes."""
        assert classify_block(extra_data) is BlockStatus.VANILLA

    def test_malformed_extra_data(self) -> None:
        """Test that malformed extra data raises ParseError."""
        with pytest.raises(ParseError):
            classify_block("0xabc")


class TestComputeBlockReward:
    """Tests for compute_block_reward function."""

    def test_relay_block(self) -> None:
        """Test the reference relay block: 20850 gwei, sub-gwei truncated."""
        result = compute_block_reward(
            _block(extra_data=RELAY_EXTRA_DATA, transactions=reward_transactions())
        )

        assert result == RewardResult(status=BlockStatus.RELAY, reward_gwei=20_850)
        assert result.to_response() == {"status": "relay", "reward": "20850"}

    def test_vanilla_block(self) -> None:
        """Test the same transactions under short extra data."""
        result = compute_block_reward(
            _block(extra_data=VANILLA_EXTRA_DATA, transactions=reward_transactions())
        )

        assert result.to_response() == {"status": "vanilla", "reward": "20850"}

    def test_empty_block(self) -> None:
        """Test that a block without transactions yields zero and vanilla."""
        result = compute_block_reward(_block(extra_data=b"", transactions=[]))

        assert result.reward_gwei == 0
        assert result.status is BlockStatus.VANILLA

    def test_block_without_extra_data_field(self) -> None:
        """Test that a node omitting extraData still yields a vanilla reward."""
        payload = execution_block(21_373_000, transactions=reward_transactions())
        del payload["extraData"]

        result = compute_block_reward(ExecutionBlock.model_validate(payload))

        assert result.to_response() == {"status": "vanilla", "reward": "20850"}

    def test_all_at_or_below_base_fee(self) -> None:
        """Test that a block with no tipping transaction yields zero."""
        txs = [
            transaction(BASE_FEE, 21_000),
            transaction(BASE_FEE - 1, 50_000),
            transaction(0, 100_000),
        ]

        assert compute_block_reward(_block(transactions=txs)).reward_gwei == 0

    def test_truncates_to_gwei(self) -> None:
        """Test that 1_999_999_999 wei is reported as 1 gwei."""
        txs = [transaction(BASE_FEE + 1_999_999_999, 1)]

        assert compute_block_reward(_block(transactions=txs)).reward_gwei == 1

    def test_idempotent(self) -> None:
        """Test that repeated computation yields the same reward string."""
        block = _block(transactions=reward_transactions())

        first = compute_block_reward(block).to_response()
        second = compute_block_reward(block).to_response()

        assert first == second

    @pytest.mark.parametrize("base_fee", ["", "0x", "1000", "0xnothex"])
    def test_malformed_base_fee_is_fatal(self, base_fee: str) -> None:
        """Test that an unparseable base fee fails the whole block."""
        with pytest.raises(ParseError, match="invalid base fee"):
            compute_block_reward(_block(base_fee=base_fee, transactions=reward_transactions()))

    def test_missing_base_fee_is_fatal(self) -> None:
        """Test that a pre-London block without base fee cannot be computed."""
        block = _block(transactions=reward_transactions())
        block.base_fee_per_gas = None

        with pytest.raises(ParseError):
            compute_block_reward(block)
