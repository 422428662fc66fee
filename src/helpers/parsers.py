"""Parsing utilities for chain quantities, slots and epochs.

Every numeric field coming from the node is either a decimal string (beacon
API) or a ``0x``-prefixed hex string (JSON-RPC). Both are parsed into Python
``int`` so wei-level sums never overflow; floats are never used.
"""

import re

from src.helpers.constants import GWEI, MAX_SLOT, SLOTS_PER_EPOCH
from src.helpers.errors import InvalidInputError, ParseError


_HEX_QUANTITY = re.compile(r"0x[0-9a-fA-F]+")
_HEX_DATA = re.compile(r"0x(?:[0-9a-fA-F]{2})*")
_DECIMAL = re.compile(r"[0-9]+")


def parse_hex_quantity(hex_value: str | None) -> int:
    """Parse a ``0x``-prefixed hex quantity into an integer.

    Args:
        hex_value: Hex-encoded string, e.g. ``"0x3b9aca00"``

    Returns:
        int: Parsed value

    Raises:
        ParseError: If the value is missing, lacks the prefix or has no digits

    Example:
        >>> parse_hex_quantity("0xff")
        255
    """
    if not isinstance(hex_value, str) or not _HEX_QUANTITY.fullmatch(hex_value):
        msg = f"invalid hex quantity: {hex_value!r}"
        raise ParseError(msg)
    return int(hex_value[2:], 16)


def parse_decimal_quantity(value: str | None) -> int:
    """Parse a non-negative decimal string such as ``"19381234"``.

    Raises:
        ParseError: If the value is not made only of ASCII digits
    """
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        msg = f"invalid decimal quantity: {value!r}"
        raise ParseError(msg)
    return int(value)


def decimal_to_hex_quantity(value: str) -> str:
    """Convert a decimal block number string to a JSON-RPC hex quantity.

    Example:
        >>> decimal_to_hex_quantity("19381234")
        '0x127bbf2'
    """
    return hex(parse_decimal_quantity(value))


def hex_data_length(hex_data: str | None) -> int:
    """Return the byte length of ``0x``-prefixed hex data.

    Raises:
        ParseError: If the value is not even-length hex data

    Example:
        >>> hex_data_length("0x6265617665726275696c642e6f7267")
        15
    """
    if not isinstance(hex_data, str) or not _HEX_DATA.fullmatch(hex_data):
        msg = f"invalid hex data: {hex_data!r}"
        raise ParseError(msg)
    return len(bytes.fromhex(hex_data[2:]))


def parse_slot(raw: str) -> int:
    """Parse a slot given by a caller as a base-10 unsigned 64-bit integer.

    Raises:
        InvalidInputError: If the slot is not a decimal uint64
    """
    if not isinstance(raw, str) or not _DECIMAL.fullmatch(raw):
        msg = "invalid slot parameter"
        raise InvalidInputError(msg)

    slot = int(raw)
    if slot > MAX_SLOT:
        msg = "invalid slot parameter"
        raise InvalidInputError(msg)
    return slot


def slot_to_epoch(slot: int) -> int:
    """Return the epoch containing ``slot``."""
    return slot // SLOTS_PER_EPOCH


def epoch_start_slot(epoch: int) -> int:
    """Return the first slot of ``epoch``."""
    return epoch * SLOTS_PER_EPOCH


def wei_to_gwei(wei: int) -> int:
    """Convert wei to gwei, discarding the sub-gwei remainder.

    Example:
        >>> wei_to_gwei(1_999_999_999)
        1
    """
    return wei // GWEI


__all__ = [
    "decimal_to_hex_quantity",
    "epoch_start_slot",
    "hex_data_length",
    "parse_decimal_quantity",
    "parse_hex_quantity",
    "parse_slot",
    "slot_to_epoch",
    "wei_to_gwei",
]
