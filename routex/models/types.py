"""Shared type definitions for Routex models.

Move type identifiers, account addresses and u64 amounts as they appear
on the chain's REST interface, with explicit validated conversions.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from routex.errors import MalformedViewResponse

# Maximum Move u64 value
U64_MAX = 2**64 - 1

_ACCOUNT_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{1,64}$")
_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
# 0x<address>::<module>::<struct>, optionally with generic parameters
_TYPE_ID_RE = re.compile(rf"^0x[a-fA-F0-9]{{1,64}}::{_IDENTIFIER}::{_IDENTIFIER}(<.+>)?$")


def parse_u64(value: Any) -> int:
    """Convert a chain response value into a u64 integer.

    The REST interface renders u64 values as decimal strings. Anything else
    is rejected rather than coerced.

    Args:
        value: Raw value from a view response

    Returns:
        The value as a non-negative int

    Raises:
        MalformedViewResponse: If value is not a decimal u64
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise MalformedViewResponse(f"u64 expected, got bool {value!r}")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        if not value.isascii() or not value.isdigit():
            raise MalformedViewResponse(f"u64 must be a decimal integer string: {value!r}")
        int_value = int(value)
    else:
        raise MalformedViewResponse(f"u64 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise MalformedViewResponse(f"u64 cannot be negative: {value}")
    if int_value > U64_MAX:
        raise MalformedViewResponse(f"u64 overflow: {value} > 2^64-1")
    return int_value


def validate_u64(value: Any) -> int:
    """Pydantic validator for u64 amounts (accepts int or decimal string)."""
    try:
        return parse_u64(value)
    except MalformedViewResponse as err:
        raise ValueError(str(err)) from err


def is_valid_account_address(address: str) -> bool:
    """Check if a string is a valid account address (0x + 1..64 hex chars)."""
    if not isinstance(address, str):
        return False
    return _ACCOUNT_ADDRESS_RE.match(address) is not None


def normalize_account_address(address: str) -> str:
    """Normalize an account address to lowercase with a 0x prefix.

    Raises:
        ValueError: If the address is not valid hex
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    if not is_valid_account_address(addr):
        raise ValueError(f"Invalid account address: {address}")
    return addr


def is_valid_type_id(type_id: str) -> bool:
    """Check if a string looks like a Move struct type (0xaddr::module::Name)."""
    if not isinstance(type_id, str):
        return False
    return _TYPE_ID_RE.match(type_id) is not None


def validate_type_id(value: Any) -> str:
    if not is_valid_type_id(value):
        raise ValueError(f"Invalid Move type identifier: {value!r}")
    return value


# Move struct type, e.g. 0x1::aptos_coin::AptosCoin
TypeId = Annotated[
    str,
    BeforeValidator(validate_type_id),
    Field(description="Move type identifier (0xaddr::module::Name)"),
]

# 64-bit unsigned integer (int or decimal string on input)
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer"),
]
