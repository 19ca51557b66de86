"""Felt (Starknet field element) parsing and formatting.

Every value in Starknet calldata is a felt: an unsigned integer below the
field prime. Literals are accepted as ``0x``-prefixed hex or plain decimal
strings. Parsing never truncates or wraps; anything that does not fit the
requested width raises ParameterEncodingError naming the offending field.
"""

from __future__ import annotations

import re

from feesim.constants import FELT_MAX, U64_MAX, U128_MAX
from feesim.errors import ParameterEncodingError

_HEX_BODY = re.compile(r"[0-9a-fA-F]+")


def parse_felt(value: str | int, field: str, *, max_value: int | None = FELT_MAX) -> int:
    """Parse a numeric literal into a felt.

    Args:
        value: Hex string (``0x...``), decimal string, or int
        field: Name of the field being parsed (used in error messages)
        max_value: Inclusive upper bound (default: largest felt). None
            disables the bound for arbitrary-precision amounts.

    Returns:
        The parsed integer

    Raises:
        ParameterEncodingError: If the literal is malformed, negative,
            or exceeds max_value
    """
    if isinstance(value, bool):
        raise ParameterEncodingError(field, value, "expected a numeric literal, got bool")

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        parsed = _parse_literal(value, field)
    else:
        raise ParameterEncodingError(
            field, value, f"expected str or int, got {type(value).__name__}"
        )

    if parsed < 0:
        raise ParameterEncodingError(field, value, "value cannot be negative")
    if max_value is not None and parsed > max_value:
        raise ParameterEncodingError(field, value, f"value exceeds maximum {hex(max_value)}")
    return parsed


def _parse_literal(value: str, field: str) -> int:
    if value[:2] in ("0x", "0X"):
        body = value[2:]
        if not _HEX_BODY.fullmatch(body):
            raise ParameterEncodingError(field, value, "not a valid hex literal")
        return int(body, 16)

    # str.isdigit() alone accepts non-ASCII digits such as superscripts
    if not (value.isascii() and value.isdigit()):
        raise ParameterEncodingError(field, value, "not a valid decimal or hex literal")
    try:
        return int(value)
    except ValueError as e:
        # Decimal strings past the interpreter's int conversion digit limit
        raise ParameterEncodingError(field, value, "value too large") from e


def parse_u64(value: str | int, field: str) -> int:
    """Parse a literal that must fit in 64 bits."""
    return parse_felt(value, field, max_value=U64_MAX)


def parse_u128(value: str | int, field: str) -> int:
    """Parse a literal that must fit in 128 bits."""
    return parse_felt(value, field, max_value=U128_MAX)


def to_hex(value: int) -> str:
    """Format a felt as a lowercase ``0x`` hex string (no padding)."""
    return hex(value)


__all__ = ["parse_felt", "parse_u64", "parse_u128", "to_hex"]
