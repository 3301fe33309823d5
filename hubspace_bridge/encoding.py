"""Conversions between Python values and Afero attribute data strings."""
import re
from typing import Any, Optional

from .errors import UnsupportedValueTypeError

# leading integer of a string, decimal or 0x-prefixed hex
_INTEGER_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]*)")


def convert_number_to_hex_reverse(number: int) -> str:
    """Hex-encode ``number`` with its bytes reversed (little-endian).

    >>> convert_number_to_hex_reverse(0x1234)
    '3412'
    """
    hex_value = format(number, "x")
    if len(hex_value) % 2:
        hex_value = "0" + hex_value
    pairs = [hex_value[i:i + 2] for i in range(0, len(hex_value), 2)]
    return "".join(reversed(pairs))


def encode_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "01" if value else "00"
    if isinstance(value, (int, float)):
        # attribute data is unsigned whole bytes; negative and fractional numbers have no encoding
        if isinstance(value, float) and not value.is_integer():
            raise UnsupportedValueTypeError(value)
        if value < 0:
            raise UnsupportedValueTypeError(value)
        return convert_number_to_hex_reverse(int(value))
    raise UnsupportedValueTypeError(value)


def decode_boolean(raw: Any) -> Optional[bool]:
    if not raw:
        return None
    return raw == "1"


def decode_integer(raw: Any) -> Optional[int]:
    if not raw or not isinstance(raw, str):
        return None
    sign, digits = _INTEGER_PREFIX.match(raw).groups()
    base = 10
    if digits[:2].lower() == "0x":
        base, digits = 16, digits[2:]
    if not digits:
        return None
    number = int(digits, base)
    return -number if sign == "-" else number
