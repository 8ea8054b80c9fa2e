"""Module for miscellaneous multi-use functions"""

__all__ = [
    'from_bits_i64', 'round_half_up', 'to_bits_u64', 'wrap_i64',
]

from decimal import Decimal
import math

from uvoxid._const import I64_MAX, U64_MAX


def round_half_up(value: float, precision: int = 0) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    The value is read through its shortest decimal representation, so 1.55 is a tie
    at one decimal place even though the nearest float is slightly above it.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    quantum = Decimal(1).scaleb(-precision)
    scaled = Decimal(repr(value)) / quantum + Decimal('0.5')

    return float(math.floor(scaled) * quantum)


def to_bits_u64(value: int) -> int:
    """Reinterpret an integer as its unsigned 64-bit two's-complement pattern"""
    return value & U64_MAX


def from_bits_i64(bits: int) -> int:
    """Reinterpret an unsigned 64-bit pattern as a signed 64-bit integer"""
    bits &= U64_MAX
    return bits - (1 << 64) if bits > I64_MAX else bits


def wrap_i64(value: int) -> int:
    """Wrap an arbitrary integer into the signed 64-bit range"""
    return from_bits_i64(to_bits_u64(value))
