"""
Approximate comparison of addresses by truncating their packed form
"""

__all__ = ['equal_within', 'snap', 'truncate']

from typing import Union

from uvoxid._const import (
    BITS_PER_UNIT, HEX_LENGTH, MAX_SIGNIFICANT_UNITS, SNAP_PREFIX, TOTAL_BITS
)
from uvoxid.address import UvoxId
from uvoxid.errors import PrecisionOutOfRangeError


AddressLike = Union[UvoxId, int]


def _as_packed(value: AddressLike) -> int:
    if isinstance(value, UvoxId):
        return value.packed

    if not 0 <= value < 1 << TOTAL_BITS:
        raise ValueError(f'packed value must fit in {TOTAL_BITS} unsigned bits')

    return value


def truncate(value: AddressLike, significant_units: int) -> int:
    """
    Keep only the most significant bits of a packed address, zeroing the rest.
    Each unit of precision is worth 5 bits (one base-32 character), and the
    precision budget is shared by all four fields in packing order.

    Args:
        value:
            A UvoxId or its packed integer form

        significant_units:
            The number of 5-bit units to keep, between 0 and 51

    Returns:
        The truncated packed integer
    """
    if not 0 <= significant_units <= MAX_SIGNIFICANT_UNITS:
        raise PrecisionOutOfRangeError(significant_units, MAX_SIGNIFICANT_UNITS)

    drop_bits = TOTAL_BITS - significant_units * BITS_PER_UNIT
    return _as_packed(value) >> drop_bits << drop_bits


def equal_within(a: AddressLike, b: AddressLike, significant_units: int) -> bool:
    """Test whether two addresses match at the requested precision"""
    return truncate(a, significant_units) == truncate(b, significant_units)


def snap(value: AddressLike, significant_units: int) -> str:
    """
    Snap an address to the requested precision and render it as a
    fixed-length token, e.g. 'uvoxid:0000...'
    """
    return f'{SNAP_PREFIX}{truncate(value, significant_units):0{HEX_LENGTH}x}'
