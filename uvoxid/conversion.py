"""
Module for unit conversions between physical lengths and voxel counts
"""
__all__ = ['from_voxels', 'to_voxels', 'UNIT_TO_METERS']

from types import MappingProxyType

from uvoxid._const import VOXEL_SIZE_M
from uvoxid.utils.functions import round_half_up


UNIT_TO_METERS = MappingProxyType({
    'um': 1e-6,
    'mm': 1e-3,
    'cm': 1e-2,
    'm': 1.0,
    'km': 1e3,
    'in': 0.0254,
    'ft': 0.3048,
    'yd': 0.9144,
    'mi': 1609.34,
})


def _meters_per_unit(unit: str) -> float:
    try:
        return UNIT_TO_METERS[unit.lower()]
    except KeyError:
        raise ValueError(
            f'Unsupported unit: {unit}. Options: {list(UNIT_TO_METERS.keys())}'
        ) from None


def to_voxels(value: float, unit: str) -> int:
    """
    Converts a physical length to a voxel count (1 voxel = 1 micrometer).

    Args:
        value (float): The length.
        unit (str): The unit of length (micrometer = 'um', millimeter = 'mm',
        centimeter = 'cm', meter = 'm', kilometer = 'km', inch = 'in',
        feet = 'ft', yard = 'yd', mile = 'mi').

    Returns:
        int: The length in voxels, rounded to the nearest voxel.
    """
    meters = value * _meters_per_unit(unit)
    return int(round_half_up(meters / VOXEL_SIZE_M))


def from_voxels(voxels: int, unit: str) -> float:
    """
    Converts a voxel count back to a physical length.

    Args:
        voxels (int): The length in voxels.
        unit (str): The unit to convert to; see to_voxels() for options.

    Returns:
        float: The length in the requested unit.
    """
    meters = voxels * VOXEL_SIZE_M
    return meters / _meters_per_unit(unit)
