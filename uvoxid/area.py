"""
Surface area of spherical patches bounded by addresses
"""

__all__ = ['area_between', 'spherical_patch_area']

import math

from uvoxid._const import MICROMETERS_PER_METER
from uvoxid.address import UvoxId
from uvoxid.errors import FrameMismatchError


def spherical_patch_area(
    r_um: int,
    lat1_deg: float,
    lat2_deg: float,
    lon1_deg: float,
    lon2_deg: float,
) -> float:
    """
    Area of a latitude/longitude bounded patch on a sphere, in square meters.

    Uses A = R² * |Δλ| * |sin φ2 - sin φ1|

    Args:
        r_um:
            The sphere radius, in micrometers

        lat1_deg, lat2_deg:
            The latitude bounds, in degrees

        lon1_deg, lon2_deg:
            The longitude bounds, in degrees

    Returns:
        float
    """
    r_m = r_um / MICROMETERS_PER_METER
    delta_lon = abs(math.radians(lon2_deg) - math.radians(lon1_deg))
    delta_sin = abs(math.sin(math.radians(lat2_deg)) - math.sin(math.radians(lat1_deg)))
    return r_m ** 2 * delta_lon * delta_sin


def area_between(uv1: UvoxId, uv2: UvoxId) -> float:
    """
    Area of the patch whose opposite corners are the two addresses, in
    square meters. Both addresses must lie on the same spherical shell.
    """
    if uv1.frame_id != uv2.frame_id:
        raise FrameMismatchError(uv1.frame_id, uv2.frame_id)

    if uv1.r_um != uv2.r_um:
        raise ValueError('Both addresses must be on the same spherical shell (same radius).')

    lat1, lon1 = uv1.to_degrees()
    lat2, lon2 = uv2.to_degrees()
    return spherical_patch_area(uv1.r_um, lat1, lat2, lon1, lon2)
