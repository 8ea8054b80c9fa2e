"""Orientation differences between two addresses"""

__all__ = ['spherical_delta']

from typing import Tuple

from uvoxid._const import MICRO_PER_DEGREE
from uvoxid.address import UvoxId
from uvoxid.errors import FrameMismatchError


def spherical_delta(uv1: UvoxId, uv2: UvoxId) -> Tuple[int, float, float]:
    """
    Change in position from uv1 to uv2. Both addresses must share a frame.

    Returns:
        (dr_um, dlat_deg, dlon_deg), where dlon_deg is taken the short way
        around and normalized to [-180, 180]
    """
    if uv1.frame_id != uv2.frame_id:
        raise FrameMismatchError(uv1.frame_id, uv2.frame_id)

    dr_um = uv2.r_um - uv1.r_um
    dlat_deg = (uv2.lat_code - uv1.lat_code) / MICRO_PER_DEGREE
    dlon_deg = (uv2.lon_code - uv1.lon_code) / MICRO_PER_DEGREE

    if dlon_deg > 180:
        dlon_deg -= 360
    elif dlon_deg < -180:
        dlon_deg += 360

    return dr_um, dlat_deg, dlon_deg
