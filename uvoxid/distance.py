"""
Distance calculations between addresses on a shared frame
"""

__all__ = ['haversine_distance', 'linear_distance']

import math

import numpy as np

from uvoxid._const import MICRO_PER_DEGREE, MICROMETERS_PER_METER
from uvoxid.address import UvoxId
from uvoxid.errors import FrameMismatchError


def _check_frames(uv1: UvoxId, uv2: UvoxId):
    if uv1.frame_id != uv2.frame_id:
        raise FrameMismatchError(uv1.frame_id, uv2.frame_id)


def linear_distance(uv1: UvoxId, uv2: UvoxId) -> float:
    """
    Straight-line (chord) distance between two addresses, in meters.

    Accounts for both the radial and the angular separation, so it is exact
    at every scale and matches "as the crow tunnels" intuition for nearby
    points.
    """
    _check_frames(uv1, uv2)
    return float(np.linalg.norm(np.array(uv1.xyz) - np.array(uv2.xyz)))


def haversine_distance(uv1: UvoxId, uv2: UvoxId) -> float:
    """
    Great-circle (surface) distance between two addresses, in meters.

    Both points are treated as lying on one sphere whose radius is the mean
    of the two radii.
    """
    _check_frames(uv1, uv2)
    r_m = (uv1.r_um + uv2.r_um) / 2 / MICROMETERS_PER_METER

    lat1 = math.radians(uv1.lat_code / MICRO_PER_DEGREE)
    lon1 = math.radians(uv1.lon_code / MICRO_PER_DEGREE)
    lat2 = math.radians(uv2.lat_code / MICRO_PER_DEGREE)
    lon2 = math.radians(uv2.lon_code / MICRO_PER_DEGREE)

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return r_m * c
