"""
Displacements between addresses, and how they compose with an address
"""

from __future__ import annotations

__all__ = ['Delta', 'apply_delta']

from typing import Annotated, Tuple

from pydantic import Field, validate_call

from uvoxid._const import (
    FULL_TURN_MICRO, HALF_TURN_MICRO, I128_MAX, I128_MIN, LAT_MAX_MICRO,
    LAT_MIN_MICRO, LON_MIN_MICRO, U64_MAX
)
from uvoxid.address import UvoxId
from uvoxid.utils.logging import warn_once


I128 = Annotated[int, Field(strict=True, ge=I128_MIN, le=I128_MAX)]


class Delta:
    """
    A difference between two addresses in the same frame: (dr, dlat, dlon).

    dr is in micrometers; dlat and dlon are in millionths of a degree. Each
    component must fit in a signed 128-bit integer, which is wide enough to
    hold the difference of any two 64-bit address fields.
    """

    __slots__ = ('dr', 'dlat', 'dlon')

    @validate_call
    def __init__(self, dr: I128 = 0, dlat: I128 = 0, dlon: I128 = 0):
        self.dr = dr
        self.dlat = dlat
        self.dlon = dlon

    def __eq__(self, other):
        if not isinstance(other, Delta):
            return False

        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f'<Delta({self.dr}, {self.dlat}, {self.dlon})>'

    def __add__(self, other: Delta) -> Delta:
        if not isinstance(other, Delta):
            return NotImplemented

        return Delta(self.dr + other.dr, self.dlat + other.dlat, self.dlon + other.dlon)

    def __sub__(self, other: Delta) -> Delta:
        if not isinstance(other, Delta):
            return NotImplemented

        return Delta(self.dr - other.dr, self.dlat - other.dlat, self.dlon - other.dlon)

    def __neg__(self) -> Delta:
        return Delta(-self.dr, -self.dlat, -self.dlon)

    def as_tuple(self) -> Tuple[int, int, int]:
        """Returns (dr, dlat, dlon)"""
        return self.dr, self.dlat, self.dlon

    def scale(self, factor: int) -> Delta:
        """
        Multiply every component by an integer factor, e.g. to project a
        per-step displacement several steps forward.

        Args:
            factor:
                The integer multiplier

        Returns:
            Delta
        """
        return Delta(self.dr * factor, self.dlat * factor, self.dlon * factor)


def _reflect_latitude(lat: int, lon: int) -> Tuple[int, int]:
    """
    Fold a latitude that has walked past a pole back into [-90, 90] degrees.
    Every reflection moves the longitude to the opposite meridian.
    """
    # A reflection over each pole in turn moves both lat and lon by a full turn
    if lat > LAT_MAX_MICRO:
        lat -= (lat - LAT_MAX_MICRO) // FULL_TURN_MICRO * FULL_TURN_MICRO
    elif lat < LAT_MIN_MICRO:
        lat += (LAT_MIN_MICRO - lat) // FULL_TURN_MICRO * FULL_TURN_MICRO

    while not LAT_MIN_MICRO <= lat <= LAT_MAX_MICRO:
        if lat > LAT_MAX_MICRO:
            lat = HALF_TURN_MICRO - lat
        else:
            lat = -HALF_TURN_MICRO - lat
        lon += HALF_TURN_MICRO

    return lat, lon


def apply_delta(uvoxid: UvoxId, delta: Delta) -> UvoxId:
    """
    Move an address by a displacement. The frame is never changed.

    Radius saturates at zero (and at the 64-bit maximum). Latitude is
    reflected over the poles, shifting longitude by 180 degrees for every
    crossing, and longitude is wrapped into [-180, 180).

    Args:
        uvoxid:
            The starting address

        delta:
            The displacement to apply

    Returns:
        UvoxId
    """
    r_um = uvoxid.r_um + delta.dr
    if r_um < 0:
        r_um = 0
    elif r_um > U64_MAX:
        warn_once(
            'Radius exceeded the 64-bit maximum and was saturated. '
            '(this warning will not repeat)'
        )
        r_um = U64_MAX

    lat, lon = _reflect_latitude(
        uvoxid.lat_code + delta.dlat,
        uvoxid.lon_code + delta.dlon,
    )
    lat = min(max(lat, LAT_MIN_MICRO), LAT_MAX_MICRO)
    lon = (lon - LON_MIN_MICRO) % FULL_TURN_MICRO + LON_MIN_MICRO

    return UvoxId._from_fields(  # pylint: disable=protected-access
        uvoxid.frame_id, r_um, lat, lon
    )
