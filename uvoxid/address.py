"""
Representation of a fixed-width spatial address (a UVoxID)
"""

from __future__ import annotations

__all__ = ['UvoxId', 'decode', 'encode', 'from_hex', 'pack', 'to_hex', 'unpack']

from functools import total_ordering
import json
import math
import string
from typing import TYPE_CHECKING, Annotated, Any, Dict, List, Optional, Tuple

from pydantic import Field, validate_call

from uvoxid._const import (
    FIELD_BITS, FIELD_HEX_CHARS, FRAME_EARTH, HEX_LENGTH, I64_MAX, I64_MIN,
    LAT_BIAS, LAT_MAX_MICRO, LAT_MIN_MICRO, LON_BIAS, LON_MAX_MICRO,
    LON_MIN_MICRO, MICRO_PER_DEGREE, MICROMETERS_PER_METER, TOTAL_BITS, U64_MAX
)
from uvoxid.errors import FrameMismatchError
from uvoxid.utils.functions import from_bits_i64, round_half_up, to_bits_u64, wrap_i64
from uvoxid.utils.logging import LOGGER, warn_once

if TYPE_CHECKING:  # pragma: no cover
    from uvoxid.delta import Delta


U64 = Annotated[int, Field(strict=True, ge=0, le=U64_MAX)]
I64 = Annotated[int, Field(strict=True, ge=I64_MIN, le=I64_MAX)]

_HEX_DIGITS = frozenset(string.hexdigits)


@total_ordering
class UvoxId:
    """
    A spatial address made of four 64-bit fields:

        frame_id: the reference frame anchor (0 = Earth, 1 = Moon, 2 = Sun, ...)
        r_um: radial distance from the frame center, in micrometers
        lat_code: latitude in millionths of a degree
        lon_code: longitude in millionths of a degree

    Construction never clamps or normalizes; only delta arithmetic brings
    latitude and longitude back into their logical ranges.
    """

    __slots__ = ('frame_id', 'r_um', 'lat_code', 'lon_code')

    @validate_call
    def __init__(self, frame_id: U64, r_um: U64, lat_code: I64, lon_code: I64):
        self.frame_id = frame_id
        self.r_um = r_um
        self.lat_code = lat_code
        self.lon_code = lon_code

    @classmethod
    def _from_fields(cls, frame_id: int, r_um: int, lat_code: int, lon_code: int) -> UvoxId:
        """Internal constructor for values already known to be within range"""
        obj = cls.__new__(cls)
        obj.frame_id = frame_id
        obj.r_um = r_um
        obj.lat_code = lat_code
        obj.lon_code = lon_code
        return obj

    def __eq__(self, other):
        if not isinstance(other, UvoxId):
            return False

        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other):
        if not isinstance(other, UvoxId):
            return NotImplemented

        return self.packed < other.packed

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f'<UvoxId({self.frame_id}, {self.r_um}, {self.lat_code}, {self.lon_code})>'

    def __str__(self):
        return (
            f'frame={self.frame_id}, r={self.r_um} µm, '
            f'lat={self.lat_code}, lon={self.lon_code}'
        )

    def __add__(self, delta: Delta) -> UvoxId:
        from uvoxid.delta import Delta, apply_delta  # pylint: disable=import-outside-toplevel

        if not isinstance(delta, Delta):
            return NotImplemented

        return apply_delta(self, delta)

    def __sub__(self, other: UvoxId) -> Delta:
        from uvoxid.delta import Delta  # pylint: disable=import-outside-toplevel

        if not isinstance(other, UvoxId):
            return NotImplemented

        if self.frame_id != other.frame_id:
            raise FrameMismatchError(self.frame_id, other.frame_id)

        return Delta(
            self.r_um - other.r_um,
            self.lat_code - other.lat_code,
            self.lon_code - other.lon_code,
        )

    @classmethod
    def earth(cls, r_um: int, lat_code: int, lon_code: int) -> UvoxId:
        """Convenience constructor for an address in the Earth frame (frame 0)"""
        return cls(FRAME_EARTH, r_um, lat_code, lon_code)

    @classmethod
    def from_degrees(
        cls,
        lat_deg: float,
        lon_deg: float,
        r_um: int = 0,
        frame_id: int = FRAME_EARTH,
    ) -> UvoxId:
        """
        Create an address from decimal degrees. Degrees are rounded to the
        nearest millionth (ties rounded up).

        Args:
            lat_deg:
                Latitude, in decimal degrees

            lon_deg:
                Longitude, in decimal degrees

            r_um: (Default 0)
                Radial distance from the frame center, in micrometers

            frame_id: (Default 0)
                The reference frame

        Returns:
            UvoxId
        """
        lat_code = int(round_half_up(lat_deg * MICRO_PER_DEGREE))
        lon_code = int(round_half_up(lon_deg * MICRO_PER_DEGREE))
        if not LAT_MIN_MICRO <= lat_code <= LAT_MAX_MICRO:
            warn_once(
                'Latitude outside of [-90, 90] will be stored as-is; apply a zero '
                'Delta to normalize. (this warning will not repeat)'
            )
        if not LON_MIN_MICRO <= lon_code < LON_MAX_MICRO:
            warn_once(
                'Longitude outside of [-180, 180) will be stored as-is; apply a zero '
                'Delta to normalize. (this warning will not repeat)'
            )

        return cls(frame_id, r_um, lat_code, lon_code)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> UvoxId:
        """
        Create an address from its structured record form, as produced
        by .to_dict()

        Args:
            record:
                A dict with the keys 'frame_id', 'r_um', 'lat_code', 'lon_code'

        Returns:
            UvoxId
        """
        missing = [key for key in cls.__slots__ if key not in record]
        if missing:
            raise ValueError(f'UvoxId record is missing field(s): {", ".join(missing)}')

        return cls(*(record[key] for key in cls.__slots__))

    @classmethod
    def from_json(cls, json_str: str) -> UvoxId:
        """Create an address from a JSON object string, as produced by .to_json()"""
        record = json.loads(json_str)
        if not isinstance(record, dict):
            raise ValueError('UvoxId JSON must be an object')

        return cls.from_dict(record)

    @property
    def packed(self) -> int:
        """The address as a single 256-bit integer"""
        return (
            self.frame_id << (3 * FIELD_BITS)
            | self.r_um << (2 * FIELD_BITS)
            | to_bits_u64(self.lat_code + LAT_BIAS) << FIELD_BITS
            | to_bits_u64(self.lon_code + LON_BIAS)
        )

    @property
    def xyz(self) -> List[float]:
        """Converts the address to cartesian coordinates [x, y, z], in meters"""
        r_m = self.r_um / MICROMETERS_PER_METER
        r_lat = math.radians(self.lat_code / MICRO_PER_DEGREE)
        r_lon = math.radians(self.lon_code / MICRO_PER_DEGREE)
        return [
            r_m * math.cos(r_lat) * math.cos(r_lon),
            r_m * math.cos(r_lat) * math.sin(r_lon),
            r_m * math.sin(r_lat),
        ]

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Returns (frame_id, r_um, lat_code, lon_code)"""
        return self.frame_id, self.r_um, self.lat_code, self.lon_code

    def to_degrees(self) -> Tuple[float, float]:
        """Returns the (latitude, longitude) pair in decimal degrees"""
        return self.lat_code / MICRO_PER_DEGREE, self.lon_code / MICRO_PER_DEGREE

    def to_dict(self) -> Dict[str, int]:
        """Convert the address to a record of its four fields"""
        return dict(zip(self.__slots__, self.as_tuple()))

    def to_hex(self) -> str:
        """Convert the address to its canonical 64-character hex form"""
        return format(self.packed, f'0{HEX_LENGTH}x')

    def to_json(self) -> str:
        """Convert the address to a JSON object string"""
        return json.dumps(self.to_dict())

    def wrapping_add_lat(self, delta: int) -> UvoxId:
        """Advance the raw latitude code, wrapping within the signed 64-bit range"""
        return self._from_fields(
            self.frame_id, self.r_um, wrap_i64(self.lat_code + delta), self.lon_code
        )

    def wrapping_add_lon(self, delta: int) -> UvoxId:
        """Advance the raw longitude code, wrapping within the signed 64-bit range"""
        return self._from_fields(
            self.frame_id, self.r_um, self.lat_code, wrap_i64(self.lon_code + delta)
        )


def encode(frame_id: int, r_um: int, lat_micro: int, lon_micro: int) -> UvoxId:
    """Encode raw coordinate values into an address"""
    return UvoxId(frame_id, r_um, lat_micro, lon_micro)


def decode(uvoxid: UvoxId) -> Tuple[int, int, int, int]:
    """Decode an address into (frame_id, r_um, lat_micro, lon_micro)"""
    return uvoxid.as_tuple()


def pack(uvoxid: UvoxId) -> int:
    """Pack an address into its 256-bit integer form"""
    return uvoxid.packed


def unpack(packed: int) -> UvoxId:
    """
    Unpack a 256-bit integer, as produced by pack(), back into an address.

    Args:
        packed:
            An integer in the range [0, 2**256)

    Returns:
        UvoxId
    """
    if not 0 <= packed < 1 << TOTAL_BITS:
        raise ValueError(f'packed value must fit in {TOTAL_BITS} unsigned bits')

    return UvoxId._from_fields(  # pylint: disable=protected-access
        packed >> (3 * FIELD_BITS) & U64_MAX,
        packed >> (2 * FIELD_BITS) & U64_MAX,
        from_bits_i64((packed >> FIELD_BITS & U64_MAX) - LAT_BIAS),
        from_bits_i64((packed & U64_MAX) - LON_BIAS),
    )


def to_hex(uvoxid: UvoxId) -> str:
    """Convert an address to its canonical 64-character hex form"""
    return uvoxid.to_hex()


def from_hex(hex_str: str) -> Optional[UvoxId]:
    """
    Parse the canonical hex form of an address. Returns None if the string
    is not exactly 64 hex characters.

    Args:
        hex_str:
            A 64-character hex string, as produced by to_hex()

    Returns:
        UvoxId, or None if the string could not be parsed
    """
    if len(hex_str) != HEX_LENGTH:
        LOGGER.debug('Rejected hex address of length %d', len(hex_str))
        return None

    for start in range(0, HEX_LENGTH, FIELD_HEX_CHARS):
        group = hex_str[start:start + FIELD_HEX_CHARS]
        if not _HEX_DIGITS.issuperset(group):
            LOGGER.debug('Rejected hex address with invalid group %r', group)
            return None

    return unpack(int(hex_str, 16))
