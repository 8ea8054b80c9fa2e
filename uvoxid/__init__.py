from uvoxid._version import __version__  # noqa: F401
from uvoxid.utils.logging import LOGGER
from uvoxid._const import FRAME_EARTH, FRAME_MOON, FRAME_SUN
from uvoxid.address import UvoxId, decode, encode, from_hex, pack, to_hex, unpack
from uvoxid.delta import Delta, apply_delta
from uvoxid.errors import FrameMismatchError, PrecisionOutOfRangeError, UvoxError
from uvoxid.tolerance import equal_within, snap, truncate


__all__ = [
    'Delta',
    'FRAME_EARTH',
    'FRAME_MOON',
    'FRAME_SUN',
    'FrameMismatchError',
    'LOGGER',
    'PrecisionOutOfRangeError',
    'UvoxError',
    'UvoxId',
    'apply_delta',
    'decode',
    'encode',
    'equal_within',
    'from_hex',
    'pack',
    'snap',
    'to_hex',
    'truncate',
    'unpack',
]
