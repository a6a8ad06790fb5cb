import logging
from typing import Callable, List, Tuple

import numpy as np

from ChromaKit.Utils.CustomTypes import HSV, RGB, AsHSV, AsRGB
from ChromaKit.Utils.Errors import InternalError, InvalidArgument
from ChromaKit.ColorMath.HexCodec import DecodeHex, EncodeHex

logger = logging.getLogger(__name__)

# All channel math runs in single precision, truncation results depend on it
_F = np.float32
_ZERO = _F(0.0)

SECTOR_WIDTH = 60

# (R', G', B') for each 60 degree hue sector, given (C, X)
_SECTOR_PERMUTATIONS: List[Callable[[np.float32, np.float32], Tuple[np.float32, np.float32, np.float32]]] = [
    lambda c, x: (c, x, _ZERO),
    lambda c, x: (x, c, _ZERO),
    lambda c, x: (_ZERO, c, x),
    lambda c, x: (_ZERO, x, c),
    lambda c, x: (x, _ZERO, c),
    lambda c, x: (c, _ZERO, x),
]


def _Sector(h: int) -> int:
    # last sector is closed on both ends, so h == 360 lands in it
    return min(h // SECTOR_WIDTH, len(_SECTOR_PERMUTATIONS) - 1)


def HsvToRgb(hsv, s: int | None = None, v: int | None = None) -> RGB:
    """
    Convert an HSV color to RGB using the chroma / intermediate / match method.

    The sector index h // 60 is an integer, so X is either 0 or C, and every
    channel is truncated rather than rounded.

    :param hsv: An HSV, an ordered sequence, or the hue when s and v are given
    """
    color = AsHSV(hsv, s, v)
    h, s, v = color.h, color.s, color.v

    c = _F(v * s) / _F(10000.0)
    x = c * _F(1 - abs((h // SECTOR_WIDTH) % 2 - 1))
    m = _F(v) / _F(100.0) - c

    r_, g_, b_ = _SECTOR_PERMUTATIONS[_Sector(h)](c, x)
    channels = [int((component + m) * _F(255.0)) for component in (r_, g_, b_)]
    try:
        return RGB(*channels)
    except InvalidArgument as e:
        logger.error("HSV %s produced out of range channels %s", color, channels)
        raise InternalError(f"HSV to RGB produced invalid channels {channels}") from e


def RgbToHsv(rgb, g: int | None = None, b: int | None = None) -> HSV:
    """
    Convert an RGB color to HSV.

    Ties for the maximum channel resolve red first, then green, then blue.
    Hue, saturation and value are truncated to integers.

    :param rgb: An RGB, an ordered sequence, or the red channel when g and b are given
    """
    color = AsRGB(rgb, g, b)
    r_norm = _F(color.r) / _F(255.0)
    g_norm = _F(color.g) / _F(255.0)
    b_norm = _F(color.b) / _F(255.0)

    c_max = max(r_norm, g_norm, b_norm)
    c_min = min(r_norm, g_norm, b_norm)
    chroma = c_max - c_min

    if chroma == 0:
        h = _ZERO
    elif c_max == r_norm:
        h = _F(60.0) * np.mod((g_norm - b_norm) / chroma, _F(6.0))
    elif c_max == g_norm:
        h = _F(60.0) * ((b_norm - r_norm) / chroma + _F(2.0))
    elif c_max == b_norm:
        h = _F(60.0) * ((r_norm - g_norm) / chroma + _F(4.0))
    else:
        logger.error("No channel of %s matches the maximum %r", color, c_max)
        raise InternalError("RGB to HSV found no channel equal to the maximum")

    v = c_max * _F(100.0)
    s = _ZERO if v == 0 else chroma / c_max * _F(100.0)

    components = [int(h), int(s), int(v)]
    try:
        return HSV(*components)
    except InvalidArgument as e:
        logger.error("RGB %s produced out of range components %s", color, components)
        raise InternalError(f"RGB to HSV produced invalid components {components}") from e


def HsvToHex(hsv, s: int | None = None, v: int | None = None) -> str:
    """HSV -> RGB -> hex string."""
    return EncodeHex(HsvToRgb(hsv, s, v))


def HexToHsv(hex_color: str) -> HSV:
    """Hex string -> RGB -> HSV."""
    return RgbToHsv(DecodeHex(hex_color))
