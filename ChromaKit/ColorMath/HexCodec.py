import logging
import string
from typing import Dict

from ChromaKit.Utils.CustomTypes import RGB, AsRGB
from ChromaKit.Utils.Errors import InternalError, InvalidArgument

logger = logging.getLogger(__name__)

HEX_LENGTH = 7
HEX_PREFIX = "#"
HEX_ALPHABET = frozenset(string.digits + "ABCDEF")

# digit table covers 0-9A-Z, only the first 16 entries are reachable
_DIGITS: str = string.digits + string.ascii_uppercase
_DIGIT_VALUES: Dict[str, int] = {char: value for value, char in enumerate(_DIGITS)}


def DecodeHex(hex_color: str) -> RGB:
    """
    Decode a "#RRGGBB" string (case-insensitive) into an RGB.

    :param hex_color: 7 character string starting with '#'
    """
    if not isinstance(hex_color, str):
        logger.debug("Rejected non-string hex color %r", hex_color)
        raise InvalidArgument(f"DecodeHex expects a string, got {type(hex_color).__name__}")
    if len(hex_color) != HEX_LENGTH:
        logger.debug("Rejected hex string %r: bad length", hex_color)
        raise InvalidArgument(f"Hex color must be a {HEX_LENGTH}-symbol string, got {len(hex_color)} symbols")
    if not hex_color.startswith(HEX_PREFIX):
        logger.debug("Rejected hex string %r: missing prefix", hex_color)
        raise InvalidArgument(f"Hex color must start with '{HEX_PREFIX}'")

    digits = [char.upper() for char in hex_color[1:]]
    valid = sum(char in HEX_ALPHABET for char in digits)
    if valid != HEX_LENGTH - 1:
        logger.debug("Rejected hex string %r: %d valid digits", hex_color, valid)
        raise InvalidArgument("Hex color must contain only digits 0-9 and letters A-F after '#'")

    channels = [0, 0, 0]
    for idx, char in enumerate(digits):
        value = _DIGIT_VALUES.get(char)
        if value is None:
            logger.error("Hex digit %r passed validation but has no table entry", char)
            raise InternalError(f"No value for hex digit {char!r}")
        channels[idx // 2] += value * (16 if idx % 2 == 0 else 1)
    return RGB(*channels)


def EncodeHex(rgb, g: int | None = None, b: int | None = None) -> str:
    """
    Encode a color as a '#' prefixed string of 6 uppercase hex digits.

    Each channel is written low nibble first, then high nibble, which is the
    digit order the reference output uses (so RGB(1, 2, 3) gives "#102030").

    :param rgb: An RGB, an ordered sequence, or the red channel when g and b are given
    """
    color = AsRGB(rgb, g, b)
    out = [HEX_PREFIX]
    for channel in color:
        out.append(_DIGITS[channel % 16])
        out.append(_DIGITS[channel // 16 % 16])
    return "".join(out)
