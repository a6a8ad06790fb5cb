import logging
import numbers
from dataclasses import dataclass
from typing import Sequence

from ChromaKit.Utils.Errors import InvalidArgument

logger = logging.getLogger(__name__)

RGB_MAX = 255
HUE_MAX = 360
PERCENT_MAX = 100


def _CheckComponent(name: str, value, upper: int) -> int:
    """
    Validate a single color component and normalize it to a plain int.

    :param name: Human readable component name used in the error message
    :param value: The component value to check
    :param upper: Inclusive upper bound, the lower bound is always 0
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        logger.debug("Rejected non-integer %s component %r", name, value)
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= upper:
        logger.debug("Rejected %s component %r", name, value)
        raise InvalidArgument(f"{name} must be in range from 0 to {upper}, got {value}")
    return int(value)


def _FirstThree(seq: Sequence[int], kind: str) -> tuple:
    if isinstance(seq, (str, bytes)):
        logger.debug("Rejected %s sequence %r: string", kind, seq)
        raise InvalidArgument(f"{kind} sequence must hold integers, not a string")
    try:
        return seq[0], seq[1], seq[2]
    except (IndexError, KeyError, TypeError):
        logger.debug("Rejected %s sequence %r", kind, seq)
        raise InvalidArgument(f"{kind} sequence must have at least 3 elements") from None


@dataclass(frozen=True)
class RGB:
    """
    An immutable RGB color.
        r (int): Red channel, 0 to 255.
        g (int): Green channel, 0 to 255.
        b (int): Blue channel, 0 to 255.
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        object.__setattr__(self, 'r', _CheckComponent("Red", self.r, RGB_MAX))
        object.__setattr__(self, 'g', _CheckComponent("Green", self.g, RGB_MAX))
        object.__setattr__(self, 'b', _CheckComponent("Blue", self.b, RGB_MAX))

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    @classmethod
    def FromSequence(cls, seq: Sequence[int]) -> "RGB":
        """Build an RGB from the first three elements of an ordered sequence."""
        return cls(*_FirstThree(seq, "RGB"))


@dataclass(frozen=True)
class HSV:
    """
    An immutable HSV color.
        h (int): Hue in degrees, 0 to 360. 0 and 360 are the same hue.
        s (int): Saturation in percent, 0 to 100.
        v (int): Value (brightness) in percent, 0 to 100.
    """
    h: int
    s: int
    v: int

    def __post_init__(self):
        object.__setattr__(self, 'h', _CheckComponent("Hue", self.h, HUE_MAX))
        object.__setattr__(self, 's', _CheckComponent("Saturation", self.s, PERCENT_MAX))
        object.__setattr__(self, 'v', _CheckComponent("Value", self.v, PERCENT_MAX))

    def __iter__(self):
        return iter((self.h, self.s, self.v))

    @classmethod
    def FromSequence(cls, seq: Sequence[int]) -> "HSV":
        """Build an HSV from the first three elements of an ordered sequence."""
        return cls(*_FirstThree(seq, "HSV"))


def MakeRGB(*args) -> RGB:
    """
    Build an RGB either from three channels or from a single ordered sequence.

    :param args: (r, g, b) or (sequence,)
    """
    if len(args) == 1:
        return RGB.FromSequence(args[0])
    if len(args) == 3:
        return RGB(*args)
    logger.debug("Rejected MakeRGB call with %d arguments", len(args))
    raise InvalidArgument(f"MakeRGB takes 3 channels or one sequence, got {len(args)} arguments")


def MakeHSV(*args) -> HSV:
    """
    Build an HSV either from three components or from a single ordered sequence.

    :param args: (h, s, v) or (sequence,)
    """
    if len(args) == 1:
        return HSV.FromSequence(args[0])
    if len(args) == 3:
        return HSV(*args)
    logger.debug("Rejected MakeHSV call with %d arguments", len(args))
    raise InvalidArgument(f"MakeHSV takes 3 components or one sequence, got {len(args)} arguments")


def AsRGB(color, g=None, b=None) -> RGB:
    """
    Accept the argument forms the conversion functions take and return an RGB:
    an RGB instance, an ordered sequence, or three separate channels.
    """
    if g is None and b is None:
        if isinstance(color, HSV):
            logger.debug("Rejected HSV %s where an RGB was expected", color)
            raise InvalidArgument("Expected an RGB color, got an HSV")
        return color if isinstance(color, RGB) else RGB.FromSequence(color)
    return RGB(color, g, b)


def AsHSV(color, s=None, v=None) -> HSV:
    """
    Same as AsRGB, for HSV.
    """
    if s is None and v is None:
        if isinstance(color, RGB):
            logger.debug("Rejected RGB %s where an HSV was expected", color)
            raise InvalidArgument("Expected an HSV color, got an RGB")
        return color if isinstance(color, HSV) else HSV.FromSequence(color)
    return HSV(color, s, v)
