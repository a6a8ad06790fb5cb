# ChromaKit - RGB / HSV / hex color conversion for Python
import logging

from .Utils.Errors import InvalidArgument, InternalError
from .Utils.CustomTypes import RGB, HSV, MakeRGB, MakeHSV
from .ColorMath.HexCodec import DecodeHex, EncodeHex
from .ColorMath.Conversion import HsvToRgb, RgbToHsv, HsvToHex, HexToHsv

logging.getLogger(__name__).addHandler(logging.NullHandler())
