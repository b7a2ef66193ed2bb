"""Data models: the pixel buffer, formats, encoder settings and errors."""

from .errors import RasterError, InvalidDimensions, DecodeError, EncodeError, OutOfBounds
from .image_format import ImageFormat
from .encode_params import EncodeParams, clamp_quality
from .pixel_buffer import PixelBuffer

__all__ = [
    'PixelBuffer',
    'ImageFormat',
    'EncodeParams',
    'clamp_quality',
    'RasterError',
    'InvalidDimensions',
    'DecodeError',
    'EncodeError',
    'OutOfBounds',
]
