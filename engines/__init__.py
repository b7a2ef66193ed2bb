"""Image engines - pure computation on PixelBuffers."""

from PIL import __version__ as _pillow_version

from .codec import (
    decode,
    decode_auto,
    decode_png,
    decode_jpeg,
    decode_gif,
    encode,
    encode_png,
    encode_jpeg,
    guess_format,
)
from .geometry import resize, resize_fast, rotate90, rotate180, rotate270, fliph, flipv, crop
from .photometric import grayscale, invert, adjust_contrast, brighten, blur

__version__ = '0.1.0'


def get_version() -> str:
    """Engine version with the codec backend it runs on."""
    return f"rasterkit {__version__} (Pillow {_pillow_version})"


__all__ = [
    'decode',
    'decode_auto',
    'decode_png',
    'decode_jpeg',
    'decode_gif',
    'encode',
    'encode_png',
    'encode_jpeg',
    'guess_format',
    'resize',
    'resize_fast',
    'rotate90',
    'rotate180',
    'rotate270',
    'fliph',
    'flipv',
    'crop',
    'grayscale',
    'invert',
    'adjust_contrast',
    'brighten',
    'blur',
    'get_version',
]
