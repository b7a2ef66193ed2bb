"""PNG / JPEG / GIF decoding and PNG / JPEG encoding.

Container parsing and writing is done by Pillow. Every decoded image is
normalized to RGBA8; encoders drop alpha for formats that cannot store it.
"""

import io
import logging
import struct
from typing import Optional, Union

import numpy as np
from PIL import Image

from models.encode_params import EncodeParams
from models.errors import DecodeError, EncodeError
from models.image_format import ImageFormat
from models.pixel_buffer import PixelBuffer
from utils.constants import DEFAULT_JPEG_QUALITY, DEFAULT_PNG_COMPRESS_LEVEL

logger = logging.getLogger(__name__)

# Errors Pillow raises for corrupt, truncated or unsupported streams
_PIL_DECODE_ERRORS = (
    OSError,
    SyntaxError,
    ValueError,
    EOFError,
    struct.error,
    Image.DecompressionBombError,
)

_WIDE_GRAY_MODES = ('I', 'I;16', 'I;16L', 'I;16B', 'I;16N', 'F')


def guess_format(data: bytes) -> Optional[ImageFormat]:
    """Detect the container format from its signature."""
    for fmt in ImageFormat:
        if fmt.matches(data):
            return fmt
    return None


def _to_rgba(image: Image.Image) -> np.ndarray:
    """Normalize any Pillow mode to an (H, W, 4) uint8 array."""
    if image.mode in _WIDE_GRAY_MODES:
        # 16-bit grayscale: keep the high byte
        wide = np.asarray(image).astype(np.int64)
        gray = np.clip(wide >> 8, 0, 255).astype(np.uint8)
        alpha = np.full(gray.shape, 255, dtype=np.uint8)
        transparency = image.info.get('transparency')
        if isinstance(transparency, int):
            alpha[wide == transparency] = 0
        return np.dstack([gray, gray, gray, alpha])

    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return np.array(image, dtype=np.uint8)


def decode(data: bytes, format_hint: Union[ImageFormat, str]) -> PixelBuffer:
    """
    Decode compressed bytes into a PixelBuffer.

    Args:
        data: Complete compressed image
        format_hint: Expected container format; the stream must match it

    Returns:
        RGBA8 PixelBuffer (first frame only for GIF)

    Raises:
        DecodeError: bad signature, truncated or corrupt stream, unsupported mode
    """
    fmt = ImageFormat.parse(format_hint)
    data = bytes(data)

    if not fmt.matches(data):
        raise DecodeError(fmt, f"missing {fmt.name} signature")

    try:
        if fmt is ImageFormat.PNG:
            # stream must run through IEND with valid CRCs
            with Image.open(io.BytesIO(data), formats=[fmt.pil_format]) as image:
                image.verify()
        with Image.open(io.BytesIO(data), formats=[fmt.pil_format]) as image:
            image.load()
            logger.debug("Decoding %s %dx%d mode=%s", fmt.name, image.width, image.height, image.mode)
            pixels = _to_rgba(image)
    except _PIL_DECODE_ERRORS as e:
        raise DecodeError(fmt, str(e) or type(e).__name__) from e

    return PixelBuffer.from_array(pixels, copy=False)


def decode_auto(data: bytes) -> PixelBuffer:
    """Decode bytes whose format is detected from the signature."""
    fmt = guess_format(data)
    if fmt is None:
        raise DecodeError(None, "unrecognized image signature")
    return decode(data, fmt)


def decode_png(data: bytes) -> PixelBuffer:
    return decode(data, ImageFormat.PNG)


def decode_jpeg(data: bytes) -> PixelBuffer:
    return decode(data, ImageFormat.JPEG)


def decode_gif(data: bytes) -> PixelBuffer:
    return decode(data, ImageFormat.GIF)


def encode(buffer: PixelBuffer, params: EncodeParams) -> bytes:
    """
    Encode a PixelBuffer with the given parameters.

    Raises:
        EncodeError: format cannot be encoded or the writer failed
    """
    fmt = params.format
    if not fmt.can_encode:
        raise EncodeError(fmt, "encoding is not supported")

    image = Image.fromarray(buffer.pixels)
    if not fmt.supports_alpha:
        image = image.convert('RGB')

    save_kwargs = {'format': fmt.pil_format, 'optimize': params.optimize}
    if fmt is ImageFormat.JPEG:
        save_kwargs['quality'] = params.quality
        save_kwargs['subsampling'] = params.subsampling
    elif fmt is ImageFormat.PNG:
        save_kwargs['compress_level'] = params.compress_level

    out = io.BytesIO()
    try:
        image.save(out, **save_kwargs)
    except (OSError, ValueError) as e:
        raise EncodeError(fmt, str(e)) from e

    encoded = out.getvalue()
    logger.debug("Encoded %dx%d as %s: %d bytes", buffer.width, buffer.height, fmt.name, len(encoded))
    return encoded


def encode_png(buffer: PixelBuffer, compress_level: int = DEFAULT_PNG_COMPRESS_LEVEL) -> bytes:
    """Lossless PNG with alpha."""
    return encode(buffer, EncodeParams(format=ImageFormat.PNG, compress_level=compress_level))


def encode_jpeg(buffer: PixelBuffer, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """JPEG at quality clamped into [1, 100]; alpha is dropped."""
    return encode(buffer, EncodeParams(format=ImageFormat.JPEG, quality=quality))
