"""Image file I/O through the codec engine."""

from pathlib import Path
from typing import Optional, Union

from engines.codec import decode, decode_auto, encode
from models.encode_params import EncodeParams
from models.image_format import ImageFormat
from models.pixel_buffer import PixelBuffer
from utils.constants import DEFAULT_JPEG_QUALITY


def load_image(path: Union[str, Path], format_hint: Optional[Union[ImageFormat, str]] = None) -> PixelBuffer:
    """Load image as RGBA PixelBuffer. Without a hint the format is sniffed."""
    data = Path(path).read_bytes()
    if format_hint is None:
        return decode_auto(data)
    return decode(data, format_hint)


def save_image(buffer: PixelBuffer, path: Union[str, Path], quality: int = DEFAULT_JPEG_QUALITY) -> None:
    """Save image; the format follows the file suffix."""
    path = Path(path)
    params = EncodeParams(format=ImageFormat.parse(path.suffix), quality=quality)
    path.write_bytes(encode(buffer, params))
