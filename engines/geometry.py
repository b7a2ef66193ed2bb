"""Geometric transforms: resize, rotate, flip, crop.

Every function returns a new PixelBuffer and leaves its input untouched.
"""

import logging
from typing import Tuple

import cv2

from engines.resampling import lanczos_resample, nearest_indices
from models.errors import InvalidDimensions, OutOfBounds
from models.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def _check_target(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Target size must be positive, got {width}x{height}")


def compute_fit(w: int, h: int, tw: int, th: int) -> Tuple[int, int]:
    """Compute dimensions to fit within target, preserving aspect ratio."""
    scale = min(tw / w, th / h)
    return max(1, round(w * scale)), max(1, round(h * scale))


def resize(buffer: PixelBuffer, width: int, height: int, fit: bool = False) -> PixelBuffer:
    """
    High quality resize with a separable Lanczos-3 kernel.

    Args:
        buffer: Source image
        width: Target width
        height: Target height
        fit: If True, scale to fit inside width x height keeping the aspect ratio

    Returns:
        Resized image
    """
    _check_target(width, height)
    if fit:
        width, height = compute_fit(buffer.width, buffer.height, width, height)

    if (width, height) == buffer.dimensions:
        return buffer.copy()

    logger.debug("Lanczos resize %dx%d -> %dx%d", buffer.width, buffer.height, width, height)
    return PixelBuffer.from_array(lanczos_resample(buffer.pixels, width, height), copy=False)


def resize_fast(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Nearest-neighbor resize to exactly width x height."""
    _check_target(width, height)
    xs = nearest_indices(buffer.width, width)
    ys = nearest_indices(buffer.height, height)
    return PixelBuffer.from_array(buffer.pixels[ys[:, None], xs[None, :]], copy=False)


def rotate90(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate 90 degrees clockwise."""
    return PixelBuffer.from_array(cv2.rotate(buffer.pixels, cv2.ROTATE_90_CLOCKWISE), copy=False)


def rotate180(buffer: PixelBuffer) -> PixelBuffer:
    return PixelBuffer.from_array(cv2.rotate(buffer.pixels, cv2.ROTATE_180), copy=False)


def rotate270(buffer: PixelBuffer) -> PixelBuffer:
    """Rotate 270 degrees clockwise."""
    return PixelBuffer.from_array(cv2.rotate(buffer.pixels, cv2.ROTATE_90_COUNTERCLOCKWISE), copy=False)


def fliph(buffer: PixelBuffer) -> PixelBuffer:
    """Mirror left-right."""
    return PixelBuffer.from_array(cv2.flip(buffer.pixels, 1), copy=False)


def flipv(buffer: PixelBuffer) -> PixelBuffer:
    """Mirror top-bottom."""
    return PixelBuffer.from_array(cv2.flip(buffer.pixels, 0), copy=False)


def crop(buffer: PixelBuffer, x: int, y: int, width: int, height: int) -> PixelBuffer:
    """
    Extract the width x height rectangle whose top-left corner is (x, y).

    Raises:
        InvalidDimensions: if the rectangle is empty
        OutOfBounds: if the rectangle does not lie inside the buffer
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Crop size must be positive, got {width}x{height}")
    if x < 0 or y < 0 or x + width > buffer.width or y + height > buffer.height:
        raise OutOfBounds(
            f"Crop rectangle ({x}, {y}, {width}, {height}) exceeds {buffer.width}x{buffer.height} image",
            bounds=buffer.dimensions,
            request=(x, y, width, height),
        )
    return PixelBuffer.from_array(buffer.pixels[y:y + height, x:x + width])
