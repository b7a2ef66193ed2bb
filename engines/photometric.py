"""Photometric adjustments.

``invert`` works in place and returns None. Everything else returns a new
PixelBuffer.
"""

import logging

import numpy as np

from engines.resampling import gaussian_blur
from models.pixel_buffer import PixelBuffer
from utils.constants import CONTRAST_MIDPOINT, SRGB_LUMA, SRGB_LUMA_DIV

logger = logging.getLogger(__name__)


def grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """Replace RGB with sRGB luma, keep alpha."""
    rgb = buffer.pixels[:, :, :3].astype(np.int64)
    luma = (
        SRGB_LUMA[0] * rgb[:, :, 0] + SRGB_LUMA[1] * rgb[:, :, 1] + SRGB_LUMA[2] * rgb[:, :, 2]
    ) // SRGB_LUMA_DIV

    out = buffer.to_array()
    out[:, :, :3] = luma.astype(np.uint8)[:, :, None]
    return PixelBuffer.from_array(out, copy=False)


def invert(buffer: PixelBuffer) -> None:
    """Invert RGB in place; alpha is untouched."""
    rgb = buffer.pixels[:, :, :3]
    np.subtract(255, rgb, out=rgb)


def adjust_contrast(buffer: PixelBuffer, contrast: float) -> PixelBuffer:
    """
    Scale RGB distance from the midpoint by ((100 + contrast) / 100) ** 2.

    Positive values increase contrast, -100 flattens everything to the midpoint.
    """
    percent = ((100.0 + contrast) / 100.0) ** 2
    rgb = buffer.pixels[:, :, :3].astype(np.float64)
    adjusted = (rgb - CONTRAST_MIDPOINT) * percent + CONTRAST_MIDPOINT

    out = buffer.to_array()
    out[:, :, :3] = np.clip(adjusted, 0, 255).astype(np.uint8)
    return PixelBuffer.from_array(out, copy=False)


def brighten(buffer: PixelBuffer, value: int) -> PixelBuffer:
    """Add an integer offset to RGB, clamped to [0, 255]."""
    offset = int(np.clip(value, -255, 255))
    rgb = buffer.pixels[:, :, :3].astype(np.int16) + offset

    out = buffer.to_array()
    out[:, :, :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    return PixelBuffer.from_array(out, copy=False)


def blur(buffer: PixelBuffer, sigma: float) -> PixelBuffer:
    """
    Gaussian blur of all four channels.

    Non-positive sigma leaves the image unchanged and returns a copy.
    """
    if not sigma > 0:
        logger.debug("Blur with sigma=%s is a no-op", sigma)
        return buffer.copy()
    return PixelBuffer.from_array(gaussian_blur(buffer.pixels, sigma), copy=False)
