"""Shared utilities."""

from .constants import (
    CHANNELS,
    SRGB_LUMA,
    SRGB_LUMA_DIV,
    LANCZOS_SUPPORT,
    DEFAULT_JPEG_QUALITY,
)

__all__ = [
    'CHANNELS',
    'SRGB_LUMA',
    'SRGB_LUMA_DIV',
    'LANCZOS_SUPPORT',
    'DEFAULT_JPEG_QUALITY',
]
