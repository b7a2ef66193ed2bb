"""Encoder parameters."""

from dataclasses import dataclass
from typing import Literal, Union

from models.image_format import ImageFormat
from utils.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PNG_COMPRESS_LEVEL,
    DEFAULT_SUBSAMPLING,
    JPEG_QUALITY_MAX,
    JPEG_QUALITY_MIN,
    SUBSAMPLING_MODES,
)


def clamp_quality(quality) -> int:
    """Clamp JPEG quality into [1, 100]. Out-of-range values are not an error."""
    return int(min(max(quality, JPEG_QUALITY_MIN), JPEG_QUALITY_MAX))


@dataclass
class EncodeParams:
    """Settings for encoding a PixelBuffer.

    ``quality`` only affects JPEG, ``compress_level`` only affects PNG.
    """

    format: Union[ImageFormat, str] = ImageFormat.PNG
    quality: int = DEFAULT_JPEG_QUALITY
    compress_level: int = DEFAULT_PNG_COMPRESS_LEVEL
    subsampling: Literal['4:4:4', '4:2:2', '4:2:0'] = DEFAULT_SUBSAMPLING
    optimize: bool = False

    def __post_init__(self):
        self.format = ImageFormat.parse(self.format)
        self.quality = clamp_quality(self.quality)
        if not (0 <= self.compress_level <= 9):
            raise ValueError(f"Compress level must be 0-9, got {self.compress_level}")
        if self.subsampling not in SUBSAMPLING_MODES:
            raise ValueError(f"Unknown subsampling mode: {self.subsampling}")
