"""Numeric constants shared by the engines."""

CHANNELS = 4

# sRGB / Rec. 709 luma weights, integer form
SRGB_LUMA = (2126, 7152, 722)
SRGB_LUMA_DIV = 10000

LANCZOS_SUPPORT = 3.0

# Gaussian kernel radius in multiples of sigma
BLUR_RADIUS_SIGMAS = 3.0

CONTRAST_MIDPOINT = 128.0

JPEG_QUALITY_MIN = 1
JPEG_QUALITY_MAX = 100
DEFAULT_JPEG_QUALITY = 75
DEFAULT_PNG_COMPRESS_LEVEL = 6

SUBSAMPLING_MODES = ('4:4:4', '4:2:2', '4:2:0')
DEFAULT_SUBSAMPLING = '4:2:0'
