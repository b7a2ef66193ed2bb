"""Structured errors raised by the engine."""

from typing import Optional, Tuple


class RasterError(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(RasterError, ValueError):
    """Pixel data does not match the declared dimensions."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DecodeError(RasterError):
    """Compressed input is malformed or unsupported."""

    def __init__(self, format, reason: str):
        # format is None when it could not be detected
        name = format.name if format is not None else "Image"
        super().__init__(f"{name} decode failed: {reason}")
        self.format = format
        self.reason = reason


class EncodeError(RasterError):
    """Encoding a buffer into a container format failed."""

    def __init__(self, format, reason: str):
        super().__init__(f"{format.name} encoding failed: {reason}")
        self.format = format
        self.reason = reason


class OutOfBounds(RasterError, IndexError):
    """A coordinate or rectangle lies outside the buffer."""

    def __init__(self, message: str, bounds: Tuple[int, int], request: tuple):
        super().__init__(message)
        self.bounds = bounds
        self.request = request
