"""In-memory RGBA8 bitmap."""

from typing import Tuple

import numpy as np

from models.errors import InvalidDimensions, OutOfBounds
from utils.constants import CHANNELS

Pixel = Tuple[int, int, int, int]


def _check_size(width, height) -> None:
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")


class PixelBuffer:
    """Row-major RGBA8 pixels owned by a single holder.

    Storage is a ``(height, width, 4)`` uint8 array. Constructors copy their
    input and transforms in ``engines`` return new buffers, so two buffers
    never share memory. ``set_pixel`` and ``engines.photometric.invert`` are
    the only operations that mutate a buffer.
    """

    __slots__ = ('_pixels',)
    __hash__ = None

    def __init__(self, width: int, height: int, data):
        _check_size(width, height)
        if isinstance(data, (int, np.integer)):
            raise TypeError(f"Pixel data must be bytes-like or a sequence, got {type(data).__name__}")
        owned = bytearray(data)
        expected = width * height * CHANNELS
        if len(owned) != expected:
            raise InvalidDimensions(
                f"Expected {expected} bytes for {width}x{height} RGBA, got {len(owned)}",
                expected=expected,
                actual=len(owned),
            )
        self._pixels = np.frombuffer(owned, dtype=np.uint8).reshape(height, width, CHANNELS)

    @classmethod
    def from_array(cls, array: np.ndarray, copy: bool = True) -> 'PixelBuffer':
        """Wrap an (H, W, 4) uint8 array. With copy=False the array is adopted."""
        if not isinstance(array, np.ndarray) or array.dtype != np.uint8:
            raise InvalidDimensions(f"Expected uint8 array, got {getattr(array, 'dtype', type(array))}")
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise InvalidDimensions(f"Expected array of shape (H, W, 4), got {array.shape}")
        _check_size(array.shape[1], array.shape[0])
        buffer = cls.__new__(cls)
        buffer._pixels = np.array(array, copy=True, order='C') if copy else np.ascontiguousarray(array)
        return buffer

    @classmethod
    def blank(cls, width: int, height: int, color: Pixel = (0, 0, 0, 0)) -> 'PixelBuffer':
        """Buffer filled with a single color."""
        _check_size(width, height)
        pixels = np.empty((height, width, CHANNELS), dtype=np.uint8)
        pixels[:] = np.array(bytearray(color), dtype=np.uint8)
        return cls.from_array(pixels, copy=False)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """The owned storage array. Mutating it mutates the buffer."""
        return self._pixels

    def copy(self) -> 'PixelBuffer':
        return PixelBuffer.from_array(self._pixels)

    def to_raw(self) -> bytes:
        """Copy of the pixel data as RGBA8 bytes, row-major."""
        return self._pixels.tobytes()

    def to_array(self) -> np.ndarray:
        return self._pixels.copy()

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check_coordinates(x, y)
        r, g, b, a = self._pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int, a: int) -> None:
        self._check_coordinates(x, y)
        value = (r, g, b, a)
        if any(not 0 <= channel <= 255 for channel in value):
            raise ValueError(f"Channel values must be 0-255, got {value}")
        self._pixels[y, x] = value

    def _check_coordinates(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image",
                bounds=self.dimensions,
                request=(x, y),
            )

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.dimensions == other.dimensions and np.array_equal(self._pixels, other._pixels)

    def __repr__(self):
        return f"PixelBuffer(width={self.width}, height={self.height})"
