"""Supported container formats and their capabilities."""

from enum import Enum
from typing import Tuple, Union


class ImageFormat(Enum):
    """Container format with the capability flags the codec consults."""

    PNG = ('PNG', True, True, (b'\x89PNG\r\n\x1a\n',))
    JPEG = ('JPEG', False, True, (b'\xff\xd8\xff',))
    GIF = ('GIF', True, False, (b'GIF87a', b'GIF89a'))

    def __init__(self, pil_format: str, supports_alpha: bool, can_encode: bool,
                 signatures: Tuple[bytes, ...]):
        self.pil_format = pil_format
        self.supports_alpha = supports_alpha
        self.can_encode = can_encode
        self.signatures = signatures

    def matches(self, data: bytes) -> bool:
        """True if data starts with one of this format's signatures."""
        return any(data.startswith(sig) for sig in self.signatures)

    @classmethod
    def parse(cls, value: Union['ImageFormat', str]) -> 'ImageFormat':
        """Accept an ImageFormat or a case-insensitive name / file suffix."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lstrip('.').upper()
        if key == 'JPG':
            key = 'JPEG'
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown image format: {value!r}") from None
