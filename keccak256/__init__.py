"""
Keccak-256 (Ethereum-style, not NIST SHA3-256) over hex-encoded input.

    >>> keccak256("")
    'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
"""

import logging

from . import hexcodec
from .errors import InvalidArgument, InvalidCharacter, InvalidLength
from .sponge import DIGEST_BYTES, hash_bytes

__all__ = [
    "keccak256",
    "keccak256_digest",
    "InvalidArgument",
    "InvalidCharacter",
    "InvalidLength",
    "DIGEST_BYTES",
]

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def keccak256_digest(data: bytes) -> bytes:
    """Keccak-256 of raw bytes, as 32 bytes."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    return hash_bytes(bytes(data))


def keccak256(text: str) -> str:
    """
    Hash hex-encoded input with Keccak-256.

    Args:
        text: Even-length string of hex digits, any case, possibly empty.

    Returns:
        The digest as 64 lowercase hex characters.

    Raises:
        TypeError: If text is not a str.
        InvalidLength: If text has an odd number of characters.
        InvalidCharacter: If text contains anything but hex digits.
    """
    data = hexcodec.decode(text)
    digest = hexcodec.encode(hash_bytes(data))
    logger.debug("keccak256: %s... (%d bytes)", digest[:16], len(data))
    return digest
