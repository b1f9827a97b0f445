"""
Strict hex decoding of the input and lowercase hex rendering of the digest.

`bytes.fromhex` skips whitespace, so every character is checked against the
hex alphabet before it is handed over.
"""

import logging

from .errors import InvalidCharacter, InvalidLength

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Args:
        text: Hex digits in any mix of case. May be empty.

    Returns:
        The decoded bytes (half the length of `text`).

    Raises:
        TypeError: If text is not a str.
        InvalidLength: If text has an odd number of characters.
        InvalidCharacter: If any character is not 0-9, a-f or A-F.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if len(text) % 2:
        logger.debug("rejecting hex input of odd length %d", len(text))
        raise InvalidLength(f"{len(text)} characters")

    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            logger.debug("rejecting hex input: %r at position %d", char, position)
            raise InvalidCharacter(char, position)

    return bytes.fromhex(text)


def encode(digest: bytes) -> str:
    """Render a digest as lowercase hex, two digits per byte."""
    return bytes(digest).hex()
