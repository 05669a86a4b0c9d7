"""Compact text rendering of raw bytes.

Bytes are rendered in base58 with the Bitcoin alphabet: alphanumeric, without
the visually confusable `0`, `O`, `I` and `l`, and shorter than hexadecimal.
Every leading zero byte is rendered as a leading `1`, so the byte length of a
payload survives a round trip.
"""

import base58
from scopebits.exceptions import MalformedEncodingError

ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")


def bytes_to_text(data: bytes) -> str:
    """Render bytes in the compact text alphabet.

    Examples:
        >>> bytes_to_text(bytes([6]))
        '7'
        >>> bytes_to_text(bytes([0, 1]))
        '12'

    """
    return base58.b58encode(data).decode("ascii")


def text_to_bytes(text: str) -> bytes:
    """Parse text rendered by `bytes_to_text` back into bytes.

    Raises:
        MalformedEncodingError: If `text` holds a character outside the alphabet.

    """
    try:
        return base58.b58decode(text)
    except ValueError as err:  # UnicodeEncodeError included
        raise MalformedEncodingError(text, str(err)) from err
