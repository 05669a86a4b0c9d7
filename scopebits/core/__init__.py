"""Offer the hash primitive, the compact text alphabet and the name rules."""

from scopebits.core.alphabet import ALPHABET, bytes_to_text, text_to_bytes
from scopebits.core.hashing import digest, fingerprint
from scopebits.core.naming import RESERVED_CHARACTERS, check_name

__all__ = [
    "ALPHABET",
    "RESERVED_CHARACTERS",
    "bytes_to_text",
    "check_name",
    "digest",
    "fingerprint",
    "text_to_bytes",
]
