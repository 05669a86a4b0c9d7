"""Offer a checksum-protected bit-vector codec for scoped tag vocabularies."""

__version__ = "0.1.0"

from scopebits.canonicalizer import remove_duplicates, validate
from scopebits.codec import decode, encode
from scopebits.core import digest, fingerprint
from scopebits.exceptions import (
    ChecksumMismatchError,
    ConfigError,
    ConfigValidationError,
    IndexOutOfRangeError,
    InvalidNameError,
    MalformedEncodingError,
    ScopeBitsError,
    ScopeNotFoundError,
    TagNotFoundError,
)
from scopebits.models import RawScope, ScopedTags, ValidScope
from scopebits.registry import Registry, build
from scopebits.settings import ScopeBitsSettings, load_registry, load_settings

__all__ = [
    # Hash primitive
    "digest",
    "fingerprint",
    # Models
    "RawScope",
    "ScopedTags",
    "ValidScope",
    # Operations
    "build",
    "decode",
    "encode",
    "remove_duplicates",
    "validate",
    "Registry",
    # Settings
    "ScopeBitsSettings",
    "load_registry",
    "load_settings",
    # Errors
    "ChecksumMismatchError",
    "ConfigError",
    "ConfigValidationError",
    "IndexOutOfRangeError",
    "InvalidNameError",
    "MalformedEncodingError",
    "ScopeBitsError",
    "ScopeNotFoundError",
    "TagNotFoundError",
]
