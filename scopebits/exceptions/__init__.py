"""Offer Exception handling tools for the scope codec."""

from .error import (
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

__all__ = [
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
