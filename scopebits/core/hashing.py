"""Deterministic content hashing for tags and tag sets."""

import hashlib
from collections.abc import Iterable

from scopebits.core.alphabet import bytes_to_text


def digest(text: str) -> str:
    """Hash the UTF-8 bytes of `text` with SHA-256, rendered in base58.

    Examples:
        >>> digest("hello")
        '42TEXg1vFAbcJ65y7qdYG9iCPvYfy3NDdVLd75akX2P5'

    """
    return bytes_to_text(hashlib.sha256(text.encode("utf-8")).digest())


def fingerprint(tags: Iterable[str]) -> str:
    """Compute an order-independent fingerprint of a tag sequence.

    Every tag is digested, the digests are sorted and concatenated, and the
    concatenation is digested again. Duplicates are NOT removed here: callers
    wanting set semantics must deduplicate first.

    Examples:
        >>> fingerprint(["a", "b"]) == fingerprint(["b", "a"])
        True

    """
    return digest("".join(sorted(digest(tag) for tag in tags)))
