"""Scope canonicalization and checksum validation.

A raw scope definition becomes a `ValidScope` once its name is checked, its
tags are deduplicated and the declared checksum matches the fingerprint of
the tag set. Bit indexes follow the deduplicated, first-seen order of the
raw tags; the digest-sorted order is only used for the fingerprint.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from scopebits.core.naming import RESERVED_CHARACTERS, check_name
from scopebits.models import RawScope, ValidScope

LOG_PREFIX = "[Canonicalizer]"

__all__ = [
    "RESERVED_CHARACTERS",
    "check_name",
    "remove_duplicates",
    "validate",
]

logger = logging.getLogger(__name__)


def remove_duplicates(tags: Iterable[str]) -> list[str]:
    """Drop repeated tags, keeping the first occurrence of each.

    Examples:
        >>> remove_duplicates(["d", "a", "b", "a", "c"])
        ['d', 'a', 'b', 'c']

    """
    return list(dict.fromkeys(tags))


def validate(scope: RawScope | Mapping[str, Any]) -> ValidScope:
    """Canonicalize a raw scope definition and verify its checksum.

    Args:
        scope: A `RawScope`, or a mapping with `name`, `checksum` and `tags`.

    Returns:
        ValidScope: The canonical scope.

    Raises:
        InvalidNameError: If the name is empty or contains `[` or `]`.
        ChecksumMismatchError: If the declared checksum does not match.
        pydantic.ValidationError: If a mapping does not have the RawScope shape.

    """
    raw = scope if isinstance(scope, RawScope) else RawScope.model_validate(scope)
    check_name(raw.name)

    valid = ValidScope(
        name=raw.name, checksum=raw.checksum, tags=remove_duplicates(raw.tags)
    )
    logger.debug(
        f"{LOG_PREFIX} Scope {valid.name} validated with {len(valid.tags)} tags"
    )
    return valid
