"""ValidScope."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self

from pydantic import Field, PrivateAttr, model_validator
from scopebits.core.hashing import digest, fingerprint
from scopebits.core.naming import check_name
from scopebits.exceptions import (
    ChecksumMismatchError,
    IndexOutOfRangeError,
    TagNotFoundError,
)
from scopebits.models.base_model import BaseScopeModel


class ValidScope(BaseScopeModel):
    """Represent a validated, canonical scope.

    `tags` holds the deduplicated vocabulary in index order and `tag_index`
    is its exact inverse. Both are read-only for the lifetime of the
    instance. Construction enforces the name rules and the checksum, so a
    ValidScope cannot exist for a vocabulary that does not match it.

    Raises:
        InvalidNameError: If the name is empty or contains `[` or `]`.
        ChecksumMismatchError: If `checksum` is not the fingerprint of `tags`.
        pydantic.ValidationError: If `tags` contains duplicates.
    """

    name: str = Field(description="The scope name.")
    checksum: str = Field(description="The verified fingerprint of the tag set.")
    tags: tuple[str, ...] = Field(description="The vocabulary, position = bit index.")

    _tag_index: Mapping[str, int] = PrivateAttr()

    @model_validator(mode="after")
    def _check_scope(self) -> Self:
        """Check name, uniqueness of tags and checksum, in that order."""
        check_name(self.name)
        if len(set(self.tags)) != len(self.tags):
            raise ValueError("tags must not contain duplicates.")
        computed = fingerprint(self.tags)
        if computed != self.checksum:
            raise ChecksumMismatchError(self.name, computed, self.checksum)
        return self

    def model_post_init(self, context__: Any) -> None:
        """Build the read-only tag index."""
        self._tag_index = MappingProxyType(
            {tag: idx for idx, tag in enumerate(self.tags)}
        )

    @property
    def tag_index(self) -> Mapping[str, int]:
        """Return the read-only mapping of each tag to its index."""
        return self._tag_index

    def index_of(self, tag: str) -> int:
        """Return the bit index of `tag`.

        Raises:
            TagNotFoundError: If `tag` is not part of the scope.

        """
        try:
            return self._tag_index[tag]
        except KeyError:
            raise TagNotFoundError(self.name, tag) from None

    def tag_at(self, index: int) -> str:
        """Return the tag at bit index `index`.

        Raises:
            IndexOutOfRangeError: If `index` is past the end of the vocabulary.

        """
        if not 0 <= index < len(self.tags):
            raise IndexOutOfRangeError(self.name, index, len(self.tags))
        return self.tags[index]

    def digest_order(self) -> list[str]:
        """Return the tags sorted by ascending digest, as fingerprinted."""
        return sorted(self.tags, key=digest)
