"""RawScope."""

from pydantic import Field
from scopebits.models.base_model import BaseScopeModel


class RawScope(BaseScopeModel):
    """Represent a scope definition as supplied by the caller.

    Nothing is checked beyond field types here: name rules, deduplication
    and the checksum are handled by `scopebits.canonicalizer.validate`.
    """

    name: str = Field(description="The scope name, used as the fragment prefix.")
    checksum: str = Field(description="The declared fingerprint of the tag set.")
    tags: list[str] = Field(
        description="The scope vocabulary. May contain duplicates, in any order.",
    )
