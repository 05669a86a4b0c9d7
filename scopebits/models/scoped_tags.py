"""ScopedTags."""

from pydantic import Field
from scopebits.models.base_model import BaseScopeModel


class ScopedTags(BaseScopeModel):
    """Represent a selection of tags within one named scope.

    Used both as `encode` input, where tag order does not matter, and as
    `decode` output, where tags come back in ascending index order.
    """

    name: str = Field(description="The name of the scope the tags belong to.")
    tags: list[str] = Field(
        default_factory=list,
        description="The selected tags.",
    )
