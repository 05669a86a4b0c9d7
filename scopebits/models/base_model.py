"""BaseScopeModel."""

from pydantic import BaseModel, ConfigDict


class BaseScopeModel(BaseModel):
    """Base class for the codec's data model.

    Instances are frozen once validated and reject unknown fields.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )
