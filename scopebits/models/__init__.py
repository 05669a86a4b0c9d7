"""Offer the data model of the scope codec."""

from scopebits.models.base_model import BaseScopeModel
from scopebits.models.raw_scope import RawScope
from scopebits.models.scoped_tags import ScopedTags
from scopebits.models.valid_scope import ValidScope

__all__ = [
    "BaseScopeModel",
    "RawScope",
    "ScopedTags",
    "ValidScope",
]
