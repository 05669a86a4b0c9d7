"""Scope name rules."""

from scopebits.exceptions import InvalidNameError

RESERVED_CHARACTERS = frozenset("[]")


def check_name(name: str) -> str:
    """Return `name` if usable as a fragment prefix, else raise InvalidNameError."""
    if name == "" or not RESERVED_CHARACTERS.isdisjoint(name):
        raise InvalidNameError(name)
    return name
