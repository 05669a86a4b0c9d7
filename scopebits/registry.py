"""Registry of validated scopes.

The registry is built once, all-or-nothing, and only read afterwards, so a
single instance can be shared by concurrent callers without locking.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from scopebits import codec
from scopebits.canonicalizer import validate
from scopebits.exceptions import ScopeBitsError, ScopeNotFoundError
from scopebits.models import RawScope, ScopedTags, ValidScope

LOG_PREFIX = "[Registry]"

logger = logging.getLogger(__name__)


class Registry:
    """Hold validated scopes in input order and look them up by name.

    Examples:
        >>> registry = Registry.build(
        ...     [
        ...         {
        ...             "name": "xtest",
        ...             "checksum": "2icyXAVNHz29D1dTVYE59sm5foRZmqqBTY26bZdN3q58",
        ...             "tags": ["c", "a", "b"],
        ...         }
        ...     ]
        ... )
        >>> registry.encode([ScopedTags(name="xtest", tags=["a", "b"])])
        'xtest[7]'

    """

    __slots__ = ("_scopes", "_by_name")

    def __init__(self, scopes: Iterable[ValidScope] = ()) -> None:
        """Initialize the registry from already validated scopes."""
        self._scopes: tuple[ValidScope, ...] = tuple(scopes)
        by_name: dict[str, ValidScope] = {}
        for scope in self._scopes:
            # duplicate names: the first one wins, as a linear scan would
            by_name.setdefault(scope.name, scope)
        self._by_name: Mapping[str, ValidScope] = MappingProxyType(by_name)

    @classmethod
    def build(cls, scopes: Iterable[RawScope | Mapping[str, Any]]) -> "Registry":
        """Validate every raw scope, in order, and build a registry from them.

        The first invalid scope aborts the whole construction: no partially
        valid registry is ever returned.

        Raises:
            InvalidNameError: If a scope name is empty or contains `[` or `]`.
            ChecksumMismatchError: If a declared checksum does not match.

        """
        valid: list[ValidScope] = []
        for scope in scopes:
            try:
                valid.append(validate(scope))
            except ScopeBitsError as err:
                logger.error(f"{LOG_PREFIX} Registry construction aborted: {err}")
                raise
        logger.info(f"{LOG_PREFIX} Registry built with {len(valid)} scopes")
        return cls(valid)

    @property
    def scopes(self) -> tuple[ValidScope, ...]:
        """Return the held scopes, in construction order."""
        return self._scopes

    @property
    def names(self) -> list[str]:
        """Return the names of the held scopes, in construction order."""
        return [scope.name for scope in self._scopes]

    def lookup(self, name: str) -> ValidScope:
        """Return the first held scope named `name`.

        Raises:
            ScopeNotFoundError: If no scope has that name.

        """
        try:
            return self._by_name[name]
        except KeyError:
            raise ScopeNotFoundError(name) from None

    def encode(self, selections: Sequence[ScopedTags | Mapping[str, Any]]) -> str:
        """Encode tag selections against this registry, see `codec.encode`."""
        return codec.encode(self, selections)

    def decode(self, encoded: str) -> list[ScopedTags]:
        """Decode an encoded string against this registry, see `codec.decode`."""
        return codec.decode(self, encoded)

    def __contains__(self, name: object) -> bool:
        """Tell whether a scope named `name` is held."""
        return name in self._by_name

    def __iter__(self) -> Iterator[ValidScope]:
        """Iterate over the held scopes in construction order."""
        return iter(self._scopes)

    def __len__(self) -> int:
        """Return the number of held scopes."""
        return len(self._scopes)

    def __eq__(self, other: object) -> bool:
        """Compare registries by their held scopes."""
        if not isinstance(other, Registry):
            return NotImplemented
        return self._scopes == other._scopes

    def __repr__(self) -> str:
        """Return a short representation listing the scope names."""
        return f"Registry(names={self.names!r})"


def build(scopes: Iterable[RawScope | Mapping[str, Any]]) -> Registry:
    """Build a `Registry` from raw scope definitions, see `Registry.build`."""
    return Registry.build(scopes)
