"""Bit-vector codec for tag selections.

Each scope selection is packed into a little-endian bit vector (bit `i` of
the vector selects the tag at index `i`), rendered in the compact text
alphabet and emitted as a `name[payload]` fragment. Fragments are
concatenated without separator, in the caller's order.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from scopebits.core.alphabet import bytes_to_text, text_to_bytes
from scopebits.exceptions import MalformedEncodingError
from scopebits.models import ScopedTags

if TYPE_CHECKING:
    from scopebits.registry import Registry

LOG_PREFIX = "[Codec]"
OPEN_DELIMITER = "["
CLOSE_DELIMITER = "]"

logger = logging.getLogger(__name__)


def pack_indices(indices: Iterable[int]) -> bytes:
    """Set bit `i % 8` of byte `i // 8` for every index.

    The result is exactly as long as needed to hold the highest index; no
    index at all gives an empty byte string.

    Examples:
        >>> pack_indices([1, 2])
        b'\\x06'
        >>> len(pack_indices([8]))
        2

    """
    indices = list(indices)
    if not indices:
        return b""
    bits = bytearray((max(indices) + 8) // 8)
    for idx in indices:
        bits[idx // 8] |= 1 << (idx % 8)
    return bytes(bits)


def unpack_bits(data: bytes) -> Iterator[int]:
    """Yield the index of every set bit, lowest byte and lowest bit first."""
    for byte_idx, byte in enumerate(data):
        for bit in range(8):
            if byte & (1 << bit):
                yield byte_idx * 8 + bit


def encode(
    registry: "Registry", selections: Sequence[ScopedTags | Mapping[str, Any]]
) -> str:
    """Encode tag selections into one packed string.

    Selections with no tags contribute no fragment. The order of tags within
    a selection does not change its fragment.

    Raises:
        ScopeNotFoundError: If a selection names an unknown scope.
        TagNotFoundError: If a selected tag is not part of its scope.

    """
    fragments: list[str] = []
    for selection in selections:
        if not isinstance(selection, ScopedTags):
            selection = ScopedTags.model_validate(selection)
        scope = registry.lookup(selection.name)
        indices = [scope.index_of(tag) for tag in selection.tags]
        if not indices:
            continue
        fragments.append(
            f"{scope.name}{OPEN_DELIMITER}{bytes_to_text(pack_indices(indices))}{CLOSE_DELIMITER}"
        )
    logger.debug(f"{LOG_PREFIX} Encoded {len(fragments)} fragments")
    return "".join(fragments)


def split_fragment(piece: str) -> tuple[str, str]:
    """Split a `name[payload` piece into its name and payload.

    Raises:
        MalformedEncodingError: If the piece does not hold exactly one `[`
            or has an empty name.

    """
    if piece.count(OPEN_DELIMITER) != 1:
        raise MalformedEncodingError(
            piece, f"expected exactly one '{OPEN_DELIMITER}' separator"
        )
    name, payload = piece.split(OPEN_DELIMITER)
    if name == "":
        raise MalformedEncodingError(piece, "empty scope name")
    return name, payload


def decode(registry: "Registry", encoded: str) -> list[ScopedTags]:
    """Decode a packed string into tag selections.

    Selections come back in fragment order; tags within a selection come
    back in ascending index order.

    Raises:
        MalformedEncodingError: If a fragment or its payload is malformed.
        ScopeNotFoundError: If a fragment names an unknown scope.
        IndexOutOfRangeError: If a set bit is past the end of the scope.

    """
    selections: list[ScopedTags] = []
    pieces = (piece.strip() for piece in encoded.split(CLOSE_DELIMITER))
    for piece in filter(None, pieces):
        name, payload = split_fragment(piece)
        data = text_to_bytes(payload)
        scope = registry.lookup(name)
        tags = [scope.tag_at(idx) for idx in unpack_bits(data)]
        selections.append(ScopedTags(name=name, tags=tags))
    logger.debug(f"{LOG_PREFIX} Decoded {len(selections)} fragments")
    return selections
