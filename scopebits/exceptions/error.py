"""Offers a collection of custom exceptions raised by the scope codec."""


class ScopeBitsError(Exception):
    """Base class for every error raised while building, encoding or decoding.

    Operations are all-or-nothing: when one of these errors is raised,
    nothing was produced and the caller should discard any pending result.
    """


class InvalidNameError(ScopeBitsError):
    """Scope name is empty or contains a reserved delimiter (`[` or `]`)."""

    def __init__(self, name: str) -> None:
        """Initialize the error with the offending name."""
        self.name = name
        if name == "":
            message = "Scope name is empty"
        else:
            message = f"Scope {name} contains []"
        super().__init__(message)


class ChecksumMismatchError(ScopeBitsError):
    """Declared checksum does not match the fingerprint of the scope's tags.

    Both values are kept so the caller can report the drift.
    """

    def __init__(self, name: str, computed: str, declared: str) -> None:
        """Initialize the error with both fingerprints."""
        self.name = name
        self.computed = computed
        self.declared = declared
        super().__init__(f"Checksum failed for scope {name}: {computed} != {declared}")


class ScopeNotFoundError(ScopeBitsError):
    """No scope with the requested name is held by the registry."""

    def __init__(self, name: str) -> None:
        """Initialize the error with the missing scope name."""
        self.name = name
        super().__init__(f"Scope not found: {name}")


class TagNotFoundError(ScopeBitsError):
    """A selected tag is not part of the scope's vocabulary."""

    def __init__(self, scope: str, tag: str) -> None:
        """Initialize the error with the scope and the unknown tag."""
        self.scope = scope
        self.tag = tag
        super().__init__(f"Tag not found in Scope: {scope}:{tag}")


class MalformedEncodingError(ScopeBitsError):
    """Encoded string has a bad fragment structure or an invalid payload."""

    def __init__(self, fragment: str, reason: str) -> None:
        """Initialize the error with the faulty fragment."""
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"Malformed encoding {fragment!r}: {reason}")


class IndexOutOfRangeError(ScopeBitsError):
    """A decoded bit points past the end of the scope's tag list.

    This typically means the vocabulary changed since the string was encoded.
    """

    def __init__(self, scope: str, index: int, size: int) -> None:
        """Initialize the error with the decoded index and the scope size."""
        self.scope = scope
        self.index = index
        self.size = size
        super().__init__(
            f"Bit index {index} out of range for scope {scope} ({size} tags)"
        )


class ConfigError(Exception):
    """Base class for configuration-related errors.

    This exception is raised when there is an issue with the configuration,
    such as an unreadable file or values of the wrong shape. It signals an
    actionable problem in configuration the user can fix immediately.
    """


class ConfigValidationError(ConfigError):
    """Configuration does not validate against the settings model."""
