__all__ = ["VersionError", "ConfigurationError", "IdentifierNotFoundError"]


class VersionError(Exception):
    """Base class for errors raised while resolving versioned identifiers."""


class ConfigurationError(VersionError, ValueError):
    """Raised when an alias table does not have the expected shape."""


class IdentifierNotFoundError(VersionError, LookupError):
    """Raised when neither a versioned nor a plain identifier exists.

    Attributes:
        identifier: The identifier the caller asked for.
        candidate: The version-qualified identifier that was tried first. Equal to
            ``identifier`` when no version was supplied.
    """

    def __init__(self, identifier: str, candidate: str):
        super().__init__(
            f'Identifier "{identifier}" not found (also tried versioned "{candidate}")'
        )
        self.identifier = identifier
        self.candidate = candidate
