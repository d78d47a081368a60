"""Value types and string helpers shared by the resolvers."""

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "WHITESPACE",
    "ProxyKey",
    "trim",
    "insert_version",
]

WHITESPACE = " \t\n\r\0\x0b"
"""Characters stripped from version labels, aliases and identifiers."""


@dataclass(frozen=True)
class ProxyKey:
    """Normalised key of a registered proxy.

    Attributes:
        version: Canonical version group key; ``""`` for the unversioned bucket.
        identifier: Trimmed identifier of the component.
    """

    version: str
    identifier: str


def trim(value: Optional[str]) -> str:
    """Strip ASCII whitespace from both ends, treating ``None`` as ``""``."""
    return (value or "").strip(WHITESPACE)


def insert_version(identifier: str, version: str, delimiter: str = ".") -> str:
    """Insert ``version`` as a new segment directly before the leaf name.

    Example:
        >>> insert_version("Ns.Widget", "v1")  # "Ns.v1.Widget"
        >>> insert_version("Widget", "v1")     # "v1.Widget"
    """
    prefix, separator, leaf = identifier.rpartition(delimiter)
    if not separator:
        return f"{version}{delimiter}{identifier}"
    return f"{prefix}{separator}{version}{delimiter}{leaf}"
