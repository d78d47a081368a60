"""Resolution of versioned identifiers by namespace rewriting.

A versioned implementation of ``app.api.Handler`` lives one namespace level
deeper, under a segment named after the version: version ``v2`` is looked for
at ``app.api.v2.Handler``. Whether a name exists is answered by a
:class:`NameExistence` collaborator, so the same rule works against the
running interpreter (:class:`ImportableNames`) or against an explicit manifest
(:class:`KnownNames`).
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from versioned.domain import insert_version, trim
from versioned.errors import IdentifierNotFoundError

__all__ = [
    "NameExistence",
    "KnownNames",
    "ImportableNames",
    "NamespaceVersionResolver",
]

logger = logging.getLogger(__name__)


class NameExistence(ABC):
    """Answers whether an entity with a fully qualified identifier exists."""

    @abstractmethod
    def exists(self, identifier: str) -> bool:
        ...


class KnownNames(NameExistence):
    """Existence check against a fixed set of identifiers."""

    def __init__(self, names: Iterable[str]):
        self._names = frozenset(names)

    def exists(self, identifier: str) -> bool:
        return identifier in self._names


class ImportableNames(NameExistence):
    """Existence check against modules and attributes of the running interpreter.

    The longest dotted prefix of the identifier that can be imported is taken
    as the module, and the remaining segments are looked up as attributes on
    it. ``"json.decoder.JSONDecoder"`` exists; ``"json.v2.JSONDecoder"`` does
    not.

    Identifiers written with another delimiter (``"json::JSONDecoder"``) are
    split on that delimiter instead.
    """

    def __init__(self, delimiter: str = "."):
        if not delimiter:
            raise ValueError("Namespace delimiter must not be empty")
        self._delimiter = delimiter

    def exists(self, identifier: str) -> bool:
        segments = identifier.split(self._delimiter)
        if not all(segments):
            return False

        for boundary in range(len(segments), 0, -1):
            module_name = ".".join(segments[:boundary])
            try:
                target = importlib.import_module(module_name)
            except ImportError as exc:
                logger.debug("Cannot import %s: %s", module_name, exc)
                continue
            for attribute in segments[boundary:]:
                if not hasattr(target, attribute):
                    return False
                target = getattr(target, attribute)
            return True
        return False


class NamespaceVersionResolver:
    """Pick the versioned variant of an identifier when one exists.

    Versions are used exactly as given (after trimming); this resolver knows
    nothing about aliases, so callers pass canonical version group keys.

    Example:
        >>> resolver = NamespaceVersionResolver(KnownNames(["Ns.Widget", "Ns.v1.Widget"]))
        >>> resolver.resolve("Ns.Widget", "v1")  # "Ns.v1.Widget"
        >>> resolver.resolve("Ns.Widget", "v9")  # "Ns.Widget"
        >>> resolver.resolve("Ns.Widget")        # "Ns.Widget"
    """

    def __init__(self, names: NameExistence, delimiter: str = "."):
        if not delimiter:
            raise ValueError("Namespace delimiter must not be empty")
        self._names = names
        self._delimiter = delimiter

    def versioned_name(self, identifier: str, version: str) -> str:
        """Return ``identifier`` with ``version`` inserted before its leaf name."""
        return insert_version(identifier, version, self._delimiter)

    def resolve(self, identifier: str, version: Optional[str] = None) -> str:
        """Resolve ``identifier`` to its variant for ``version``.

        Args:
            identifier: Fully qualified identifier of the component.
            version: Optional version label; blank means no version.

        Returns:
            The versioned identifier if it exists, otherwise ``identifier``
            itself if that exists.

        Raises:
            IdentifierNotFoundError: If neither identifier exists.
        """
        version = trim(version)
        candidate = identifier
        if version:
            candidate = self.versioned_name(identifier, version)
            if self._names.exists(candidate):
                logger.debug("Resolved %s version %r to %s", identifier, version, candidate)
                return candidate

        if self._names.exists(identifier):
            return identifier

        raise IdentifierNotFoundError(identifier, candidate)
