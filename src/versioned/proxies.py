"""In-memory registry of pre-built instances, keyed by version and identifier.

Proxies let callers hand over a ready-made object (a test double, a shared
singleton) for an identifier so that resolution returns it directly instead of
an identifier to construct. Entries are grouped into one bucket per version
group key; the unversioned bucket is keyed by ``""``.
"""

import logging
import threading
from typing import Any, Optional

from versioned.aliases import VersionAliasResolver
from versioned.domain import ProxyKey, trim

__all__ = ["ProxyRegistry"]

logger = logging.getLogger(__name__)


class ProxyRegistry:
    """Registry of proxy instances with alias-aware version buckets.

    When an alias resolver is supplied, versions are canonicalised through it on
    every operation, so a proxy added under one alias can be looked up under any
    other alias of the same group. Without a resolver, versions are only trimmed.

    All access to the underlying mapping is serialised by a single lock.

    Example:
        >>> proxies = ProxyRegistry(VersionAliasResolver({"v1": ["alpha"]}))
        >>> proxies.add("app.Widget", widget, "alpha")
        >>> proxies.lookup("app.Widget", "v1") is widget  # True
    """

    def __init__(self, aliases: Optional[VersionAliasResolver] = None):
        self._aliases = aliases
        self._proxies: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def lookup(self, identifier: str, version: Optional[str] = None) -> Optional[Any]:
        """Return the proxy registered for ``identifier`` and ``version``.

        Args:
            identifier: Identifier the proxy was registered for.
            version: Optional version label; aliases are honoured when the
                registry has an alias resolver.

        Returns:
            The registered instance itself, or None if nothing is registered.
        """
        key = self._key(identifier, version)
        with self._lock:
            bucket = self._proxies.get(key.version)
            if bucket is None:
                return None
            return bucket.get(key.identifier)

    def add(
        self, identifier: str, instance: Any, version: Optional[str] = None
    ) -> "ProxyRegistry":
        """Register ``instance`` for ``identifier`` under ``version``.

        An existing entry for the same key is replaced.

        Raises:
            ValueError: If the identifier is blank or the instance is None.
        """
        key = self._key(identifier, version)
        if not key.identifier:
            raise ValueError("Proxy identifier must not be empty")
        if instance is None:
            raise ValueError(f'Proxy for "{key.identifier}" must not be None')

        with self._lock:
            self._proxies.setdefault(key.version, {})[key.identifier] = instance
        logger.debug("Registered proxy for %s (version %r)", key.identifier, key.version)
        return self

    def remove(self, identifier: str, version: Optional[str] = None) -> "ProxyRegistry":
        """Remove the proxy for ``identifier`` under ``version``, if any.

        A version bucket left empty by the removal is dropped as well.
        """
        key = self._key(identifier, version)
        with self._lock:
            bucket = self._proxies.get(key.version)
            if bucket is None or key.identifier not in bucket:
                return self
            del bucket[key.identifier]
            if not bucket:
                del self._proxies[key.version]
        logger.debug("Removed proxy for %s (version %r)", key.identifier, key.version)
        return self

    def registered_versions(self) -> list[str]:
        """Version group keys that currently hold at least one proxy."""
        with self._lock:
            return sorted(self._proxies)

    def snapshot(self) -> dict[str, list[str]]:
        """Return the registered identifiers per version group key.

        Returns:
            Mapping from version group key to sorted identifiers.
        """
        with self._lock:
            return {
                version: sorted(bucket)
                for version, bucket in sorted(self._proxies.items())
            }

    def _key(self, identifier: str, version: Optional[str]) -> ProxyKey:
        if self._aliases is not None:
            version = self._aliases.resolve(version)
        else:
            version = trim(version)
        return ProxyKey(version, trim(identifier))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._proxies.values())

    def __contains__(self, identifier: str) -> bool:
        return self.lookup(identifier) is not None
