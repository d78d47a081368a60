"""Entry point combining proxy lookup with namespace-based version resolution."""

import logging
from typing import Any, Optional

from versioned.aliases import VersionAliasResolver
from versioned.domain import trim
from versioned.names import NamespaceVersionResolver
from versioned.proxies import ProxyRegistry

__all__ = ["Dispatcher"]

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolve an identifier and version to a proxy instance or an identifier.

    Registered proxies always take precedence. Only when no proxy is registered
    is the version canonicalised through the alias table and handed, with the
    identifier, to the namespace resolver.

    Attributes:
        aliases: Alias resolver used to canonicalise versions for namespace lookup.
        names: Resolver that maps identifiers to their versioned variants.
        proxies: Registry consulted first. Created on demand, sharing ``aliases``,
            when not supplied.

    Example:
        >>> dispatcher = Dispatcher(
        ...     VersionAliasResolver({"v1": ["alpha"]}),
        ...     NamespaceVersionResolver(KnownNames(["Ns.Widget", "Ns.v1.Widget"])),
        ... )
        >>> dispatcher.resolve("Ns.Widget", "alpha")  # "Ns.v1.Widget"
        >>> dispatcher.proxies.add("Ns.Widget", widget, "v1")
        >>> dispatcher.resolve("Ns.Widget", "alpha")  # widget
    """

    def __init__(
        self,
        aliases: VersionAliasResolver,
        names: NamespaceVersionResolver,
        proxies: Optional[ProxyRegistry] = None,
    ):
        self.aliases = aliases
        self.names = names
        self.proxies = proxies if proxies is not None else ProxyRegistry(aliases)

    def resolve(self, identifier: str, version: Optional[str] = None) -> Any:
        """Resolve ``identifier`` for ``version``.

        Args:
            identifier: Fully qualified identifier of the component.
            version: Optional version label or alias.

        Returns:
            The registered proxy instance if there is one, otherwise the
            identifier chosen by the namespace resolver.

        Raises:
            IdentifierNotFoundError: If no proxy is registered and neither the
                versioned nor the plain identifier exists.
        """
        proxy = self.proxies.lookup(identifier, version)
        if proxy is not None:
            logger.debug("Using registered proxy for %s (version %r)", identifier, version)
            return proxy

        return self.names.resolve(identifier, trim(self.aliases.resolve(version)))

    def __call__(self, identifier: str, version: Optional[str] = None) -> Any:
        return self.resolve(identifier, version)
