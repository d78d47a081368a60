"""High level entry point for assembling a dispatcher."""

from typing import Any, Iterable, Mapping, Optional, Union

from versioned.aliases import AliasTable, VersionAliasResolver
from versioned.dispatcher import Dispatcher
from versioned.names import (
    ImportableNames,
    KnownNames,
    NameExistence,
    NamespaceVersionResolver,
)

__all__ = ["make_dispatcher"]


def make_dispatcher(
    aliases: Optional[AliasTable] = None,
    names: Union[NameExistence, Iterable[str], None] = None,
    proxies: Optional[Mapping[str, Any]] = None,
    delimiter: str = ".",
) -> Dispatcher:
    """Construct a :class:`Dispatcher` from plain configuration.

    Args:
        aliases: Alias table mapping version group keys to alias labels.
        names: How identifier existence is checked. Either a
            :class:`NameExistence`, an iterable of known identifiers, or None
            to check against importable modules and their attributes, with
            identifier segments split on ``delimiter``.
        proxies: Optional mapping of identifiers to instances registered in the
            unversioned bucket of the dispatcher's proxy registry.
        delimiter: Separator between identifier segments.

    Returns:
        A dispatcher whose proxy registry shares the alias table.

    Raises:
        ConfigurationError: If the alias table is malformed.

    Example:
        >>> dispatcher = make_dispatcher({"v1": ["alpha"]}, ["Ns.Widget", "Ns.v1.Widget"])
        >>> dispatcher("Ns.Widget", "alpha")  # "Ns.v1.Widget"
    """
    if names is None:
        names = ImportableNames(delimiter)
    elif not isinstance(names, NameExistence):
        names = KnownNames(names)

    dispatcher = Dispatcher(
        VersionAliasResolver(aliases),
        NamespaceVersionResolver(names, delimiter),
    )
    for identifier, instance in (proxies or {}).items():
        dispatcher.proxies.add(identifier, instance)
    return dispatcher
