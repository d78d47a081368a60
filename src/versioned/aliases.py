"""Canonicalisation of version labels through a configured alias table.

An alias table maps a version group key (the canonical name of a version, e.g.
``"v1"``) to the labels callers may use to ask for it::

    >>> aliases = VersionAliasResolver({"v1": ["alpha", "a1"], "v2": ["beta"]})
    >>> aliases.resolve(" alpha ")  # "v1"
    >>> aliases.resolve("v1")       # "v1" (not an alias, returned as given)
    >>> aliases.resolve(None)       # ""
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional, Sequence

from versioned.domain import trim
from versioned.errors import ConfigurationError

__all__ = ["AliasTable", "VersionAliasResolver"]

logger = logging.getLogger(__name__)

AliasTable = Mapping[str, Sequence[str]]


class VersionAliasResolver:
    """Resolve version labels to their version group key.

    The table is validated when the resolver is created and cannot be changed
    afterwards. Matching is exact and case-sensitive; groups are searched in the
    order they were configured.
    """

    def __init__(self, aliases: Optional[AliasTable] = None):
        self._aliases = MappingProxyType(_validate(aliases if aliases is not None else {}))

    @property
    def aliases(self) -> Mapping[str, tuple[str, ...]]:
        """The validated table: group key to trimmed, deduplicated aliases."""
        return self._aliases

    def groups(self) -> list[str]:
        return list(self._aliases)

    def resolve(self, label: Optional[str] = None) -> str:
        """Return the version group key for ``label``.

        Args:
            label: Version label supplied by a caller. ``None`` and
                whitespace-only labels mean "no version".

        Returns:
            The key of the first group listing the trimmed label as an alias,
            otherwise the trimmed label itself (``""`` when no version was given).
        """
        label = trim(label)
        for group, labels in self._aliases.items():
            if label in labels:
                return group
        return label

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str):
            return False
        label = trim(label)
        return any(label in labels for labels in self._aliases.values())


def _validate(aliases: AliasTable) -> dict[str, tuple[str, ...]]:
    """Check the shape of an alias table and normalise its labels.

    Args:
        aliases: Mapping of group keys to lists of alias labels.

    Returns:
        A new dict with each alias list trimmed and deduplicated, keeping the
        first occurrence of each label.

    Raises:
        ConfigurationError: If the table is not a mapping, a group key is not a
            non-empty string, a value is not a list or tuple of labels, or a label
            is not a string or is empty after trimming.
    """
    if not isinstance(aliases, Mapping):
        raise ConfigurationError(
            "Alias table must be a mapping of version group keys to lists of labels"
        )

    validated: dict[str, tuple[str, ...]] = {}
    seen: dict[str, str] = {}
    for group, labels in aliases.items():
        if not isinstance(group, str) or not group:
            raise ConfigurationError(
                f"Version group keys must be non-empty strings (got {group!r})"
            )
        if not isinstance(labels, (list, tuple)):
            raise ConfigurationError(
                f'Aliases for version group "{group}" must be a list of strings'
            )

        normalised: list[str] = []
        for index, label in enumerate(labels):
            if not isinstance(label, str):
                raise ConfigurationError(
                    f'Version labels must be strings (key "{group}", index {index})'
                )
            label = trim(label)
            if not label:
                raise ConfigurationError(
                    f'Version labels must be non-empty (key "{group}", index {index})'
                )
            if label in normalised:
                continue
            if label in seen:
                logger.warning(
                    'Alias "%s" is listed under "%s" and "%s"; "%s" takes precedence',
                    label, seen[label], group, seen[label],
                )
            else:
                seen[label] = group
            normalised.append(label)

        validated[group] = tuple(normalised)
    return validated
