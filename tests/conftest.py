import pytest

from versioned.aliases import VersionAliasResolver
from versioned.names import KnownNames, NamespaceVersionResolver
from versioned.proxies import ProxyRegistry


@pytest.fixture
def aliases() -> VersionAliasResolver:
    return VersionAliasResolver({"v1": ["alpha", "a1"], "v2": ["beta"]})


@pytest.fixture
def proxies(aliases) -> ProxyRegistry:
    return ProxyRegistry(aliases)


@pytest.fixture
def names() -> NamespaceVersionResolver:
    return NamespaceVersionResolver(KnownNames(["Ns.Widget", "Ns.v1.Widget"]))
