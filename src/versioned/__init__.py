"""Versioned component resolution.

Versioned resolves a component identifier and an optional version label to one
of three outcomes: a pre-built instance registered as a proxy, the identifier of
a version-specific implementation, or the identifier unchanged. Callers can
switch between interchangeable implementations ("API v1" vs "API v2") without
hard-coding the choice, and inject test doubles or singletons that bypass
lookup entirely.

Key Features:
    - Alias tables mapping many version labels onto one canonical version
    - Proxy registry of explicitly registered instances per version
    - Version-specific variants found by inserting the version before the leaf
      name (``app.api.Handler`` -> ``app.api.v2.Handler``)
    - Graceful fallback to the unversioned identifier

Basic Usage:
    >>> from versioned.builders import make_dispatcher
    >>>
    >>> dispatcher = make_dispatcher({"v1": ["alpha"], "v2": ["beta"]})
    >>> dispatcher.resolve("app.api.Handler", "beta")   # "app.api.v2.Handler"
    >>> dispatcher.proxies.add("app.api.Handler", fake_handler, "v1")
    >>> dispatcher.resolve("app.api.Handler", "alpha")  # fake_handler

The package consists of several modules:
    - aliases: Version label canonicalisation
    - proxies: Registry of proxy instances
    - names: Namespace rewriting and existence checks
    - dispatcher: Precedence between proxies and namespace resolution
    - builders: High-level dispatcher construction
    - domain: Shared value types and string helpers
    - errors: Package-specific exceptions
"""
