"""Release explorer exception hierarchy.

Normalization of release tags never raises (every accessor returns a
documented default). Exceptions are reserved for configuration problems,
relay transport failures and lookups of releases that are not in the
current collection.

Exception hierarchy:

```text
ExplorerError (base -- never raised directly)
├── ConfigurationError       -- config validation, missing keys, bad YAML
├── ConnectivityError        -- relay unreachable, network failures
│   └── SubscriptionError    -- subscription could not be opened or failed mid-stream
└── ReleaseNotFoundError     -- release id absent from the current collection
```

See Also:
    [ReleaseStore][tollgate_explorer.explorer.store.ReleaseStore]: Surfaces
        transport failures through its ``error`` field and raises
        [ReleaseNotFoundError][tollgate_explorer.core.exceptions.ReleaseNotFoundError]
        from ``get_release()``.
    [ExplorerConfig][tollgate_explorer.explorer.configs.ExplorerConfig]: Raises
        [ConfigurationError][tollgate_explorer.core.exceptions.ConfigurationError]
        from ``from_yaml()``.
"""

from __future__ import annotations


class ExplorerError(Exception):
    """Base exception for all release explorer errors.

    Never raised directly -- always use a specific subclass.
    """


class ConfigurationError(ExplorerError):
    """Invalid or missing configuration (YAML file, field validation)."""


class ConnectivityError(ExplorerError):
    """Base for all relay/network connectivity errors."""


class SubscriptionError(ConnectivityError):
    """A relay subscription could not be opened or failed while streaming.

    Not retried automatically; recovery is a user-triggered refetch.
    """


class ReleaseNotFoundError(ExplorerError, LookupError):
    """The requested release id is not present in the current collection.

    The store never fetches a single release on demand, so a miss means
    the detail view has nothing to show.
    """

    def __init__(self, release_id: str) -> None:
        super().__init__(f"Release not found: {release_id}")
        self.release_id = release_id
