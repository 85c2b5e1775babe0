r"""TollGate release explorer -- NIP-94 release metadata pipeline.

Subscribes to a publisher's file metadata events on Nostr relays,
normalizes loosely-typed tags into release fields, keeps a deduplicated
newest-first collection and applies compound filters for a UI to render.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
             explorer          Release store, filters, facets, sample data
            /   |    \
         core  nips  utils     Logging/errors/YAML, NIP-94 accessors, keys/relay client
            \   |    /
             models            Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from tollgate_explorer import ReleaseStore``) use
    lazy loading and resolve on first access, so importing the package
    does not load nostr-sdk until it is needed.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("tollgate-explorer")

__all__ = [
    "ExplorerConfig",
    "Facet",
    "FilterSpec",
    "Logger",
    "NostrRelayClient",
    "ProductType",
    "Release",
    "ReleaseChannel",
    "ReleaseStore",
    "StoreState",
    "Tag",
    "filter_and_sort",
    "unique_values",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Logger": ("tollgate_explorer.core", "Logger"),
    "Facet": ("tollgate_explorer.models", "Facet"),
    "FilterSpec": ("tollgate_explorer.models", "FilterSpec"),
    "ProductType": ("tollgate_explorer.models", "ProductType"),
    "Release": ("tollgate_explorer.models", "Release"),
    "ReleaseChannel": ("tollgate_explorer.models", "ReleaseChannel"),
    "Tag": ("tollgate_explorer.models", "Tag"),
    "NostrRelayClient": ("tollgate_explorer.utils", "NostrRelayClient"),
    "ExplorerConfig": ("tollgate_explorer.explorer", "ExplorerConfig"),
    "ReleaseStore": ("tollgate_explorer.explorer", "ReleaseStore"),
    "StoreState": ("tollgate_explorer.explorer", "StoreState"),
    "filter_and_sort": ("tollgate_explorer.explorer", "filter_and_sort"),
    "unique_values": ("tollgate_explorer.explorer", "unique_values"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'tollgate_explorer' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
