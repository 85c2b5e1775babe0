"""Release pipeline: streaming store, filter/sort engine, facets and sample data.

Attributes:
    ReleaseStore: Streaming aggregator owning the live release collection
        for one publisher at a time.
    StoreState: Lifecycle states of a store subscription.
    ExplorerConfig: Pydantic configuration (publisher, relays, limits, logging).
    filter_and_sort: Visible subset of a collection under a
        [FilterSpec][tollgate_explorer.models.filter_spec.FilterSpec].
    unique_values: Available choices for a
        [Facet][tollgate_explorer.models.constants.Facet].
    fallback_releases: Fixed sample data for the default publisher.
"""

from .configs import ExplorerConfig, LoggingConfig
from .facets import unique_values
from .fallback import fallback_releases
from .filters import apply_filters, filter_and_sort, matches, sort_by_date
from .store import ReleaseStore, StoreState


__all__ = [
    "ExplorerConfig",
    "LoggingConfig",
    "ReleaseStore",
    "StoreState",
    "apply_filters",
    "fallback_releases",
    "filter_and_sort",
    "matches",
    "sort_by_date",
    "unique_values",
]
