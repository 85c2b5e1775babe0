"""Unit tests for explorer.fallback module."""

from tollgate_explorer.explorer.fallback import fallback_releases
from tollgate_explorer.models import DEFAULT_PUBLISHER_KEY, ProductType
from tollgate_explorer.nips.nip94 import (
    get_release_channel,
    get_release_product_type,
    get_release_version,
)


NOW = 1_750_000_000
DAY = 86_400


class TestFallbackReleases:
    def test_composition(self):
        releases = fallback_releases(now=NOW)
        products = [get_release_product_type(r) for r in releases]
        assert len(releases) == 5
        assert products.count(ProductType.TOLLGATE_OS) == 3
        assert products.count(ProductType.TOLLGATE_CORE) == 2

    def test_newest_first(self):
        releases = fallback_releases(now=NOW)
        assert [r.created_at for r in releases] == [NOW - i * DAY for i in range(5)]

    def test_ids_and_channels(self):
        releases = fallback_releases(now=NOW)
        assert [r.id for r in releases] == [
            "mock-os-0",
            "mock-os-1",
            "mock-os-2",
            "mock-core-0",
            "mock-core-1",
        ]
        assert [get_release_channel(r) for r in releases] == [
            "stable",
            "beta",
            "dev",
            "stable",
            "beta",
        ]

    def test_versions(self):
        versions = [get_release_version(r) for r in fallback_releases(now=NOW)]
        assert versions[:3] == ["v1.3.0", "v1.2.0", "v1.1.0"]

    def test_published_by_default_key(self):
        assert {r.pubkey for r in fallback_releases(now=NOW)} == {DEFAULT_PUBLISHER_KEY}

    def test_defaults_to_current_time(self):
        releases = fallback_releases()
        assert releases[0].created_at > NOW
