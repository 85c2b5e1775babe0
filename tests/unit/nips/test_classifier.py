"""Unit tests for nips.nip94.classifier module."""

import pytest

from tollgate_explorer.models import ProductType
from tollgate_explorer.nips.nip94 import classify_product


OS = ProductType.TOLLGATE_OS
CORE = ProductType.TOLLGATE_CORE
BASIC = ProductType.TOLLGATE_BASIC


class TestNameTag:
    """Rule 1: standardized ``name`` tag."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("tollgate-os-gl-mt3000", OS),
            ("tollgate-core", CORE),
            ("tollgate-module-basic-go", BASIC),
        ],
    )
    def test_name_markers(self, make_release, name, expected):
        assert classify_product(make_release(tags=[["name", name]])) is expected

    def test_name_beats_content_keywords(self, make_release):
        release = make_release(tags=[["name", "tollgate-core"]], content="basic module")
        assert classify_product(release) is CORE

    def test_unrelated_name_falls_through(self, make_release):
        release = make_release(tags=[["name", "firmware"]], content="core package")
        assert classify_product(release) is CORE


class TestDeprecatedTags:
    """Rules 2 and 3: ``package_name`` and ``tollgate_os_version``."""

    def test_package_name_basic(self, make_release):
        release = make_release(tags=[["package_name", "tollgate-module-basic-go_1.0"]])
        assert classify_product(release) is BASIC

    def test_package_name_other_falls_through(self, make_release):
        release = make_release(tags=[["package_name", "tollgate-core"]])
        assert classify_product(release) is OS

    def test_os_version_tag(self, make_release):
        release = make_release(tags=[["tollgate_os_version", "v1.0.0"]], content="core module")
        assert classify_product(release) is OS

    def test_empty_os_version_ignored(self, make_release):
        release = make_release(tags=[["tollgate_os_version", ""]], content="core")
        assert classify_product(release) is CORE


class TestKeywordScan:
    """Rule 4: keywords over content, URL and filename."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"content": "The BASIC payment module"},
            {"tags": [["url", "https://x.example/Module.ipk"]]},
            {"tags": [["filename", "basic.ipk"]]},
        ],
    )
    def test_basic_keywords(self, make_release, kwargs):
        assert classify_product(make_release(**kwargs)) is BASIC

    def test_basic_before_core(self, make_release):
        assert classify_product(make_release(content="core module")) is BASIC

    def test_core_in_url(self, make_release):
        release = make_release(tags=[["url", "https://x.example/tollgate-CORE-v1.ipk"]])
        assert classify_product(release) is CORE


class TestDefault:
    """Rule 5: default to OS."""

    def test_no_signals(self, make_release):
        assert classify_product(make_release()) is OS

    def test_deterministic(self, make_release):
        release = make_release(content="core")
        assert {classify_product(release) for _ in range(5)} == {CORE}
