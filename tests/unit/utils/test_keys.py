"""Unit tests for utils.keys module."""

import pytest
from nostr_sdk import Keys, PublicKey

from tollgate_explorer.models import DEFAULT_PUBLISHER_KEY
from tollgate_explorer.utils.keys import is_valid_publisher_key, normalize_publisher_key


class TestIsValidPublisherKey:
    @pytest.mark.parametrize("key", [DEFAULT_PUBLISHER_KEY, "A" * 64, "0123456789abcdef" * 4])
    def test_valid(self, key):
        assert is_valid_publisher_key(key) is True

    @pytest.mark.parametrize(
        "key",
        ["", "abc", "a" * 63, "a" * 65, "g" * 64, f" {DEFAULT_PUBLISHER_KEY}", None, 123],
    )
    def test_invalid(self, key):
        assert is_valid_publisher_key(key) is False


class TestNormalizePublisherKey:
    def test_lowercases_hex(self):
        assert normalize_publisher_key(DEFAULT_PUBLISHER_KEY.upper()) == DEFAULT_PUBLISHER_KEY

    def test_strips_whitespace(self):
        assert normalize_publisher_key(f"\t{DEFAULT_PUBLISHER_KEY} ") == DEFAULT_PUBLISHER_KEY

    def test_npub(self):
        keys = Keys.generate()
        npub = keys.public_key().to_bech32()
        assert normalize_publisher_key(npub) == keys.public_key().to_hex()

    def test_npub_of_default(self):
        npub = PublicKey.parse(DEFAULT_PUBLISHER_KEY).to_bech32()
        assert normalize_publisher_key(npub) == DEFAULT_PUBLISHER_KEY

    def test_invalid_npub(self):
        with pytest.raises(ValueError, match="Invalid npub"):
            normalize_publisher_key("npub1notreallyakey")

    @pytest.mark.parametrize("key", ["", "nsec1abc", "xyz", "a" * 63])
    def test_invalid_format(self, key):
        with pytest.raises(ValueError, match="Must be 64 character hex string"):
            normalize_publisher_key(key)
