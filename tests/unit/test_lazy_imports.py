"""Unit tests for the top-level lazy import table."""

import importlib

import pytest

import tollgate_explorer


class TestLazyImports:
    @pytest.mark.parametrize("name", tollgate_explorer.__all__)
    def test_resolves(self, name):
        value = getattr(tollgate_explorer, name)
        module_path, attr_name = tollgate_explorer._LAZY_IMPORTS[name]
        assert value is getattr(importlib.import_module(module_path), attr_name)

    def test_table_matches_all(self):
        assert set(tollgate_explorer._LAZY_IMPORTS) == set(tollgate_explorer.__all__)

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            _ = tollgate_explorer.Nope

    def test_dir(self):
        assert "ReleaseStore" in dir(tollgate_explorer)

    def test_version(self):
        assert isinstance(tollgate_explorer.__version__, str)
