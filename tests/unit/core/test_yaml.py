"""Unit tests for core.yaml module."""

import pytest
import yaml

from tollgate_explorer.core.yaml import load_yaml


class TestLoadYaml:
    def test_mapping(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("limit: 10\nrelays:\n  - wss://a\n")
        assert load_yaml(path) == {"limit": 10, "relays": ["wss://a"]}

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("a: 1\n")
        assert load_yaml(str(path)) == {"a": 1}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "nope.yaml")

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(TypeError, match="got list"):
            load_yaml(path)

    def test_invalid_syntax(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("a: [1, 2\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)

    def test_safe_load_rejects_python_tags(self, tmp_path):
        path = tmp_path / "evil.yaml"
        path.write_text("a: !!python/object/apply:os.system ['echo hi']\n")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)
