"""YAML configuration loading.

Uses ``yaml.safe_load`` so untrusted configuration files cannot instantiate
arbitrary Python objects. Consumed by
[ExplorerConfig.from_yaml()][tollgate_explorer.explorer.configs.ExplorerConfig.from_yaml].

Examples:
    ```python
    from tollgate_explorer.core.yaml import load_yaml

    config = load_yaml("config/explorer.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Returns:
        Parsed configuration as a nested dictionary, or an empty dict if
        the file exists but contains no data.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        TypeError: If the document root is not a mapping.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise TypeError(f"Config root must be a mapping, got {type(data).__name__}")
    return data
