"""Infrastructure shared by every layer above the models.

Attributes:
    Logger: Structured key=value / JSON logger.
    StructuredFormatter: Root-handler formatter for unified log output.
    setup_logging: Installs the formatter on the root logger.
    load_yaml: Safe YAML configuration loader.
    ExplorerError: Base of the exception hierarchy.
"""

from .exceptions import (
    ConfigurationError,
    ConnectivityError,
    ExplorerError,
    ReleaseNotFoundError,
    SubscriptionError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "ConnectivityError",
    "ExplorerError",
    "Logger",
    "ReleaseNotFoundError",
    "StructuredFormatter",
    "SubscriptionError",
    "format_kv_pairs",
    "load_yaml",
    "setup_logging",
]
