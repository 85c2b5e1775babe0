"""Release explorer configuration models.

Examples:
    ```yaml
    publisher_key: 5075e61f0b048148b60105c1dd72bbeae1957336ae5824087e52efa374f8416a
    relays:
      - wss://relay.damus.io
      - wss://nos.lol
    limit: 500
    timeout: 15.0
    logging:
      level: DEBUG
      json_output: false
    ```

See Also:
    [ReleaseStore.from_config()][tollgate_explorer.explorer.store.ReleaseStore.from_config]:
        Builds a store from these settings.
    [NostrRelayClient][tollgate_explorer.utils.relay_client.NostrRelayClient]:
        Consumes ``relays`` and ``timeout``.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Any, Literal, Self

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tollgate_explorer.core.exceptions import ConfigurationError
from tollgate_explorer.core.yaml import load_yaml
from tollgate_explorer.models.constants import DEFAULT_LIMIT, DEFAULT_PUBLISHER_KEY, DEFAULT_RELAYS
from tollgate_explorer.utils.keys import normalize_publisher_key


_RELAY_SCHEMES = ("ws://", "wss://")


class LoggingConfig(BaseModel):
    """Structured logging settings.

    See Also:
        [setup_logging][tollgate_explorer.core.logger.setup_logging]:
            Applies ``level`` to the root logger.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False


class ExplorerConfig(BaseModel):
    """Top-level release explorer configuration.

    Attributes:
        publisher_key: Publisher whose releases are browsed first. Accepts a
            64-character hex key or an ``npub1`` key; stored as lowercase hex.
        relays: Relay URLs to subscribe through (``ws://`` or ``wss://``).
        limit: Maximum number of events requested per subscription.
        timeout: Seconds the relay client waits for end-of-stored-events.
        logging: Structured logging settings.
    """

    publisher_key: str = Field(default=DEFAULT_PUBLISHER_KEY, description="Publisher hex pubkey")
    relays: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RELAYS),
        min_length=1,
        description="Relay URLs to subscribe through",
    )
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=5000, description="Events per subscription")
    timeout: float = Field(default=10.0, gt=0.0, le=300.0, description="EOSE wait in seconds")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("publisher_key", mode="before")
    @classmethod
    def validate_publisher_key(cls, v: Any) -> str:
        """Normalize to lowercase hex, rejecting anything that is not a public key."""
        if not isinstance(v, str):
            raise ValueError(f"publisher_key must be a string, got {type(v).__name__}")
        return normalize_publisher_key(v)

    @field_validator("relays", mode="after")
    @classmethod
    def validate_relays(cls, v: list[str]) -> list[str]:
        """Require websocket URLs and drop duplicates while keeping order."""
        seen: list[str] = []
        for url in v:
            url = url.strip()
            if not url.startswith(_RELAY_SCHEMES):
                raise ValueError(f"Relay URL must use ws:// or wss://: {url}")
            if url not in seen:
                seen.append(url)
        return seen

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> Self:
        """Load and validate a configuration file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails validation.
        """
        try:
            data = load_yaml(config_path)
        except (FileNotFoundError, TypeError, yaml.YAMLError) as e:
            raise ConfigurationError(str(e)) from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If validation fails.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid explorer configuration: {e}") from e
