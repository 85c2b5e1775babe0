"""Nostr helpers: publisher key validation and the relay subscription client.

Attributes:
    is_valid_publisher_key: 64-character hex check used before switching
        publishers.
    normalize_publisher_key: Hex/npub to lowercase hex conversion.
    RelayClient: Abstract relay subscription interface.
    NostrRelayClient: nostr-sdk implementation of ``RelayClient``.
"""

from .keys import is_valid_publisher_key, normalize_publisher_key
from .relay_client import (
    NostrRelayClient,
    NostrSubscription,
    RelayClient,
    SubscriptionHandle,
    SubscriptionListener,
    SubscriptionRequest,
    create_client,
)


__all__ = [
    "NostrRelayClient",
    "NostrSubscription",
    "RelayClient",
    "SubscriptionHandle",
    "SubscriptionListener",
    "SubscriptionRequest",
    "create_client",
    "is_valid_publisher_key",
    "normalize_publisher_key",
]
