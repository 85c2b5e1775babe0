"""
Pytest configuration and shared fixtures for release explorer tests.

Provides:
- A release factory building events with arbitrary tags
- A fake relay client that records subscriptions and lets tests drive
  listener callbacks directly
- A store wired to the fake client with a fixed clock
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from tollgate_explorer.explorer.store import ReleaseStore
from tollgate_explorer.models import DEFAULT_PUBLISHER_KEY, Release
from tollgate_explorer.utils.relay_client import (
    RelayClient,
    SubscriptionHandle,
    SubscriptionListener,
    SubscriptionRequest,
)


FIXED_NOW = 1_750_000_000
OTHER_PUBLISHER_KEY = "ab" * 32


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Release Factory
# ============================================================================


def build_release(
    release_id: str = "a" * 64,
    *,
    created_at: int | None = FIXED_NOW,
    tags: Sequence[Sequence[str]] = (),
    content: str = "",
    pubkey: str = DEFAULT_PUBLISHER_KEY,
) -> Release:
    """Build a release with the given tags."""
    return Release(
        id=release_id,
        pubkey=pubkey,
        created_at=created_at,
        tags=[list(tag) for tag in tags],
        content=content,
    )


@pytest.fixture
def make_release() -> Callable[..., Release]:
    """Factory fixture wrapping ``build_release``."""
    return build_release


# ============================================================================
# Fake Relay Client
# ============================================================================


class FakeSubscription(SubscriptionHandle):
    """Subscription handle that only records whether it was abandoned."""

    def __init__(self, request: SubscriptionRequest, listener: SubscriptionListener) -> None:
        self.request = request
        self.listener = listener
        self.unsubscribed = False

    def unsubscribe(self) -> None:
        self.unsubscribed = True


class FakeRelayClient(RelayClient):
    """Relay client that hands listeners back to the test instead of streaming."""

    def __init__(self) -> None:
        self.subscriptions: list[FakeSubscription] = []
        self.fail_with: BaseException | None = None

    def subscribe(
        self, request: SubscriptionRequest, listener: SubscriptionListener
    ) -> FakeSubscription:
        if self.fail_with is not None:
            raise self.fail_with
        subscription = FakeSubscription(request, listener)
        self.subscriptions.append(subscription)
        return subscription

    @property
    def last(self) -> FakeSubscription:
        return self.subscriptions[-1]


@pytest.fixture
def fake_client() -> FakeRelayClient:
    return FakeRelayClient()


@pytest.fixture
def store(fake_client: FakeRelayClient) -> ReleaseStore:
    """Store on the default publisher with a fixed clock, not yet started."""
    return ReleaseStore(fake_client, clock=lambda: FIXED_NOW)


@pytest.fixture
def nostr_event_factory() -> Callable[..., Any]:
    """Factory building ``nostr_sdk.Event`` look-alikes with method chains."""
    from unittest.mock import MagicMock

    def _make(
        event_id: str,
        created_at: int = FIXED_NOW,
        tags: Sequence[Sequence[str]] = (),
        content: str = "",
        author: str = DEFAULT_PUBLISHER_KEY,
    ) -> MagicMock:
        event = MagicMock()
        event.id.return_value.to_hex.return_value = event_id
        event.author.return_value.to_hex.return_value = author
        event.created_at.return_value.as_secs.return_value = created_at
        tag_mocks = []
        for tag in tags:
            tag_mock = MagicMock()
            tag_mock.as_vec.return_value = list(tag)
            tag_mocks.append(tag_mock)
        event.tags.return_value.to_vec.return_value = tag_mocks
        event.content.return_value = content
        return event

    return _make
