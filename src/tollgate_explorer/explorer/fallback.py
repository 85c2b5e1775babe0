"""Synthetic sample releases for the default publisher.

When a subscription for the default publisher ends with zero live events,
the store shows this fixed data set instead of an empty explorer. The
sample releases are recognisable only by their ``mock-`` ids and
``releases.tollgate.example`` URLs; consumers receive them as ordinary
[Release][tollgate_explorer.models.release.Release] objects.

The set is three TollGate OS images (stable, beta, dev) and two TollGate
Core packages (stable, beta), one day apart, newest first.
"""

from __future__ import annotations

import time
from typing import Final

from tollgate_explorer.models.constants import DEFAULT_PUBLISHER_KEY, ReleaseChannel
from tollgate_explorer.models.release import Release


_DAY: Final[int] = 86_400
_OS_CHANNELS: Final[tuple[ReleaseChannel, ...]] = (
    ReleaseChannel.STABLE,
    ReleaseChannel.BETA,
    ReleaseChannel.DEV,
)
_CORE_CHANNELS: Final[tuple[ReleaseChannel, ...]] = (
    ReleaseChannel.STABLE,
    ReleaseChannel.BETA,
)
_BASE_URL: Final[str] = "https://releases.tollgate.example"
_ARCHITECTURE: Final[str] = "aarch64_cortex-a53"


def _os_release(i: int, channel: ReleaseChannel, now: int) -> Release:
    version = f"v1.{3 - i}.0"
    device = f"gl-mt300{i}"
    file_hash = f"hash{i}abcdef1234567890"
    return Release(
        id=f"mock-os-{i}",
        pubkey=DEFAULT_PUBLISHER_KEY,
        created_at=now - i * _DAY,
        tags=[
            ["url", f"{_BASE_URL}/tollgate-os-{version}-gl-mt3000.bin"],
            ["m", "application/octet-stream"],
            ["x", file_hash],
            ["ox", file_hash],
            ["architecture", _ARCHITECTURE],
            ["device_id", device],
            ["supported_devices", f"{device},{device}-v2"],
            ["openwrt_version", f"24.10.{i + 1}"],
            ["tollgate_os_version", version],
            ["release_channel", channel.value],
        ],
        content=(
            f"TollGate OS {version} for GL-MT300{i} - "
            "OpenWRT-based firmware with integrated payment gateway"
        ),
    )


def _core_release(i: int, channel: ReleaseChannel, now: int) -> Release:
    version = f"v0.{5 - i}.0"
    file_hash = f"corehash{i}abcdef1234567890"
    return Release(
        id=f"mock-core-{i}",
        pubkey=DEFAULT_PUBLISHER_KEY,
        created_at=now - (i + len(_OS_CHANNELS)) * _DAY,
        tags=[
            ["url", f"{_BASE_URL}/tollgate-core-{version}-aarch64.ipk"],
            ["m", "application/x-ipk"],
            ["x", file_hash],
            ["ox", file_hash],
            ["architecture", _ARCHITECTURE],
            ["tollgate_core_version", version],
            ["release_channel", channel.value],
        ],
        content=f"TollGate Core {version} - Payment gateway package for OpenWRT",
    )


def fallback_releases(now: int | None = None) -> list[Release]:
    """Build the sample data set, newest first.

    Args:
        now: Timestamp of the newest release. Defaults to the current time.
    """
    if now is None:
        now = int(time.time())
    releases = [_os_release(i, channel, now) for i, channel in enumerate(_OS_CHANNELS)]
    releases += [_core_release(i, channel, now) for i, channel in enumerate(_CORE_CHANNELS)]
    releases.sort(key=lambda release: release.timestamp, reverse=True)
    return releases
