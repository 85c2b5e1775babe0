"""
NIP-94 file metadata normalization for TollGate releases.

Pure, stateless functions that read typed fields out of a
[Release][tollgate_explorer.models.release.Release], applying fallback
chains and heuristic product inference.

Attributes:
    accessors: Per-field ``get_release_*`` accessors plus date formatting
        and text truncation helpers.
    classifier: Product type inference with a fixed precedence order.
"""

from .accessors import (
    get_product_display_name,
    get_release_architecture,
    get_release_channel,
    get_release_date,
    get_release_device_id,
    get_release_download_url,
    get_release_file_hash,
    get_release_mime_type,
    get_release_openwrt_version,
    get_release_product_type,
    get_release_supported_devices,
    get_release_version,
    truncate_text,
)
from .classifier import classify_product


__all__ = [
    "classify_product",
    "get_product_display_name",
    "get_release_architecture",
    "get_release_channel",
    "get_release_date",
    "get_release_device_id",
    "get_release_download_url",
    "get_release_file_hash",
    "get_release_mime_type",
    "get_release_openwrt_version",
    "get_release_product_type",
    "get_release_supported_devices",
    "get_release_version",
    "truncate_text",
]
