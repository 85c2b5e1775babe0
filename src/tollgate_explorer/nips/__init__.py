"""Nostr Implementation Possibility (NIP) support.

Currently only NIP-94 (file metadata), the event format TollGate
publishers use to announce releases.

See Also:
    [tollgate_explorer.nips.nip94][]: Release field accessors and the
        product classifier.
"""

from .nip94 import classify_product


__all__ = ["classify_product"]
