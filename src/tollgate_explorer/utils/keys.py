"""Publisher key validation.

Publishers are identified by their Nostr public key. The explorer works
with the 64-character lowercase hex form; ``npub1`` bech32 keys are
accepted at the configuration/UI boundary and converted with
``nostr_sdk.PublicKey``.

Examples:
    ```python
    is_valid_publisher_key("5075e61f...416a")   # True
    is_valid_publisher_key("not-a-key")         # False
    normalize_publisher_key("npub1...")         # '5075e61f...416a'
    ```
"""

from __future__ import annotations

import re
from typing import Any, Final

from nostr_sdk import NostrSdkError, PublicKey


_HEX_KEY_PATTERN: Final = re.compile(r"[0-9a-fA-F]{64}")
_NPUB_PREFIX: Final = "npub1"


def is_valid_publisher_key(value: Any) -> bool:
    """Return True if *value* is a 64-character hexadecimal string."""
    return isinstance(value, str) and _HEX_KEY_PATTERN.fullmatch(value) is not None


def normalize_publisher_key(value: str) -> str:
    """Convert a hex or ``npub1`` public key into lowercase hex.

    Raises:
        ValueError: If *value* is neither a 64-character hex string nor a
            valid ``npub1`` key.
    """
    candidate = value.strip()
    if is_valid_publisher_key(candidate):
        return candidate.lower()
    if candidate.startswith(_NPUB_PREFIX):
        try:
            return PublicKey.parse(candidate).to_hex()
        except NostrSdkError as e:
            raise ValueError(f"Invalid npub publisher key: {e}") from e
    raise ValueError("Invalid pubkey format. Must be 64 character hex string.")
