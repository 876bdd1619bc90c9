"""Text encodings and wire formats for encoded credentials.

Two representations are supported:
- hex: lowercase, two characters per byte
- base64: standard alphabet with padding

and two wire formats built on them:
- ``<hex-salt>:<hex-hash>`` for the secure profile
- ``<base64-salt>.<base64-hash>`` for the compact and deterministic profiles
"""
from __future__ import annotations

import base64
import binascii
from typing import Optional, Tuple

from .exceptions import EncodingOverflowError, MalformedCredentialError

SECURE_SEPARATOR = ":"
COMPACT_SEPARATOR = "."


def to_hex(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii")


def from_hex(text: str) -> bytes:
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError, TypeError) as e:
        raise MalformedCredentialError(f"invalid hex string: {e}") from e


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_base64(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise MalformedCredentialError(f"invalid base64 string: {e}") from e


def join_credential(salt_text: str, hash_text: str, separator: str, max_length: Optional[int] = None) -> str:
    """Join encoded salt and hash with ``separator``.

    Raises EncodingOverflowError if ``max_length`` is set and the result is longer;
    the value is never truncated.
    """
    joined = f"{salt_text}{separator}{hash_text}"
    if max_length is not None and len(joined) > max_length:
        raise EncodingOverflowError(
            f"encoded credential is {len(joined)} characters, limit is {max_length}"
        )
    return joined


def split_credential(stored: str, separator: str) -> Tuple[str, str]:
    """Split ``stored`` into (salt_text, hash_text).

    Raises MalformedCredentialError unless there are exactly two non-empty parts.
    """
    if not isinstance(stored, str):
        raise MalformedCredentialError("stored credential must be a string")
    parts = stored.split(separator)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedCredentialError(
            f"expected '<salt>{separator}<hash>', got {len(parts)} part(s)"
        )
    return parts[0], parts[1]


def format_secure(salt_hex: str, hash_hex: str) -> str:
    return join_credential(salt_hex, hash_hex, SECURE_SEPARATOR)


def parse_secure(stored: str) -> Tuple[str, str]:
    return split_credential(stored, SECURE_SEPARATOR)


def format_compact(salt: bytes, key: bytes, max_length: Optional[int] = None) -> str:
    return join_credential(to_base64(salt), to_base64(key), COMPACT_SEPARATOR, max_length)


def parse_compact(stored: str) -> Tuple[bytes, bytes]:
    """Decode ``<base64-salt>.<base64-hash>`` into raw (salt, key) bytes."""
    salt_text, hash_text = split_credential(stored, COMPACT_SEPARATOR)
    salt, key = from_base64(salt_text), from_base64(hash_text)
    if not salt or not key:
        raise MalformedCredentialError("salt and hash must both decode to non-empty bytes")
    return salt, key
