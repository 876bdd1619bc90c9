"""Password encryption and verification for the three KDF profiles.

- secure: 32-byte random salt, PBKDF2-HMAC-SHA256 at 100,000 iterations,
  256-bit key, both hex-encoded. Used for the first-party API.
- compact: 16-byte random salt, 50,000 iterations, 128-bit key, encoded as
  ``<base64-salt>.<base64-hash>`` and capped at 72 characters.
- deterministic: like compact, but the salt is the first 16 bytes of
  SHA-256 over the normalized email, so the same password and email always
  produce the same string.

Verification never raises on a malformed stored value; it reports a mismatch.
"""
from __future__ import annotations

import hmac
import logging
from typing import Dict, Optional

from ..core.encoding import format_compact, from_hex, parse_compact, parse_secure, to_hex
from ..core.exceptions import InvalidEmailError, InvalidPasswordError, MalformedCredentialError
from ..core.hashing import email_salt
from .kdf import derive_key, generate_salt
from .profiles import COMPACT, DETERMINISTIC, SECURE

logger = logging.getLogger(__name__)


def _same(a: bytes, b: bytes) -> bool:
    return hmac.compare_digest(a, b)


# ----------------------------------------------------------------------
# Secure profile
# ----------------------------------------------------------------------

def encrypt_secure(password: str, salt_hex: Optional[str] = None) -> Dict[str, str]:
    """Return ``{"hash": ..., "salt": ...}`` as lowercase hex strings.

    A fresh 32-byte salt is generated unless ``salt_hex`` is given.
    """
    if salt_hex is not None:
        salt = from_hex(salt_hex)
        if not salt:
            raise MalformedCredentialError("salt must not be empty")
    else:
        salt = generate_salt(SECURE.salt_bytes)
    logger.debug("deriving %s key (%d iterations, %d bits)", SECURE.name, SECURE.iterations, SECURE.key_bits)
    key = derive_key(password, salt, SECURE.iterations, SECURE.key_bits)
    return {"hash": to_hex(key), "salt": to_hex(salt)}


def verify_secure(password: str, stored_hash_hex: str, stored_salt_hex: str) -> bool:
    """Re-derive with the stored salt and compare hex digests exactly."""
    if not isinstance(stored_hash_hex, str) or not isinstance(stored_salt_hex, str):
        return False
    try:
        candidate = encrypt_secure(password, stored_salt_hex)["hash"]
    except (MalformedCredentialError, InvalidPasswordError) as e:
        logger.warning("secure verification rejected input: %s", e)
        return False
    return _same(candidate.encode("utf-8"), stored_hash_hex.encode("utf-8"))


def validate_password_secure(password: str, stored: str) -> bool:
    """Verify ``password`` against a combined ``salt:hash`` string."""
    try:
        salt_hex, hash_hex = parse_secure(stored)
    except MalformedCredentialError as e:
        logger.warning("secure credential rejected: %s", e)
        return False
    return verify_secure(password, hash_hex, salt_hex)


# ----------------------------------------------------------------------
# Compact profile
# ----------------------------------------------------------------------

def encrypt_compact(password: str) -> str:
    salt = generate_salt(COMPACT.salt_bytes)
    logger.debug("deriving %s key (%d iterations, %d bits)", COMPACT.name, COMPACT.iterations, COMPACT.key_bits)
    key = derive_key(password, salt, COMPACT.iterations, COMPACT.key_bits)
    return format_compact(salt, key, COMPACT.max_length)


def verify_compact(password: str, stored: str) -> bool:
    try:
        salt, stored_key = parse_compact(stored)
        key = derive_key(password, salt, COMPACT.iterations, COMPACT.key_bits)
    except (MalformedCredentialError, InvalidPasswordError) as e:
        logger.warning("compact verification rejected input: %s", e)
        return False
    return _same(key, stored_key)


# ----------------------------------------------------------------------
# Deterministic profile
# ----------------------------------------------------------------------

def encrypt_deterministic(password: str, email: str) -> str:
    salt = email_salt(email, DETERMINISTIC.salt_bytes)
    logger.debug(
        "deriving %s key (%d iterations, %d bits)",
        DETERMINISTIC.name, DETERMINISTIC.iterations, DETERMINISTIC.key_bits,
    )
    key = derive_key(password, salt, DETERMINISTIC.iterations, DETERMINISTIC.key_bits)
    return format_compact(salt, key, DETERMINISTIC.max_length)


def verify_deterministic(password: str, email: str, stored: str) -> bool:
    # The salt is derivable from the email, so compare whole strings.
    try:
        candidate = encrypt_deterministic(password, email)
    except (InvalidPasswordError, InvalidEmailError) as e:
        logger.warning("deterministic verification rejected input: %s", e)
        return False
    if not isinstance(stored, str):
        return False
    return _same(candidate.encode("utf-8"), stored.encode("utf-8"))
