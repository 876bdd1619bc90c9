"""Security helpers: salt generation, PBKDF2 key derivation and password profiles for CredKDF.

This package provides:
- PBKDF2-HMAC-SHA256 key derivation over an OS-random (or email-derived) salt
- the secure, compact and deterministic encrypt/verify pairs
- the registration payload helper
- asyncio wrappers that keep the derivation off the event loop
"""

from .kdf import generate_salt, derive_key, kdf_params_to_dict
from .profiles import KdfProfile, SECURE, COMPACT, DETERMINISTIC, get_profile
from .passwords import (
    encrypt_secure,
    verify_secure,
    validate_password_secure,
    encrypt_compact,
    verify_compact,
    encrypt_deterministic,
    verify_deterministic,
)
from .registration import RegistrationPayload, prepare_secure_registration

__all__ = [
    "generate_salt",
    "derive_key",
    "kdf_params_to_dict",
    "KdfProfile",
    "SECURE",
    "COMPACT",
    "DETERMINISTIC",
    "get_profile",
    "encrypt_secure",
    "verify_secure",
    "validate_password_secure",
    "encrypt_compact",
    "verify_compact",
    "encrypt_deterministic",
    "verify_deterministic",
    "RegistrationPayload",
    "prepare_secure_registration",
]
