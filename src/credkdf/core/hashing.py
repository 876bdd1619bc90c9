""" Utility for digest operations. """

import hashlib

from .exceptions import InvalidEmailError


def normalize_email(email: str) -> str:
    # Lower-cased and trimmed; every caller must agree on this form.
    return email.strip().lower()


def calculate_sha256_bytes(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def email_salt(email: str, length: int = 16) -> bytes:

    # First `length` bytes of SHA-256 over the normalized email.

    try:
        data = normalize_email(email).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEmailError("email is not valid UTF-8 text") from e
    digest = calculate_sha256_bytes(data)
    return digest[:length]
