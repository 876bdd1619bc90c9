import logging
import os
from typing import Dict

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..core.exceptions import (
    DerivationParameterError,
    EmptyPasswordError,
    EntropyError,
    InvalidPasswordError,
)

logger = logging.getLogger(__name__)


def generate_salt(length: int = 32) -> bytes:
    """Return ``length`` cryptographically secure random bytes from the OS."""
    if not isinstance(length, int) or isinstance(length, bool) or length <= 0:
        raise DerivationParameterError(f"salt length must be a positive integer, got {length!r}")
    try:
        return os.urandom(length)
    except (NotImplementedError, OSError) as e:
        raise EntropyError("OS random source is unavailable") from e


def derive_key(
    password: bytes | str,
    salt: bytes,
    iterations: int,
    output_bits: int,
) -> bytes:
    """
    Derive ``output_bits // 8`` bytes from a password using PBKDF2-HMAC-SHA256.
    Identical inputs always yield identical output.
    """
    if isinstance(password, str):
        try:
            password = password.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidPasswordError("password is not valid UTF-8 text") from e

    if not isinstance(iterations, int) or isinstance(iterations, bool) or iterations <= 0:
        raise DerivationParameterError(f"iteration count must be a positive integer, got {iterations!r}")
    if not isinstance(output_bits, int) or isinstance(output_bits, bool) or output_bits <= 0 or output_bits % 8:
        raise DerivationParameterError(f"output bits must be a positive multiple of 8, got {output_bits!r}")
    if not isinstance(salt, (bytes, bytearray)) or not salt:
        raise DerivationParameterError("salt must be non-empty bytes")
    if not isinstance(password, (bytes, bytearray)):
        raise DerivationParameterError("password must be str or bytes")
    if not password:
        raise EmptyPasswordError("refusing to derive a key from an empty password")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=output_bits // 8,
        salt=bytes(salt),
        iterations=iterations,
    )
    return kdf.derive(bytes(password))


def kdf_params_to_dict(salt: bytes, iterations: int, output_bits: int) -> Dict:
    return {
        "algo": "pbkdf2-sha256",
        "salt": salt.hex(),
        "iterations": iterations,
        "key_bits": output_bits,
    }
