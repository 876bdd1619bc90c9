"""Unit tests for the Key Derivation Function (KDF) module."""

import hashlib
from unittest.mock import patch

import pytest

from credkdf.core.exceptions import (
    DerivationParameterError,
    EmptyPasswordError,
    EntropyError,
    InvalidPasswordError,
)
from credkdf.security.kdf import derive_key, generate_salt, kdf_params_to_dict

# RFC 7914 section 11, PBKDF2-HMAC-SHA256, P="passwd", S="salt", c=1
RFC7914_VECTOR = bytes.fromhex(
    "55ac046e56e3089fec1691c22544b605f94185216dde0465e68b9d57c20dacbc"
    "49ca9cccf179b645991664b39d77ef317c71b845b1e30bd509112041d3a19783"
)


# ==============================================================================
# Tests: Salt generation
# ==============================================================================

def test_generate_salt_defaults():
    """Ensure salt generation returns bytes of the default length (32)."""
    salt = generate_salt()
    assert isinstance(salt, bytes)
    assert len(salt) == 32


def test_generate_salt_custom_length():
    """Ensure salt generation respects the length parameter."""
    salt = generate_salt(length=16)
    assert len(salt) == 16
    assert isinstance(salt, bytes)


def test_generate_salt_is_random():
    assert generate_salt() != generate_salt()


@pytest.mark.parametrize("length", [0, -1, 1.5, True])
def test_generate_salt_rejects_bad_length(length):
    with pytest.raises(DerivationParameterError):
        generate_salt(length)


def test_generate_salt_entropy_failure():
    """An unavailable OS random source surfaces as EntropyError."""
    with patch("credkdf.security.kdf.os.urandom", side_effect=NotImplementedError("no source")):
        with pytest.raises(EntropyError, match="random source"):
            generate_salt(16)


# ==============================================================================
# Tests: Derivation
# ==============================================================================

def test_derive_key_known_vector():
    key = derive_key(b"passwd", b"salt", 1, 512)
    assert key == RFC7914_VECTOR


def test_derive_key_matches_hashlib():
    salt = generate_salt(16)
    expected = hashlib.pbkdf2_hmac("sha256", b"hunter2", salt, 1000, dklen=16)
    assert derive_key(b"hunter2", salt, 1000, 128) == expected


@pytest.mark.parametrize("bits", [8, 128, 256, 512])
def test_derive_key_output_length(bits):
    assert len(derive_key(b"pass", b"salt", 10, bits)) == bits // 8


def test_derive_key_is_deterministic():
    salt = generate_salt(16)
    assert derive_key(b"pass", salt, 100, 128) == derive_key(b"pass", salt, 100, 128)


def test_derive_key_string_and_bytes_agree():
    """Ensure passing the same password as string or bytes yields the same key."""
    salt = generate_salt(16)
    assert derive_key("pässword", salt, 100, 256) == derive_key("pässword".encode("utf-8"), salt, 100, 256)


def test_derive_key_depends_on_salt_and_iterations():
    base = derive_key(b"pass", b"salt-one", 100, 256)
    assert derive_key(b"pass", b"salt-two", 100, 256) != base
    assert derive_key(b"pass", b"salt-one", 101, 256) != base


@pytest.mark.parametrize("iterations", [0, -5, 1.0, None])
def test_derive_key_rejects_bad_iterations(iterations):
    with pytest.raises(DerivationParameterError, match="iteration"):
        derive_key(b"pass", b"salt", iterations, 256)


@pytest.mark.parametrize("bits", [0, -8, 12, 255])
def test_derive_key_rejects_unaligned_bits(bits):
    with pytest.raises(DerivationParameterError, match="multiple of 8"):
        derive_key(b"pass", b"salt", 10, bits)


@pytest.mark.parametrize("password", ["", b""])
def test_derive_key_rejects_empty_password(password):
    with pytest.raises(EmptyPasswordError):
        derive_key(password, b"salt", 10, 256)


def test_derive_key_rejects_empty_salt():
    with pytest.raises(DerivationParameterError, match="salt"):
        derive_key(b"pass", b"", 10, 256)


def test_kdf_params_to_dict():
    """Validate the parameter description helper."""
    result = kdf_params_to_dict(salt=b"\xaa" * 16, iterations=50_000, output_bits=128)

    assert result == {
        "algo": "pbkdf2-sha256",
        "salt": "aa" * 16,
        "iterations": 50_000,
        "key_bits": 128,
    }


def test_derive_key_rejects_unencodable_password():
    """A lone surrogate cannot be UTF-8 encoded and is rejected as a bad password."""
    with pytest.raises(InvalidPasswordError, match="UTF-8"):
        derive_key("\ud800", b"salt", 10, 256)
