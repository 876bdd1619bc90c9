"""Fixed KDF parameter sets.

The compact and deterministic profiles use fewer iterations and shorter salts
and keys than the secure profile so their base64 form fits a third-party
password field capped at 72 characters. Keep them separate from SECURE.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KdfProfile:
    name: str
    salt_bytes: int
    iterations: int
    key_bits: int
    encoding: str
    separator: str
    max_length: Optional[int] = None

    @property
    def key_bytes(self) -> int:
        return self.key_bits // 8

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "salt_bytes": self.salt_bytes,
            "iterations": self.iterations,
            "key_bits": self.key_bits,
            "encoding": self.encoding,
            "separator": self.separator,
            "max_length": self.max_length,
        }


SECURE = KdfProfile(
    name="secure",
    salt_bytes=32,
    iterations=100_000,
    key_bits=256,
    encoding="hex",
    separator=":",
)

COMPACT = KdfProfile(
    name="compact",
    salt_bytes=16,
    iterations=50_000,
    key_bits=128,
    encoding="base64",
    separator=".",
    max_length=72,
)

# salt is SHA-256(normalized email)[:16], never random
DETERMINISTIC = KdfProfile(
    name="deterministic",
    salt_bytes=16,
    iterations=50_000,
    key_bits=128,
    encoding="base64",
    separator=".",
    max_length=72,
)

PROFILES = {p.name: p for p in (SECURE, COMPACT, DETERMINISTIC)}


def get_profile(name: str) -> KdfProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(f"unknown profile {name!r}, expected one of {sorted(PROFILES)}") from None
