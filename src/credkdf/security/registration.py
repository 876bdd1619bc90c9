"""Registration payload assembly for the first-party API."""
from __future__ import annotations

from dataclasses import dataclass

from ..core.encoding import format_secure
from .passwords import encrypt_secure


@dataclass(frozen=True)
class RegistrationPayload:
    """What the registration flow hands to the transport layer."""

    username: str
    email: str
    encrypted_password: str
    avatar: str

    def to_dict(self) -> dict:
        return {
            "username": self.username,
            "email": self.email,
            "encryptedPassword": self.encrypted_password,
            "avatar": self.avatar,
        }


def prepare_secure_registration(username: str, email: str, password: str, avatar: str) -> RegistrationPayload:
    """Encrypt ``password`` with the secure profile and bundle it as ``salt:hash``."""
    result = encrypt_secure(password)
    return RegistrationPayload(
        username=username,
        email=email,
        encrypted_password=format_secure(result["salt"], result["hash"]),
        avatar=avatar,
    )
