"""Non-blocking wrappers for use inside an asyncio event loop.

PBKDF2 is CPU-bound; each wrapper runs the synchronous function on a worker
thread. Calls share no state, so any number may run concurrently. A cancelled
call's result is discarded.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from . import passwords, registration


async def encrypt_secure_async(password: str, salt_hex: Optional[str] = None) -> Dict[str, str]:
    return await asyncio.to_thread(passwords.encrypt_secure, password, salt_hex)


async def verify_secure_async(password: str, stored_hash_hex: str, stored_salt_hex: str) -> bool:
    return await asyncio.to_thread(passwords.verify_secure, password, stored_hash_hex, stored_salt_hex)


async def validate_password_secure_async(password: str, stored: str) -> bool:
    return await asyncio.to_thread(passwords.validate_password_secure, password, stored)


async def encrypt_compact_async(password: str) -> str:
    return await asyncio.to_thread(passwords.encrypt_compact, password)


async def verify_compact_async(password: str, stored: str) -> bool:
    return await asyncio.to_thread(passwords.verify_compact, password, stored)


async def encrypt_deterministic_async(password: str, email: str) -> str:
    return await asyncio.to_thread(passwords.encrypt_deterministic, password, email)


async def verify_deterministic_async(password: str, email: str, stored: str) -> bool:
    return await asyncio.to_thread(passwords.verify_deterministic, password, email, stored)


async def prepare_secure_registration_async(
    username: str, email: str, password: str, avatar: str
) -> registration.RegistrationPayload:
    return await asyncio.to_thread(
        registration.prepare_secure_registration, username, email, password, avatar
    )
