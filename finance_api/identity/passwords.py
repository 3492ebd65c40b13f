"""
===============================================================================
TARJETA CRC — identity/passwords.py
===============================================================================

Módulo:
    Hashing de contraseñas (Argon2)

Responsabilidades:
    - Hashear/verificar passwords con argon2-cffi.
    - Ejecutar el trabajo CPU-bound en un thread (no bloquear el event loop).

Colaboradores:
    - domain.services.PasswordHasher (puerto que implementa).
    - application/usecases/user, session (consumidores).
===============================================================================
"""

from __future__ import annotations

import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

_password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hashea un password usando Argon2."""
    return _password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verifica password vs hash almacenado."""
    try:
        return _password_hasher.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


class Argon2PasswordHasher:
    """Adapter async del puerto PasswordHasher."""

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(verify_password, password, password_hash)
