"""
Identidad: hashing de contraseñas (argon2), tokens JWT y dependencia bearer.
"""

from .passwords import Argon2PasswordHasher, hash_password, verify_password
from .tokens import JWTTokenService

__all__ = [
    "Argon2PasswordHasher",
    "JWTTokenService",
    "hash_password",
    "verify_password",
]
