"""Security infrastructure adapters.

- Password hashing (bcrypt)
- JWT access/refresh token issuance and verification
- One-time code generation and hashing
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.one_time_code_service import OneTimeCodeService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "OneTimeCodeService",
]
