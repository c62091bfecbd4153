"""Domain protocols (ports).

Infrastructure adapters implement these structurally. No inheritance is
required.
"""

from src.domain.protocols.calendar_repository import CalendarRepository
from src.domain.protocols.email_service_protocol import EmailServiceProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository
from src.domain.protocols.one_time_code_protocol import OneTimeCodeProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_repository import DuplicateEmailError, UserRepository

__all__ = [
    "CalendarRepository",
    "DuplicateEmailError",
    "EmailServiceProtocol",
    "LoggerProtocol",
    "MemberRepository",
    "OneTimeCodeProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "TokenGenerationProtocol",
    "UserRepository",
]
