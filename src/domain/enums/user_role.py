"""User roles for role-based authorization.

Roles:
    - admin: Full access, may act on any user account
    - user: Standard account, may act only on itself

Usage:
    from src.domain.enums import UserRole

    if current_user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String enum so values serialize directly into JWT claims and JSON.
    """

    ADMIN = "admin"
    USER = "user"
