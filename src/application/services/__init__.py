"""Application services shared by several handlers."""

from src.application.services.membership_verifier import MembershipVerifier
from src.application.services.permission_checker import PermissionChecker

__all__ = ["MembershipVerifier", "PermissionChecker"]
