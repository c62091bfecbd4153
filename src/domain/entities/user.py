"""User domain entity for authentication and account security.

Pure business logic, no framework dependencies.

One-time code slots:
    The entity carries two independent code slots, each a (hash, expiry)
    pair that is always set and cleared as a unit:
    - email verification slot: proves ownership of the address
    - two-factor slot: forgot-password and change-password confirmation
    Clearing one slot never touches the other.

    The two-factor slot also holds the hash of a requested new password
    while a change awaits confirmation. Writing the slot always replaces
    that pending hash, so a forgot-password code issued mid-change cancels
    the change.
"""

import hmac
import math
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from src.domain.enums import UserRole

DEFAULT_MAX_FAILED_LOGINS = 5
DEFAULT_LOCKOUT = timedelta(minutes=15)
DEFAULT_RESET_COOLDOWN = timedelta(hours=24)
DEFAULT_TIMEZONE = "America/Toronto"


@dataclass
class NotificationPreferences:
    """Which channels the user wants reminders on."""

    email: bool = True
    sms: bool = False
    push: bool = True


@dataclass
class UserPreferences:
    """Per-user display and notification settings."""

    timezone: str = DEFAULT_TIMEZONE
    notifications: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )


@dataclass
class User:
    """User domain entity with authentication business rules.

    Business Rules:
        - Email verification required before login
        - Account locks after 5 failed login attempts
        - Lockout duration is 15 minutes
        - Failed login counter resets on successful login
        - A one-time code is valid only while its hash matches and it
          has not expired; consuming it clears the slot
        - A password reset blocks new reset requests for 24 hours

    Attributes:
        id: Unique user identifier
        email: Lowercase email address (unique)
        name: Display name
        password_hash: Bcrypt hash (never plaintext)
        role: Authorization role
        is_active: False when the account is soft-disabled
        is_email_verified: Email ownership confirmed
        failed_login_attempts: Consecutive failed logins
        lock_until: Account unusable until this moment (None if not locked)
        email_verification_code: SHA-256 hash of the pending email code
        email_verification_code_expiry: Expiry of the pending email code
        two_factor_code: SHA-256 hash of the pending reset/change code
        two_factor_code_expiry: Expiry of the pending reset/change code
        pending_password_hash: Bcrypt hash awaiting change confirmation
        last_password_reset_at: Last completed reset (cooldown anchor)
        last_login: Last successful login
        created_at: Creation timestamp (immutable)
        updated_at: Last modification timestamp

    Example:
        >>> user = User(id=uuid7(), email="ada@example.com", name="Ada",
        ...             password_hash="$2b$12$...")
        >>> user.is_locked()
        False
        >>> user.register_failed_login()
        False
        >>> user.failed_login_attempts
        1
    """

    id: UUID
    email: str
    name: str
    password_hash: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    is_email_verified: bool = False
    failed_login_attempts: int = 0
    lock_until: datetime | None = None
    email_verification_code: str | None = None
    email_verification_code_expiry: datetime | None = None
    two_factor_code: str | None = None
    two_factor_code_expiry: datetime | None = None
    pending_password_hash: str | None = None
    last_password_reset_at: datetime | None = None
    last_login: datetime | None = None
    preferences: UserPreferences = field(default_factory=UserPreferences)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # ------------------------------------------------------------------
    # Lockout
    # ------------------------------------------------------------------

    def is_locked(self) -> bool:
        """Check if the account is currently locked.

        Returns:
            bool: True while lock_until is in the future.
        """
        if self.lock_until is None:
            return False
        return datetime.now(UTC) < self.lock_until

    def lock_minutes_remaining(self) -> int:
        """Whole minutes (rounded up) until the lock expires, 0 if unlocked."""
        if not self.is_locked():
            return 0
        assert self.lock_until is not None
        remaining = (self.lock_until - datetime.now(UTC)).total_seconds()
        return max(1, math.ceil(remaining / 60))

    def register_failed_login(
        self,
        max_attempts: int = DEFAULT_MAX_FAILED_LOGINS,
        lockout: timedelta = DEFAULT_LOCKOUT,
    ) -> bool:
        """Increment the failed login counter, locking at the threshold.

        Args:
            max_attempts: Attempts that trigger the lock.
            lockout: How long the lock lasts.

        Returns:
            bool: True if this attempt locked the account.
        """
        self.failed_login_attempts += 1
        self.updated_at = datetime.now(UTC)
        if self.failed_login_attempts >= max_attempts:
            self.lock_until = datetime.now(UTC) + lockout
            return True
        return False

    def reset_failed_login(self) -> None:
        """Clear the failed login counter and any lock."""
        self.failed_login_attempts = 0
        self.lock_until = None
        self.updated_at = datetime.now(UTC)

    def clear_expired_lock(self) -> bool:
        """Reset lock state if a lock exists but has elapsed.

        Returns:
            bool: True if state changed and needs persisting.
        """
        if self.lock_until is not None and not self.is_locked():
            self.reset_failed_login()
            return True
        return False

    def record_login(self) -> None:
        """Apply the effects of a successful login."""
        self.reset_failed_login()
        self.last_login = datetime.now(UTC)

    def can_login(self) -> bool:
        """Active, verified and not locked."""
        return self.is_active and self.is_email_verified and not self.is_locked()

    # ------------------------------------------------------------------
    # Email verification slot
    # ------------------------------------------------------------------

    def set_email_verification_code(self, code_hash: str, expires_at: datetime) -> None:
        """Store a new pending email verification code (replaces any previous)."""
        self.email_verification_code = code_hash
        self.email_verification_code_expiry = expires_at
        self.updated_at = datetime.now(UTC)

    def clear_email_verification_code(self) -> None:
        """Clear the email verification slot."""
        self.email_verification_code = None
        self.email_verification_code_expiry = None
        self.updated_at = datetime.now(UTC)

    def email_verification_code_matches(self, code_hash: str) -> bool:
        """True iff a code is pending, the hash matches and it has not expired."""
        return _code_slot_matches(
            self.email_verification_code,
            self.email_verification_code_expiry,
            code_hash,
        )

    def mark_email_verified(self) -> None:
        """Confirm email ownership and consume the verification code."""
        self.is_email_verified = True
        self.clear_email_verification_code()

    # ------------------------------------------------------------------
    # Two-factor (password reset / change) slot
    # ------------------------------------------------------------------

    def set_two_factor_code(
        self,
        code_hash: str,
        expires_at: datetime,
        pending_password_hash: str | None = None,
    ) -> None:
        """Store a new pending code, replacing any previous code and pending password.

        Args:
            code_hash: SHA-256 hash of the emailed code.
            expires_at: When the code stops being accepted.
            pending_password_hash: New password hash for a change request.
                None for forgot-password, which discards any pending change.
        """
        self.two_factor_code = code_hash
        self.two_factor_code_expiry = expires_at
        self.pending_password_hash = pending_password_hash
        self.updated_at = datetime.now(UTC)

    def clear_two_factor_code(self) -> None:
        """Clear the two-factor slot, pending password included."""
        self.two_factor_code = None
        self.two_factor_code_expiry = None
        self.pending_password_hash = None
        self.updated_at = datetime.now(UTC)

    def two_factor_code_matches(self, code_hash: str) -> bool:
        """True iff a code is pending, the hash matches and it has not expired."""
        return _code_slot_matches(
            self.two_factor_code,
            self.two_factor_code_expiry,
            code_hash,
        )

    # ------------------------------------------------------------------
    # Password changes
    # ------------------------------------------------------------------

    def is_reset_cooldown_active(
        self, cooldown: timedelta = DEFAULT_RESET_COOLDOWN
    ) -> bool:
        """True if a password reset completed within the cooldown window."""
        if self.last_password_reset_at is None:
            return False
        return datetime.now(UTC) - self.last_password_reset_at < cooldown

    def reset_password(self, new_password_hash: str) -> None:
        """Apply a completed password reset.

        Sets the new hash, starts the reset cooldown and consumes the
        two-factor code. The email verification slot is left untouched.
        """
        self.password_hash = new_password_hash
        self.last_password_reset_at = datetime.now(UTC)
        self.clear_two_factor_code()

    def apply_pending_password(self) -> bool:
        """Promote the pending password hash and consume the code.

        No reset cooldown starts; this is an authenticated change.

        Returns:
            bool: False (and nothing changes) when no change is pending.
        """
        if self.pending_password_hash is None:
            return False
        self.password_hash = self.pending_password_hash
        self.clear_two_factor_code()
        return True

    # ------------------------------------------------------------------
    # Authorization
    # ------------------------------------------------------------------

    @property
    def is_admin(self) -> bool:
        """True for administrators."""
        return self.role == UserRole.ADMIN


def _code_slot_matches(
    stored_hash: str | None,
    expires_at: datetime | None,
    candidate_hash: str,
) -> bool:
    if stored_hash is None or expires_at is None:
        return False
    if datetime.now(UTC) > expires_at:
        return False
    return hmac.compare_digest(stored_hash, candidate_hash)
