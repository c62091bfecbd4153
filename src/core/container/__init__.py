"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_user_repository, ...

The container is organized into modules by concern:
- infrastructure: Core services (db, security, email, logging)
- repositories: Repository factories
- auth_handlers: Authentication handler and guard factories
- user_handlers: User management handler factories
- calendar_handlers: Calendar and membership handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_code_service,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_calendar_repository,
    get_member_repository,
    get_refresh_token_repository,
    get_user_repository,
)

# Auth handlers and guards
from src.core.container.auth_handlers import (
    get_confirm_password_change_handler,
    get_login_lock_guard,
    get_login_user_handler,
    get_logout_user_handler,
    get_password_reset_cooldown_guard,
    get_refresh_access_token_handler,
    get_register_user_handler,
    get_request_password_change_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
    get_verify_reset_code_handler,
)

# User handlers
from src.core.container.user_handlers import (
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_update_user_handler,
)

# Calendar handlers
from src.core.container.calendar_handlers import (
    get_add_member_handler,
    get_create_calendar_handler,
    get_delete_calendar_handler,
    get_list_calendars_handler,
    get_list_members_handler,
    get_membership_verifier,
    get_remove_member_handler,
    get_update_calendar_handler,
    get_update_member_role_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_password_service",
    "get_token_service",
    "get_code_service",
    "get_email_service",
    "get_logger",
    # Repositories
    "get_user_repository",
    "get_refresh_token_repository",
    "get_calendar_repository",
    "get_member_repository",
    # Auth handlers
    "get_register_user_handler",
    "get_verify_email_handler",
    "get_resend_verification_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_access_token_handler",
    "get_request_password_reset_handler",
    "get_verify_reset_code_handler",
    "get_reset_password_handler",
    "get_request_password_change_handler",
    "get_confirm_password_change_handler",
    "get_login_lock_guard",
    "get_password_reset_cooldown_guard",
    # User handlers
    "get_get_user_handler",
    "get_create_user_handler",
    "get_update_user_handler",
    "get_delete_user_handler",
    # Calendar handlers
    "get_membership_verifier",
    "get_create_calendar_handler",
    "get_list_calendars_handler",
    "get_update_calendar_handler",
    "get_delete_calendar_handler",
    "get_list_members_handler",
    "get_add_member_handler",
    "get_update_member_role_handler",
    "get_remove_member_handler",
]
