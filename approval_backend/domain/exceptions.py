"""
Exception hierarchy for account lifecycle operations.

Use cases raise these; the API layer translates them into HTTP responses.
Notification failures are not represented here: the email service reports
them as a boolean instead of raising.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AccountError(Exception):
    """Base exception for all account errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Lookup / state
# -----------------------------------------------------------------------------


class UserNotFoundError(AccountError):
    """Raised when the referenced user does not exist."""

    def __init__(self, user_id: Optional[str] = None):
        super().__init__("User not found")
        self.user_id = user_id


class InvalidUserStateError(AccountError):
    """Raised when a decision is attempted on a user that is no longer pending."""

    def __init__(self, current_status: str):
        super().__init__(f"User is already {current_status}")
        self.current_status = current_status


class DuplicateEmailError(AccountError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class UserStoreError(AccountError):
    """Raised when the user store is unreachable or a write fails."""
    pass


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class AccountNotApprovedError(AccountError):
    """Raised when a pending or rejected account tries to log in."""

    def __init__(self, current_status: str):
        super().__init__(f"Account is {current_status}")
        self.current_status = current_status


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class InvalidAccountDetailsError(AccountError):
    """Raised when account details fail the same checks registration applies."""
    pass
