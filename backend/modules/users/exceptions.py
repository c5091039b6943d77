"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when no user exists for an email."""

    def __init__(self, email: str):
        super().__init__(
            f"User not found: {email}",
            code="USER_NOT_FOUND",
            details={"email": email},
        )
