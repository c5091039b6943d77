"""
Users module.

Owns user records keyed by email and their membership tier.

Public API:
- IUserDirectory: Interface for user operations
- User, MembershipTier, ResolvedUser: Data models
- UserNotFoundError: Raised when an email has no user record
"""

from .interfaces import IUserDirectory, IUserRepository
from .models import (
    User,
    MembershipTier,
    ResolutionOutcome,
    ResolvedUser,
    RegisterUserRequest,
    UpgradeResponse,
)
from .exceptions import UserNotFoundError

__all__ = [
    # Interfaces
    "IUserDirectory",
    "IUserRepository",
    # Models
    "User",
    "MembershipTier",
    "ResolutionOutcome",
    "ResolvedUser",
    "RegisterUserRequest",
    "UpgradeResponse",
    # Exceptions
    "UserNotFoundError",
]
