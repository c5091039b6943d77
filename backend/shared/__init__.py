"""
Shared infrastructure for the Forum backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository class
- observability: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    ForumError,
    NotFoundError,
    ValidationError,
    AuthorizationError,
    ExternalServiceError,
    PersistenceError,
)
from .models import ApiModel, Email, normalize_email, utc_now, display_time

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "ForumError",
    "NotFoundError",
    "ValidationError",
    "AuthorizationError",
    "ExternalServiceError",
    "PersistenceError",
    "ApiModel",
    "Email",
    "normalize_email",
    "utc_now",
    "display_time",
]
