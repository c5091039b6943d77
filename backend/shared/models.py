"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base model for everything that crosses the HTTP boundary.

    Fields are declared in snake_case and exposed as camelCase
    (``author_email`` <-> ``authorEmail``). Either spelling is
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def display_time(moment: datetime) -> str:
    """Format a timestamp for display, e.g. ``10/18/2026, 3:04:05 PM``."""
    hour = moment.hour % 12 or 12
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment:%M:%S} {'AM' if moment.hour < 12 else 'PM'}"
    )


def normalize_email(email: str) -> str:
    """
    Canonical form of an email address, used as the identity key.

    Addresses are compared case-insensitively, so the whole address is
    lowercased. Bodies and path parameters go through this same function.
    """
    return email.strip().lower()


# Validated email in canonical form, for request bodies
Email = Annotated[EmailStr, AfterValidator(normalize_email)]
