"""
Users module data models.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from shared.models import ApiModel, Email


class MembershipTier(str, Enum):
    """Membership tiers. Upgrades only go from FREE to PREMIUM."""

    FREE = "free"
    PREMIUM = "premium"


class User(ApiModel):
    """A forum member, identified by email."""

    email: str = Field(..., description="Unique identity key")
    name: str = Field(default="", description="Display name")
    image: str = Field(default="", description="Avatar URL")
    membership: MembershipTier = Field(default=MembershipTier.FREE)
    created_at: datetime = Field(..., description="Creation time")


class ResolutionOutcome(str, Enum):
    """Whether resolve_or_create found a user or had to create one."""

    CREATED = "created"
    EXISTING = "existing"


class ResolvedUser(BaseModel):
    """Tagged result of resolve_or_create."""

    user: User
    outcome: ResolutionOutcome

    @property
    def created(self) -> bool:
        return self.outcome == ResolutionOutcome.CREATED


class RegisterUserRequest(ApiModel):
    """Request body for POST /users."""

    email: Email
    name: str = Field(default="", max_length=200)
    image: str = Field(default="", max_length=2000)


class UpgradeResponse(ApiModel):
    """Response for PUT /users/{email}/upgrade."""

    message: str
    upgraded: bool
