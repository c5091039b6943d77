"""
Membership module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from modules.users.models import User, ResolutionOutcome


class AuthorizationDecision(BaseModel):
    """Result of MembershipPolicy.authorize_post."""

    allowed: bool
    reason: Optional[str] = Field(None, description="Set when allowed is False")
    user: User
    outcome: ResolutionOutcome = Field(
        ...,
        description="Whether the user was found or created while authorizing",
    )
    post_count: Optional[int] = Field(
        None,
        description="Existing posts counted for free-tier users",
    )

    @property
    def user_created(self) -> bool:
        return self.outcome == ResolutionOutcome.CREATED
