"""
Posts module data models.

These models define the data structures used by the posts module
and exposed over the API (camelCase on the wire).
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from shared.models import ApiModel, Email


class VoteDirection(str, Enum):
    """Which counter a vote increments."""

    UP = "up"
    DOWN = "down"

    @property
    def column(self) -> str:
        return "up_vote" if self is VoteDirection.UP else "down_vote"


class Comment(ApiModel):
    """A comment embedded in a post. Comments are append-only."""

    id: str = Field(..., description="Comment ID (UUID)")
    author_name: str = Field(default="")
    author_image: str = Field(default="")
    text: str
    time: str = Field(..., description="Human-readable creation time")


class Post(ApiModel):
    """A forum post with its votes and comments."""

    id: str = Field(..., description="Post ID (UUID)")
    author_email: str = Field(..., description="Author identity, not enforced as a reference")
    author_name: str = Field(default="")
    author_image: str = Field(default="")
    title: str
    content: str = Field(default="")
    up_vote: int = Field(default=0, ge=0)
    down_vote: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)
    time: str = Field(..., description="Human-readable creation time")
    created_at: datetime = Field(..., description="Creation time, used for ordering")


class CreatePostRequest(ApiModel):
    """Request body for POST /posts."""

    author_email: Email
    author_name: str = Field(default="Anonymous", max_length=200)
    author_image: str = Field(default="", max_length=2000)
    title: str = Field(..., min_length=1, max_length=300)
    content: str = Field(default="", max_length=50000)


class UpdatePostRequest(ApiModel):
    """
    Request body for PUT /posts/{id}.

    Every supplied field overwrites the stored value, vote counters and
    author identity included. ``id``, ``time``, ``createdAt`` and
    ``comments`` cannot be replaced; unknown fields are rejected. A field
    sent as null is rejected too: omit it to leave it unchanged.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = Field(None, max_length=50000)
    author_email: Optional[Email] = None
    author_name: Optional[str] = None
    author_image: Optional[str] = None
    up_vote: Optional[int] = Field(None, ge=0)
    down_vote: Optional[int] = Field(None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("null is not allowed, omit the field instead")
        return value

    def changes(self) -> dict[str, Any]:
        """Supplied fields keyed by storage column name."""
        return self.model_dump(exclude_unset=True)


class AddCommentRequest(ApiModel):
    """Request body for PUT /posts/{id}/comment."""

    author_name: str = Field(default="Anonymous", max_length=200)
    author_image: str = Field(default="", max_length=2000)
    text: str = Field(..., min_length=1, max_length=10000)


class PostCreationResult(ApiModel):
    """
    Response for POST /posts.

    ``notifications_failed`` reports a fan-out failure after the post
    was stored; the post is kept in that case.
    """

    acknowledged: bool = True
    inserted_id: str
    post: Post
    notified_count: int = Field(default=0, ge=0)
    notifications_failed: bool = False


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    message: str


class CommentAddedResponse(ApiModel):
    """Response for PUT /posts/{id}/comment."""

    message: str
    comment: Comment
