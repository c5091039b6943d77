"""
Posts module.

Handles post storage, the membership-gated creation pipeline, votes
and comments.

Public API:
- IPostService: Interface for post operations
- Post, Comment, VoteDirection: Data models
- PostNotFoundError: Raised when a post id has no record
"""

from .interfaces import IPostService, IPostRepository
from .models import (
    Post,
    Comment,
    VoteDirection,
    CreatePostRequest,
    UpdatePostRequest,
    AddCommentRequest,
    PostCreationResult,
    MessageResponse,
    CommentAddedResponse,
)
from .exceptions import PostNotFoundError

__all__ = [
    # Interfaces
    "IPostService",
    "IPostRepository",
    # Models
    "Post",
    "Comment",
    "VoteDirection",
    "CreatePostRequest",
    "UpdatePostRequest",
    "AddCommentRequest",
    "PostCreationResult",
    "MessageResponse",
    "CommentAddedResponse",
    # Exceptions
    "PostNotFoundError",
]
