"""
Posts module interfaces.

Routes depend on IPostService; the service depends on IPostRepository,
which the container binds to Supabase or in-memory storage.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import (
    Post,
    Comment,
    VoteDirection,
    CreatePostRequest,
    PostCreationResult,
)


@runtime_checkable
class IPostRepository(Protocol):
    """Storage operations for posts. Each write touches a single record."""

    def create(self, post: Post) -> Post:
        ...

    def get(self, post_id: str) -> Optional[Post]:
        ...

    def list_newest_first(self) -> list[Post]:
        ...

    def count_by_author(self, author_email: str) -> int:
        ...

    def update_fields(self, post_id: str, fields: dict[str, Any]) -> bool:
        """Overwrite the given columns. Returns False if the post is missing."""
        ...

    def delete(self, post_id: str) -> bool:
        ...

    def increment_vote(self, post_id: str, direction: VoteDirection) -> bool:
        """Atomically add 1 to a vote counter."""
        ...

    def append_comment(self, post_id: str, comment: Comment) -> bool:
        """Atomically append to the comment list."""
        ...


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.
    """

    async def create_post(self, request: CreatePostRequest) -> PostCreationResult:
        """
        Create a post if the author's membership allows it.

        Runs: resolve author -> count posts -> authorize -> create -> notify.

        Raises:
            PostLimitExceededError: If a free-tier author is at the limit
        """
        ...

    async def get_post(self, post_id: str) -> Post:
        """
        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        ...

    async def replace_post(self, post_id: str, fields: dict[str, Any]) -> None:
        ...

    async def delete_post(self, post_id: str) -> None:
        ...

    async def vote(self, post_id: str, direction: VoteDirection) -> None:
        ...

    async def add_comment(
        self,
        post_id: str,
        author_name: str,
        author_image: str,
        text: str,
    ) -> Comment:
        ...
