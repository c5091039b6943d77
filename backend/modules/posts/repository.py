"""
Post repositories.

SupabasePostRepository stores posts in the ``posts`` table with comments
embedded as a jsonb array. Vote increments and comment appends run as
Postgres functions (see migrations/001_forum_schema.sql) so each is a
single atomic statement.

InMemoryPostRepository keeps posts in process for development and tests.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Post, Comment, VoteDirection


class SupabasePostRepository(BaseRepository[Post]):
    """
    Repository for the ``posts`` table.

    Note: This repository does NOT check membership limits.
    The service layer runs the policy before calling create().
    """

    # -------------------------------------------------------------------------
    # Post CRUD operations
    # -------------------------------------------------------------------------

    def create(self, post: Post) -> Post:
        data = post.model_dump(mode="json")
        with self._guard("create post"):
            result = self._db.table("posts").insert(data).execute()
        return self._map_to_post(result.data[0]) if result.data else post

    def get(self, post_id: str) -> Optional[Post]:
        with self._guard("get post"):
            result = self._db.table("posts").select("*").eq("id", post_id).execute()
        if not result.data:
            return None
        return self._map_to_post(result.data[0])

    def list_newest_first(self) -> list[Post]:
        with self._guard("list posts"):
            result = self._db.table("posts").select("*").order(
                "created_at", desc=True
            ).execute()
        return [self._map_to_post(row) for row in result.data]

    def count_by_author(self, author_email: str) -> int:
        with self._guard("count posts"):
            result = self._db.table("posts").select(
                "id", count="exact"
            ).eq("author_email", author_email).execute()
        return result.count or 0

    def update_fields(self, post_id: str, fields: dict[str, Any]) -> bool:
        if not fields:
            return self.get(post_id) is not None
        with self._guard("update post"):
            result = self._db.table("posts").update(fields).eq("id", post_id).execute()
        return bool(result.data)

    def delete(self, post_id: str) -> bool:
        with self._guard("delete post"):
            result = self._db.table("posts").delete().eq("id", post_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Atomic single-row updates
    # -------------------------------------------------------------------------

    def increment_vote(self, post_id: str, direction: VoteDirection) -> bool:
        with self._guard("increment vote"):
            result = self._db.rpc("increment_post_vote", {
                "p_post_id": post_id,
                "p_column": direction.column,
            }).execute()
        return bool(result.data)

    def append_comment(self, post_id: str, comment: Comment) -> bool:
        with self._guard("append comment"):
            result = self._db.rpc("append_post_comment", {
                "p_post_id": post_id,
                "p_comment": comment.model_dump(mode="json"),
            }).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map database row to Post model."""
        return Post(
            id=str(data["id"]),
            author_email=data["author_email"],
            author_name=data.get("author_name") or "",
            author_image=data.get("author_image") or "",
            title=data["title"],
            content=data.get("content") or "",
            up_vote=data.get("up_vote", 0),
            down_vote=data.get("down_vote", 0),
            comments=[Comment(**c) for c in data.get("comments") or []],
            time=data["time"],
            created_at=data["created_at"],
        )


class InMemoryPostRepository:
    """Dict-backed post storage that remembers insertion order."""

    def __init__(self) -> None:
        self._posts: dict[str, Post] = {}

    def create(self, post: Post) -> Post:
        self._posts[post.id] = post.model_copy(deep=True)
        return post

    def get(self, post_id: str) -> Optional[Post]:
        post = self._posts.get(post_id)
        return post.model_copy(deep=True) if post else None

    def list_newest_first(self) -> list[Post]:
        # dicts keep insertion order, so reversing gives newest first
        return [p.model_copy(deep=True) for p in reversed(self._posts.values())]

    def count_by_author(self, author_email: str) -> int:
        return sum(1 for p in self._posts.values() if p.author_email == author_email)

    def update_fields(self, post_id: str, fields: dict[str, Any]) -> bool:
        post = self._posts.get(post_id)
        if post is None:
            return False
        self._posts[post_id] = post.model_copy(update=fields)
        return True

    def delete(self, post_id: str) -> bool:
        return self._posts.pop(post_id, None) is not None

    def increment_vote(self, post_id: str, direction: VoteDirection) -> bool:
        post = self._posts.get(post_id)
        if post is None:
            return False
        column = direction.column
        self._posts[post_id] = post.model_copy(
            update={column: getattr(post, column) + 1}
        )
        return True

    def append_comment(self, post_id: str, comment: Comment) -> bool:
        post = self._posts.get(post_id)
        if post is None:
            return False
        self._posts[post_id] = post.model_copy(
            update={"comments": [*post.comments, comment]}
        )
        return True
