"""
Posts service implementation.

Runs the membership-gated creation pipeline and the direct post
operations (update, delete, vote, comment).
"""

import logging
import uuid
from typing import Any

from shared.exceptions import PersistenceError
from shared.models import normalize_email, utc_now, display_time
from modules.membership.service import MembershipPolicy
from modules.membership.exceptions import PostLimitExceededError
from modules.notifications.interfaces import INotificationService

from .interfaces import IPostService, IPostRepository
from .models import (
    Post,
    Comment,
    VoteDirection,
    CreatePostRequest,
    PostCreationResult,
)
from .exceptions import PostNotFoundError

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """
    Post service.

    create_post is strictly sequential: the membership decision completes
    before the post is written, and notifications go out after it is
    stored. Nothing is rolled back if fan-out fails.
    """

    def __init__(
        self,
        repository: IPostRepository,
        policy: MembershipPolicy,
        notifications: INotificationService,
    ):
        self._repo = repository
        self._policy = policy
        self._notifications = notifications

    async def create_post(self, request: CreatePostRequest) -> PostCreationResult:
        """Authorize, store and announce a new post."""
        email = normalize_email(str(request.author_email))
        decision = await self._policy.authorize_post(
            email,
            request.author_name,
            request.author_image,
        )
        if not decision.allowed:
            raise PostLimitExceededError(
                email,
                limit=self._policy.free_post_limit,
                post_count=decision.post_count or 0,
            )

        now = utc_now()
        post = self._repo.create(Post(
            id=str(uuid.uuid4()),
            author_email=email,
            author_name=request.author_name,
            author_image=request.author_image,
            title=request.title,
            content=request.content,
            up_vote=0,
            down_vote=0,
            comments=[],
            time=display_time(now),
            created_at=now,
        ))
        logger.info(f"Created post {post.id} by {email}")

        try:
            notified = await self._notifications.announce_new_post(
                email, post.author_name, post.title
            )
        except PersistenceError:
            logger.warning(
                f"Post {post.id} was stored but notification fan-out failed",
                exc_info=True,
            )
            return PostCreationResult(
                inserted_id=post.id,
                post=post,
                notified_count=0,
                notifications_failed=True,
            )

        return PostCreationResult(
            inserted_id=post.id,
            post=post,
            notified_count=notified,
        )

    async def get_post(self, post_id: str) -> Post:
        post = self._repo.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def list_posts(self) -> list[Post]:
        return self._repo.list_newest_first()

    async def replace_post(self, post_id: str, fields: dict[str, Any]) -> None:
        """
        Overwrite the supplied fields of a post.

        No field is protected by this method; callers choose which
        fields may reach it (see UpdatePostRequest). A replaced author
        email is stored in canonical form so it keeps counting toward
        that author.
        """
        if "author_email" in fields:
            fields = {**fields, "author_email": normalize_email(fields["author_email"])}
        if not self._repo.update_fields(post_id, fields):
            raise PostNotFoundError(post_id)

    async def delete_post(self, post_id: str) -> None:
        if not self._repo.delete(post_id):
            raise PostNotFoundError(post_id)

    async def vote(self, post_id: str, direction: VoteDirection) -> None:
        """Add one vote. Repeat votes from the same caller all count."""
        if not self._repo.increment_vote(post_id, direction):
            raise PostNotFoundError(post_id)

    async def add_comment(
        self,
        post_id: str,
        author_name: str,
        author_image: str,
        text: str,
    ) -> Comment:
        comment = Comment(
            id=str(uuid.uuid4()),
            author_name=author_name,
            author_image=author_image,
            text=text,
            time=display_time(utc_now()),
        )
        if not self._repo.append_comment(post_id, comment):
            raise PostNotFoundError(post_id)
        return comment
