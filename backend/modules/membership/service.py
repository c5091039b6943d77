"""
Membership policy service.

Gates post creation: resolve the author, count their posts, decide.
"""

import logging
from typing import Protocol, runtime_checkable

from modules.users.interfaces import IUserDirectory
from modules.users.models import MembershipTier
from shared.models import normalize_email

from .models import AuthorizationDecision
from .policy import is_post_allowed, DEFAULT_FREE_POST_LIMIT, POST_LIMIT_EXCEEDED

logger = logging.getLogger(__name__)


@runtime_checkable
class IPostCounter(Protocol):
    """The one thing the policy needs from post storage."""

    def count_by_author(self, author_email: str) -> int:
        ...


class MembershipPolicy:
    """
    Decides whether an author may create a new post.

    The check must complete before the post is created; callers run
    authorize_post and only then write the post.
    """

    def __init__(
        self,
        users: IUserDirectory,
        posts: IPostCounter,
        free_post_limit: int = DEFAULT_FREE_POST_LIMIT,
    ):
        self._users = users
        self._posts = posts
        self._limit = free_post_limit

    @property
    def free_post_limit(self) -> int:
        return self._limit

    async def authorize_post(
        self,
        email: str,
        name: str = "Anonymous",
        image: str = "",
    ) -> AuthorizationDecision:
        """
        Authorize a post attempt by ``email``.

        The user is created on first reference, using ``name`` and ``image``
        as defaults. A denial has no side effects beyond that resolution.
        """
        email = normalize_email(email)
        resolved = await self._users.resolve_or_create(email, name, image)
        user = resolved.user

        if user.membership == MembershipTier.PREMIUM:
            return AuthorizationDecision(
                allowed=True,
                user=user,
                outcome=resolved.outcome,
            )

        post_count = self._posts.count_by_author(email)
        allowed = is_post_allowed(user.membership, post_count, self._limit)
        if not allowed:
            logger.info(
                f"Post denied for {email}: {post_count} posts, free limit {self._limit}"
            )

        return AuthorizationDecision(
            allowed=allowed,
            reason=None if allowed else POST_LIMIT_EXCEEDED,
            user=user,
            outcome=resolved.outcome,
            post_count=post_count,
        )
