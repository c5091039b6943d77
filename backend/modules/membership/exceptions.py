"""
Membership module exceptions.
"""

from shared.exceptions import AuthorizationError


class PostLimitExceededError(AuthorizationError):
    """
    Raised when a free-tier user has used up their posts.

    This is an expected outcome, not a fault: the UI should prompt
    the user to upgrade.
    """

    def __init__(self, email: str, limit: int, post_count: int):
        super().__init__(
            f"Free members can create up to {limit} posts. "
            "Upgrade to premium to keep posting.",
            code="POST_LIMIT_EXCEEDED",
            details={
                "email": email,
                "limit": limit,
                "post_count": post_count,
                "reason": "post-limit-exceeded",
            },
        )
