"""
Posting rules per membership tier.
"""

from modules.users.models import MembershipTier

DEFAULT_FREE_POST_LIMIT = 5

POST_LIMIT_EXCEEDED = "post-limit-exceeded"


def is_post_allowed(
    tier: MembershipTier,
    post_count: int,
    limit: int = DEFAULT_FREE_POST_LIMIT,
) -> bool:
    """
    Decide whether a user with ``post_count`` existing posts may post again.

    Premium members are unlimited. Free members may hold at most ``limit``
    posts, so the attempt is allowed while the count is below the limit.
    """
    if tier == MembershipTier.PREMIUM:
        return True
    return post_count < limit
