"""
Membership module.

Decides whether a user may create another post, based on their tier.

Public API:
- is_post_allowed: Pure decision function
- MembershipPolicy: Resolves the author, counts posts and decides
- AuthorizationDecision: Outcome of an authorization check
- PostLimitExceededError: Raised by callers that turn a denial into an error
"""

from .policy import is_post_allowed, DEFAULT_FREE_POST_LIMIT, POST_LIMIT_EXCEEDED
from .models import AuthorizationDecision
from .service import MembershipPolicy, IPostCounter
from .exceptions import PostLimitExceededError

__all__ = [
    "is_post_allowed",
    "DEFAULT_FREE_POST_LIMIT",
    "POST_LIMIT_EXCEEDED",
    "AuthorizationDecision",
    "MembershipPolicy",
    "IPostCounter",
    "PostLimitExceededError",
]
