"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Storage is chosen by ``Settings.storage_backend``: Supabase tables in
production, in-process repositories for local development and tests.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.users.interfaces import IUserDirectory, IUserRepository
    from modules.posts.interfaces import IPostService, IPostRepository
    from modules.notifications.interfaces import (
        INotificationService,
        INotificationRepository,
    )
    from modules.membership.service import MembershipPolicy
    from modules.billing.interfaces import ICheckoutService, IPaymentGateway


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._user_repository: "IUserRepository | None" = None
        self._post_repository: "IPostRepository | None" = None
        self._notification_repository: "INotificationRepository | None" = None
        self._user_directory: "IUserDirectory | None" = None
        self._membership_policy: "MembershipPolicy | None" = None
        self._notification_service: "INotificationService | None" = None
        self._post_service: "IPostService | None" = None
        self._payment_gateway: "IPaymentGateway | None" = None
        self._checkout_service: "ICheckoutService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def uses_memory_storage(self) -> bool:
        return self.settings.storage_backend == "memory"

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            if self.uses_memory_storage:
                from modules.users.repository import InMemoryUserRepository
                self._user_repository = InMemoryUserRepository()
            else:
                from modules.users.repository import SupabaseUserRepository
                from shared.database import get_supabase_client
                self._user_repository = SupabaseUserRepository(get_supabase_client())
        return self._user_repository

    @property
    def post_repository(self) -> "IPostRepository":
        """Get the post repository instance."""
        if self._post_repository is None:
            if self.uses_memory_storage:
                from modules.posts.repository import InMemoryPostRepository
                self._post_repository = InMemoryPostRepository()
            else:
                from modules.posts.repository import SupabasePostRepository
                from shared.database import get_supabase_client
                self._post_repository = SupabasePostRepository(get_supabase_client())
        return self._post_repository

    @property
    def notification_repository(self) -> "INotificationRepository":
        """Get the notification repository instance."""
        if self._notification_repository is None:
            if self.uses_memory_storage:
                from modules.notifications.repository import InMemoryNotificationRepository
                self._notification_repository = InMemoryNotificationRepository()
            else:
                from modules.notifications.repository import SupabaseNotificationRepository
                from shared.database import get_supabase_client
                self._notification_repository = SupabaseNotificationRepository(
                    get_supabase_client()
                )
        return self._notification_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def users(self) -> "IUserDirectory":
        """Get the user directory instance."""
        if self._user_directory is None:
            from modules.users.service import UserDirectory
            self._user_directory = UserDirectory(self.user_repository)
        return self._user_directory

    @property
    def membership(self) -> "MembershipPolicy":
        """Get the membership policy instance."""
        if self._membership_policy is None:
            from modules.membership.service import MembershipPolicy
            self._membership_policy = MembershipPolicy(
                users=self.users,
                posts=self.post_repository,
                free_post_limit=self.settings.free_post_limit,
            )
        return self._membership_policy

    @property
    def notifications(self) -> "INotificationService":
        """Get the notification service instance."""
        if self._notification_service is None:
            from modules.notifications.service import NotificationService
            self._notification_service = NotificationService(
                repository=self.notification_repository,
                users=self.users,
            )
        return self._notification_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(
                repository=self.post_repository,
                policy=self.membership,
                notifications=self.notifications,
            )
        return self._post_service

    @property
    def payment_gateway(self) -> "IPaymentGateway":
        """Get the payment gateway instance."""
        if self._payment_gateway is None:
            from modules.billing.gateway import StripePaymentGateway
            self._payment_gateway = StripePaymentGateway(self.settings.stripe_secret_key)
        return self._payment_gateway

    @property
    def checkout(self) -> "ICheckoutService":
        """Get the checkout service instance."""
        if self._checkout_service is None:
            from modules.billing.models import UpgradeProduct
            from modules.billing.service import CheckoutSessionBroker
            settings = self.settings
            self._checkout_service = CheckoutSessionBroker(
                gateway=self.payment_gateway,
                frontend_url=settings.frontend_url,
                product=UpgradeProduct(
                    name=settings.premium_product_name,
                    unit_amount=settings.premium_price_cents,
                    currency=settings.premium_currency,
                ),
            )
        return self._checkout_service

    def use_payment_gateway(self, gateway: "IPaymentGateway") -> None:
        """Swap the payment gateway (tests, sandbox runs)."""
        self._payment_gateway = gateway
        self._checkout_service = None

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._post_repository = None
        self._notification_repository = None
        self._user_directory = None
        self._membership_policy = None
        self._notification_service = None
        self._post_service = None
        self._payment_gateway = None
        self._checkout_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-built container (e.g. one using in-memory storage)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_user_directory() -> "IUserDirectory":
    """FastAPI dependency for the user directory."""
    return get_container().users


def get_post_service() -> "IPostService":
    """FastAPI dependency for the post service."""
    return get_container().posts


def get_notification_service() -> "INotificationService":
    """FastAPI dependency for the notification service."""
    return get_container().notifications


def get_checkout_service() -> "ICheckoutService":
    """FastAPI dependency for the checkout service."""
    return get_container().checkout
