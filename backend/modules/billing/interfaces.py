"""
Billing module interfaces.

Other modules should depend on ICheckoutService, not the concrete
implementation. IPaymentGateway hides Stripe so tests can substitute
a fake.
"""

from typing import Protocol, runtime_checkable

from .models import CheckoutSession, UpgradeProduct


@runtime_checkable
class IPaymentGateway(Protocol):
    """Creates hosted one-time-payment sessions."""

    def create_payment_session(
        self,
        product: UpgradeProduct,
        customer_email: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """
        Raises:
            PaymentProviderError: If the provider call fails
        """
        ...


@runtime_checkable
class ICheckoutService(Protocol):
    """
    Interface for the membership upgrade checkout.

    Completion is observed by the client through the success redirect;
    this service neither verifies payment nor upgrades the user.
    """

    async def create_upgrade_session(self, email: str) -> CheckoutSession:
        """
        Start a checkout for the premium upgrade.

        Args:
            email: User the purchase is for; embedded in the redirect URLs

        Returns:
            CheckoutSession with the session id and hosted checkout URL

        Raises:
            PaymentProviderError: If the provider call fails
        """
        ...
