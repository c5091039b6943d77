"""
Checkout session broker.

Builds the upgrade purchase and its redirect targets, then hands off
to the payment gateway.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from shared.models import normalize_email

from .interfaces import ICheckoutService, IPaymentGateway
from .models import CheckoutSession, UpgradeProduct

logger = logging.getLogger(__name__)


class CheckoutSessionBroker(ICheckoutService):
    """
    Creates premium upgrade checkout sessions.

    The upgrade itself is applied by a separate PUT /users/{email}/upgrade
    call once the client lands on the success page.
    """

    def __init__(
        self,
        gateway: IPaymentGateway,
        frontend_url: str,
        product: Optional[UpgradeProduct] = None,
    ):
        self._gateway = gateway
        self._frontend_url = frontend_url.rstrip("/")
        self._product = product or UpgradeProduct()

    @property
    def product(self) -> UpgradeProduct:
        return self._product

    def redirect_urls(self, email: str) -> tuple[str, str]:
        """Success and cancel URLs, each carrying the email as a query parameter."""
        query = urlencode({"email": email})
        return (
            f"{self._frontend_url}/payment-success?{query}",
            f"{self._frontend_url}/payment-cancel?{query}",
        )

    async def create_upgrade_session(self, email: str) -> CheckoutSession:
        email = normalize_email(email)
        success_url, cancel_url = self.redirect_urls(email)
        session = self._gateway.create_payment_session(
            self._product,
            customer_email=email,
            success_url=success_url,
            cancel_url=cancel_url,
        )
        logger.info(f"Created checkout session {session.session_id} for {email}")
        return session
