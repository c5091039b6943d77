"""
Stripe payment gateway.
"""

import logging
from typing import Optional

import stripe

from .exceptions import PaymentProviderError
from .interfaces import IPaymentGateway
from .models import CheckoutSession, UpgradeProduct

logger = logging.getLogger(__name__)


class StripePaymentGateway(IPaymentGateway):
    """IPaymentGateway backed by Stripe Checkout."""

    def __init__(self, secret_key: str, client: Optional[stripe.StripeClient] = None):
        self._secret_key = secret_key
        self._client = client

    def _get_client(self) -> stripe.StripeClient:
        if self._client is None:
            if not self._secret_key:
                raise PaymentProviderError(
                    "Payment provider is not configured. Set STRIPE_SECRET_KEY."
                )
            self._client = stripe.StripeClient(self._secret_key)
        return self._client

    def create_payment_session(
        self,
        product: UpgradeProduct,
        customer_email: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        client = self._get_client()
        try:
            session = client.checkout.sessions.create(params={
                "mode": "payment",
                "payment_method_types": ["card"],
                "customer_email": customer_email,
                "line_items": [
                    {
                        "price_data": {
                            "currency": product.currency,
                            "product_data": {"name": product.name},
                            "unit_amount": product.unit_amount,
                        },
                        "quantity": product.quantity,
                    }
                ],
                "success_url": success_url,
                "cancel_url": cancel_url,
            })
        except stripe.StripeError as e:
            message = e.user_message or str(e) or "Payment provider error"
            logger.error(f"Stripe checkout session creation failed: {message}")
            raise PaymentProviderError(message, provider_code=e.code) from e

        return CheckoutSession(session_id=session.id, redirect_url=session.url or "")
