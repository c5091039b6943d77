"""
Billing module.

Handles the Stripe checkout session for the premium membership upgrade.

Public API:
- ICheckoutService: Interface for checkout operations
- IPaymentGateway: Seam over the payment provider
- CheckoutSession, UpgradeProduct: Data models
- Billing exceptions: PaymentProviderError
"""

from .interfaces import ICheckoutService, IPaymentGateway
from .models import (
    CheckoutSession,
    CheckoutRequest,
    UpgradeProduct,
)
from .exceptions import PaymentProviderError

__all__ = [
    # Interfaces
    "ICheckoutService",
    "IPaymentGateway",
    # Models
    "CheckoutSession",
    "CheckoutRequest",
    "UpgradeProduct",
    # Exceptions
    "PaymentProviderError",
]
