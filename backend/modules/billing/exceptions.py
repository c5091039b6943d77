"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class PaymentProviderError(ExternalServiceError):
    """
    Raised when the payment provider call fails.

    The provider's message is passed through so the client can show it.
    """

    http_status = 500

    def __init__(self, message: str, provider_code: Optional[str] = None):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_PROVIDER_ERROR",
            details={"provider_code": provider_code} if provider_code else {},
        )
