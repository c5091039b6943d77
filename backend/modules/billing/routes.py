"""
Checkout API endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_checkout_service

from .interfaces import ICheckoutService
from .models import CheckoutRequest, CheckoutSession

router = APIRouter()


@router.post("/create-checkout-session", response_model=CheckoutSession)
async def create_checkout_session(
    request: CheckoutRequest,
    service: ICheckoutService = Depends(get_checkout_service),
) -> CheckoutSession:
    """
    Start the premium membership purchase.

    Returns the Stripe session id and the hosted checkout URL. Provider
    failures return 500 with code PAYMENT_PROVIDER_ERROR.
    """
    return await service.create_upgrade_session(str(request.email))
