"""
Billing module data models.
"""

from pydantic import BaseModel, Field

from shared.models import ApiModel, Email


class UpgradeProduct(BaseModel):
    """
    The one-time purchase that upgrades a membership.

    Amounts are in the smallest currency unit (cents).
    """

    name: str = Field(default="Premium Membership")
    unit_amount: int = Field(default=999, gt=0)
    currency: str = Field(default="usd", min_length=3, max_length=3)
    quantity: int = Field(default=1, ge=1)

    model_config = {"frozen": True}


class CheckoutRequest(ApiModel):
    """Request body for POST /create-checkout-session."""

    email: Email


class CheckoutSession(ApiModel):
    """
    Stripe checkout session info.

    Returned when initiating the upgrade purchase.
    """

    session_id: str = Field(..., description="Stripe checkout session ID")
    redirect_url: str = Field(..., description="Checkout URL to redirect user to")
