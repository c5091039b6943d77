"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired through a ServiceContainer that uses in-memory storage,
and payments go through FakePaymentGateway instead of Stripe.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from modules.billing.exceptions import PaymentProviderError
from modules.billing.models import CheckoutSession, UpgradeProduct
from shared.config import Settings


TEST_FRONTEND_URL = "https://forum.example.com"


class FakePaymentGateway:
    """Records checkout requests and returns canned sessions."""

    def __init__(self, fail_with: str | None = None):
        self.fail_with = fail_with
        self.calls: list[dict] = []

    def create_payment_session(
        self,
        product: UpgradeProduct,
        customer_email: str,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        self.calls.append({
            "product": product,
            "customer_email": customer_email,
            "success_url": success_url,
            "cancel_url": cancel_url,
        })
        if self.fail_with:
            raise PaymentProviderError(self.fail_with, provider_code="card_declined")
        return CheckoutSession(
            session_id=f"cs_test_{len(self.calls)}",
            redirect_url=f"https://checkout.stripe.com/c/pay/cs_test_{len(self.calls)}",
        )


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def memory_settings() -> Settings:
    """Settings that keep all data in process."""
    return Settings(
        storage_backend="memory",
        free_post_limit=5,
        frontend_url=TEST_FRONTEND_URL,
        stripe_secret_key="",
    )


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def container(memory_settings, payment_gateway) -> ServiceContainer:
    """A fully wired container backed by in-memory repositories."""
    container = ServiceContainer(memory_settings)
    container.use_payment_gateway(payment_gateway)
    return container


@pytest.fixture
def alice_email() -> str:
    return "alice@example.com"


@pytest.fixture
def bob_email() -> str:
    return "bob@example.com"


@pytest.fixture
def failing_gateway() -> FakePaymentGateway:
    """A gateway whose every call is declined by the provider."""
    return FakePaymentGateway(fail_with="Your card was declined.")


@pytest.fixture
def client(container) -> TestClient:
    """HTTP client for an app wired to the in-memory container."""
    set_container(container)
    return TestClient(create_app())
