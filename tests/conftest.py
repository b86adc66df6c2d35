from datetime import datetime, timezone
from typing import Any

import pytest

from payment_kata.config import Settings
from payment_kata.domain.models import GatewayResponse, PaymentRequest
from payment_kata.methods import PaymentMethodRegistry
from payment_kata.processor import PaymentProcessor
from payment_kata.services.audit import InMemoryAuditLog
from payment_kata.services.factory import ServiceFactory
from payment_kata.services.store import InMemoryTransactionStore

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
FIXED_MILLIS = 1714564800000
TEST_API_KEY = "sk_test_fixture"


class RecordingGateway:
    """Gateway fake that remembers every call."""

    def __init__(self, status: str = "success") -> None:
        self.status = status
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def post(self, url: str, payload: dict[str, Any]) -> GatewayResponse:
        self.calls.append((url, payload))
        return GatewayResponse(status=self.status, transaction_id="txn_fake")


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []

    def send(self, to: str, subject: str, body: str) -> bool:
        self.sent.append((to, subject, body))
        return True


@pytest.fixture(autouse=True)
def reset_factory():
    ServiceFactory.reset()
    yield
    ServiceFactory.reset()


@pytest.fixture()
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def audit_log() -> InMemoryAuditLog:
    return InMemoryAuditLog()


@pytest.fixture()
def store() -> InMemoryTransactionStore:
    return InMemoryTransactionStore()


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fixed_millis() -> int:
    """Epoch milliseconds of `fixed_now`."""
    return FIXED_MILLIS


@pytest.fixture()
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture()
def processor(gateway, notifier, audit_log, store, fixed_now, api_key) -> PaymentProcessor:
    return PaymentProcessor(
        gateway=gateway,
        notifier=notifier,
        audit_log=audit_log,
        store=store,
        registry=PaymentMethodRegistry.default(Settings()),
        api_key=api_key,
        clock=lambda: fixed_now,
    )


@pytest.fixture()
def card_request() -> PaymentRequest:
    return PaymentRequest(
        payment_type="credit_card",
        amount=100.0,
        currency="USD",
        customer_email="customer@example.com",
        details={"card_number": "4242424242424242", "cvv": "123", "expiry": "12/25"},
    )
