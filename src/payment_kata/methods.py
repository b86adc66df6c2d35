"""
Payment methods: one class per payment type, dispatched through a registry.

Each method knows three things about its backend: which fields it requires,
which URL it posts to, and how to build the payload. The processor never
branches on the payment type; it asks the registry for the method and lets
the method talk to the gateway.

Adding a payment type means writing a `PaymentMethod` subclass and
registering it. The processor stays untouched.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from payment_kata.config import Settings
from payment_kata.domain.models import GatewayResponse, PaymentRequest, PaymentType
from payment_kata.errors import MissingPaymentDetailsError, UnsupportedPaymentTypeError
from payment_kata.services.gateway import PaymentGateway

logger = logging.getLogger(__name__)


class PaymentMethod(ABC):
    """Base class for payment methods.

    Subclasses set the class attributes below and implement
    `method_fields()`. `charge()` is the only entry point the processor uses.
    """

    payment_type: str
    id_prefix: str                 # Prefix of processed transaction ids, e.g. "CC"
    display_name: str              # Used in audit lines: "<display_name> of 10.0 USD"
    receipt_noun: str              # Used in emails: "Your <receipt_noun> of 10.0 USD ..."
    required_fields: tuple[str, ...] = ()

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint

    def validate(self, details: dict[str, Any]) -> None:
        missing = [name for name in self.required_fields if name not in details]
        if missing:
            raise MissingPaymentDetailsError(self.payment_type, missing)

    @abstractmethod
    def method_fields(self, details: dict[str, Any]) -> dict[str, Any]:
        """Pick the method-specific fields that go into the backend payload."""

    def build_payload(self, request: PaymentRequest, api_key: str) -> dict[str, Any]:
        payload: dict[str, Any] = {"amount": request.amount, "currency": request.currency}
        payload.update(self.method_fields(request.details))
        payload["api_key"] = api_key
        return payload

    def charge(self, request: PaymentRequest, gateway: PaymentGateway, api_key: str) -> GatewayResponse:
        self.validate(request.details)
        logger.info("Processing %s of %s %s", self.display_name.lower(), request.amount, request.currency)
        return gateway.post(self.endpoint, self.build_payload(request, api_key))


class CreditCardMethod(PaymentMethod):
    payment_type = PaymentType.CREDIT_CARD.value
    id_prefix = "CC"
    display_name = "Credit card payment"
    receipt_noun = "payment"
    required_fields = ("card_number", "cvv", "expiry")

    def method_fields(self, details: dict[str, Any]) -> dict[str, Any]:
        return {
            "card_number": details["card_number"],
            "cvv": details["cvv"],
            "expiry": details["expiry"],
        }


class PayPalMethod(PaymentMethod):
    payment_type = PaymentType.PAYPAL.value
    id_prefix = "PP"
    display_name = "PayPal payment"
    receipt_noun = "PayPal payment"
    required_fields = ("paypal_email",)

    def method_fields(self, details: dict[str, Any]) -> dict[str, Any]:
        return {"paypal_email": details["paypal_email"]}


class BankTransferMethod(PaymentMethod):
    payment_type = PaymentType.BANK_TRANSFER.value
    id_prefix = "BT"
    display_name = "Bank transfer"
    receipt_noun = "bank transfer"
    required_fields = ("account_number", "routing_number")

    def method_fields(self, details: dict[str, Any]) -> dict[str, Any]:
        return {
            "account_number": details["account_number"],
            "routing_number": details["routing_number"],
        }


class PaymentMethodRegistry:
    """Maps payment-type tags to payment methods."""

    def __init__(self, methods: list[PaymentMethod] | None = None) -> None:
        self._methods: dict[str, PaymentMethod] = {}
        for method in methods or []:
            self.register(method)

    @classmethod
    def default(cls, settings: Settings) -> "PaymentMethodRegistry":
        return cls(
            [
                CreditCardMethod(settings.card_endpoint),
                PayPalMethod(settings.paypal_endpoint),
                BankTransferMethod(settings.bank_endpoint),
            ]
        )

    def register(self, method: PaymentMethod) -> None:
        if method.payment_type in self._methods:
            logger.warning("Replacing payment method for %r", method.payment_type)
        self._methods[method.payment_type] = method

    def get(self, payment_type: str) -> PaymentMethod:
        try:
            return self._methods[payment_type]
        except KeyError:
            raise UnsupportedPaymentTypeError(payment_type) from None

    def supported_types(self) -> list[str]:
        return sorted(self._methods)

    def __contains__(self, payment_type: object) -> bool:
        return payment_type in self._methods
