"""
Exception hierarchy for the payment processor.

Validation problems are raised before any backend call. A gateway that
declines a charge is not an error: it comes back as a FAILED PaymentResult.
"""

from collections.abc import Iterable


class PaymentError(Exception):
    """Base class for all payment processing errors."""


class PaymentValidationError(PaymentError):
    """The request was rejected before reaching a payment backend."""


class InvalidAmountError(PaymentValidationError):
    def __init__(self, amount: float) -> None:
        super().__init__(f"Invalid amount {amount}")
        self.amount = amount


class InvalidEmailError(PaymentValidationError):
    def __init__(self, email: str) -> None:
        super().__init__(f"Invalid email {email}")
        self.email = email


class MissingPaymentDetailsError(PaymentValidationError):
    """Raised when a payment method's required fields are absent."""

    def __init__(self, payment_type: str, missing: Iterable[str]) -> None:
        self.payment_type = payment_type
        self.missing = tuple(missing)
        super().__init__(f"Missing {payment_type} details: {', '.join(self.missing)}")


class UnsupportedPaymentTypeError(PaymentValidationError):
    def __init__(self, payment_type: str) -> None:
        super().__init__(f"Unsupported payment type {payment_type}")
        self.payment_type = payment_type
