"""
Domain models for the payment processing kata.

All models use Pydantic v2 BaseModel for validation and serialization, so a
PaymentResult can be printed as JSON straight from the CLI.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "paypal" instead of {"value": "paypal"}).
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class PaymentType(str, Enum):
    """Payment types understood by the built-in payment methods."""

    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"


class PaymentStatus(str, Enum):
    """Outcome of a processed payment."""

    SUCCESS = "SUCCESS"   # Gateway accepted the charge
    FAILED = "FAILED"     # Gateway answered with anything but "success"


# ── Processor input / output ─────────────────────────────────────────


class PaymentRequest(BaseModel):
    """Input to `PaymentProcessor.process_payment()`.

    `payment_type` stays a plain string: an unknown tag has to reach the
    method registry so it can be rejected there. Amount and email are
    checked by the processor, not by the model.
    """

    payment_type: str
    amount: float
    currency: str = "USD"
    customer_email: str
    details: dict[str, Any] = Field(default_factory=dict)  # Method-specific fields


class PaymentResult(BaseModel):
    """Result returned to the caller for every request that passed validation."""

    status: PaymentStatus
    payment_type: str
    amount: float
    currency: str
    customer_email: str
    transaction_id: str | None = None          # CC-/PP-/BT- id, set on success only
    gateway_transaction_id: str | None = None  # txn_ id echoed by the gateway
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.SUCCESS


# ── Collaborator payloads ────────────────────────────────────────────


class GatewayResponse(BaseModel):
    """Response from the (simulated) payment backend."""

    status: str
    transaction_id: str

    @property
    def succeeded(self) -> bool:
        return self.status == "success"


class TransactionRecord(BaseModel):
    """A processed transaction kept by the transaction store."""

    transaction_id: str
    payment_type: str
    amount: float
    currency: str
    customer_email: str
    gateway_transaction_id: str
    created_at: datetime
