"""
PaymentProcessor: the refactored payment pipeline.

Every collaborator is injected: the gateway that talks to the backends, the
notifier that emails the customer, the audit log, the transaction store, the
payment-method registry and the fee/discount strategies. `ServiceFactory`
wires the defaults; tests pass fakes.

Failures are explicit:
  - Validation problems raise a `PaymentValidationError` subclass before any
    backend is contacted (an ERROR audit line is written first).
  - A backend that declines returns a FAILED `PaymentResult`.
"""

import logging
import math
from collections.abc import Callable
from datetime import datetime

from payment_kata.domain.models import (
    GatewayResponse,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
    TransactionRecord,
)
from payment_kata.domain.pricing import (
    DiscountStrategy,
    FeeStrategy,
    StandardFeeStrategy,
    TierDiscountStrategy,
)
from payment_kata.errors import InvalidAmountError, InvalidEmailError, PaymentValidationError
from payment_kata.methods import PaymentMethod, PaymentMethodRegistry
from payment_kata.services.audit import AuditLog
from payment_kata.services.gateway import PaymentGateway, epoch_millis
from payment_kata.services.notify import Notifier
from payment_kata.services.store import InMemoryTransactionStore

logger = logging.getLogger(__name__)


class PaymentProcessor:
    """Validates a payment request and dispatches it to its payment method.

    Execution flow:
        1. finite amount > 0                   (else InvalidAmountError)
        2. "@" in customer_email               (else InvalidEmailError)
        3. registry lookup by payment_type     (else UnsupportedPaymentTypeError)
        4. method field check, in charge()     (else MissingPaymentDetailsError)
        5. gateway call → record + audit + notify
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        notifier: Notifier,
        audit_log: AuditLog,
        store: InMemoryTransactionStore,
        registry: PaymentMethodRegistry,
        api_key: str,
        fee_strategy: FeeStrategy | None = None,
        discount_strategy: DiscountStrategy | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.gateway = gateway
        self.notifier = notifier
        self.audit_log = audit_log
        self.store = store
        self.registry = registry
        self.api_key = api_key
        # Strategy pattern: swap in a different fee schedule or tier table if needed.
        self.fee_strategy: FeeStrategy = fee_strategy or StandardFeeStrategy()
        self.discount_strategy: DiscountStrategy = discount_strategy or TierDiscountStrategy()
        self.clock = clock

    # ── Validation ───────────────────────────────────────────────

    def _validate(self, request: PaymentRequest) -> PaymentMethod:
        if not math.isfinite(request.amount) or request.amount <= 0:
            self.audit_log.write(f"ERROR: Invalid amount {request.amount} for {request.customer_email}")
            raise InvalidAmountError(request.amount)
        if "@" not in request.customer_email:
            self.audit_log.write(f"ERROR: Invalid email {request.customer_email}")
            raise InvalidEmailError(request.customer_email)
        try:
            return self.registry.get(request.payment_type)
        except PaymentValidationError as exc:
            self.audit_log.write(f"ERROR: {exc}")
            raise

    # ── Outcomes ─────────────────────────────────────────────────

    def _succeeded(self, method: PaymentMethod, request: PaymentRequest, response: GatewayResponse) -> PaymentResult:
        now = self.clock()
        record = TransactionRecord(
            transaction_id=f"{method.id_prefix}-{epoch_millis(now)}",
            payment_type=method.payment_type,
            amount=request.amount,
            currency=request.currency,
            customer_email=request.customer_email,
            gateway_transaction_id=response.transaction_id,
            created_at=now,
        )
        self.store.add(record)
        self.audit_log.write(
            f"SUCCESS: {method.display_name} of {request.amount} {request.currency} for {request.customer_email}"
        )
        self.notifier.send(
            request.customer_email,
            "Payment Successful",
            f"Your {method.receipt_noun} of {request.amount} {request.currency} was processed.",
        )
        logger.info("%s %s succeeded", method.display_name, record.transaction_id)
        return self._result(
            PaymentStatus.SUCCESS,
            request,
            transaction_id=record.transaction_id,
            gateway_transaction_id=response.transaction_id,
            message=f"{method.display_name} successful",
        )

    def _failed(self, method: PaymentMethod, request: PaymentRequest, response: GatewayResponse) -> PaymentResult:
        self.audit_log.write(
            f"FAILED: {method.display_name} of {request.amount} {request.currency} for {request.customer_email}"
        )
        self.notifier.send(
            request.customer_email,
            "Payment Failed",
            f"Your {method.receipt_noun} could not be processed.",
        )
        logger.warning("%s declined by gateway (status=%s)", method.display_name, response.status)
        return self._result(
            PaymentStatus.FAILED,
            request,
            gateway_transaction_id=response.transaction_id,
            message=f"{method.display_name} failed",
        )

    @staticmethod
    def _result(status: PaymentStatus, request: PaymentRequest, **fields: str) -> PaymentResult:
        return PaymentResult(
            status=status,
            payment_type=request.payment_type,
            amount=request.amount,
            currency=request.currency,
            customer_email=request.customer_email,
            **fields,
        )

    # ── Public API ───────────────────────────────────────────────

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        method = self._validate(request)
        try:
            # charge() checks the method fields before posting to the gateway.
            response = method.charge(request, self.gateway, self.api_key)
        except PaymentValidationError as exc:
            self.audit_log.write(f"ERROR: {exc}")
            raise
        if response.succeeded:
            return self._succeeded(method, request, response)
        return self._failed(method, request, response)

    def get_processed_transactions(self) -> list[str]:
        return self.store.ids()

    def calculate_fees(self, amount: float) -> float:
        return self.fee_strategy.fee(amount)

    def apply_discount(self, amount: float, customer_tier: str) -> float:
        return self.discount_strategy.apply(amount, customer_tier)
