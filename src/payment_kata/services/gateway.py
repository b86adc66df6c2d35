"""
Payment gateway facade.

Part of the **service layer** that encapsulates external operations behind
clean interfaces. In a real system this would POST to the card processor,
PayPal or the bank. Here it only logs the request and fabricates a response;
nothing is ever sent over the network.

Payment methods build the payload and hand it to the gateway (not the other
way around), so the gateway knows nothing about payment types.
"""

import json
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from payment_kata.domain.models import GatewayResponse

logger = logging.getLogger(__name__)

# Payload keys that must never reach a log line in clear text.
SECRET_FIELDS = frozenset({"api_key", "card_number", "cvv", "account_number"})


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def mask_secrets(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of `payload` with secret values reduced to their last 4 chars."""
    masked = {}
    for key, value in payload.items():
        if key in SECRET_FIELDS and value is not None:
            text = str(value)
            masked[key] = "****" + text[-4:] if len(text) > 4 else "****"
        else:
            masked[key] = value
    return masked


class PaymentGateway(Protocol):
    """Anything that can post a payment payload and return a GatewayResponse."""

    def post(self, url: str, payload: dict[str, Any]) -> GatewayResponse: ...


class SimulatedGateway:
    """Simulates a payment backend.

    Answers "success" unless constructed with another `status`, which is the
    only way to reach the declined branch of the processor.
    """

    def __init__(self, status: str = "success", clock: Callable[[], datetime] = datetime.now) -> None:
        self.status = status
        self.clock = clock

    def post(self, url: str, payload: dict[str, Any]) -> GatewayResponse:
        logger.info("Making request to %s", url)
        logger.debug("Payload: %s", json.dumps(mask_secrets(payload)))
        response = GatewayResponse(status=self.status, transaction_id=f"txn_{epoch_millis(self.clock())}")
        logger.info("Gateway answered %s (%s)", response.status, response.transaction_id)
        return response
