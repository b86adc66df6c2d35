"""
Notification service facade.

Simulates emailing the customer about a payment outcome. In production this
would integrate with SendGrid, SES, etc. Every simulated email is also
recorded in the audit log.
"""

import logging
from typing import Protocol

from payment_kata.services.audit import AuditLog

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, to: str, subject: str, body: str) -> bool: ...


class EmailNotifier:
    """Simulates sending an email. Always succeeds."""

    def __init__(self, audit_log: AuditLog) -> None:
        self.audit_log = audit_log

    def send(self, to: str, subject: str, body: str) -> bool:
        logger.info("Sending email to %s: %s", to, subject)
        logger.debug("Email body: %s", body)
        self.audit_log.write(f"Email sent to {to}: {subject}")
        return True
