import logging
import re

from payment_kata.config import Settings
from payment_kata.services.audit import FileAuditLog, InMemoryAuditLog
from payment_kata.services.factory import ServiceFactory
from payment_kata.services.gateway import SimulatedGateway, mask_secrets
from payment_kata.services.notify import EmailNotifier


class TestFileAuditLog:
    def test_appends_timestamped_lines(self, tmp_path, fixed_now):
        path = tmp_path / "payment_logs.txt"
        log = FileAuditLog(path, clock=lambda: fixed_now)
        log.write("first")
        log.write("second")
        assert path.read_text() == (
            "[2024-05-01T12:00:00+00:00] first\n"
            "[2024-05-01T12:00:00+00:00] second\n"
        )

    def test_default_clock_writes_iso_timestamp(self, tmp_path):
        path = tmp_path / "log.txt"
        FileAuditLog(path).write("hello")
        assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?\] hello\n", path.read_text())

    def test_keeps_existing_content(self, tmp_path, fixed_now):
        path = tmp_path / "log.txt"
        path.write_text("old\n")
        FileAuditLog(path, clock=lambda: fixed_now).write("new")
        assert path.read_text().splitlines()[0] == "old"


class TestSimulatedGateway:
    def test_default_response_is_success(self, fixed_now, fixed_millis):
        response = SimulatedGateway(clock=lambda: fixed_now).post("https://x.test", {"amount": 1})
        assert response.succeeded
        assert response.transaction_id == f"txn_{fixed_millis}"

    def test_forced_status(self):
        assert not SimulatedGateway(status="declined").post("https://x.test", {}).succeeded

    def test_payload_log_masks_secrets(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="payment_kata.services.gateway"):
            SimulatedGateway().post("https://x.test", {"card_number": "4242424242424242", "api_key": "sk_test_12345"})
        assert "4242424242424242" not in caplog.text
        assert "sk_test_12345" not in caplog.text
        assert "****4242" in caplog.text

    def test_mask_secrets(self):
        masked = mask_secrets({"cvv": "123", "amount": 10.0, "account_number": "000123456"})
        assert masked == {"cvv": "****", "amount": 10.0, "account_number": "****3456"}


class TestEmailNotifier:
    def test_send_writes_audit_line(self):
        audit_log = InMemoryAuditLog()
        assert EmailNotifier(audit_log).send("a@example.com", "Payment Successful", "body")
        assert audit_log.messages == ["Email sent to a@example.com: Payment Successful"]


class TestServiceFactory:
    def test_processor_uses_configured_settings(self, tmp_path):
        log_path = tmp_path / "audit.txt"
        ServiceFactory.configure(Settings(api_key="sk_test_env", log_file_path=str(log_path)))
        processor = ServiceFactory.get_processor()
        assert processor.api_key == "sk_test_env"
        assert processor.audit_log.path == log_path

    def test_services_are_cached(self, tmp_path):
        ServiceFactory.configure(Settings(log_file_path=str(tmp_path / "a.txt")))
        first = ServiceFactory.get_processor()
        second = ServiceFactory.get_processor()
        assert first.store is second.store
        assert first.audit_log is second.audit_log

    def test_gateway_override(self, tmp_path):
        ServiceFactory.configure(Settings(log_file_path=str(tmp_path / "a.txt")))
        declining = SimulatedGateway(status="declined")
        assert ServiceFactory.get_processor(gateway=declining).gateway is declining
