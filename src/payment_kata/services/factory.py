"""
Default wiring for the CLI.

`ServiceFactory` holds one `Settings` object plus the collaborators built from
it. The audit log and the transaction store are created once and shared, so
every processor handed out writes to the same log file and lists the same
transactions. `configure()` swaps in explicit settings; `reset()` forgets
everything, which the tests do between cases.
"""

from payment_kata.config import Settings, get_settings
from payment_kata.methods import PaymentMethodRegistry
from payment_kata.processor import PaymentProcessor
from payment_kata.services.audit import FileAuditLog
from payment_kata.services.gateway import PaymentGateway, SimulatedGateway
from payment_kata.services.notify import EmailNotifier
from payment_kata.services.store import InMemoryTransactionStore


class ServiceFactory:
    """Builds the default collaborators on first use and keeps them until `reset()`."""

    _settings: Settings | None = None
    _audit_log: FileAuditLog | None = None
    _gateway: SimulatedGateway | None = None
    _notifier: EmailNotifier | None = None
    _store: InMemoryTransactionStore | None = None
    _registry: PaymentMethodRegistry | None = None

    @classmethod
    def configure(cls, settings: Settings) -> None:
        """Use `settings` instead of the environment; drops cached services."""
        cls.reset()
        cls._settings = settings

    @classmethod
    def reset(cls) -> None:
        cls._settings = None
        cls._audit_log = None
        cls._gateway = None
        cls._notifier = None
        cls._store = None
        cls._registry = None

    @classmethod
    def get_settings(cls) -> Settings:
        if cls._settings is None:
            cls._settings = get_settings()
        return cls._settings

    @classmethod
    def get_audit_log(cls) -> FileAuditLog:
        if cls._audit_log is None:
            cls._audit_log = FileAuditLog(cls.get_settings().log_file_path)
        return cls._audit_log

    @classmethod
    def get_gateway(cls) -> SimulatedGateway:
        if cls._gateway is None:
            cls._gateway = SimulatedGateway()
        return cls._gateway

    @classmethod
    def get_notifier(cls) -> EmailNotifier:
        if cls._notifier is None:
            cls._notifier = EmailNotifier(cls.get_audit_log())
        return cls._notifier

    @classmethod
    def get_store(cls) -> InMemoryTransactionStore:
        if cls._store is None:
            cls._store = InMemoryTransactionStore()
        return cls._store

    @classmethod
    def get_registry(cls) -> PaymentMethodRegistry:
        if cls._registry is None:
            cls._registry = PaymentMethodRegistry.default(cls.get_settings())
        return cls._registry

    @classmethod
    def get_processor(cls, gateway: PaymentGateway | None = None) -> PaymentProcessor:
        """Build a processor over the cached collaborators.

        `gateway` overrides the cached simulated gateway, e.g. one that
        declines every charge.
        """
        return PaymentProcessor(
            gateway=gateway or cls.get_gateway(),
            notifier=cls.get_notifier(),
            audit_log=cls.get_audit_log(),
            store=cls.get_store(),
            registry=cls.get_registry(),
            api_key=cls.get_settings().api_key,
        )
