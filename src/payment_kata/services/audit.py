"""
Audit log: the append-only text file every payment outcome is written to.

Each line has the form ``[2024-05-01T12:00:00.123456] MESSAGE``. The file is
opened in append mode for every write, so concurrent readers such as
``tail -f`` see complete lines.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


def format_line(message: str, moment: datetime) -> str:
    return f"[{moment.isoformat()}] {message}\n"


class AuditLog(Protocol):
    def write(self, message: str) -> None: ...


class FileAuditLog:
    """Appends timestamped lines to a text file."""

    def __init__(self, path: str | Path, clock: Callable[[], datetime] = datetime.now) -> None:
        self.path = Path(path)
        self.clock = clock

    def write(self, message: str) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(format_line(message, self.clock()))
        logger.debug("Audit line written: %s", message)


class InMemoryAuditLog:
    """Keeps audit messages in memory. Used by tests and dry runs."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)
        logger.debug("Audit line recorded: %s", message)
