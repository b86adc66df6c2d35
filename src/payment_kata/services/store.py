"""In-process transaction store. Nothing is persisted; a restart forgets everything."""

import logging

from payment_kata.domain.models import TransactionRecord

logger = logging.getLogger(__name__)


class InMemoryTransactionStore:
    def __init__(self) -> None:
        self._records: list[TransactionRecord] = []

    def add(self, record: TransactionRecord) -> None:
        self._records.append(record)
        logger.debug("Stored transaction %s", record.transaction_id)

    def records(self) -> list[TransactionRecord]:
        return list(self._records)

    def ids(self) -> list[str]:
        return [record.transaction_id for record in self._records]

    def __len__(self) -> int:
        return len(self._records)
