import threading
from datetime import datetime, timezone
from typing import Dict

from cardswitch.exceptions import AlreadyReversed, DuplicateKey, NotFound
from cardswitch.ledger.base import BaseLedger
from cardswitch.schemas.records import TransactionRecord


class InMemoryLedger(BaseLedger):
    """
    Dict-backed ledger guarded by a single lock.

    Records are frozen, so returning the stored instance is already a snapshot;
    a reversal replaces the entry instead of mutating it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[str, TransactionRecord] = {}

    @property
    def backend_name(self) -> str:
        return "memory"

    def put(self, record: TransactionRecord) -> None:
        with self._lock:
            if record.stan in self._records:
                raise DuplicateKey(record.stan)
            self._records[record.stan] = record

    def get(self, stan: str) -> TransactionRecord:
        with self._lock:
            record = self._records.get(stan)
        if record is None:
            raise NotFound(stan)
        return record

    def mark_reversed(self, stan: str) -> TransactionRecord:
        with self._lock:
            record = self._records.get(stan)
            if record is None:
                raise NotFound(stan)
            if record.reversed:
                raise AlreadyReversed(stan)
            updated = record.model_copy(
                update={"reversed": True, "reversed_at": datetime.now(timezone.utc)}
            )
            self._records[stan] = updated
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
