from cardswitch.config import Settings
from cardswitch.ledger.base import BaseLedger
from cardswitch.ledger.memory import InMemoryLedger
from cardswitch.ledger.sql import SqlLedger


def build_ledger(settings: Settings) -> BaseLedger:
    """Construct the ledger backend selected by settings.ledger_backend."""
    if settings.ledger_backend == "sql":
        return SqlLedger.from_url(settings.database_url)
    if settings.ledger_backend == "memory":
        return InMemoryLedger()
    raise ValueError(f"Unknown ledger backend: {settings.ledger_backend}")


__all__ = ["BaseLedger", "InMemoryLedger", "SqlLedger", "build_ledger"]
