"""
SQLAlchemy-backed ledger.

Uniqueness comes from the primary key and reversal from a conditional UPDATE,
so both check-and-write steps happen inside the database statement itself.
Calls are additionally serialized because the default in-memory SQLite
database is a single shared connection.
"""
import threading
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from cardswitch import models
from cardswitch.database import Base, make_engine, make_session_factory
from cardswitch.exceptions import AlreadyReversed, DuplicateKey, NotFound
from cardswitch.ledger.base import BaseLedger
from cardswitch.schemas.records import TransactionRecord


class SqlLedger(BaseLedger):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._lock = threading.Lock()

    @classmethod
    def from_url(cls, database_url: str) -> "SqlLedger":
        engine = make_engine(database_url)
        Base.metadata.create_all(bind=engine)
        return cls(make_session_factory(engine))

    @property
    def backend_name(self) -> str:
        return "sql"

    def put(self, record: TransactionRecord) -> None:
        row = models.AuthorizedTransaction(**record.model_dump())
        with self._lock:
            db = self._session_factory()
            try:
                db.add(row)
                db.commit()
            except IntegrityError:
                db.rollback()
                raise DuplicateKey(record.stan)
            finally:
                db.close()

    def get(self, stan: str) -> TransactionRecord:
        with self._lock:
            db = self._session_factory()
            try:
                row = db.query(models.AuthorizedTransaction).filter(
                    models.AuthorizedTransaction.stan == stan
                ).first()
                if row is None:
                    raise NotFound(stan)
                return self._to_record(row)
            finally:
                db.close()

    def mark_reversed(self, stan: str) -> TransactionRecord:
        with self._lock:
            db = self._session_factory()
            try:
                result = db.execute(
                    update(models.AuthorizedTransaction)
                    .where(
                        models.AuthorizedTransaction.stan == stan,
                        models.AuthorizedTransaction.reversed.is_(False),
                    )
                    .values(reversed=True, reversed_at=datetime.now(timezone.utc))
                )
                db.commit()

                row = db.query(models.AuthorizedTransaction).filter(
                    models.AuthorizedTransaction.stan == stan
                ).first()
                if row is None:
                    raise NotFound(stan)
                if result.rowcount == 0:
                    raise AlreadyReversed(stan)
                return self._to_record(row)
            finally:
                db.close()

    @staticmethod
    def _to_record(row: models.AuthorizedTransaction) -> TransactionRecord:
        return TransactionRecord.model_validate(row)
