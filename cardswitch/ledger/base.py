from abc import ABC, abstractmethod

from cardswitch.schemas.records import TransactionRecord


class BaseLedger(ABC):
    """
    Abstract store of approved authorizations keyed by STAN.

    Every operation is atomic on its own and holds the ledger's critical
    section only for its own duration.
    """

    @abstractmethod
    def put(self, record: TransactionRecord) -> None:
        """
        Insert a new record.

        Raises:
            DuplicateKey: if a record with the same STAN already exists
        """
        pass

    @abstractmethod
    def get(self, stan: str) -> TransactionRecord:
        """
        Return a snapshot of the record for stan.

        Raises:
            NotFound: if no record exists for stan
        """
        pass

    @abstractmethod
    def mark_reversed(self, stan: str) -> TransactionRecord:
        """
        Flip the reversed flag from False to True in one check-and-set step
        and return the updated snapshot.

        Raises:
            NotFound: if no record exists for stan
            AlreadyReversed: if the record was reversed before
        """
        pass

    @property
    @abstractmethod
    def backend_name(self) -> str:
        pass
