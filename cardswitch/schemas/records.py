from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TransactionRecord(BaseModel):
    """
    An approved authorization as held by the ledger.

    Instances are frozen: the ledger hands out snapshots and produces a new
    instance when the reversed flag flips.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    stan: str
    pan: str
    amount: int
    currency: str
    merchant_id: str
    transaction_datetime: str = ""
    created_at: datetime
    reversed: bool = False
    reversed_at: Optional[datetime] = None
