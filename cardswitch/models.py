from sqlalchemy import Column, String, Integer, Boolean, DateTime
from cardswitch.database import Base


class AuthorizedTransaction(Base):
    __tablename__ = "authorized_transactions"

    stan = Column(String, primary_key=True)
    pan = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)  # minor currency units
    currency = Column(String(3), nullable=False)
    merchant_id = Column(String, nullable=False)
    transaction_datetime = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False)
    reversed = Column(Boolean, nullable=False, default=False)
    reversed_at = Column(DateTime, nullable=True)
