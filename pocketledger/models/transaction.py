"""
Transaction database model.
"""

import enum
from sqlalchemy import Column, Integer, String, Date, Numeric, Text, Index
from pocketledger.database import Base


class TransactionType(str, enum.Enum):
    """Direction of money flow. Shared by transactions and categories."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Numeric(10, 2), nullable=False)  # Always positive, sign comes from type
    type = Column(String(10), nullable=False)
    category = Column(Text, nullable=False)  # Category name, not a foreign key
    date = Column(Date, nullable=False)
    note = Column(Text, nullable=True)

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_date", "date"),
        Index("idx_transaction_type_category", "type", "category"),
        {"sqlite_autoincrement": True},
    )
