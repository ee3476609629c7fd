"""
Database models package.
"""

from pocketledger.models.category import Category
from pocketledger.models.transaction import Transaction, TransactionType

__all__ = [
    "Category",
    "Transaction",
    "TransactionType",
]
