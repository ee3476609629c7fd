"""
Transaction schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

from pocketledger.models.transaction import TransactionType


class TransactionBase(BaseModel):
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: str = Field(..., min_length=1)
    date: date
    note: Optional[str] = None


class TransactionCreate(TransactionBase):
    pass


class TransactionResponse(BaseModel):
    """A transaction joined with its category's display fields."""
    id: int
    amount: Decimal
    type: TransactionType
    category: str
    date: date
    note: Optional[str]
    icon: Optional[str] = None  # None when the category no longer exists
    color: Optional[str] = None

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int
