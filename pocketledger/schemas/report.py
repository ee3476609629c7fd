"""
Report schemas.
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from decimal import Decimal

from pocketledger.models.transaction import TransactionType
from pocketledger.schemas.transaction import TransactionResponse


class MonthlyTotal(BaseModel):
    month: str  # "01".."12"
    income: Decimal
    expense: Decimal


class CategoryTotal(BaseModel):
    type: TransactionType
    category: str
    color: Optional[str] = None
    total: Decimal


class CategoryBreakdown(CategoryTotal):
    transactions: List[TransactionResponse] = []


class Balance(BaseModel):
    income: Decimal
    expense: Decimal
    balance: Decimal


class PeriodSummary(BaseModel):
    start_date: date
    end_date: date
    income: Decimal
    expense: Decimal
    net: Decimal


class MonthlyReport(BaseModel):
    year: int
    month: int
    summary: PeriodSummary
    categories: List[CategoryTotal]
    transactions: List[TransactionResponse]


class AnnualReport(BaseModel):
    year: int
    months: List[MonthlyTotal]
    income: Decimal
    expense: Decimal
    net: Decimal
    categories: List[CategoryBreakdown]
