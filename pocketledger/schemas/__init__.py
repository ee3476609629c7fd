"""
Pydantic schemas package.
"""

from pocketledger.schemas.common import CreatedResponse
from pocketledger.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryResponse,
    CategoryList,
)
from pocketledger.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionResponse,
    TransactionListResponse,
)
from pocketledger.schemas.report import (
    MonthlyTotal,
    CategoryTotal,
    CategoryBreakdown,
    Balance,
    PeriodSummary,
    MonthlyReport,
    AnnualReport,
)

__all__ = [
    "CreatedResponse",
    "CategoryBase",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryList",
    "TransactionBase",
    "TransactionCreate",
    "TransactionResponse",
    "TransactionListResponse",
    "MonthlyTotal",
    "CategoryTotal",
    "CategoryBreakdown",
    "Balance",
    "PeriodSummary",
    "MonthlyReport",
    "AnnualReport",
]
