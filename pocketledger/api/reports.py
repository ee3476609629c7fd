"""
Report API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from datetime import date

from pocketledger.dependencies import get_store
from pocketledger.schemas.report import (
    AnnualReport,
    Balance,
    CategoryTotal,
    MonthlyReport,
    MonthlyTotal,
    PeriodSummary,
)
from pocketledger.store import LedgerStore

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/monthly-totals", response_model=list[MonthlyTotal])
def get_monthly_totals(
    year: int = Query(..., ge=1, le=9999),
    store: LedgerStore = Depends(get_store)
):
    """
    Income and expense per month of a year.
    Months without transactions are omitted.
    """
    return store.monthly_totals(year)


@router.get("/category-totals", response_model=list[CategoryTotal])
def get_category_totals(
    start_date: date,
    end_date: date,
    store: LedgerStore = Depends(get_store)
):
    """
    Totals per (type, category) in an inclusive date range.
    Largest total first within each type.
    """
    return store.category_totals(start_date, end_date)


@router.get("/balance", response_model=Balance)
def get_balance(store: LedgerStore = Depends(get_store)):
    """Running balance over every transaction."""
    return store.balance()


@router.get("/summary", response_model=PeriodSummary)
def get_period_summary(
    start_date: date,
    end_date: date,
    store: LedgerStore = Depends(get_store)
):
    """Income, expense and net for an inclusive date range."""
    return store.period_summary(start_date, end_date)


@router.get("/monthly", response_model=MonthlyReport)
def get_monthly_report(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    store: LedgerStore = Depends(get_store)
):
    """Totals, category breakdown and transactions for one month."""
    return store.monthly_report(year, month)


@router.get("/annual", response_model=AnnualReport)
def get_annual_report(
    year: int = Query(..., ge=1, le=9999),
    store: LedgerStore = Depends(get_store)
):
    """Monthly totals and per-category breakdown for a year."""
    return store.annual_report(year)
