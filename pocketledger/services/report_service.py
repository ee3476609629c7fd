"""Aggregation queries behind the monthly and annual reports."""

import calendar
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Any, List, Tuple

from sqlalchemy import and_, case, extract, func
from sqlalchemy.orm import Session

from pocketledger.errors import ValidationError
from pocketledger.models import Transaction, TransactionType
from pocketledger.schemas.report import (
    AnnualReport,
    Balance,
    CategoryBreakdown,
    CategoryTotal,
    MonthlyReport,
    MonthlyTotal,
    PeriodSummary,
)
from pocketledger.services.ledger_service import category_lookup, list_transactions_in_range
from pocketledger.services.validation import CENTS, coerce_range, coerce_year


def _money(value: Any) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENTS)


def _sum_of(txn_type: TransactionType):
    return func.coalesce(
        func.sum(case((Transaction.type == txn_type.value, Transaction.amount), else_=0)),
        0,
    )


def _type_sums(db: Session, *criteria) -> Tuple[Decimal, Decimal]:
    """(income, expense) over transactions matching criteria."""
    income, expense = db.query(
        _sum_of(TransactionType.income),
        _sum_of(TransactionType.expense),
    ).filter(*criteria).one()
    return _money(income), _money(expense)


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of a month."""
    year = coerce_year(year)
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month!r}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def monthly_totals(db: Session, year: int) -> List[MonthlyTotal]:
    """
    Income and expense per calendar month of `year`.

    Months without transactions are left out rather than reported as zero.
    """
    year = coerce_year(year)
    month = extract("month", Transaction.date)

    rows = db.query(
        month.label("month"),
        _sum_of(TransactionType.income).label("income"),
        _sum_of(TransactionType.expense).label("expense"),
    ).filter(
        extract("year", Transaction.date) == year
    ).group_by(month).order_by(month).all()

    return [
        MonthlyTotal(
            month=f"{int(row.month):02d}",
            income=_money(row.income),
            expense=_money(row.expense),
        )
        for row in rows
    ]


def category_totals(db: Session, start_date: Any, end_date: Any) -> List[CategoryTotal]:
    """
    Sum per (type, category) within an inclusive date range.

    Ordered by type, then largest total first. Orphaned categories are still
    counted, with no color.
    """
    start, end = coerce_range(start_date, end_date)
    lookup = category_lookup()
    total = func.sum(Transaction.amount).label("total")

    rows = db.query(
        Transaction.type,
        Transaction.category,
        lookup.c.color,
        total,
    ).outerjoin(
        lookup,
        and_(
            Transaction.category == lookup.c.name,
            Transaction.type == lookup.c.type,
        ),
    ).filter(
        Transaction.date >= start,
        Transaction.date <= end
    ).group_by(
        Transaction.type, Transaction.category, lookup.c.color
    ).order_by(
        Transaction.type, total.desc(), Transaction.category
    ).all()

    return [
        CategoryTotal(
            type=row.type,
            category=row.category,
            color=row.color,
            total=_money(row.total),
        )
        for row in rows
    ]


def get_balance(db: Session) -> Balance:
    """Income minus expense over the whole ledger."""
    income, expense = _type_sums(db)
    return Balance(income=income, expense=expense, balance=income - expense)


def period_summary(db: Session, start_date: Any, end_date: Any) -> PeriodSummary:
    start, end = coerce_range(start_date, end_date)
    income, expense = _type_sums(
        db,
        Transaction.date >= start,
        Transaction.date <= end
    )
    return PeriodSummary(
        start_date=start,
        end_date=end,
        income=income,
        expense=expense,
        net=income - expense,
    )


def monthly_report(db: Session, year: int, month: int) -> MonthlyReport:
    """Totals, category breakdown and transactions for one month."""
    start, end = month_bounds(year, month)
    return MonthlyReport(
        year=year,
        month=month,
        summary=period_summary(db, start, end),
        categories=category_totals(db, start, end),
        transactions=list_transactions_in_range(db, start, end),
    )


def annual_report(db: Session, year: int) -> AnnualReport:
    """
    Month-by-month totals for a year, plus each category's total together
    with the transactions that make it up.
    """
    year = coerce_year(year)
    start, end = date(year, 1, 1), date(year, 12, 31)

    months = monthly_totals(db, year)
    income = sum((m.income for m in months), Decimal("0.00"))
    expense = sum((m.expense for m in months), Decimal("0.00"))

    by_category = defaultdict(list)
    for txn in list_transactions_in_range(db, start, end):
        by_category[(txn.type, txn.category)].append(txn)

    categories = [
        CategoryBreakdown(
            **total.model_dump(),
            transactions=by_category[(total.type, total.category)],
        )
        for total in category_totals(db, start, end)
    ]

    return AnnualReport(
        year=year,
        months=months,
        income=income,
        expense=expense,
        net=income - expense,
        categories=categories,
    )
