"""
Transaction and category CRUD.

Transactions reference categories by (name, type) only. Reads join the two
tables at query time and tolerate transactions whose category is gone.
"""

from typing import Any, List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Query, Session

from pocketledger.models import Category, Transaction
from pocketledger.schemas.category import CategoryResponse
from pocketledger.schemas.transaction import TransactionResponse
from pocketledger.services.validation import (
    coerce_amount,
    coerce_date,
    coerce_range,
    coerce_type,
    require_text,
)


def category_lookup():
    """
    One display row per (name, type).

    Duplicate (name, type) categories are not prevented, so the lowest id
    wins. This keeps joined transaction rows from being duplicated.
    """
    first_ids = select(func.min(Category.id)).group_by(Category.name, Category.type)
    return (
        select(Category.name, Category.type, Category.icon, Category.color)
        .where(Category.id.in_(first_ids))
        .subquery("category_lookup")
    )


def _joined_transactions(db: Session) -> Query:
    lookup = category_lookup()
    return (
        db.query(
            Transaction.id,
            Transaction.amount,
            Transaction.type,
            Transaction.category,
            Transaction.date,
            Transaction.note,
            lookup.c.icon,
            lookup.c.color,
        )
        .outerjoin(
            lookup,
            and_(
                Transaction.category == lookup.c.name,
                Transaction.type == lookup.c.type,
            ),
        )
        .order_by(Transaction.date.desc(), Transaction.id.desc())
    )


def _to_responses(rows) -> List[TransactionResponse]:
    return [TransactionResponse.model_validate(dict(row._mapping)) for row in rows]


def list_transactions(db: Session) -> List[TransactionResponse]:
    """All transactions, most recent first."""
    return _to_responses(_joined_transactions(db).all())


def list_transactions_in_range(
    db: Session,
    start_date: Any,
    end_date: Any
) -> List[TransactionResponse]:
    """Transactions dated within [start_date, end_date], most recent first."""
    start, end = coerce_range(start_date, end_date)
    query = _joined_transactions(db).filter(
        Transaction.date >= start,
        Transaction.date <= end
    )
    return _to_responses(query.all())


def add_transaction(
    db: Session,
    amount: Any,
    type: Any,
    category: str,
    date: Any,
    note: Optional[str] = None
) -> int:
    """Validate and insert a transaction. Returns the new id."""
    txn = Transaction(
        amount=coerce_amount(amount),
        type=coerce_type(type).value,
        category=require_text(category, "category"),
        date=coerce_date(date),
        note=note,
    )
    db.add(txn)
    db.commit()
    return txn.id


def delete_transaction(db: Session, transaction_id: int) -> None:
    """Delete a transaction. Missing ids are ignored."""
    db.query(Transaction).filter(Transaction.id == transaction_id).delete(
        synchronize_session=False
    )
    db.commit()


def list_categories(
    db: Session,
    type: Optional[Any] = None
) -> List[CategoryResponse]:
    """All categories, or those of one type ordered by name."""
    query = db.query(Category)
    if type is not None:
        query = query.filter(Category.type == coerce_type(type).value)
        query = query.order_by(Category.name, Category.id)
    else:
        query = query.order_by(Category.type, Category.name, Category.id)
    return [CategoryResponse.model_validate(c) for c in query.all()]


def add_category(
    db: Session,
    name: str,
    type: Any,
    icon: str,
    color: Optional[str] = None
) -> int:
    """Validate and insert a category. Returns the new id."""
    category = Category(
        name=require_text(name, "name"),
        type=coerce_type(type).value,
        icon=require_text(icon, "icon"),
        color=color,
    )
    db.add(category)
    db.commit()
    return category.id


def delete_category(db: Session, category_id: int) -> None:
    """
    Delete a category. Missing ids are ignored.

    Transactions filed under the category are left as they are and show up
    without icon or color from then on.
    """
    db.query(Category).filter(Category.id == category_id).delete(
        synchronize_session=False
    )
    db.commit()
