"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from datetime import date

from pocketledger.dependencies import get_store
from pocketledger.schemas.common import CreatedResponse
from pocketledger.schemas.transaction import (
    TransactionCreate,
    TransactionListResponse
)
from pocketledger.store import LedgerStore

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    store: LedgerStore = Depends(get_store)
):
    """List transactions, most recent first, optionally within a date range"""
    if (start_date is None) != (end_date is None):
        raise HTTPException(
            status_code=422,
            detail="start_date and end_date must be given together"
        )

    if start_date is not None:
        items = store.list_transactions_in_range(start_date, end_date)
    else:
        items = store.list_transactions()

    return TransactionListResponse(items=items, total=len(items))


@router.post("", response_model=CreatedResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    store: LedgerStore = Depends(get_store)
):
    """Record a new income or expense"""
    transaction_id = store.add_transaction(
        amount=transaction.amount,
        type=transaction.type,
        category=transaction.category,
        date=transaction.date,
        note=transaction.note,
    )
    return CreatedResponse(id=transaction_id)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: int,
    store: LedgerStore = Depends(get_store)
):
    """Delete a transaction. Unknown ids succeed as well."""
    store.delete_transaction(transaction_id)
    return None
