"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import Optional

from pocketledger.dependencies import get_store
from pocketledger.models import TransactionType
from pocketledger.schemas.category import CategoryCreate, CategoryList
from pocketledger.schemas.common import CreatedResponse
from pocketledger.store import LedgerStore

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(
    type: Optional[TransactionType] = None,
    store: LedgerStore = Depends(get_store)
):
    """List categories, optionally only income or only expense."""
    categories = store.list_categories(type)

    return CategoryList(
        items=categories,
        total=len(categories)
    )


@router.post("", response_model=CreatedResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    store: LedgerStore = Depends(get_store)
):
    """Create a new category."""
    category_id = store.add_category(
        name=category.name,
        type=category.type,
        icon=category.icon,
        color=category.color,
    )
    return CreatedResponse(id=category_id)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: int,
    store: LedgerStore = Depends(get_store)
):
    """
    Delete a category.

    Transactions in the category are kept and keep their category name.
    """
    store.delete_category(category_id)
    return None
