"""
Maintenance API endpoints.
"""

from fastapi import APIRouter, Depends

from pocketledger.dependencies import get_store
from pocketledger.store import LedgerStore

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post("/reset", status_code=204)
def reset_ledger(store: LedgerStore = Depends(get_store)):
    """Erase all data and restore the default categories. Cannot be undone."""
    store.reset()
    return None
