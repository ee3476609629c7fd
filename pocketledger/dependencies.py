"""
FastAPI dependencies.
"""

from fastapi import Request

from pocketledger.store import LedgerStore


def get_store(request: Request) -> LedgerStore:
    """
    Dependency for getting the application's ledger store.
    """
    return request.app.state.store
