"""
Main API router.
"""

from fastapi import APIRouter
from pocketledger.api import categories, transactions, reports, maintenance

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(transactions.router)
api_router.include_router(reports.router)
api_router.include_router(maintenance.router)
