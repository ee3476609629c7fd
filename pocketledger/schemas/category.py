"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from typing import Optional

from pocketledger.models.transaction import TransactionType


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1)
    type: TransactionType
    icon: str = Field(..., min_length=1)
    color: Optional[str] = None


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: int

    class Config:
        from_attributes = True


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[CategoryResponse]
    total: int
