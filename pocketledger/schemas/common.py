"""
Shared response schemas.
"""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    """Identifier assigned to a newly inserted row."""
    id: int
