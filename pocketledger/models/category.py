"""
Category database model.
"""

from sqlalchemy import Column, Integer, String, Text
from pocketledger.database import Base


class Category(Base):
    """Category model. Transactions reference it by name and type only."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    type = Column(String(10), nullable=False)
    icon = Column(Text, nullable=False)  # Icon set key, stored verbatim
    color = Column(Text, nullable=True)

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )
