"""
Default category seeding.
"""

import logging

from sqlalchemy.orm import Session

from pocketledger.models import Category

logger = logging.getLogger(__name__)


# Order matters: ids are assigned in this sequence on a fresh database.
DEFAULT_CATEGORIES = [
    {"name": "Salary", "type": "income", "icon": "briefcase", "color": "#00B894"},
    {"name": "Freelance", "type": "income", "icon": "laptop", "color": "#00CEC9"},
    {"name": "Investments", "type": "income", "icon": "trending-up", "color": "#6C5CE7"},
    {"name": "Food", "type": "expense", "icon": "coffee", "color": "#FF7675"},
    {"name": "Transport", "type": "expense", "icon": "car", "color": "#FAB1A0"},
    {"name": "Shopping", "type": "expense", "icon": "shopping-bag", "color": "#FD79A8"},
    {"name": "Bills", "type": "expense", "icon": "file-text", "color": "#636E72"},
    {"name": "Entertainment", "type": "expense", "icon": "film", "color": "#E84393"},
]


def seed_categories(db: Session) -> int:
    """
    Insert the default categories if the table is empty.

    Returns the number of rows inserted. The caller owns the commit, so the
    whole seed set lands in one transaction or not at all.
    """
    existing_count = db.query(Category).count()
    if existing_count > 0:
        logger.debug(f"Categories already seeded ({existing_count} categories exist)")
        return 0

    for cat_data in DEFAULT_CATEGORIES:
        db.add(Category(**cat_data))
        # Flush each row so ids follow list order
        db.flush()

    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
