"""
Ledger store handle.

A LedgerStore owns the engine for one database. It opens lazily on first
use. Operations, open and reset are serialized on one lock, so concurrent
first callers share one engine, the default categories are seeded once, and
a reset never lands in the middle of another call. Each public operation
runs in its own session and commits on its own.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from pocketledger.database import Base, build_engine
from pocketledger.errors import InitializationError, StorageError
from pocketledger.schemas.category import CategoryResponse
from pocketledger.schemas.report import (
    AnnualReport,
    Balance,
    CategoryTotal,
    MonthlyReport,
    MonthlyTotal,
    PeriodSummary,
)
from pocketledger.schemas.transaction import TransactionResponse
from pocketledger.seed import seed_categories
from pocketledger.services import ledger_service, report_service

logger = logging.getLogger(__name__)


class LedgerStore:
    """Transactions, categories and report queries over one SQLite database."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "LedgerStore":
        """
        Create the schema and seed default categories if needed.

        Safe to call any number of times. Raises InitializationError if the
        database cannot be opened or prepared.
        """
        with self._lock:
            if self._engine is not None:
                return self

            engine = None
            try:
                engine = build_engine(self.database_url, echo=self.echo)
                Base.metadata.create_all(bind=engine)

                factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
                with factory() as db:
                    seed_categories(db)
                    db.commit()
            except (SQLAlchemyError, OSError) as e:
                logger.error(f"Error initializing ledger database: {e}")
                if engine is not None:
                    engine.dispose()
                raise InitializationError(f"Cannot open ledger database: {e}") from e

            self._engine = engine
            self._session_factory = factory
            logger.info(f"Ledger database ready at {engine.url!r}")
            return self

    def close(self) -> None:
        """Release the engine. The next operation reopens it."""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
            self._engine = None
            self._session_factory = None

    def reset(self) -> None:
        """
        Drop every table and start over with an empty, freshly seeded ledger.

        Irreversible. Stops at the first failing step. Waits for any operation
        in progress on another thread to finish first.
        """
        with self._lock:
            self.open()
            try:
                Base.metadata.drop_all(bind=self._engine)
            except SQLAlchemyError as e:
                logger.error(f"Error clearing ledger database: {e}")
                raise InitializationError(f"Cannot reset ledger database: {e}") from e
            self.close()
            self.open()
            logger.info("Ledger database reset")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Session bound to the open database.

        Holds the store lock until the session closes, so reset and close
        never run underneath an operation. Database failures roll back and
        surface as StorageError. Other exceptions pass through unchanged.
        """
        with self._lock:
            self.open()
            db = self._session_factory()
            try:
                yield db
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Ledger storage error: {e}")
                raise StorageError(str(e)) from e
            finally:
                db.close()

    # Transactions

    def list_transactions(self) -> List[TransactionResponse]:
        with self.session() as db:
            return ledger_service.list_transactions(db)

    def list_transactions_in_range(self, start_date: Any, end_date: Any) -> List[TransactionResponse]:
        with self.session() as db:
            return ledger_service.list_transactions_in_range(db, start_date, end_date)

    def add_transaction(
        self,
        amount: Any,
        type: Any,
        category: str,
        date: Any,
        note: Optional[str] = None
    ) -> int:
        with self.session() as db:
            return ledger_service.add_transaction(db, amount, type, category, date, note)

    def delete_transaction(self, transaction_id: int) -> None:
        with self.session() as db:
            ledger_service.delete_transaction(db, transaction_id)

    # Categories

    def list_categories(self, type: Optional[Any] = None) -> List[CategoryResponse]:
        with self.session() as db:
            return ledger_service.list_categories(db, type)

    def add_category(
        self,
        name: str,
        type: Any,
        icon: str,
        color: Optional[str] = None
    ) -> int:
        with self.session() as db:
            return ledger_service.add_category(db, name, type, icon, color)

    def delete_category(self, category_id: int) -> None:
        with self.session() as db:
            ledger_service.delete_category(db, category_id)

    # Reports

    def monthly_totals(self, year: int) -> List[MonthlyTotal]:
        with self.session() as db:
            return report_service.monthly_totals(db, year)

    def category_totals(self, start_date: Any, end_date: Any) -> List[CategoryTotal]:
        with self.session() as db:
            return report_service.category_totals(db, start_date, end_date)

    def balance(self) -> Balance:
        with self.session() as db:
            return report_service.get_balance(db)

    def period_summary(self, start_date: Any, end_date: Any) -> PeriodSummary:
        with self.session() as db:
            return report_service.period_summary(db, start_date, end_date)

    def monthly_report(self, year: int, month: int) -> MonthlyReport:
        with self.session() as db:
            return report_service.monthly_report(db, year, month)

    def annual_report(self, year: int) -> AnnualReport:
        with self.session() as db:
            return report_service.annual_report(db, year)
