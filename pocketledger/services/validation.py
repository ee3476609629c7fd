"""
Input normalization for ledger writes and queries.

Every function either returns a clean value or raises ValidationError, so
callers can validate everything before touching the database.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from pocketledger.errors import ValidationError
from pocketledger.models.transaction import TransactionType

CENTS = Decimal("0.01")
# Largest value a NUMERIC(10,2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def coerce_amount(amount: Any) -> Decimal:
    """Return a positive amount rounded to cents."""
    if isinstance(amount, bool) or amount is None:
        raise ValidationError(f"Amount must be a number, got {amount!r}")

    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Amount must be a number, got {amount!r}")

    if not value.is_finite():
        raise ValidationError(f"Amount must be finite, got {amount!r}")
    if value > MAX_AMOUNT:
        raise ValidationError(f"Amount must not exceed {MAX_AMOUNT}, got {amount!r}")

    try:
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"Amount cannot be rounded to cents, got {amount!r}")
    if value <= 0:
        raise ValidationError(f"Amount must be positive, got {amount!r}")
    return value


def coerce_type(value: Any) -> TransactionType:
    try:
        return TransactionType(value)
    except (ValueError, TypeError):
        allowed = ", ".join(t.value for t in TransactionType)
        raise ValidationError(f"Type must be one of: {allowed}; got {value!r}")


def coerce_date(value: Any, field: str = "date") -> date:
    """
    Accept a date, a datetime (time is dropped) or an ISO 8601 string.

    Strings may carry a valid time part ("2024-01-15T10:30:00Z"); only the
    calendar date is kept.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) > 10:
                if text.endswith(("Z", "z")):
                    text = text[:-1] + "+00:00"
                return datetime.fromisoformat(text).date()
            return date.fromisoformat(text)
        except ValueError:
            pass
    raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD), got {value!r}")


def coerce_range(start_date: Any, end_date: Any) -> tuple[date, date]:
    """Both bounds are inclusive. An inverted range simply matches nothing."""
    return coerce_date(start_date, "start_date"), coerce_date(end_date, "end_date")


def coerce_year(year: Any) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"Year must be an integer, got {year!r}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year must be between 1 and 9999, got {year}")
    return year


def require_text(value: Optional[str], field: str) -> str:
    """Reject missing or blank strings. The value itself is kept verbatim."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value
