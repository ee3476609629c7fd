"""
Ledger error types.

Every failure the store reports is one of these. Deleting a missing id is not
an error, so there is no not-found type.
"""


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class InitializationError(LedgerError):
    """The backing database could not be opened or its schema created."""
    pass


class ValidationError(LedgerError):
    """Caller-supplied data failed a precondition. Nothing was written."""
    pass


class StorageError(LedgerError):
    """A read or write against the database failed after validation passed."""
    pass
