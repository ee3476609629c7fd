"""
Pocket Ledger: local income/expense ledger with report queries.
"""

__version__ = "1.0.0"
