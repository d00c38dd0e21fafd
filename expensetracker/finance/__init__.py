"""Mini README: Transaction storage for the expense tracker.

The package holds the authoritative in-memory store and its domain errors.
A store is created once per web application and can be instantiated freely
in tests, so no state is shared at module level.
"""

from .exceptions import TransactionNotFoundError, TransactionValidationError
from .ledger import Transaction, TransactionStore, TransactionType, validate_fields

__all__ = [
    "Transaction",
    "TransactionNotFoundError",
    "TransactionStore",
    "TransactionType",
    "TransactionValidationError",
    "validate_fields",
]
