"""Domain-specific exceptions raised by the transaction store."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class TransactionValidationError(ValueError):
    """Raised when transaction fields fail validation. Nothing is mutated."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class TransactionNotFoundError(LookupError):
    """Raised when an operation addresses an id the store does not hold."""

    def __init__(self, transaction_id: object) -> None:
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id
