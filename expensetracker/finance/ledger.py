"""Mini README: In-memory transaction store supporting income and expenses.

Structure:
    * TransactionType - enum of the two allowed classifications.
    * Transaction - immutable id, name, type and amount record.
    * TransactionStore - ordered collection answering list/create/update/delete.

The store owns id assignment through a monotonic counter that is never
rewound, so ids stay unique after deletions. Every operation runs under a
lock because the web layer serves synchronous endpoints from a thread pool.
Fields are validated here as well as at the HTTP boundary.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .exceptions import TransactionNotFoundError, TransactionValidationError

LOGGER = get_logger(__name__)


class TransactionType(str, Enum):
    """Enumerate the supported transaction classifications."""

    INCOME = "Income"
    EXPENSES = "Expenses"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Return the matching member, rejecting anything outside the closed set."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as error:
            raise TransactionValidationError(
                f"Unsupported transaction type: {value!r}",
                errors=[{"field": "transactionType", "message": "must be Income or Expenses"}],
            ) from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense record."""

    transaction_id: int
    name: str
    transaction_type: TransactionType
    amount: float


def validate_fields(name: object, transaction_type: object, amount: object) -> Dict[str, object]:
    """Check the three mutable fields and return them coerced.

    ``name`` must be a non-blank string, ``transaction_type`` one of the
    :class:`TransactionType` values and ``amount`` a finite int or float
    (``bool`` is rejected even though it subclasses ``int``).
    """

    errors = []
    if not isinstance(name, str) or not name.strip():
        errors.append({"field": "name", "message": "name is required"})
    if transaction_type is None or transaction_type == "":
        errors.append({"field": "transactionType", "message": "transactionType is required"})
        resolved_type = None
    else:
        try:
            resolved_type = TransactionType.from_str(transaction_type)
        except TransactionValidationError as error:
            errors.extend(error.errors)
            resolved_type = None
    resolved_amount = _finite_amount(amount)
    if resolved_amount is None:
        errors.append({"field": "amount", "message": "amount must be a number"})

    if errors:
        raise TransactionValidationError("Invalid transaction data", errors=errors)
    return {"name": name, "transaction_type": resolved_type, "amount": resolved_amount}


def _finite_amount(amount: object) -> Optional[float]:
    """Return ``amount`` as a finite float, or ``None`` when it cannot be one."""

    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return None
    try:
        value = float(amount)
    except OverflowError:
        # Integers beyond the float range.
        return None
    return value if math.isfinite(value) else None


class TransactionStore:
    """Own the canonical, insertion-ordered list of transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = []
        self._sequence = 0
        self._lock = threading.Lock()
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug("Transaction store initialised with %s transactions", len(self._transactions))

    def _register(self, transaction: Transaction) -> None:
        """Append a seed transaction, keeping ids unique and the counter ahead."""

        if self._find_index(transaction.transaction_id) is not None:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        validate_fields(transaction.name, transaction.transaction_type, transaction.amount)
        self._transactions.append(transaction)
        self._sequence = max(self._sequence, transaction.transaction_id)

    def _next_id(self) -> int:
        self._sequence += 1
        return self._sequence

    def _find_index(self, transaction_id: int) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._transactions)

    def list_transactions(self) -> List[Transaction]:
        """Return a snapshot of all transactions in insertion order."""

        with self._lock:
            snapshot = list(self._transactions)
        LOGGER.debug("Listing %s transactions", len(snapshot))
        return snapshot

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising ``TransactionNotFoundError`` when missing."""

        with self._lock:
            index = self._find_index(transaction_id)
            if index is None:
                raise TransactionNotFoundError(transaction_id)
            return self._transactions[index]

    def create_transaction(self, name: object, transaction_type: object, amount: object) -> Transaction:
        """Validate the fields, assign the next id and append the transaction."""

        fields = validate_fields(name, transaction_type, amount)
        with self._lock:
            transaction = Transaction(transaction_id=self._next_id(), **fields)
            self._transactions.append(transaction)
        LOGGER.info(
            "Created transaction %s (%s %.2f)",
            transaction.transaction_id,
            transaction.transaction_type.value,
            transaction.amount,
        )
        return transaction

    def update_transaction(
        self, transaction_id: int, name: object, transaction_type: object, amount: object
    ) -> Transaction:
        """Replace every mutable field of an existing transaction in place.

        The id is checked before the fields so an unknown id reports
        not-found even when the payload is also invalid.
        """

        with self._lock:
            index = self._find_index(transaction_id)
            if index is None:
                raise TransactionNotFoundError(transaction_id)
            fields = validate_fields(name, transaction_type, amount)
            updated = replace(self._transactions[index], **fields)
            self._transactions[index] = updated
        LOGGER.info("Updated transaction %s", transaction_id)
        return updated

    def delete_transaction(self, transaction_id: int) -> Transaction:
        """Remove a transaction and return it."""

        with self._lock:
            index = self._find_index(transaction_id)
            if index is None:
                raise TransactionNotFoundError(transaction_id)
            removed = self._transactions.pop(index)
        LOGGER.info("Deleted transaction %s", transaction_id)
        return removed
