"""Mini README: Local transaction state held by the client application.

Structure:
    * SetTransactions / AddTransaction / UpdateTransaction / DeleteTransaction -
      the four actions that can change the cached list.
    * ClientState - immutable snapshot of the cached transactions.
    * apply_action - pure transition function from one snapshot to the next.
    * TransactionTotals / summarise_totals - income, expense and net figures.

The cache only changes through ``apply_action`` and only after the server
confirmed an operation, so it never shows writes the server rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from ..finance import Transaction, TransactionType


@dataclass(frozen=True, slots=True)
class SetTransactions:
    transactions: Tuple[Transaction, ...]


@dataclass(frozen=True, slots=True)
class AddTransaction:
    transaction: Transaction


@dataclass(frozen=True, slots=True)
class UpdateTransaction:
    transaction: Transaction


@dataclass(frozen=True, slots=True)
class DeleteTransaction:
    transaction_id: int


Action = Union[SetTransactions, AddTransaction, UpdateTransaction, DeleteTransaction]


@dataclass(frozen=True, slots=True)
class ClientState:
    """Cached copy of the server's transactions."""

    transactions: Tuple[Transaction, ...] = ()


def apply_action(state: ClientState, action: Action) -> ClientState:
    """Return the state produced by ``action``; ``state`` is left untouched."""

    if isinstance(action, SetTransactions):
        return ClientState(transactions=tuple(action.transactions))
    if isinstance(action, AddTransaction):
        return ClientState(transactions=state.transactions + (action.transaction,))
    if isinstance(action, UpdateTransaction):
        target = action.transaction.transaction_id
        return ClientState(
            transactions=tuple(
                action.transaction if transaction.transaction_id == target else transaction
                for transaction in state.transactions
            )
        )
    if isinstance(action, DeleteTransaction):
        return ClientState(
            transactions=tuple(
                transaction
                for transaction in state.transactions
                if transaction.transaction_id != action.transaction_id
            )
        )
    raise TypeError(f"Unsupported action: {action!r}")


@dataclass(frozen=True, slots=True)
class TransactionTotals:
    income: float
    expenses: float

    @property
    def net(self) -> float:
        return self.income - self.expenses


def summarise_totals(transactions: Iterable[Transaction]) -> TransactionTotals:
    """Sum amounts per transaction type over the given list."""

    income = 0.0
    expenses = 0.0
    for transaction in transactions:
        if transaction.transaction_type is TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return TransactionTotals(income=income, expenses=expenses)
