"""Mini README: Tests for the client-side state transitions and totals."""

from __future__ import annotations

import pytest

from expensetracker.client import (
    AddTransaction,
    ClientState,
    DeleteTransaction,
    SetTransactions,
    UpdateTransaction,
    apply_action,
    summarise_totals,
)
from expensetracker.finance import Transaction, TransactionType


def _txn(transaction_id: int, transaction_type: TransactionType, amount: float, name: str = "Item") -> Transaction:
    return Transaction(
        transaction_id=transaction_id,
        name=name,
        transaction_type=transaction_type,
        amount=amount,
    )


def test_set_replaces_everything() -> None:
    state = ClientState(transactions=(_txn(1, TransactionType.INCOME, 5),))

    new_state = apply_action(state, SetTransactions((_txn(2, TransactionType.EXPENSES, 3),)))

    assert [t.transaction_id for t in new_state.transactions] == [2]
    assert [t.transaction_id for t in state.transactions] == [1]


def test_add_update_delete_by_id() -> None:
    state = ClientState()
    state = apply_action(state, AddTransaction(_txn(1, TransactionType.INCOME, 100, "Salary")))
    state = apply_action(state, AddTransaction(_txn(2, TransactionType.EXPENSES, 30, "Food")))

    state = apply_action(state, UpdateTransaction(_txn(1, TransactionType.INCOME, 120, "Salary")))
    assert [(t.transaction_id, t.amount) for t in state.transactions] == [(1, 120), (2, 30)]

    state = apply_action(state, DeleteTransaction(1))
    assert [t.transaction_id for t in state.transactions] == [2]


def test_update_and_delete_of_unknown_id_change_nothing() -> None:
    state = ClientState(transactions=(_txn(1, TransactionType.INCOME, 5),))

    assert apply_action(state, UpdateTransaction(_txn(9, TransactionType.INCOME, 1))) == state
    assert apply_action(state, DeleteTransaction(9)) == state


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(TypeError):
        apply_action(ClientState(), "SET_TRANSACTIONS")


def test_summary_totals() -> None:
    transactions = [
        _txn(1, TransactionType.INCOME, 100),
        _txn(2, TransactionType.EXPENSES, 40),
        _txn(3, TransactionType.EXPENSES, 25),
    ]

    totals = summarise_totals(transactions)

    assert totals.income == pytest.approx(100)
    assert totals.expenses == pytest.approx(65)
    assert totals.net == pytest.approx(35)


def test_summary_of_empty_list_is_zero() -> None:
    totals = summarise_totals([])

    assert (totals.income, totals.expenses, totals.net) == (0, 0, 0)
