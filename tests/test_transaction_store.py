"""Mini README: Tests for the in-memory transaction store.

Covers id assignment (including after deletions), validation without
mutation, in-place updates, and not-found handling.
"""

from __future__ import annotations

import pytest

from expensetracker.finance import (
    Transaction,
    TransactionNotFoundError,
    TransactionStore,
    TransactionType,
    TransactionValidationError,
)


def test_create_assigns_fresh_id_and_appends() -> None:
    store = TransactionStore()

    first = store.create_transaction("Salary", "Income", 1000)
    second = store.create_transaction("Rent", TransactionType.EXPENSES, 400.5)

    assert first.transaction_id != second.transaction_id
    assert [t.transaction_id for t in store.list_transactions()] == [
        first.transaction_id,
        second.transaction_id,
    ]
    assert second.transaction_type is TransactionType.EXPENSES
    assert second.amount == pytest.approx(400.5)


def test_ids_are_not_reused_after_delete() -> None:
    """A length-based id would collide here; the counter must keep moving."""

    store = TransactionStore()
    first = store.create_transaction("A", "Income", 1)
    second = store.create_transaction("B", "Income", 2)
    store.delete_transaction(first.transaction_id)

    third = store.create_transaction("C", "Expenses", 3)

    ids = [t.transaction_id for t in store.list_transactions()]
    assert third.transaction_id not in (first.transaction_id, second.transaction_id)
    assert len(ids) == len(set(ids)) == 2


@pytest.mark.parametrize(
    "name, transaction_type, amount",
    [
        (None, "Income", 10),
        ("", "Income", 10),
        ("   ", "Income", 10),
        ("Lunch", None, 10),
        ("Lunch", "Savings", 10),
        ("Lunch", "Expenses", "10"),
        ("Lunch", "Expenses", None),
        ("Lunch", "Expenses", True),
        ("Lunch", "Expenses", float("nan")),
        ("Lunch", "Expenses", 10 ** 400),
    ],
)
def test_create_rejects_invalid_fields_without_mutation(name, transaction_type, amount) -> None:
    store = TransactionStore()
    store.create_transaction("Existing", "Income", 5)

    with pytest.raises(TransactionValidationError) as excinfo:
        store.create_transaction(name, transaction_type, amount)

    assert excinfo.value.errors
    assert len(store) == 1


def test_update_replaces_in_place_and_keeps_id() -> None:
    store = TransactionStore()
    first = store.create_transaction("Salary", "Income", 1000)
    middle = store.create_transaction("Groceries", "Expenses", 80)
    last = store.create_transaction("Bonus", "Income", 200)

    updated = store.update_transaction(middle.transaction_id, "Food", "Expenses", 95)

    assert updated.transaction_id == middle.transaction_id
    assert [t.name for t in store.list_transactions()] == ["Salary", "Food", "Bonus"]
    assert store.get_transaction(first.transaction_id) == first
    assert store.get_transaction(last.transaction_id) == last


def test_update_unknown_id_reports_not_found_before_validation() -> None:
    store = TransactionStore()
    store.create_transaction("Salary", "Income", 1000)

    with pytest.raises(TransactionNotFoundError):
        store.update_transaction(42, "", None, "oops")

    assert [t.name for t in store.list_transactions()] == ["Salary"]


def test_update_with_invalid_fields_leaves_entity_unchanged() -> None:
    store = TransactionStore()
    original = store.create_transaction("Salary", "Income", 1000)

    with pytest.raises(TransactionValidationError):
        store.update_transaction(original.transaction_id, "Salary", "Income", "lots")

    assert store.get_transaction(original.transaction_id) == original


def test_delete_removes_exactly_one() -> None:
    store = TransactionStore()
    keep = store.create_transaction("Keep", "Income", 1)
    drop = store.create_transaction("Drop", "Expenses", 2)

    removed = store.delete_transaction(drop.transaction_id)

    assert removed == drop
    assert store.list_transactions() == [keep]
    with pytest.raises(TransactionNotFoundError):
        store.delete_transaction(drop.transaction_id)
    assert len(store) == 1


def test_seed_transactions_continue_the_counter() -> None:
    store = TransactionStore(
        transactions=[
            Transaction(transaction_id=7, name="Seed", transaction_type=TransactionType.INCOME, amount=10.0)
        ]
    )

    created = store.create_transaction("Next", "Expenses", 1)

    assert created.transaction_id == 8


def test_seed_transactions_reject_duplicate_ids() -> None:
    seed = Transaction(transaction_id=1, name="Seed", transaction_type=TransactionType.INCOME, amount=1.0)

    with pytest.raises(ValueError):
        TransactionStore(transactions=[seed, seed])


def test_list_is_a_snapshot() -> None:
    store = TransactionStore()
    store.create_transaction("Salary", "Income", 1000)

    listing = store.list_transactions()
    listing.clear()

    assert len(store.list_transactions()) == 1
