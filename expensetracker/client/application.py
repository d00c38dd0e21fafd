"""Mini README: Client application tying the API client to local state.

``ClientApplication`` mirrors what a user can do: load the list, add,
edit, or delete a transaction, and read the running totals. Successful
server replies are folded into the local state through ``apply_action``;
failures are logged, exposed through ``error``, and leave the state as it
was.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..finance import Transaction, TransactionType
from ..logging_utils import get_logger
from .api_client import TransactionApiClient, TransactionApiError
from .state import (
    Action,
    AddTransaction,
    ClientState,
    DeleteTransaction,
    SetTransactions,
    TransactionTotals,
    UpdateTransaction,
    apply_action,
    summarise_totals,
)

LOGGER = get_logger(__name__)


class ClientApplication:
    """Keep a local copy of the transactions in sync with the server."""

    def __init__(self, api: TransactionApiClient, state: Optional[ClientState] = None) -> None:
        self.api = api
        self.state = state or ClientState()
        self.error: Optional[str] = None

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "ClientApplication":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return self.state.transactions

    def dispatch(self, action: Action) -> ClientState:
        self.state = apply_action(self.state, action)
        return self.state

    def _fail(self, message: str, error: TransactionApiError) -> None:
        LOGGER.error("%s: %s", message, error)
        self.error = message

    def load(self) -> bool:
        """Replace the local state with the server's list."""

        try:
            transactions = self.api.list_transactions()
        except TransactionApiError as error:
            self._fail("Failed to load transactions", error)
            return False
        self.dispatch(SetTransactions(tuple(transactions)))
        self.error = None
        return True

    def create(self, name: str, transaction_type: TransactionType, amount: float) -> Optional[Transaction]:
        try:
            created = self.api.create_transaction(name, transaction_type, amount)
        except TransactionApiError as error:
            self._fail("Failed to add transaction", error)
            return None
        self.dispatch(AddTransaction(created))
        self.error = None
        return created

    def update(
        self, transaction_id: int, name: str, transaction_type: TransactionType, amount: float
    ) -> Optional[Transaction]:
        try:
            updated = self.api.update_transaction(transaction_id, name, transaction_type, amount)
        except TransactionApiError as error:
            self._fail("Failed to update transaction", error)
            return None
        self.dispatch(UpdateTransaction(updated))
        self.error = None
        return updated

    def delete(self, transaction_id: int) -> bool:
        try:
            self.api.delete_transaction(transaction_id)
        except TransactionApiError as error:
            self._fail("Failed to delete transaction", error)
            return False
        self.dispatch(DeleteTransaction(transaction_id))
        self.error = None
        return True

    def summary(self) -> TransactionTotals:
        """Totals derived from the current local state."""

        return summarise_totals(self.state.transactions)
