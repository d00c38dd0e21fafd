"""Mini README: Client application for the transactions API.

Exports the HTTP client, the local state helpers, and the application
object that combines them.
"""

from .api_client import TransactionApiClient, TransactionApiError
from .application import ClientApplication
from .state import (
    AddTransaction,
    ClientState,
    DeleteTransaction,
    SetTransactions,
    TransactionTotals,
    UpdateTransaction,
    apply_action,
    summarise_totals,
)

__all__ = [
    "AddTransaction",
    "ClientApplication",
    "ClientState",
    "DeleteTransaction",
    "SetTransactions",
    "TransactionApiClient",
    "TransactionApiError",
    "TransactionTotals",
    "UpdateTransaction",
    "apply_action",
    "summarise_totals",
]
