"""Mini README: HTTP client for the transactions API.

Structure:
    * TransactionApiError - raised for network failures and non-2xx replies.
    * TransactionApiClient - thin wrapper over ``httpx.Client`` per endpoint.

Any ``httpx.Client`` can be injected, which lets tests drive the client
against an in-process FastAPI ``TestClient``. Without one, a client pointed
at ``api_base_url`` from the settings is created and owned by this object.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..configuration import get_settings
from ..finance import Transaction, TransactionType
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

TRANSACTIONS_PATH = "/api/transactions"


class TransactionApiError(RuntimeError):
    """A request to the transactions API did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def transaction_from_json(data: Dict[str, Any]) -> Transaction:
    """Build a ``Transaction`` from the JSON the server returns."""

    try:
        return Transaction(
            transaction_id=int(data["id"]),
            name=str(data["name"]),
            transaction_type=TransactionType(data["transactionType"]),
            amount=float(data["amount"]),
        )
    except (KeyError, TypeError, ValueError) as error:
        raise TransactionApiError(f"Malformed transaction in response: {data!r}") from error


class TransactionApiClient:
    """Issue list/create/update/delete requests against the API."""

    def __init__(self, http_client: Optional[httpx.Client] = None, base_url: Optional[str] = None) -> None:
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(base_url=base_url or get_settings().api_base_url)
        self._http = http_client

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "TransactionApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as error:
            raise TransactionApiError(f"{method} {path} failed: {error}") from error

        if response.is_error:
            message = _error_message(response)
            raise TransactionApiError(
                f"{method} {path} returned {response.status_code}: {message}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as error:
            raise TransactionApiError(f"{method} {path} returned invalid JSON") from error

    def list_transactions(self) -> List[Transaction]:
        payload = self._request("GET", TRANSACTIONS_PATH)
        if not isinstance(payload, list):
            raise TransactionApiError("Expected a list of transactions")
        return [transaction_from_json(item) for item in payload]

    def create_transaction(
        self, name: str, transaction_type: TransactionType, amount: float
    ) -> Transaction:
        body = _body(name, transaction_type, amount)
        return transaction_from_json(self._request("POST", TRANSACTIONS_PATH, json=body))

    def update_transaction(
        self, transaction_id: int, name: str, transaction_type: TransactionType, amount: float
    ) -> Transaction:
        body = _body(name, transaction_type, amount)
        path = f"{TRANSACTIONS_PATH}/{transaction_id}"
        return transaction_from_json(self._request("PUT", path, json=body))

    def delete_transaction(self, transaction_id: int) -> str:
        payload = self._request("DELETE", f"{TRANSACTIONS_PATH}/{transaction_id}")
        return str(payload.get("message", "")) if isinstance(payload, dict) else ""


def _body(name: str, transaction_type: TransactionType, amount: float) -> Dict[str, Any]:
    type_value = transaction_type.value if isinstance(transaction_type, TransactionType) else transaction_type
    return {"name": name, "transactionType": type_value, "amount": amount}


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict):
        return str(payload.get("message") or payload.get("detail") or payload)
    return str(payload)
