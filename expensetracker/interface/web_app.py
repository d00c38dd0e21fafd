"""Mini README: FastAPI application exposing the transactions REST API.

Structure:
    * create_application - factory wiring the store, middleware, and routes.
    * exception handlers - map domain errors onto 400/404/500 JSON bodies.

Every error body carries a ``message`` key. The store is created inside the
factory (or injected by tests) so each application owns its own data.
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..configuration import ExpenseTrackerSettings, get_settings
from ..finance import TransactionNotFoundError, TransactionStore, TransactionValidationError
from ..logging_utils import get_logger
from .schemas import ErrorResponse, MessageResponse, TransactionResponse, parse_payload

LOGGER = get_logger(__name__)

API_PREFIX = "/api/transactions"
INVALID_DATA_MESSAGE = "Invalid transaction data"
NOT_FOUND_MESSAGE = "Transaction not found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _parse_identifier(raw: str) -> int:
    """Path ids that are not plain ASCII digit strings can never match a stored transaction."""

    if not (raw.isascii() and raw.isdigit()):
        raise TransactionNotFoundError(raw)
    return int(raw)


def _serialise(transaction) -> dict:
    return TransactionResponse.from_transaction(transaction).model_dump(mode="json")


def create_application(
    store: Optional[TransactionStore] = None,
    settings: Optional[ExpenseTrackerSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and error handling."""

    settings = settings or get_settings()
    store = store if store is not None else TransactionStore()

    app = FastAPI(title="Expense Tracker API", version="1.0.0")
    app.state.store = store

    @app.middleware("http")
    async def log_http_requests(request: Request, call_next):
        """Log every request with its resulting status code."""

        LOGGER.debug("Request received %s %s", request.method, request.url.path)
        response = await call_next(request)
        LOGGER.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TransactionValidationError)
    async def handle_validation_error(request: Request, exc: TransactionValidationError) -> JSONResponse:
        LOGGER.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors)
        body = ErrorResponse(message=INVALID_DATA_MESSAGE, errors=exc.errors)
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed JSON bodies are reported like any other invalid payload."""

        errors = [
            {"field": str(error.get("loc", ("body",))[-1]), "message": error.get("msg", "invalid value")}
            for error in exc.errors()
        ]
        LOGGER.info("Rejected malformed request %s %s", request.method, request.url.path)
        body = ErrorResponse(message=INVALID_DATA_MESSAGE, errors=errors)
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(TransactionNotFoundError)
    async def handle_not_found(request: Request, exc: TransactionNotFoundError) -> JSONResponse:
        LOGGER.info("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=404, content={"message": NOT_FOUND_MESSAGE})

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get(API_PREFIX, response_model=List[TransactionResponse])
    def list_transactions() -> JSONResponse:
        """Return every transaction in insertion order."""

        return JSONResponse([_serialise(transaction) for transaction in store.list_transactions()])

    @app.post(
        API_PREFIX,
        status_code=201,
        response_model=TransactionResponse,
        responses={400: {"model": ErrorResponse}},
    )
    def create_transaction(payload: Any = Body(None)) -> JSONResponse:
        """Create a transaction; the store assigns its id."""

        fields = parse_payload(payload)
        transaction = store.create_transaction(fields.name, fields.transactionType, fields.amount)
        return JSONResponse(status_code=201, content=_serialise(transaction))

    @app.put(
        API_PREFIX + "/{transaction_id}",
        response_model=TransactionResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": MessageResponse}},
    )
    def update_transaction(transaction_id: str, payload: Any = Body(None)) -> JSONResponse:
        """Replace the name, type and amount of an existing transaction."""

        identifier = _parse_identifier(transaction_id)
        store.get_transaction(identifier)
        fields = parse_payload(payload)
        transaction = store.update_transaction(
            identifier, fields.name, fields.transactionType, fields.amount
        )
        return JSONResponse(_serialise(transaction))

    @app.delete(
        API_PREFIX + "/{transaction_id}",
        response_model=MessageResponse,
        responses={404: {"model": MessageResponse}},
    )
    def delete_transaction(transaction_id: str) -> JSONResponse:
        """Remove a transaction by id."""

        store.delete_transaction(_parse_identifier(transaction_id))
        return JSONResponse({"message": "Transaction deleted"})

    LOGGER.debug("Expense tracker application created (environment=%s)", settings.environment)
    return app
