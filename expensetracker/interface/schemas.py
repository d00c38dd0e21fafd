"""Mini README: Request and response models for the transactions API.

Structure:
    * TransactionPayload - body accepted by create and update.
    * TransactionResponse - serialised transaction returned to clients.
    * MessageResponse / ErrorResponse - confirmation and error envelopes.
    * parse_payload - turns a decoded JSON body into a validated payload.

Bodies are parsed explicitly inside the route handlers (rather than by
FastAPI's signature binding) so that an update addressed to an unknown id
reports 404 before the body is looked at.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, ValidationError, validator

from ..finance import Transaction, TransactionType, TransactionValidationError


class TransactionPayload(BaseModel):
    """Mutable transaction fields sent by the client."""

    name: StrictStr = Field(..., description="Display label, must not be blank.")
    transactionType: TransactionType = Field(..., description="Either Income or Expenses.")
    amount: Union[StrictInt, StrictFloat] = Field(..., description="Numeric magnitude.")

    class Config:
        # Clients may echo the id back in the body; it is never taken from there.
        extra = "ignore"

    @validator("name")
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @validator("amount")
    def _amount_finite(cls, value: Union[int, float]) -> Union[int, float]:
        try:
            finite = math.isfinite(float(value))
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError("amount must be a finite number")
        return value


class TransactionResponse(BaseModel):
    """Transaction as exposed over HTTP."""

    id: int
    name: str
    transactionType: TransactionType
    amount: float

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.transaction_id,
            name=transaction.name,
            transactionType=transaction.transaction_type,
            amount=transaction.amount,
        )


class MessageResponse(BaseModel):
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    message: str
    errors: List[FieldError] = Field(default_factory=list)


def parse_payload(raw: Any) -> TransactionPayload:
    """Validate a decoded JSON body, raising ``TransactionValidationError`` on failure."""

    if not isinstance(raw, dict):
        raise TransactionValidationError(
            "Invalid transaction data",
            errors=[{"field": "body", "message": "expected a JSON object"}],
        )
    try:
        return TransactionPayload.model_validate(raw)
    except ValidationError as error:
        raise TransactionValidationError(
            "Invalid transaction data", errors=_field_errors(error.errors())
        ) from error


def _field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    converted = []
    for error in errors:
        # Union members add their type name to the location; keep only the field.
        location = error.get("loc") or ("body",)
        converted.append({"field": str(location[0]), "message": error.get("msg", "invalid value")})
    return converted
