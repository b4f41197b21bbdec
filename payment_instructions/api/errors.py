"""Centralized API exception definitions and handlers."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from payment_instructions.messages import PaymentMessages, StatusCodes

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base domain/application error."""

    def __init__(self, message: str, status_code: int = 400, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class InstructionError(AppError):
    """Raised when a payment instruction cannot be parsed, validated or executed.

    Subclasses pin a machine-readable ``code`` and a default message; both are
    part of the wire contract and must not change.
    """

    code: str = ""
    default_message: str = ""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message=message or self.default_message, status_code=400, code=self.code)


class MalformedInstruction(InstructionError):
    code = StatusCodes.MALFORMED_INSTRUCTION
    default_message = PaymentMessages.MALFORMED_INSTRUCTION


class InvalidKeywordOrder(InstructionError):
    code = StatusCodes.INVALID_KEYWORD_ORDER
    default_message = PaymentMessages.INVALID_KEYWORD_ORDER


class InvalidAmount(InstructionError):
    code = StatusCodes.INVALID_AMOUNT
    default_message = PaymentMessages.INVALID_AMOUNT


class UnsupportedCurrency(InstructionError):
    code = StatusCodes.UNSUPPORTED_CURRENCY
    default_message = PaymentMessages.UNSUPPORTED_CURRENCY


class MissingKeyword(InstructionError):
    code = StatusCodes.MISSING_KEYWORD
    default_message = PaymentMessages.MISSING_KEYWORD


class InvalidAccountId(InstructionError):
    code = StatusCodes.INVALID_ACCOUNT_ID
    default_message = PaymentMessages.INVALID_ACCOUNT_ID


class SameAccountError(InstructionError):
    code = StatusCodes.SAME_ACCOUNT_ERROR
    default_message = PaymentMessages.SAME_ACCOUNT_ERROR


class AccountNotFound(InstructionError):
    code = StatusCodes.ACCOUNT_NOT_FOUND
    default_message = PaymentMessages.ACCOUNT_NOT_FOUND


class CurrencyMismatch(InstructionError):
    code = StatusCodes.CURRENCY_MISMATCH
    default_message = PaymentMessages.CURRENCY_MISMATCH


class InsufficientFunds(InstructionError):
    code = StatusCodes.INSUFFICIENT_FUNDS
    default_message = PaymentMessages.INSUFFICIENT_FUNDS


class InvalidDateFormat(InstructionError):
    code = StatusCodes.INVALID_DATE_FORMAT
    default_message = PaymentMessages.INVALID_DATE_FORMAT


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    """Render typed application exceptions as JSON responses."""

    content: dict[str, str] = {"detail": exc.message}
    if exc.code:
        content["status_code"] = exc.code
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request envelopes with a plain 400."""

    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler for non-domain errors."""

    logger.exception("unhandled-error: %s", type(exc).__name__)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach API exception handlers once during startup."""

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
