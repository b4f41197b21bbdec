"""Fixed vocabulary for payment instructions: currencies, codes and messages."""

from __future__ import annotations

import string
from typing import Final

SUPPORTED_CURRENCIES: Final[frozenset[str]] = frozenset({"NGN", "USD", "GBP", "GHS"})

VALID_ACCOUNT_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits + "-_.@")

STATUS_SUCCESSFUL: Final[str] = "successful"
STATUS_PENDING: Final[str] = "pending"


class StatusCodes:
    """Wire codes attached to every processed instruction or failure."""

    SUCCESSFUL = "AP00"
    PENDING = "AP02"

    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT_ERROR = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE_FORMAT = "DT01"
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"


class PaymentMessages:
    """Human-readable texts paired with the status codes."""

    TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
    TRANSACTION_PENDING = "Transaction scheduled for future execution"

    INVALID_AMOUNT = "Amount must be a positive integer"
    CURRENCY_MISMATCH = "Account currency mismatch"
    UNSUPPORTED_CURRENCY = "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"
    INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
    SAME_ACCOUNT_ERROR = "Debit and credit accounts cannot be the same"
    ACCOUNT_NOT_FOUND = "Account not found"
    INVALID_ACCOUNT_ID = "Invalid account ID format"
    INVALID_DATE_FORMAT = "Invalid date format. Use YYYY-MM-DD"
    MISSING_KEYWORD = "Missing required keyword"
    INVALID_KEYWORD_ORDER = "Invalid keyword order"
    MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"
