"""Business-rule validation of a canonical instruction against account snapshots."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date
from typing import Optional

from payment_instructions.api.errors import (
    AccountNotFound,
    CurrencyMismatch,
    InsufficientFunds,
    InvalidAccountId,
    InvalidDateFormat,
    SameAccountError,
)
from payment_instructions.messages import VALID_ACCOUNT_CHARS
from payment_instructions.schemas.payment import Account, CanonicalInstruction

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_account_id(account_id: str) -> bool:
    """Non-empty and drawn only from letters, digits and ``-_.@``."""

    return bool(account_id) and all(char in VALID_ACCOUNT_CHARS for char in account_id)


def find_account(accounts: Sequence[Account], account_id: str) -> Optional[Account]:
    """First account with a matching id."""

    return next((account for account in accounts if account.id == account_id), None)


def parse_execution_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date or raise InvalidDateFormat."""

    if not DATE_PATTERN.fullmatch(value):
        raise InvalidDateFormat()
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDateFormat() from exc


def ensure_valid_account_id(account_id: str) -> None:
    if not is_valid_account_id(account_id):
        raise InvalidAccountId()


def ensure_account_exists(accounts: Sequence[Account], account_id: str) -> Account:
    account = find_account(accounts, account_id)
    if account is None:
        raise AccountNotFound()
    return account


def ensure_currency_matches(account: Account, currency: str) -> None:
    if account.currency.upper() != currency:
        raise CurrencyMismatch()


def validate_instruction(instruction: CanonicalInstruction, accounts: Sequence[Account]) -> None:
    """Apply business rules in fixed order; the first violated rule is raised."""

    ensure_valid_account_id(instruction.debit_account)
    ensure_valid_account_id(instruction.credit_account)

    if instruction.debit_account == instruction.credit_account:
        raise SameAccountError()

    debit_account = ensure_account_exists(accounts, instruction.debit_account)
    credit_account = ensure_account_exists(accounts, instruction.credit_account)

    ensure_currency_matches(debit_account, instruction.currency)
    ensure_currency_matches(credit_account, instruction.currency)

    if debit_account.balance < instruction.amount:
        raise InsufficientFunds()

    if instruction.execute_by:
        parse_execution_date(instruction.execute_by)
