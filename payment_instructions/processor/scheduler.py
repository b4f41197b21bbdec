"""Immediate vs deferred execution decision."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from payment_instructions.messages import (
    STATUS_PENDING,
    STATUS_SUCCESSFUL,
    PaymentMessages,
    StatusCodes,
)
from payment_instructions.processor.validation import parse_execution_date

Clock = Callable[[], date]


@dataclass(frozen=True)
class ExecutionDecision:
    """Status triple attached to a processed instruction."""

    execute_now: bool
    status: str
    status_reason: str
    status_code: str


SUCCESSFUL = ExecutionDecision(
    execute_now=True,
    status=STATUS_SUCCESSFUL,
    status_reason=PaymentMessages.TRANSACTION_SUCCESSFUL,
    status_code=StatusCodes.SUCCESSFUL,
)

PENDING = ExecutionDecision(
    execute_now=False,
    status=STATUS_PENDING,
    status_reason=PaymentMessages.TRANSACTION_PENDING,
    status_code=StatusCodes.PENDING,
)


def make_clock(timezone: Optional[str] = None) -> Clock:
    """Return a callable giving today's calendar date, local or in ``timezone``."""

    if timezone is None:
        return date.today
    zone = ZoneInfo(timezone)
    return lambda: datetime.now(zone).date()


def should_execute_now(execute_by: Optional[str], today: date) -> bool:
    """Same-day and past dates execute now; only future dates wait."""

    if not execute_by:
        return True
    return parse_execution_date(execute_by) <= today


def decide_execution(execute_by: Optional[str], today: date) -> ExecutionDecision:
    return SUCCESSFUL if should_execute_now(execute_by, today) else PENDING
