"""Dependency helpers for API layer."""

from fastapi import Depends

from payment_instructions.config import Settings, get_settings
from payment_instructions.processor.scheduler import Clock, make_clock
from payment_instructions.processor.service import PaymentInstructionService


def get_clock(settings: Settings = Depends(get_settings)) -> Clock:
    """Build the clock deciding today's date for scheduling."""

    return make_clock(settings.timezone)


def get_payment_service(clock: Clock = Depends(get_clock)) -> PaymentInstructionService:
    """Build payment instruction service dependency."""

    return PaymentInstructionService(clock=clock)
