"""Payment instruction processing orchestration service."""

from __future__ import annotations

import logging
from typing import Optional

from payment_instructions.api.errors import InstructionError
from payment_instructions.config import Settings
from payment_instructions.processor.parser import InstructionParser
from payment_instructions.processor.projector import project_balances
from payment_instructions.processor.scheduler import Clock, decide_execution, make_clock
from payment_instructions.processor.validation import validate_instruction
from payment_instructions.schemas.payment import PaymentInstructionRequest, TransactionResult

logger = logging.getLogger(__name__)


class PaymentInstructionService:
    """Parse, validate, schedule and project one payment instruction.

    Stateless between calls; the account snapshot in each request is never
    mutated and nothing is persisted.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._parser = InstructionParser()
        self._clock = clock or make_clock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentInstructionService":
        """Factory using the configured timezone for today's date."""

        return cls(clock=make_clock(settings.timezone))

    def process(self, request: PaymentInstructionRequest) -> TransactionResult:
        """Return the full projected result or raise an InstructionError."""

        instruction_text = request.instruction.strip()
        logger.info("parsing-instruction: %r", instruction_text)

        try:
            instruction = self._parser.parse(instruction_text)
            validate_instruction(instruction, request.accounts)

            decision = decide_execution(instruction.execute_by, self._clock())
            accounts = project_balances(request.accounts, instruction, decision.execute_now)
        except InstructionError as exc:
            logger.warning("parse-instruction-error: %s %s", exc.code, exc.message)
            raise

        result = TransactionResult(
            type=instruction.type,
            amount=instruction.amount,
            currency=instruction.currency,
            debit_account=instruction.debit_account,
            credit_account=instruction.credit_account,
            execute_by=instruction.execute_by,
            status=decision.status,
            status_reason=decision.status_reason,
            status_code=decision.status_code,
            accounts=accounts,
        )
        logger.info("instruction-processed: %s %s", result.status_code, result.model_dump_json())
        return result
