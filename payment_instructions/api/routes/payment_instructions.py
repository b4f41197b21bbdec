"""Payment instruction endpoints."""

from fastapi import APIRouter, Depends

from payment_instructions.api.deps import get_payment_service
from payment_instructions.processor.service import PaymentInstructionService
from payment_instructions.schemas.payment import PaymentInstructionRequest, TransactionResult

router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


@router.post("", response_model=TransactionResult)
async def process_payment_instruction(
    payload: PaymentInstructionRequest,
    service: PaymentInstructionService = Depends(get_payment_service),
) -> TransactionResult:
    """Parse a free-text instruction and return projected balances."""

    return service.process(payload)
