"""Payment instruction request, domain and response schemas."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

Number = Union[int, float]
StrictNumber = Union[StrictInt, StrictFloat]


class InstructionType(str, Enum):
    """Which side of the transfer the instruction text leads with."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class Account(BaseModel):
    """Caller-supplied account snapshot."""

    model_config = {"frozen": True}

    id: str
    balance: StrictNumber
    currency: str


class PaymentInstructionRequest(BaseModel):
    """Raw request envelope: accounts plus free-text instruction."""

    accounts: list[Account]
    instruction: str


class CanonicalInstruction(BaseModel):
    """Format-independent instruction extracted from text."""

    model_config = {"frozen": True}

    type: InstructionType
    amount: int = Field(gt=0)
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str] = None


class ProjectedAccount(BaseModel):
    """Balance of one involved account before and after the transfer."""

    id: str
    balance: Number
    balance_before: Number
    currency: str


class TransactionResult(BaseModel):
    """Fully validated, projected response for one instruction."""

    type: InstructionType
    amount: int
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str]
    status: str
    status_reason: str
    status_code: str
    accounts: list[ProjectedAccount]
