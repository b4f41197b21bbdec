"""Instruction surface formats and the phrase-based format detector."""

from __future__ import annotations

from dataclasses import dataclass

from payment_instructions.api.errors import MalformedInstruction
from payment_instructions.schemas.payment import InstructionType


@dataclass(frozen=True)
class InstructionFormat:
    """Anchor keywords and role mapping for one surface form.

    The sentence reads ``<verb> <amount> <currency> <preposition> account <id>
    for <counter_verb> <counter_preposition> account <id>``. The leading account
    plays the ``type`` role; the trailing one plays the opposite role.
    """

    type: InstructionType
    verb: str
    preposition: str
    counter_verb: str
    counter_preposition: str
    markers: tuple[str, ...]

    def matches(self, lowered: str) -> bool:
        return all(marker in lowered for marker in self.markers)


DEBIT_FORMAT = InstructionFormat(
    type=InstructionType.DEBIT,
    verb="debit",
    preposition="from",
    counter_verb="credit",
    counter_preposition="to",
    markers=("debit", "from account", "for credit to account"),
)

CREDIT_FORMAT = InstructionFormat(
    type=InstructionType.CREDIT,
    verb="credit",
    preposition="to",
    counter_verb="debit",
    counter_preposition="from",
    markers=("credit", "to account", "for debit from account"),
)

# Checked in order; DEBIT wins when both would match.
FORMATS: tuple[InstructionFormat, ...] = (DEBIT_FORMAT, CREDIT_FORMAT)


def detect_format(text: str) -> InstructionFormat:
    """Pick the surface format by phrase containment on the lowercased text."""

    lowered = text.lower()
    for fmt in FORMATS:
        if fmt.matches(lowered):
            return fmt
    raise MalformedInstruction()
