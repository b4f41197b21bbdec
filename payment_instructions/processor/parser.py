"""Deterministic parser turning instruction text into a canonical instruction."""

from __future__ import annotations

import re
from typing import Optional

from payment_instructions.api.errors import (
    InvalidAmount,
    InvalidKeywordOrder,
    MissingKeyword,
    UnsupportedCurrency,
)
from payment_instructions.messages import SUPPORTED_CURRENCIES
from payment_instructions.processor.formats import InstructionFormat, detect_format
from payment_instructions.processor.tokenizer import tokenize
from payment_instructions.schemas.payment import CanonicalInstruction, InstructionType

AMOUNT_PATTERN = re.compile(r"[0-9]+")

ACCOUNT_KEYWORD = "account"
FOR_KEYWORD = "for"
DATE_KEYWORD = "on"


def find_keyword(tokens: list[str], keyword: str, start: int = 0) -> int:
    """Index of the first token equal to ``keyword`` (case-insensitive) at or after ``start``, else -1."""

    for index in range(max(start, 0), len(tokens)):
        if tokens[index].lower() == keyword:
            return index
    return -1


def _token_at(tokens: list[str], index: int) -> Optional[str]:
    if 0 <= index < len(tokens):
        return tokens[index]
    return None


class InstructionParser:
    """Parse both surface forms through one routine keyed by format descriptor."""

    def parse(self, text: str) -> CanonicalInstruction:
        fmt = detect_format(text)
        return self.parse_tokens(tokenize(text), fmt)

    def parse_tokens(self, tokens: list[str], fmt: InstructionFormat) -> CanonicalInstruction:
        verb_index, preposition_index, counter_preposition_index = self._locate_anchors(tokens, fmt)

        amount = self._extract_amount(_token_at(tokens, verb_index + 1))
        currency = self._extract_currency(_token_at(tokens, verb_index + 2))
        leading_account = self._extract_account(tokens, preposition_index)
        trailing_account = self._extract_account(tokens, counter_preposition_index)

        if fmt.type is InstructionType.DEBIT:
            debit_account, credit_account = leading_account, trailing_account
        else:
            debit_account, credit_account = trailing_account, leading_account

        return CanonicalInstruction(
            type=fmt.type,
            amount=amount,
            currency=currency,
            debit_account=debit_account,
            credit_account=credit_account,
            execute_by=self._extract_execute_by(tokens),
        )

    def _locate_anchors(self, tokens: list[str], fmt: InstructionFormat) -> tuple[int, int, int]:
        """Find verb, preposition, ``for`` and counter preposition in that order."""

        verb_index = find_keyword(tokens, fmt.verb)
        if verb_index == -1:
            raise InvalidKeywordOrder()

        preposition_index = find_keyword(tokens, fmt.preposition, verb_index + 1)
        if preposition_index == -1:
            raise InvalidKeywordOrder()

        for_index = find_keyword(tokens, FOR_KEYWORD, preposition_index + 1)
        if for_index == -1:
            raise InvalidKeywordOrder()

        # The slot right after "for" holds the counter verb.
        counter_preposition_index = find_keyword(tokens, fmt.counter_preposition, for_index + 2)
        if counter_preposition_index == -1:
            raise InvalidKeywordOrder()

        return verb_index, preposition_index, counter_preposition_index

    def _extract_amount(self, token: Optional[str]) -> int:
        if token is None or not AMOUNT_PATTERN.fullmatch(token):
            raise InvalidAmount()
        amount = int(token, 10)
        if amount <= 0:
            raise InvalidAmount()
        return amount

    def _extract_currency(self, token: Optional[str]) -> str:
        currency = token.upper() if token else ""
        if currency not in SUPPORTED_CURRENCIES:
            raise UnsupportedCurrency()
        return currency

    def _extract_account(self, tokens: list[str], preposition_index: int) -> str:
        keyword = _token_at(tokens, preposition_index + 1)
        if keyword is None or keyword.lower() != ACCOUNT_KEYWORD:
            raise MissingKeyword()
        return _token_at(tokens, preposition_index + 2) or ""

    def _extract_execute_by(self, tokens: list[str]) -> Optional[str]:
        on_index = find_keyword(tokens, DATE_KEYWORD)
        if on_index == -1:
            return None
        return _token_at(tokens, on_index + 1)


def parse_instruction(text: str) -> CanonicalInstruction:
    """Detect the format of ``text`` and parse it."""

    return InstructionParser().parse(text)
