from __future__ import annotations

import pytest

from payment_instructions.api.errors import (
    InvalidAmount,
    InvalidKeywordOrder,
    MalformedInstruction,
    MissingKeyword,
    UnsupportedCurrency,
)
from payment_instructions.processor.formats import CREDIT_FORMAT, DEBIT_FORMAT, InstructionFormat, detect_format
from payment_instructions.processor.parser import InstructionParser, find_keyword, parse_instruction
from payment_instructions.processor.tokenizer import tokenize
from payment_instructions.schemas.payment import InstructionType


def test_tokenize_collapses_spaces_and_keeps_case() -> None:
    assert tokenize("  Debit  500 NGN ") == ["Debit", "500", "NGN"]
    assert tokenize("") == []


def test_find_keyword_is_case_insensitive_and_respects_start() -> None:
    tokens = ["To", "x", "to", "y"]
    assert find_keyword(tokens, "to") == 0
    assert find_keyword(tokens, "to", 1) == 2
    assert find_keyword(tokens, "from") == -1


def test_detect_format_by_phrases() -> None:
    assert detect_format("DEBIT 1 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b") is DEBIT_FORMAT
    assert detect_format("credit 1 usd to account a for debit from account b") is CREDIT_FORMAT
    with pytest.raises(MalformedInstruction):
        detect_format("send 100 USD to bob")


def test_parse_debit_format() -> None:
    parsed = parse_instruction("Debit 500 NGN from Account A001 for credit to Account B002")

    assert parsed.type is InstructionType.DEBIT
    assert parsed.amount == 500
    assert parsed.currency == "NGN"
    assert parsed.debit_account == "A001"
    assert parsed.credit_account == "B002"
    assert parsed.execute_by is None


def test_parse_credit_format_swaps_roles() -> None:
    parsed = parse_instruction("Credit 500 ngn to account B002 for debit from account A001 on 2099-01-01")

    assert parsed.type is InstructionType.CREDIT
    assert parsed.currency == "NGN"
    assert parsed.debit_account == "A001"
    assert parsed.credit_account == "B002"
    assert parsed.execute_by == "2099-01-01"


def test_debit_and_credit_phrasing_yield_same_canonical_fields() -> None:
    debit = parse_instruction("debit 75 GBP from account x-1 for credit to account y.2")
    credit = parse_instruction("credit 75 GBP to account y.2 for debit from account x-1")

    fields = ("amount", "currency", "debit_account", "credit_account", "execute_by")
    assert [getattr(debit, name) for name in fields] == [getattr(credit, name) for name in fields]


def test_parse_collapses_repeated_spaces() -> None:
    parsed = parse_instruction("debit   10  USD from account a1   for credit to account b1")
    assert parsed.amount == 10
    assert parsed.credit_account == "b1"


def test_trailing_on_without_date_leaves_execute_by_empty() -> None:
    parsed = parse_instruction("debit 10 USD from account a1 for credit to account b1 on")
    assert parsed.execute_by is None


@pytest.mark.parametrize("amount", ["0", "-5", "abc", "12.5", "1,000"])
def test_invalid_amount(amount: str) -> None:
    with pytest.raises(InvalidAmount):
        parse_instruction(f"debit {amount} USD from account a1 for credit to account b1")


@pytest.mark.parametrize("currency", ["EUR", "btc", "dollars"])
def test_unsupported_currency(currency: str) -> None:
    with pytest.raises(UnsupportedCurrency) as exc_info:
        parse_instruction(f"credit 10 {currency} to account b1 for debit from account a1")
    assert exc_info.value.code == "CU02"


def test_invalid_amount_is_reported_before_currency() -> None:
    with pytest.raises(InvalidAmount):
        parse_instruction("debit zero EUR from account a1 for credit to account b1")


@pytest.mark.parametrize(
    ("fmt", "text"),
    [
        (DEBIT_FORMAT, "debit 10 USD from wallet a1 for credit to account b1"),
        (DEBIT_FORMAT, "debit 10 USD from account a1 for credit to wallet b1"),
        (CREDIT_FORMAT, "credit 10 USD to wallet b1 for debit from account a1"),
        (CREDIT_FORMAT, "credit 10 USD to account b1 for debit from wallet a1"),
    ],
)
def test_missing_account_keyword(fmt: InstructionFormat, text: str) -> None:
    parser = InstructionParser()

    with pytest.raises(MissingKeyword) as exc_info:
        parser.parse_tokens(tokenize(text), fmt)
    assert exc_info.value.code == "SY01"


@pytest.mark.parametrize(
    ("fmt", "text"),
    [
        (DEBIT_FORMAT, "debit 10 USD from account a1 credit to account b1"),
        (DEBIT_FORMAT, "debit 10 USD from account a1 to account b1 for credit"),
        (CREDIT_FORMAT, "credit 10 USD to account b1 debit from account a1"),
        (CREDIT_FORMAT, "credit 10 USD to account b1 from account a1 for debit"),
        (CREDIT_FORMAT, "10 USD to account b1 for debit from account a1"),
    ],
)
def test_missing_or_misplaced_anchor_is_invalid_keyword_order(fmt: InstructionFormat, text: str) -> None:
    parser = InstructionParser()

    with pytest.raises(InvalidKeywordOrder) as exc_info:
        parser.parse_tokens(tokenize(text), fmt)
    assert exc_info.value.code == "SY02"


@pytest.mark.parametrize(
    "text",
    [
        "for credit to account b1 debit 10 USD from account a1",
        "for debit from account a1 credit 10 USD to account b1",
    ],
)
def test_anchors_out_of_order_are_rejected(text: str) -> None:
    with pytest.raises(InvalidKeywordOrder):
        parse_instruction(text)


def test_credit_format_leading_account_is_credit_side() -> None:
    parsed = InstructionParser().parse_tokens(
        tokenize("CREDIT 9 ghs TO ACCOUNT dest@x FOR DEBIT FROM ACCOUNT src_1"), CREDIT_FORMAT
    )

    assert (parsed.debit_account, parsed.credit_account, parsed.currency) == ("src_1", "dest@x", "GHS")


def test_missing_account_id_becomes_empty_string() -> None:
    parsed = parse_instruction("debit 10 USD from account a1 for credit to account")
    assert parsed.credit_account == ""
    assert parse_instruction("credit 10 USD to account b1 for debit from account").debit_account == ""
