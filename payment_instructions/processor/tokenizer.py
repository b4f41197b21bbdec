"""Whitespace tokenizer for instruction text."""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """Split on single spaces, collapsing runs of spaces. Case is preserved."""

    return [word for word in text.split(" ") if word]
