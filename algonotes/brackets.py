"""Checking that brackets in a string are balanced, using a stack."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional


class Status(Enum):
    """Outcome of a generalised bracket check."""

    NOT_MATCHED = "not matched"
    MATCHED = "matched"
    ILLEGAL = "illegal character"


DEFAULT_PAIRS: Mapping[str, str] = {"L": "R", "<": ">", "[": "]"}
_STANDARD_PAIRS: Mapping[str, str] = {"(": ")", "[": "]", "{": "}"}


def _closing_table(pairs: Mapping[str, str]) -> dict[str, str]:
    closing: dict[str, str] = {}
    for opening, close in pairs.items():
        if close in pairs or close in closing:
            raise ValueError(f"character {close!r} has more than one role")
        closing[close] = opening
    return closing


def generalized_validate(text: str, pairs: Optional[Mapping[str, str]] = None) -> Status:
    """Check *text* against brackets given as a mapping from opening to closing.

    The first problem found decides the result: a character that is neither an
    opening nor a closing bracket gives ILLEGAL, a closing bracket that does not
    match the innermost open one gives NOT_MATCHED.
    """
    if pairs is None:
        pairs = DEFAULT_PAIRS
    closing = _closing_table(pairs)
    stack: list[str] = []
    for char in text:
        if char in pairs:
            stack.append(char)
        elif char in closing:
            if not stack or stack[-1] != closing[char]:
                return Status.NOT_MATCHED
            stack.pop()
        else:
            return Status.ILLEGAL
    return Status.NOT_MATCHED if stack else Status.MATCHED


def validate_brackets(text: str) -> bool:
    """Report whether *text* consists only of balanced (), [] and {} brackets."""
    return generalized_validate(text, _STANDARD_PAIRS) is Status.MATCHED