"""
balanced_ternary — числа, арифметика и многозначная логика в balanced ternary.

Быстрый старт:
    >>> from balanced_ternary import ter, tryte
    >>> str(ter("+-0") + ter("+"))
    '+-+'
    >>> int(tryte("+-0"))
    6
"""

from typing import Any

from balanced_ternary.core import (
    STANDARD_ALPHABET,
    T_ALPHABET,
    THETA_ALPHABET,
    Digit,
    DigitAlphabet,
    DigitSequence,
    DivideByZero,
    FixedTernary,
    InvalidInput,
    LengthExceeded,
    Overflow,
    ParseError,
    Ternary,
    TernaryError,
    Tryte,
    digit_add,
    digit_decrement,
    digit_increment,
    digit_sub,
    fixed_ternary_type,
)
from balanced_ternary.store import DataTernary, Ter40, TritsChunk

__version__ = "1.0.0"


def trit(value: Any) -> Digit:
    """Digit из символа ('-', '0', '+'), целого (-1, 0, 1) или Digit."""
    if isinstance(value, Digit):
        return value
    if isinstance(value, str):
        return Digit.from_char(value)
    return Digit.from_int(value)


def ter(value: Any) -> Ternary:
    """Ternary из строки, целого или списка цифр (см. Ternary.of)."""
    return Ternary.of(value)


def tryte(value: Any) -> Tryte:
    """Tryte из строки или целого."""
    if isinstance(value, Tryte):
        return value
    return Tryte.from_ternary(Ternary.of(value))


def dter(value: Any) -> DataTernary:
    """DataTernary из строки, целого или Ternary."""
    return DataTernary.from_ternary(Ternary.of(value))


__all__ = [
    # Shorthand constructors
    "trit",
    "ter",
    "tryte",
    "dter",
    # Errors
    "DivideByZero",
    "InvalidInput",
    "LengthExceeded",
    "Overflow",
    "ParseError",
    "TernaryError",
    # Digit
    "STANDARD_ALPHABET",
    "T_ALPHABET",
    "THETA_ALPHABET",
    "Digit",
    "DigitAlphabet",
    # Sequences
    "DigitSequence",
    "Ternary",
    "FixedTernary",
    "Tryte",
    "fixed_ternary_type",
    "digit_add",
    "digit_sub",
    "digit_increment",
    "digit_decrement",
    # Storage
    "DataTernary",
    "Ter40",
    "TritsChunk",
]
