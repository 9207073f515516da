"""
Core — цифры, таблицы операций и последовательности balanced ternary.

Модули ядра не зависят от слоя хранения (balanced_ternary.store).
"""

# Errors
from balanced_ternary.core.errors import (
    DivideByZero,
    InvalidInput,
    LengthExceeded,
    Overflow,
    ParseError,
    TernaryError,
)

# Checked signed 64-bit arithmetic
from balanced_ternary.core.numeric import (
    I64_MAX,
    I64_MIN,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    fits_i64,
    format_radix,
    parse_radix,
    validate_i64,
)

# Digit
from balanced_ternary.core.digit import (
    STANDARD_ALPHABET,
    T_ALPHABET,
    THETA_ALPHABET,
    Digit,
    DigitAlphabet,
)

# Digit algebra
from balanced_ternary.core.algebra import (
    BINARY_OPERATORS,
    UNARY_OPERATORS,
    BinaryOperator,
    CarryOperator,
    UnaryOperator,
    binary_operator,
    unary_operator,
)

# Sequences
from balanced_ternary.core.sequence import DigitSequence, pad_left
from balanced_ternary.core.ternary import (
    Ternary,
    digit_add,
    digit_decrement,
    digit_increment,
    digit_sub,
)
from balanced_ternary.core.fixed import (
    MAX_FIXED_WIDTH,
    TRYTE_WIDTH,
    FixedTernary,
    Tryte,
    fixed_ternary_type,
)

__all__ = [
    # Errors
    "DivideByZero",
    "InvalidInput",
    "LengthExceeded",
    "Overflow",
    "ParseError",
    "TernaryError",
    # Checked arithmetic
    "I64_MAX",
    "I64_MIN",
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    "fits_i64",
    "format_radix",
    "parse_radix",
    "validate_i64",
    # Digit
    "STANDARD_ALPHABET",
    "T_ALPHABET",
    "THETA_ALPHABET",
    "Digit",
    "DigitAlphabet",
    # Digit algebra
    "BINARY_OPERATORS",
    "UNARY_OPERATORS",
    "BinaryOperator",
    "CarryOperator",
    "UnaryOperator",
    "binary_operator",
    "unary_operator",
    # Sequences
    "DigitSequence",
    "pad_left",
    "Ternary",
    "digit_add",
    "digit_decrement",
    "digit_increment",
    "digit_sub",
    "MAX_FIXED_WIDTH",
    "TRYTE_WIDTH",
    "FixedTernary",
    "Tryte",
    "fixed_ternary_type",
]
