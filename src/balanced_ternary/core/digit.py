"""
Digit — Атомарная цифра balanced ternary

Цифра принимает ровно три значения, изоморфные целым {-1, 0, +1}:
- NEG  (-1) — символ '-'
- ZERO ( 0) — символ '0'
- POS  (+1) — символ '+'

Порядок NEG < ZERO < POS структурный. Конструкторы from_char / from_int /
from_unbalanced тотальны на своём алфавите и бросают InvalidInput на всём
остальном (никакого молчаливого приведения к ZERO).

Таблицы операций над цифрами живут в balanced_ternary.core.algebra.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Final

from balanced_ternary.core.errors import InvalidInput


# =============================================================================
# ENUMS
# =============================================================================


@total_ordering
class Digit(Enum):
    """Цифра balanced ternary."""

    NEG = -1
    ZERO = 0
    POS = 1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Digit):
            return NotImplemented
        return self.value < other.value

    def __neg__(self) -> "Digit":
        return NEGATION[self]

    def __invert__(self) -> "Digit":
        return NEGATION[self]

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_char()

    # -------------------------------------------------------------------------
    # Символьная конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_char(cls, char: str) -> "Digit":
        """
        Создание цифры из символа.

        Args:
            char: Один из '-', '0', '+'

        Returns:
            Соответствующая цифра

        Raises:
            InvalidInput: Если символ вне алфавита
        """
        try:
            return _FROM_CHAR[char]
        except (KeyError, TypeError):
            raise InvalidInput(
                f"Invalid digit character {char!r}: must be either '-', '0' or '+'"
            ) from None

    def to_char(self) -> str:
        return _TO_CHAR[self]

    def to_char_t(self) -> str:
        """Нотация 'T01': NEG → 'T', ZERO → '0', POS → '1'."""
        return T_ALPHABET.char_for(self)

    def to_char_theta(self) -> str:
        """Нотация с тетой: NEG → 'Θ', ZERO → '0', POS → '1'."""
        return THETA_ALPHABET.char_for(self)

    # -------------------------------------------------------------------------
    # Целочисленная конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "Digit":
        """
        Создание цифры из целого.

        Args:
            value: Один из -1, 0, 1

        Raises:
            InvalidInput: Если value вне {-1, 0, 1}
        """
        # bool является подклассом int, но True/False не цифры
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"Invalid digit value {value!r}: must be an integer")
        if value not in (-1, 0, 1):
            raise InvalidInput(
                f"Invalid digit value {value}: must be either -1, 0 or +1"
            )
        return cls(value)

    def to_int(self) -> int:
        return self.value

    @classmethod
    def from_unbalanced(cls, value: int) -> "Digit":
        """
        Создание цифры из unbalanced-представления: 0 → NEG, 1 → ZERO, 2 → POS.

        Raises:
            InvalidInput: Если value вне {0, 1, 2}
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput(f"Invalid unbalanced digit {value!r}: must be an integer")
        if value not in (0, 1, 2):
            raise InvalidInput(
                f"Invalid unbalanced digit {value!r}: must be either 0, 1 or 2"
            )
        return cls(value - 1)

    def to_unbalanced(self) -> int:
        return self.value + 1

    def ht_bool(self) -> bool:
        """
        Конверсия в bool по HT-логике.

        Returns:
            True для POS, False для NEG

        Raises:
            InvalidInput: Для ZERO (сначала привести через possibly/necessary)
        """
        if self is Digit.ZERO:
            raise InvalidInput(
                "Cannot convert Digit.ZERO to a bool: "
                "use possibly() or necessary() first"
            )
        return self is Digit.POS


_FROM_CHAR: Final[Dict[str, Digit]] = {"-": Digit.NEG, "0": Digit.ZERO, "+": Digit.POS}
_TO_CHAR: Final[Dict[Digit, str]] = {digit: char for char, digit in _FROM_CHAR.items()}
# Таблица отрицания, общая для Digit.__neg__ и algebra.negate
NEGATION: Final[Dict[Digit, Digit]] = {
    Digit.NEG: Digit.POS,
    Digit.ZERO: Digit.ZERO,
    Digit.POS: Digit.NEG,
}


# =============================================================================
# АЛФАВИТЫ
# =============================================================================


@dataclass(frozen=True)
class DigitAlphabet:
    """
    Набор символов для отображения и разбора цифр.

    Используется Ternary.to_string_repr / Ternary.parse_with.
    Все три символа должны быть различными и односимвольными.
    """

    neg: str = "-"
    zero: str = "0"
    pos: str = "+"

    def __post_init__(self) -> None:
        chars = (self.neg, self.zero, self.pos)
        if any(len(char) != 1 for char in chars):
            raise InvalidInput(f"Alphabet symbols must be single characters: {chars}")
        if len(set(chars)) != 3:
            raise InvalidInput(f"Alphabet symbols must be distinct: {chars}")

    @property
    def symbols(self) -> str:
        """Символы в порядке NEG, ZERO, POS."""
        return self.neg + self.zero + self.pos

    def char_for(self, digit: Digit) -> str:
        if digit is Digit.NEG:
            return self.neg
        if digit is Digit.ZERO:
            return self.zero
        return self.pos

    def digit_for(self, char: str) -> Digit:
        """
        Raises:
            InvalidInput: Если символ не принадлежит алфавиту
        """
        if char == self.neg:
            return Digit.NEG
        if char == self.zero:
            return Digit.ZERO
        if char == self.pos:
            return Digit.POS
        raise InvalidInput(
            f"Invalid digit character {char!r}: must be one of {self.symbols!r}"
        )


# Стандартная нотация: "+0-"
STANDARD_ALPHABET: Final[DigitAlphabet] = DigitAlphabet()

# Нотация с T для -1: "10T"
T_ALPHABET: Final[DigitAlphabet] = DigitAlphabet(neg="T", zero="0", pos="1")

# Нотация с тетой для -1: "10Θ"
THETA_ALPHABET: Final[DigitAlphabet] = DigitAlphabet(neg="Θ", zero="0", pos="1")
