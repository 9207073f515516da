"""
Ter40 — 40 цифр balanced ternary в одном signed 64-bit целом.

Значение хранится как целое, цифры материализуются по запросу:
to_ternary() всегда возвращает ровно 40 цифр. Поддерживает
DigitSequence, поэтому логические комбинаторы работают без
промежуточного Ternary на стороне вызывающего кода.
"""

from typing import Final, List

from pydantic import BaseModel, Field, field_validator

from balanced_ternary.core.digit import Digit
from balanced_ternary.core.errors import LengthExceeded
from balanced_ternary.core.numeric import validate_i64
from balanced_ternary.core.sequence import DigitSequence
from balanced_ternary.core.ternary import Ternary

TER40_WIDTH: Final[int] = 40

# Наибольшее значение из 40 цифр: (3^40 - 1) / 2, помещается в signed 64-bit
TER40_MAX: Final[int] = (3**TER40_WIDTH - 1) // 2
TER40_MIN: Final[int] = -TER40_MAX


class Ter40(BaseModel, DigitSequence):
    """Ровно 40 цифр, хранимые как одно целое."""

    value: int = Field(default=0, description="Decimal значение")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_range(cls, v: int) -> int:
        validate_i64(v, "Ter40")
        if not TER40_MIN <= v <= TER40_MAX:
            raise ValueError(f"Ter40 value {v} needs more than {TER40_WIDTH} digits")
        return v

    @classmethod
    def from_ternary(cls, ternary: Ternary) -> "Ter40":
        """
        Raises:
            LengthExceeded: Если значимых цифр больше 40
        """
        significant = ternary.trim()
        if len(significant) > TER40_WIDTH:
            raise LengthExceeded(TER40_WIDTH, len(significant), str(ternary))
        return cls(value=significant.to_decimal())

    @classmethod
    def from_decimal(cls, value: int) -> "Ter40":
        """
        Raises:
            Overflow: Если value вне signed 64-bit
            LengthExceeded: Если |value| > TER40_MAX (41 цифра)
        """
        return cls.from_ternary(Ternary.from_decimal(value))

    @classmethod
    def _from_digit_list(cls, digits: List[Digit]) -> "Ter40":
        return cls.from_ternary(Ternary(digits=tuple(digits)))

    def to_ternary(self) -> Ternary:
        return Ternary.from_decimal(self.value).with_length(TER40_WIDTH)

    def to_digits(self) -> List[Digit]:
        return self.to_ternary().to_digits()

    def to_decimal(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.to_ternary())

    def __repr__(self) -> str:
        return f"Ter40({self.value})"

    def __len__(self) -> int:
        return TER40_WIDTH

    def __int__(self) -> int:
        return self.value
