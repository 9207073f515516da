"""
Chunks — Компактное хранение balanced ternary

- TritsChunk: 5 цифр в одном signed байте (значения -121..121, 3^5 = 243)
- DataTernary: значение переменной длины как последовательность TritsChunk

Ternary тратит по объекту на цифру; DataTernary — один байт на 5 цифр
(8/16/32/64 цифр → 2/4/7/13 байт). Для вычислений используется Ternary,
для хранения — DataTernary.

Слой хранения вызывает только стабильные примитивы ядра:
with_length, trim, to_digits, concat, from_decimal, to_decimal.
"""

import logging
from typing import Final, Iterable, List, Tuple

from pydantic import BaseModel, Field

from balanced_ternary.core.digit import Digit
from balanced_ternary.core.errors import LengthExceeded, Overflow
from balanced_ternary.core.ternary import Ternary

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ЧАНКА
# =============================================================================

# Цифр в одном чанке
CHUNK_DIGITS: Final[int] = 5

# Диапазон значений чанка: ±(3^5 - 1) / 2
CHUNK_MAX: Final[int] = (3**CHUNK_DIGITS - 1) // 2
CHUNK_MIN: Final[int] = -CHUNK_MAX


# =============================================================================
# TRITS CHUNK
# =============================================================================


class TritsChunk(BaseModel):
    """Пять цифр balanced ternary, упакованные в один signed байт."""

    value: int = Field(default=0, ge=CHUNK_MIN, le=CHUNK_MAX, description="Decimal значение чанка")

    model_config = {"frozen": True}

    @classmethod
    def from_decimal(cls, value: int) -> "TritsChunk":
        """
        Raises:
            Overflow: Если value вне [-121, 121]
        """
        if not CHUNK_MIN <= value <= CHUNK_MAX:
            raise Overflow(
                f"TritsChunk value {value} outside [{CHUNK_MIN}, {CHUNK_MAX}]"
            )
        return cls(value=value)

    @classmethod
    def from_ternary(cls, ternary: Ternary) -> "TritsChunk":
        """
        Raises:
            LengthExceeded: Если значимых цифр больше 5
        """
        significant = ternary.trim()
        if len(significant) > CHUNK_DIGITS:
            raise LengthExceeded(CHUNK_DIGITS, len(significant), str(ternary))
        return cls(value=significant.to_decimal())

    @classmethod
    def from_byte(cls, byte: int) -> "TritsChunk":
        """
        Чтение чанка из байта (two's complement).

        Raises:
            ValueError: Если byte вне [0, 255]
            Overflow: Если байт кодирует значение вне [-121, 121]
        """
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte must be in [0, 255], got {byte}")
        return cls.from_decimal(byte - 0x100 if byte & 0x80 else byte)

    def to_decimal(self) -> int:
        return self.value

    def to_byte(self) -> int:
        """Значение как беззнаковый байт (two's complement)."""
        return self.value & 0xFF

    def to_ternary(self) -> Ternary:
        """Минимальное представление (без ведущих нулей)."""
        return Ternary.from_decimal(self.value)

    def to_fixed_ternary(self) -> Ternary:
        """Представление ровно из 5 цифр."""
        return self.to_ternary().with_length(CHUNK_DIGITS)

    def to_digits(self) -> List[Digit]:
        return self.to_fixed_ternary().to_digits()

    def __str__(self) -> str:
        return str(self.to_fixed_ternary())


# =============================================================================
# DATA TERNARY
# =============================================================================


class DataTernary(BaseModel):
    """
    Значение переменной длины, хранимое чанками по 5 цифр.

    Старший чанк первый. Длина в цифрах всегда кратна 5.
    """

    chunks: Tuple[TritsChunk, ...] = Field(default=(), description="Чанки, старший первым")

    model_config = {"frozen": True}

    @classmethod
    def from_ternary(cls, ternary: Ternary) -> "DataTernary":
        """
        Упаковка: дополнение нулями слева до кратного 5, затем нарезка.

        Пустое значение упаковывается в один нулевой чанк.
        """
        chunk_count = max(1, -(-len(ternary) // CHUNK_DIGITS))
        digits = ternary.with_length(chunk_count * CHUNK_DIGITS).to_digits()

        chunks = tuple(
            TritsChunk.from_ternary(Ternary(digits=tuple(digits[start:start + CHUNK_DIGITS])))
            for start in range(0, len(digits), CHUNK_DIGITS)
        )
        logger.debug("Packed %d digits into %d chunks", len(ternary), len(chunks))
        return cls(chunks=chunks)

    @classmethod
    def from_decimal(cls, value: int) -> "DataTernary":
        return cls.from_ternary(Ternary.from_decimal(value))

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> "DataTernary":
        """
        Распаковка из байтов (по байту на чанк, старший первым).

        Raises:
            Overflow: Если байт кодирует значение вне [-121, 121]
        """
        return cls(chunks=tuple(TritsChunk.from_byte(byte) for byte in data))

    def to_bytes(self) -> bytes:
        return bytes(chunk.to_byte() for chunk in self.chunks)

    def to_fixed_ternary(self) -> Ternary:
        """Все цифры всех чанков, включая ведущие нули."""
        result = Ternary()
        for chunk in self.chunks:
            result = result.concat(chunk.to_fixed_ternary())
        return result

    def to_ternary(self) -> Ternary:
        """Распакованное значение без ведущих нулей."""
        return self.to_fixed_ternary().trim()

    def to_digits(self) -> List[Digit]:
        return self.to_ternary().to_digits()

    def to_decimal(self) -> int:
        """
        Raises:
            Overflow: Если значение вне signed 64-bit
        """
        return self.to_ternary().to_decimal()

    def __len__(self) -> int:
        return len(self.chunks)

    def __str__(self) -> str:
        return str(self.to_fixed_ternary())
