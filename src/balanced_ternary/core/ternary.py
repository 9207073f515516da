"""
Ternary — Balanced ternary значение переменной длины

Упорядоченная последовательность Digit, старшая цифра первой.
Immutable Pydantic модель: каждая операция возвращает новый экземпляр.

Источники значений:
- parse("+-0")            — строка из '+', '0', '-'
- from_decimal(n)         — signed 64-bit целое
- from_unbalanced("-12")  — стандартная запись в основании 3
- from_digits([...])      — явный список цифр

Две РАЗНЫЕ семьи операторов:
1. Арифметика (+, -, *, /): через decimal с checked 64-bit
   (Overflow / DivideByZero), НЕ поразрядный перенос
2. Логика (&, |, ^, импликации): через zip_map с таблицей связки,
   поразрядно, без decimal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результаты конверсий и арифметики никогда не пусты ("0" для нуля)
2. Каноническая форма не навязывается: ведущие нули сохраняются до trim()
3. digit_at(0) — младшая (правая) цифра
"""

from typing import Any, Iterable, List, Tuple, Union

from pydantic import BaseModel, Field

from balanced_ternary.core import algebra
from balanced_ternary.core.digit import STANDARD_ALPHABET, Digit, DigitAlphabet
from balanced_ternary.core.errors import InvalidInput, ParseError
from balanced_ternary.core.numeric import (
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    format_radix,
    parse_radix,
    validate_i64,
)
from balanced_ternary.core.sequence import DigitSequence

DigitLike = Union[Digit, int, str]


def _coerce_digit(value: DigitLike) -> Digit:
    if isinstance(value, Digit):
        return value
    if isinstance(value, str):
        return Digit.from_char(value)
    return Digit.from_int(value)


# =============================================================================
# TERNARY MODEL
# =============================================================================


class Ternary(BaseModel, DigitSequence):
    """
    Balanced ternary число переменной длины.

    Immutable модель (frozen=True). Равенство и hash структурные:
    Ternary.parse("0+") != Ternary.parse("+"), хотя decimal совпадает.
    """

    digits: Tuple[Digit, ...] = Field(
        default=(), description="Цифры, старшая первой"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(cls, digits: Iterable[DigitLike]) -> "Ternary":
        """
        Создание из явного списка цифр.

        Args:
            digits: Digit, целые {-1, 0, 1} или символы {'-', '0', '+'};
                DigitSequence копируется по to_digits()

        Raises:
            InvalidInput: Если элемент вне алфавита цифры
        """
        if isinstance(digits, DigitSequence):
            return cls._from_digit_list(digits.to_digits())
        return cls(digits=tuple(_coerce_digit(value) for value in digits))

    @classmethod
    def _from_digit_list(cls, digits: List[Digit]) -> "Ternary":
        return cls(digits=tuple(digits))

    @classmethod
    def parse(cls, text: str) -> "Ternary":
        """
        Разбор строки balanced ternary.

        Порядок символов сохраняется (старшая цифра первой), trim не
        выполняется: str(parse(s)) == s.

        Raises:
            ParseError: На первом символе вне {'+', '0', '-'}
        """
        return cls.parse_with(text, STANDARD_ALPHABET)

    @classmethod
    def parse_with(cls, text: str, alphabet: DigitAlphabet) -> "Ternary":
        """
        Разбор строки в произвольном алфавите цифр (например, "10T").

        Raises:
            ParseError: На первом символе вне алфавита
        """
        if not isinstance(text, str):
            raise TypeError(f"Cannot parse Ternary from {type(text).__name__}")

        digits = []
        for position, char in enumerate(text):
            try:
                digits.append(alphabet.digit_for(char))
            except InvalidInput:
                raise ParseError(text, char, position, expected=alphabet.symbols) from None
        return cls(digits=tuple(digits))

    @classmethod
    def from_decimal(cls, value: int) -> "Ternary":
        """
        Конверсия signed 64-bit целого в balanced ternary.

        Алгоритм:
        1. |value| в стандартном основании 3 (цифры 0, 1, 2)
        2. Проход от младшей цифры с переносом:
           0, 1 → цифра как есть, перенос 0
           2    → NEG, перенос 1
           3    → ZERO, перенос 1 (2 + перенос)
        3. Остаточный перенос → ведущий POS
        4. value < 0 → поразрядное отрицание

        Принимается весь диапазон signed 64-bit, включая минимум.

        Raises:
            Overflow: Если value вне signed 64-bit
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_decimal expects int, got {type(value).__name__}")
        validate_i64(value, "from_decimal")

        unbalanced = format_radix(abs(value), 3)
        carry = 0
        result: List[Digit] = []
        for char in reversed(unbalanced):
            digit = int(char) + carry
            if digit < 2:
                result.append(Digit.from_int(digit))
                carry = 0
            elif digit == 2:
                result.append(Digit.NEG)
                carry = 1
            else:
                result.append(Digit.ZERO)
                carry = 1
        if carry == 1:
            result.append(Digit.POS)
        result.reverse()

        ternary = cls._from_digit_list(result)
        return ternary.negate() if value < 0 else ternary

    @classmethod
    def from_unbalanced(cls, text: str) -> "Ternary":
        """
        Разбор стандартной записи в основании 3 ('-' опционально, цифры 0/1/2).

        Examples:
            >>> str(Ternary.from_unbalanced("-12"))
            '-++'

        Raises:
            ParseError: Пустая строка или символ вне {0, 1, 2}
            Overflow: Значение вне signed 64-bit
        """
        return cls.from_decimal(parse_radix(text, 3))

    @classmethod
    def of(cls, value: Any) -> "Ternary":
        """
        Универсальная конверсия: str → parse, int → from_decimal,
        Ternary → как есть, iterable → from_digits.
        """
        if isinstance(value, Ternary):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, bool):
            raise TypeError("Cannot convert bool to Ternary")
        if isinstance(value, int):
            return cls.from_decimal(value)
        if isinstance(value, DigitSequence):
            return cls._from_digit_list(value.to_digits())
        return cls.from_digits(value)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_digits(self) -> List[Digit]:
        return list(self.digits)

    def to_decimal(self) -> int:
        """
        Σ digit[i] × 3^i (i от младшей цифры), checked signed 64-bit.

        Raises:
            Overflow: Если значение вне signed 64-bit
        """
        total = 0
        for digit in self.digits:
            total = total * 3 + digit.value
        return validate_i64(total, "to_decimal")

    def to_unbalanced(self) -> str:
        """Стандартная запись в основании 3, '-' для отрицательных."""
        return format_radix(self.to_decimal(), 3)

    def to_string_repr(self, alphabet: DigitAlphabet = STANDARD_ALPHABET) -> str:
        return "".join(alphabet.char_for(digit) for digit in self.digits)

    def __str__(self) -> str:
        return self.to_string_repr()

    def __repr__(self) -> str:
        return f"Ternary({self.to_string_repr()!r})"

    def __len__(self) -> int:
        return len(self.digits)

    def __int__(self) -> int:
        return self.to_decimal()

    # -------------------------------------------------------------------------
    # Структурные операции
    # -------------------------------------------------------------------------

    def trim(self) -> "Ternary":
        """
        Удаление ведущих ZERO.

        Полностью нулевое (и пустое) значение сворачивается в "0",
        никогда не в пустую последовательность.
        """
        for index, digit in enumerate(self.digits):
            if digit is not Digit.ZERO:
                return Ternary(digits=self.digits[index:])
        return Ternary(digits=(Digit.ZERO,))

    def with_length(self, length: int) -> "Ternary":
        """
        Дополнение ZERO слева до length цифр.

        Если текущая длина >= length — значение возвращается без изменений
        (усечения не бывает).
        """
        if length <= len(self.digits):
            return self
        padding = (Digit.ZERO,) * (length - len(self.digits))
        return Ternary(digits=padding + self.digits)

    def concat(self, other: "Ternary") -> "Ternary":
        """Цифры self, затем цифры other (без числовой интерпретации)."""
        return Ternary(digits=self.digits + other.digits)

    # -------------------------------------------------------------------------
    # Арифметика (decimal round-trip)
    # -------------------------------------------------------------------------

    def add(self, other: "Ternary") -> "Ternary":
        return Ternary.from_decimal(checked_add(self.to_decimal(), other.to_decimal()))

    def sub(self, other: "Ternary") -> "Ternary":
        return Ternary.from_decimal(checked_sub(self.to_decimal(), other.to_decimal()))

    def mul(self, other: "Ternary") -> "Ternary":
        return Ternary.from_decimal(checked_mul(self.to_decimal(), other.to_decimal()))

    def div(self, other: "Ternary") -> "Ternary":
        """
        Целочисленное деление с усечением к нулю.

        Raises:
            DivideByZero: Если other.to_decimal() == 0
            Overflow: Если результат вне signed 64-bit
        """
        return Ternary.from_decimal(checked_div(self.to_decimal(), other.to_decimal()))

    def ripple_add(self, other: "Ternary") -> "Ternary":
        """
        Поразрядное сложение через zip_map_with_carry(full_add).

        Оба операнда дополняются на одну цифру сверх длинного, поэтому
        финальный перенос всегда нулевой. Результат обрезан через trim().
        """
        width = max(len(self), len(other)) + 1
        return (
            self.with_length(width)
            .zip_map_with_carry(algebra.full_add, other.with_length(width))
            .trim()
        )

    def ripple_sub(self, other: "Ternary") -> "Ternary":
        """Поразрядное вычитание через zip_map_with_carry(full_sub)."""
        width = max(len(self), len(other)) + 1
        return (
            self.with_length(width)
            .zip_map_with_carry(algebra.full_sub, other.with_length(width))
            .trim()
        )

    def __add__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.div(other)

    __floordiv__ = __truediv__

    # -------------------------------------------------------------------------
    # Логика (поразрядно, через комбинаторы)
    # -------------------------------------------------------------------------

    def negate(self) -> "Ternary":
        return self.map_each(algebra.negate)

    def __neg__(self) -> "Ternary":
        return self.negate()

    def __invert__(self) -> "Ternary":
        return self.negate()

    def and_(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.and_, other)

    def or_(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.or_, other)

    def xor(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.xor, other)

    def __and__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: object) -> "Ternary":
        if not isinstance(other, Ternary):
            return NotImplemented
        return self.xor(other)

    def bi3_and(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.bi3_and, other)

    def bi3_or(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.bi3_or, other)

    def k3_equiv(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.k3_equiv, other)

    def k3_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.k3_imply, other)

    def bi3_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.bi3_imply, other)

    def l3_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.l3_imply, other)

    def rm3_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.rm3_imply, other)

    def para_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.para_imply, other)

    def ht_imply(self, other: "Ternary") -> "Ternary":
        return self.zip_map(algebra.ht_imply, other)


# =============================================================================
# АРИФМЕТИКА ЦИФР С ПЕРЕНОСОМ
# =============================================================================


def _carry_pair_to_ternary(carry: Digit, digit: Digit) -> Ternary:
    if carry is Digit.ZERO:
        return Ternary(digits=(digit,))
    return Ternary(digits=(carry, digit))


def digit_add(a: Digit, b: Digit) -> Ternary:
    """
    Сумма двух цифр; перенос — ведущая цифра результата.

    Returns:
        Одно из "-+", "-", "0", "+", "+-"
    """
    return _carry_pair_to_ternary(*algebra.half_add(a, b))


def digit_sub(a: Digit, b: Digit) -> Ternary:
    """Разность двух цифр, эквивалентна digit_add(a, negate(b))."""
    return _carry_pair_to_ternary(*algebra.half_sub(a, b))


def digit_increment(digit: Digit) -> Ternary:
    """NEG → "0", ZERO → "+", POS → "+-" (переполнение)."""
    return digit_add(digit, Digit.POS)


def digit_decrement(digit: Digit) -> Ternary:
    """POS → "0", ZERO → "-", NEG → "-+" (переполнение вниз)."""
    return digit_add(digit, Digit.NEG)
