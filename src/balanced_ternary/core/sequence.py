"""
DigitSequence — Generic traversal engine

Единственная логика обхода в системе. Любой тип последовательности цифр
(Ternary, FixedTernary, Ter40) реализует два hook-а:
- to_digits(): упорядоченный список цифр (старшая первой)
- _from_digit_list(digits): пересборка значения из списка цифр

и получает четыре комбинатора:
- map_each(f)                       — f(d) поэлементно
- map_with_constant(f, k)           — f(d, k) поэлементно
- zip_map(f, other)                 — f(a, b) по выровненным парам
- zip_map_with_carry(f, other)      — f(a, b, carry) → (carry, d), справа налево

Политика выравнивания (zip_map, zip_map_with_carry):
1. Короткий операнд дополняется ZERO слева до длины длинного
2. Длина результата = длина длинного операнда
3. Если self короче other — операнды МЕНЯЮТСЯ МЕСТАМИ перед обходом.
   Для некоммутативных f (импликации) это меняет порядок аргументов:
   f получает (цифра длинного, цифра короткого). При разной длине
   операндов вызывающий код не должен полагаться на порядок аргументов.

Перенос zip_map_with_carry стартует с ZERO и идёт от младшей цифры;
финальный перенос отбрасывается — переполнение детектирует вызывающий.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Type, TypeVar

from balanced_ternary.core.algebra import BinaryOperator, CarryOperator, UnaryOperator
from balanced_ternary.core.digit import Digit

S = TypeVar("S", bound="DigitSequence")


def pad_left(digits: Sequence[Digit], length: int) -> List[Digit]:
    """Дополнение ZERO слева до length; длинные последовательности не режутся."""
    missing = length - len(digits)
    if missing <= 0:
        return list(digits)
    return [Digit.ZERO] * missing + list(digits)


class DigitSequence(ABC):
    """Интерфейс последовательности цифр с общими комбинаторами."""

    @abstractmethod
    def to_digits(self) -> List[Digit]:
        """Цифры значения, старшая первой."""

    @classmethod
    @abstractmethod
    def _from_digit_list(cls: Type[S], digits: List[Digit]) -> S:
        """Пересборка значения того же типа из списка цифр."""

    def _check_operand(self, other: "DigitSequence") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def digit_at(self, index: int) -> Optional[Digit]:
        """
        Цифра по позиции справа налево.

        Args:
            index: 0 — младшая (самая правая) цифра

        Returns:
            Цифра или None, если index вне диапазона
        """
        digits = self.to_digits()
        if index < 0 or index >= len(digits):
            return None
        return digits[len(digits) - 1 - index]

    def map_each(self: S, f: UnaryOperator) -> S:
        return self._from_digit_list([f(digit) for digit in self.to_digits()])

    def map_with_constant(self: S, f: BinaryOperator, constant: Digit) -> S:
        return self._from_digit_list([f(digit, constant) for digit in self.to_digits()])

    def zip_map(self: S, f: BinaryOperator, other: S) -> S:
        """
        Поэлементное f(a, b) по двум последовательностям.

        Args:
            f: Бинарная операция над цифрами
            other: Второй операнд того же типа

        Returns:
            Значение длины max(len(self), len(other))
        """
        self._check_operand(other)
        mine = self.to_digits()
        theirs = other.to_digits()
        if len(mine) < len(theirs):
            return other.zip_map(f, self)

        theirs = pad_left(theirs, len(mine))
        return self._from_digit_list([f(a, b) for a, b in zip(mine, theirs)])

    def zip_map_with_carry(self: S, f: CarryOperator, other: S) -> S:
        """
        Поэлементное f(a, b, carry) с протягиванием переноса справа налево.

        Args:
            f: Функция (a, b, carry) → (new_carry, digit)
            other: Второй операнд того же типа

        Returns:
            Значение длины max(len(self), len(other)); финальный перенос отброшен
        """
        self._check_operand(other)
        mine = self.to_digits()
        theirs = other.to_digits()
        if len(mine) < len(theirs):
            return other.zip_map_with_carry(f, self)

        theirs = pad_left(theirs, len(mine))
        carry = Digit.ZERO
        result = []
        for a, b in zip(reversed(mine), reversed(theirs)):
            carry, digit = f(a, b, carry)
            result.append(digit)
        result.reverse()
        return self._from_digit_list(result)
