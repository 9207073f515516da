"""
Errors — Таксономия ошибок balanced ternary

Все ошибки локальны и терминальны для одной операции: библиотека не делает
retry и не выполняет частичного восстановления. Граничные нарушения никогда
не clamp-ятся и не wrap-ятся молча.

Иерархия:
- TernaryError — базовый класс
- InvalidInput — символ/целое вне алфавита цифры
- ParseError — недопустимый символ в строке (с позицией)
- DivideByZero — деление на нулевую цифру или нулевое значение
- Overflow — выход за диапазон signed 64-bit
- LengthExceeded — значимых цифр больше, чем фиксированная ширина
"""

from typing import Optional


class TernaryError(Exception):
    """Базовая ошибка библиотеки balanced ternary."""

    pass


class InvalidInput(TernaryError, ValueError):
    """
    Символ или целое число вне алфавита цифры.

    Допустимы только '-', '0', '+' (символы) и -1, 0, 1 (целые).
    """

    pass


class ParseError(TernaryError, ValueError):
    """
    Строка содержит недопустимый символ.

    Attributes:
        text: Исходная строка
        char: Первый недопустимый символ
        position: Позиция символа (0-based, слева направо)
    """

    def __init__(self, text: str, char: str, position: int, expected: str = "+0-"):
        self.text = text
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid character {char!r} at position {position} in {text!r} "
            f"(expected one of {expected!r})"
        )


class DivideByZero(TernaryError, ZeroDivisionError):
    """Деление на Digit.ZERO или на значение с decimal == 0."""

    pass


class Overflow(TernaryError, OverflowError):
    """Результат вне диапазона signed 64-bit аккумулятора."""

    pass


class LengthExceeded(TernaryError, ValueError):
    """
    Значение не помещается в фиксированную ширину.

    Attributes:
        width: Фиксированная ширина (число цифр)
        length: Число значимых цифр источника
    """

    def __init__(self, width: int, length: int, value: Optional[str] = None):
        self.width = width
        self.length = length
        shown = f" {value!r}" if value is not None else ""
        super().__init__(
            f"Ternary{shown} has {length} significant digits, "
            f"exceeds fixed width {width}"
        )
