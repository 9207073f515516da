"""
Numeric — Checked 64-bit arithmetic & radix formatting

Модуль обеспечивает целочисленную основу всех decimal-конверсий:
- Проверка диапазона signed 64-bit (I64_MIN..I64_MAX)
- Checked add/sub/mul/div с явным Overflow вместо wraparound
- Форматирование и разбор целых в произвольном основании (2..36)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат вне [I64_MIN, I64_MAX] → Overflow (никогда не обрезается)
2. Деление на ноль → DivideByZero
3. Деление усекает к нулю (как целочисленное деление фиксированной ширины)
4. Все функции чистые, без состояния
"""

from typing import Final

from balanced_ternary.core.errors import DivideByZero, Overflow, ParseError

# =============================================================================
# ГРАНИЦЫ АККУМУЛЯТОРА
# =============================================================================

# Диапазон signed 64-bit аккумулятора decimal-конверсий
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

_DIGIT_CHARS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ПРОВЕРКА ДИАПАЗОНА
# =============================================================================


def fits_i64(value: int) -> bool:
    """Проверка, что value помещается в signed 64-bit."""
    return I64_MIN <= value <= I64_MAX


def validate_i64(value: int, operation: str = "conversion") -> int:
    """
    Проверка диапазона signed 64-bit.

    Args:
        value: Проверяемое целое
        operation: Имя операции для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        Overflow: Если value вне [I64_MIN, I64_MAX]
    """
    if not fits_i64(value):
        raise Overflow(f"Overflow in {operation}: {value} outside signed 64-bit range")
    return value


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_add(a: int, b: int) -> int:
    return validate_i64(a + b, "addition")


def checked_sub(a: int, b: int) -> int:
    return validate_i64(a - b, "subtraction")


def checked_mul(a: int, b: int) -> int:
    return validate_i64(a * b, "multiplication")


def checked_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности, поэтому знак считается
    отдельно: -7 / 2 == -3, а не -4.

    Raises:
        DivideByZero: Если b == 0
        Overflow: Если I64_MIN / -1
    """
    if b == 0:
        raise DivideByZero("Cannot divide by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return validate_i64(quotient, "division")


# =============================================================================
# RADIX FORMATTING
# =============================================================================


def format_radix(value: int, radix: int) -> str:
    """
    Форматирование целого в основании radix.

    Чистая функция без состояния. Ведущий '-' для отрицательных.

    Args:
        value: Целое (любого знака)
        radix: Основание 2..36

    Returns:
        Строка цифр, старшая цифра первой

    Examples:
        >>> format_radix(5, 3)
        '12'
        >>> format_radix(-5, 3)
        '-12'
        >>> format_radix(0, 3)
        '0'
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in [2, 36], got {radix}")

    magnitude = abs(value)
    digits = []
    while True:
        magnitude, remainder = divmod(magnitude, radix)
        digits.append(_DIGIT_CHARS[remainder])
        if magnitude == 0:
            break

    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(digits))


def parse_radix(text: str, radix: int) -> int:
    """
    Разбор строки в основании radix с опциональным ведущим '-'.

    Raises:
        ParseError: Пустая строка или символ вне алфавита основания
        Overflow: Значение вне signed 64-bit
    """
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in [2, 36], got {radix}")

    allowed = _DIGIT_CHARS[:radix]
    negative = text.startswith("-")
    body = text[1:] if negative else text
    offset = 1 if negative else 0

    if not body:
        raise ParseError(text, "", len(text), expected=allowed)

    value = 0
    for position, char in enumerate(body):
        digit = allowed.find(char)
        if digit < 0:
            raise ParseError(text, char, position + offset, expected=allowed)
        value = value * radix + digit

    return validate_i64(-value if negative else value, "parsing")
