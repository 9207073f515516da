"""
Digit Algebra — Таблицы операций над цифрами

Все операции тотальны и чистые. Каждая задана явной таблицей истинности:
унарные — на 3 входах (-, 0, +), бинарные — на 9 парах в порядке
(--, -0, -+, 0-, 00, 0+, +-, +0, ++). Таблицы НЕ выводятся одна из другой:
именно они являются контрактом многозначных логик.

Семейства:
- Унарные преобразования (possibly, necessary, ..., absolute_negative)
- Арифметика: half_add/half_sub (carry, digit), mul, div
- Bitwise-style связки: and_, or_, xor (K3/L3)
- Многозначные логики: K3 (Kleene), BI3 (Bochvar internal), L3 (Łukasiewicz),
  RM3 (R-Mingle), PARA (paraconsistent), HT

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. div(a, ZERO) → DivideByZero; иначе div(a, b) == mul(a, b)
2. half_sub(a, b) == half_add(a, negate(b))
3. Импликации некоммутативны: порядок (антецедент, консеквент) важен

Последовательности (Ternary, FixedTernary, Ter40) получают все эти операции
через комбинаторы DigitSequence без собственного кода обхода.
"""

from typing import Callable, Dict, Final, Tuple

from balanced_ternary.core.digit import NEGATION, Digit
from balanced_ternary.core.errors import DivideByZero

UnaryOperator = Callable[[Digit], Digit]
BinaryOperator = Callable[[Digit, Digit], Digit]
CarryOperator = Callable[[Digit, Digit, Digit], Tuple[Digit, Digit]]

_ORDER: Final[Tuple[Digit, Digit, Digit]] = (Digit.NEG, Digit.ZERO, Digit.POS)


def _unary_table(outputs: str) -> Dict[Digit, Digit]:
    """Таблица по строке выходов для входов '-', '0', '+'."""
    return {digit: Digit.from_char(out) for digit, out in zip(_ORDER, outputs)}


def _binary_table(outputs: str) -> Dict[Tuple[Digit, Digit], Digit]:
    """Таблица по строке из 9 выходов для пар (--, -0, -+, 0-, ..., ++)."""
    pairs = [(a, b) for a in _ORDER for b in _ORDER]
    return {pair: Digit.from_char(out) for pair, out in zip(pairs, outputs)}


# =============================================================================
# УНАРНЫЕ ТАБЛИЦЫ
# =============================================================================
#                                       -0+
POSSIBLY: Final = _unary_table(        "-++")
NECESSARY: Final = _unary_table(       "--+")
CONTINGENTLY: Final = _unary_table(    "-+-")
HT_NOT: Final = _unary_table(          "+--")
POST: Final = _unary_table(            "0+-")
PRE: Final = _unary_table(             "+-0")
NEGATE: Final = NEGATION
ABSOLUTE_POSITIVE: Final = _unary_table("+0+")
POSITIVE: Final = _unary_table(        "00+")
NOT_NEGATIVE: Final = _unary_table(    "0++")
NOT_POSITIVE: Final = _unary_table(    "--0")
NEGATIVE: Final = _unary_table(        "-00")
ABSOLUTE_NEGATIVE: Final = _unary_table("-0-")


def possibly(digit: Digit) -> Digit:
    return POSSIBLY[digit]


def necessary(digit: Digit) -> Digit:
    return NECESSARY[digit]


def contingently(digit: Digit) -> Digit:
    return CONTINGENTLY[digit]


def ht_not(digit: Digit) -> Digit:
    """HT-отрицание: только NEG даёт POS."""
    return HT_NOT[digit]


def post(digit: Digit) -> Digit:
    """Отрицание Поста: циклический сдвиг - → 0 → + → -."""
    return POST[digit]


def pre(digit: Digit) -> Digit:
    """Обратная к post операция."""
    return PRE[digit]


def negate(digit: Digit) -> Digit:
    """Арифметическое/логическое отрицание: NEG ↔ POS, ZERO неподвижен."""
    return NEGATE[digit]


def absolute_positive(digit: Digit) -> Digit:
    return ABSOLUTE_POSITIVE[digit]


def positive(digit: Digit) -> Digit:
    return POSITIVE[digit]


def not_negative(digit: Digit) -> Digit:
    return NOT_NEGATIVE[digit]


def not_positive(digit: Digit) -> Digit:
    return NOT_POSITIVE[digit]


def negative(digit: Digit) -> Digit:
    return NEGATIVE[digit]


def absolute_negative(digit: Digit) -> Digit:
    return ABSOLUTE_NEGATIVE[digit]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================

#                                --  -0  -+  0-  00  0+  +-  +0  ++
_ADD_CARRY_OUT: Final = _binary_table("-" "0" "0" "0" "0" "0" "0" "0" "+")
_ADD_DIGIT: Final = _binary_table(    "+" "-" "0" "-" "0" "+" "0" "+" "-")

# Сумма двух цифр как пара (carry, digit): "-+", "-", "0", "+", "+-"
ADD_CARRY: Final[Dict[Tuple[Digit, Digit], Tuple[Digit, Digit]]] = {
    pair: (_ADD_CARRY_OUT[pair], _ADD_DIGIT[pair]) for pair in _ADD_DIGIT
}
#                          --  -0  -+  0-  00  0+  +-  +0  ++
MUL: Final = _binary_table("+" "0" "-" "0" "0" "0" "-" "0" "+")


def half_add(a: Digit, b: Digit) -> Tuple[Digit, Digit]:
    """
    Сложение двух цифр.

    Returns:
        (carry, digit): например POS + POS → (POS, NEG), т.е. "+-"
    """
    return ADD_CARRY[(a, b)]


def half_sub(a: Digit, b: Digit) -> Tuple[Digit, Digit]:
    """Вычитание двух цифр как half_add(a, negate(b))."""
    return ADD_CARRY[(a, NEGATE[b])]


def full_add(a: Digit, b: Digit, carry: Digit) -> Tuple[Digit, Digit]:
    """
    Полный сумматор: a + b + carry.

    Сигнатура совпадает с трансформацией zip_map_with_carry.

    Returns:
        (carry_out, digit)
    """
    carry_ab, partial = half_add(a, b)
    carry_in, digit = half_add(partial, carry)
    # |a + b + carry| <= 3: сумма двух переносов укладывается в одну цифру
    _, carry_out = half_add(carry_ab, carry_in)
    return carry_out, digit


def full_sub(a: Digit, b: Digit, borrow: Digit) -> Tuple[Digit, Digit]:
    """
    Полный вычитатель: a - b + borrow (borrow уже со знаком).

    Returns:
        (borrow_out, digit)
    """
    return full_add(a, NEGATE[b], borrow)


def mul(a: Digit, b: Digit) -> Digit:
    """Умножение знаков, ZERO поглощает."""
    return MUL[(a, b)]


def div(a: Digit, b: Digit) -> Digit:
    """
    Деление цифр.

    Ненулевые цифры сами себе обратны, поэтому div(a, b) == mul(a, b).

    Raises:
        DivideByZero: Если b == ZERO
    """
    if b is Digit.ZERO:
        raise DivideByZero("Cannot divide a digit by Digit.ZERO")
    return MUL[(a, b)]


# =============================================================================
# BITWISE-STYLE СВЯЗКИ (K3 / L3)
# =============================================================================
#                          --  -0  -+  0-  00  0+  +-  +0  ++
AND: Final = _binary_table("-" "-" "-" "-" "0" "0" "-" "0" "+")
OR: Final = _binary_table( "-" "0" "+" "0" "0" "+" "+" "+" "+")
XOR: Final = _binary_table("-" "0" "+" "0" "0" "0" "+" "0" "-")


def and_(a: Digit, b: Digit) -> Digit:
    """NEG поглощает снизу, POS нейтрален."""
    return AND[(a, b)]


def or_(a: Digit, b: Digit) -> Digit:
    """POS поглощает сверху, NEG нейтрален."""
    return OR[(a, b)]


def xor(a: Digit, b: Digit) -> Digit:
    return XOR[(a, b)]


# =============================================================================
# МНОГОЗНАЧНЫЕ ЛОГИКИ
# =============================================================================
#                               --  -0  -+  0-  00  0+  +-  +0  ++
BI3_AND: Final = _binary_table(   "-" "0" "-" "0" "0" "0" "-" "0" "+")
BI3_OR: Final = _binary_table(    "-" "0" "+" "0" "0" "0" "+" "0" "+")
K3_EQUIV: Final = _binary_table(  "+" "0" "-" "0" "0" "0" "-" "0" "+")
K3_IMPLY: Final = _binary_table(  "+" "+" "+" "0" "0" "+" "-" "0" "+")
BI3_IMPLY: Final = _binary_table( "+" "0" "+" "0" "0" "0" "-" "0" "+")
L3_IMPLY: Final = _binary_table(  "+" "+" "+" "0" "+" "+" "-" "0" "+")
RM3_IMPLY: Final = _binary_table( "+" "+" "+" "-" "0" "+" "-" "-" "+")
PARA_IMPLY: Final = _binary_table("+" "+" "+" "-" "0" "+" "-" "0" "+")
HT_IMPLY: Final = _binary_table(  "+" "+" "+" "-" "+" "+" "-" "0" "+")


def bi3_and(a: Digit, b: Digit) -> Digit:
    """Конъюнкция Бочвара (internal): ZERO заразен."""
    return BI3_AND[(a, b)]


def bi3_or(a: Digit, b: Digit) -> Digit:
    """Дизъюнкция Бочвара (internal): ZERO заразен."""
    return BI3_OR[(a, b)]


def k3_equiv(a: Digit, b: Digit) -> Digit:
    return K3_EQUIV[(a, b)]


def k3_imply(a: Digit, b: Digit) -> Digit:
    """
    Импликация Клини.

    Args:
        a: Антецедент
        b: Консеквент
    """
    return K3_IMPLY[(a, b)]


def bi3_imply(a: Digit, b: Digit) -> Digit:
    return BI3_IMPLY[(a, b)]


def l3_imply(a: Digit, b: Digit) -> Digit:
    """Импликация Лукасевича: отличается от K3 только на (0, 0) → POS."""
    return L3_IMPLY[(a, b)]


def rm3_imply(a: Digit, b: Digit) -> Digit:
    return RM3_IMPLY[(a, b)]


def para_imply(a: Digit, b: Digit) -> Digit:
    """Паранепротиворечивая импликация: NEG → POS, иначе консеквент."""
    return PARA_IMPLY[(a, b)]


def ht_imply(a: Digit, b: Digit) -> Digit:
    return HT_IMPLY[(a, b)]


# =============================================================================
# РЕЕСТР ОПЕРАТОРОВ
# =============================================================================

UNARY_OPERATORS: Final[Dict[str, UnaryOperator]] = {
    "possibly": possibly,
    "necessary": necessary,
    "contingently": contingently,
    "ht_not": ht_not,
    "post": post,
    "pre": pre,
    "negate": negate,
    "absolute_positive": absolute_positive,
    "positive": positive,
    "not_negative": not_negative,
    "not_positive": not_positive,
    "negative": negative,
    "absolute_negative": absolute_negative,
}

BINARY_OPERATORS: Final[Dict[str, BinaryOperator]] = {
    "mul": mul,
    "div": div,
    "and": and_,
    "or": or_,
    "xor": xor,
    "bi3_and": bi3_and,
    "bi3_or": bi3_or,
    "k3_equiv": k3_equiv,
    "k3_imply": k3_imply,
    "bi3_imply": bi3_imply,
    "l3_imply": l3_imply,
    "rm3_imply": rm3_imply,
    "para_imply": para_imply,
    "ht_imply": ht_imply,
}


def unary_operator(name: str) -> UnaryOperator:
    """
    Raises:
        KeyError: Неизвестное имя оператора
    """
    if name not in UNARY_OPERATORS:
        raise KeyError(
            f"Unknown unary operator '{name}'. Registered: {list(UNARY_OPERATORS)}"
        )
    return UNARY_OPERATORS[name]


def binary_operator(name: str) -> BinaryOperator:
    """
    Raises:
        KeyError: Неизвестное имя оператора
    """
    if name not in BINARY_OPERATORS:
        raise KeyError(
            f"Unknown binary operator '{name}'. Registered: {list(BINARY_OPERATORS)}"
        )
    return BINARY_OPERATORS[name]
