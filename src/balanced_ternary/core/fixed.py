"""
FixedTernary — Balanced ternary фиксированной ширины

Значение ровно из N цифр (1 <= N <= 40). Ширина — ClassVar конкретного
класса: Tryte (N = 6) объявлен явно, остальные ширины создаёт фабрика
fixed_ternary_type(n) и кэширует.

Предел N = 40: 3^40 лишь немного превышает диапазон signed 64-bit
аккумулятора, поэтому decimal round-trip остаётся точным до этой ширины.

Все арифметические и логические операторы:
1. Конвертируют операнды в Ternary
2. Делегируют операторам Ternary
3. Конвертируют результат обратно через from_ternary, который повторно
   проверяет ширину: результат шире N → LengthExceeded (без усечения)

Именованные многозначные логики (k3_imply, l3_imply, bi3_and, ...) доступны
так же, как у Ternary, и делегируются тем же путём.

Tryte хранит значения от -364 ("------") до +364 ("++++++").
"""

import logging
import threading
from typing import Callable, ClassVar, Dict, Final, List, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, field_validator

from balanced_ternary.core import algebra
from balanced_ternary.core.digit import Digit
from balanced_ternary.core.errors import InvalidInput, LengthExceeded
from balanced_ternary.core.sequence import DigitSequence
from balanced_ternary.core.ternary import Ternary

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ШИРИНЫ
# =============================================================================

# Максимальная ширина с точным decimal round-trip
MAX_FIXED_WIDTH: Final[int] = 40

# Ширина Tryte (по аналогии с байтом)
TRYTE_WIDTH: Final[int] = 6

F = TypeVar("F", bound="FixedTernary")


# =============================================================================
# FIXED TERNARY MODEL
# =============================================================================


class FixedTernary(BaseModel, DigitSequence):
    """
    Базовая модель фиксированной ширины.

    Не инстанцируется напрямую: ширину задаёт подкласс
    (Tryte или fixed_ternary_type(n)).
    """

    width: ClassVar[int] = 0

    digits: Tuple[Digit, ...] = Field(..., description="Ровно width цифр, старшая первой")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_width(cls, v: Tuple[Digit, ...]) -> Tuple[Digit, ...]:
        """Проверка точной длины: ни больше, ни меньше width цифр."""
        if cls.width <= 0:
            raise ValueError(
                "FixedTernary has no width: use Tryte or fixed_ternary_type(n)"
            )
        if len(v) != cls.width:
            raise ValueError(f"expected exactly {cls.width} digits, got {len(v)}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_ternary(cls: Type[F], value: Ternary) -> F:
        """
        Создание из Ternary с дополнением нулями слева до width.

        Считаются только значимые цифры: ведущие нули источника не мешают.

        Raises:
            LengthExceeded: Если значимых цифр больше width
        """
        significant = value.trim()
        if len(significant) > cls.width:
            raise LengthExceeded(cls.width, len(significant), str(value))
        return cls(digits=significant.with_length(cls.width).digits)

    @classmethod
    def _from_digit_list(cls: Type[F], digits: List[Digit]) -> F:
        return cls.from_ternary(Ternary(digits=tuple(digits)))

    @classmethod
    def from_decimal(cls: Type[F], value: int) -> F:
        """
        Raises:
            Overflow: Если value вне signed 64-bit
            LengthExceeded: Если значение не помещается в width цифр
        """
        return cls.from_ternary(Ternary.from_decimal(value))

    @classmethod
    def parse(cls: Type[F], text: str) -> F:
        """
        Raises:
            ParseError: Недопустимый символ
            LengthExceeded: Больше width значимых цифр
        """
        return cls.from_ternary(Ternary.parse(text))

    @classmethod
    def max_value(cls: Type[F]) -> F:
        return cls(digits=(Digit.POS,) * cls.width)

    @classmethod
    def min_value(cls: Type[F]) -> F:
        return cls(digits=(Digit.NEG,) * cls.width)

    @classmethod
    def zero(cls: Type[F]) -> F:
        return cls(digits=(Digit.ZERO,) * cls.width)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_ternary(self) -> Ternary:
        return Ternary(digits=self.digits)

    def to_digits(self) -> List[Digit]:
        return list(self.digits)

    def to_decimal(self) -> int:
        return self.to_ternary().to_decimal()

    def __str__(self) -> str:
        return str(self.to_ternary())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __len__(self) -> int:
        return self.width

    def __int__(self) -> int:
        return self.to_decimal()

    # -------------------------------------------------------------------------
    # Делегирование операторам Ternary
    # -------------------------------------------------------------------------

    def _delegate(self: F, other: F, operation: Callable[[Ternary, Ternary], Ternary]) -> F:
        self._check_operand(other)
        return type(self).from_ternary(operation(self.to_ternary(), other.to_ternary()))

    def add(self: F, other: F) -> F:
        return self._delegate(other, Ternary.add)

    def sub(self: F, other: F) -> F:
        return self._delegate(other, Ternary.sub)

    def mul(self: F, other: F) -> F:
        return self._delegate(other, Ternary.mul)

    def div(self: F, other: F) -> F:
        return self._delegate(other, Ternary.div)

    def and_(self: F, other: F) -> F:
        return self._delegate(other, Ternary.and_)

    def or_(self: F, other: F) -> F:
        return self._delegate(other, Ternary.or_)

    def xor(self: F, other: F) -> F:
        return self._delegate(other, Ternary.xor)

    def bi3_and(self: F, other: F) -> F:
        return self._delegate(other, Ternary.bi3_and)

    def bi3_or(self: F, other: F) -> F:
        return self._delegate(other, Ternary.bi3_or)

    def k3_equiv(self: F, other: F) -> F:
        return self._delegate(other, Ternary.k3_equiv)

    def k3_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.k3_imply)

    def bi3_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.bi3_imply)

    def l3_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.l3_imply)

    def rm3_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.rm3_imply)

    def para_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.para_imply)

    def ht_imply(self: F, other: F) -> F:
        return self._delegate(other, Ternary.ht_imply)

    def negate(self: F) -> F:
        return self.map_each(algebra.negate)

    def __add__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.div(other)

    __floordiv__ = __truediv__

    def __and__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: object):
        if not isinstance(other, FixedTernary):
            return NotImplemented
        return self.xor(other)

    def __neg__(self):
        return self.negate()

    def __invert__(self):
        return self.negate()


class Tryte(FixedTernary):
    """Шесть цифр balanced ternary (~9.5 бит), значения -364..364."""

    width: ClassVar[int] = TRYTE_WIDTH


# =============================================================================
# ФАБРИКА ШИРИН
# =============================================================================

_WIDTH_CACHE: Dict[int, Type[FixedTernary]] = {TRYTE_WIDTH: Tryte}
_WIDTH_LOCK = threading.Lock()


def fixed_ternary_type(width: int) -> Type[FixedTernary]:
    """
    Класс FixedTernary заданной ширины (кэшируется).

    Args:
        width: Число цифр, 1..MAX_FIXED_WIDTH

    Returns:
        Подкласс FixedTernary с width цифр (для 6 — Tryte)

    Raises:
        InvalidInput: Если width вне [1, MAX_FIXED_WIDTH]
    """
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidInput(f"Fixed width must be an integer, got {width!r}")
    if not 1 <= width <= MAX_FIXED_WIDTH:
        raise InvalidInput(
            f"Fixed width {width} outside allowed range [1, {MAX_FIXED_WIDTH}]"
        )

    with _WIDTH_LOCK:
        cls = _WIDTH_CACHE.get(width)
        if cls is None:
            name = f"Ternary{width}"
            cls = type(
                name,
                (FixedTernary,),
                {
                    "__module__": __name__,
                    "__qualname__": name,
                    "__doc__": f"{width} цифр balanced ternary.",
                    "width": width,
                },
            )
            _WIDTH_CACHE[width] = cls
            logger.debug("Created fixed ternary type %s (width=%d)", name, width)
        return cls
