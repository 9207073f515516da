"""
Тесты для Ternary

Проверяет:
1. Разбор строк и алфавиты
2. Decimal / unbalanced конверсии и границы signed 64-bit
3. Структурные операции (trim, with_length, concat)
4. Арифметику через decimal и поразрядное сложение
5. Логические операторы и многозначные импликации
6. Арифметику цифр с переносом
7. Immutability и структурное равенство
"""

import pytest
from pydantic import ValidationError

from balanced_ternary.core.digit import T_ALPHABET, THETA_ALPHABET, Digit
from balanced_ternary.core.errors import DivideByZero, InvalidInput, Overflow, ParseError
from balanced_ternary.core.fixed import Tryte
from balanced_ternary.core.numeric import I64_MAX, I64_MIN
from balanced_ternary.core.ternary import (
    Ternary,
    digit_add,
    digit_decrement,
    digit_increment,
    digit_sub,
)


def t(text: str) -> Ternary:
    return Ternary.parse(text)


def d(value: int) -> Ternary:
    return Ternary.from_decimal(value)


# Пустые, нулевые, с ведущими нулями и без
SAMPLE_TEXTS = [
    "",
    "0",
    "000",
    "+",
    "-",
    "00+-",
    "0-0+0",
    "+-0+-0",
    "---000+++",
    "0000+++++",
    "000000000-",
]


# =============================================================================
# РАЗБОР
# =============================================================================


class TestParse:
    """Тесты Ternary.parse / parse_with"""

    def test_preserves_leading_zeros(self) -> None:
        assert str(t("00+-")) == "00+-"
        assert len(t("00+-")) == 4

    def test_invalid_char_reports_position(self) -> None:
        with pytest.raises(ParseError, match="at position 1") as exc_info:
            t("+x-")
        assert exc_info.value.char == "x"
        assert exc_info.value.position == 1
        assert exc_info.value.text == "+x-"

    def test_first_invalid_char_wins(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            t("+-ab")
        assert exc_info.value.position == 2

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            Ternary.parse(5)  # type: ignore[arg-type]

    def test_empty_string(self) -> None:
        """Пустая строка → пустое значение с decimal 0"""
        empty = t("")
        assert len(empty) == 0
        assert str(empty) == ""
        assert empty.to_decimal() == 0

    def test_parse_with_t_alphabet(self) -> None:
        value = Ternary.parse_with("10T", T_ALPHABET)
        assert str(value) == "+0-"
        assert value.to_decimal() == 8

    def test_parse_with_rejects_standard_chars(self) -> None:
        with pytest.raises(ParseError, match="T01"):
            Ternary.parse_with("+0-", T_ALPHABET)

    def test_to_string_repr(self) -> None:
        value = t("+0-")
        assert value.to_string_repr(T_ALPHABET) == "10T"
        assert value.to_string_repr(THETA_ALPHABET) == "10Θ"

    def test_from_digits_coerces(self) -> None:
        value = Ternary.from_digits(["+", 0, Digit.NEG])
        assert str(value) == "+0-"

    def test_from_digits_invalid(self) -> None:
        with pytest.raises(InvalidInput):
            Ternary.from_digits([2])

    def test_from_digits_of_sequence(self) -> None:
        """DigitSequence копируется по цифрам, а не по полям модели"""
        assert Ternary.from_digits(t("+0-")) == t("+0-")
        assert str(Ternary.from_digits(Tryte.parse("+"))) == "00000+"


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


class TestDecimalConversion:
    """Тесты from_decimal / to_decimal"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0"),
            (1, "+"),
            (-1, "-"),
            (5, "+--"),
            (-5, "-++"),
            (14, "+---"),
            (15, "+--0"),
            (120, "++++0"),
            (121, "+++++"),
            (-121, "-----"),
            (18887455, "++00--0--+-0++0+"),
        ],
    )
    def test_known_values(self, value: int, expected: str) -> None:
        assert str(d(value)) == expected
        assert t(expected).to_decimal() == value

    def test_round_trip_small_range(self) -> None:
        for value in range(-500, 501):
            assert d(value).to_decimal() == value

    def test_no_leading_zeros(self) -> None:
        for value in range(-100, 101):
            text = str(d(value))
            assert text == "0" or not text.startswith("0")

    def test_i64_bounds(self) -> None:
        """Весь диапазон signed 64-bit, включая минимум"""
        assert d(I64_MAX).to_decimal() == I64_MAX
        assert d(I64_MIN).to_decimal() == I64_MIN

    def test_from_decimal_overflow(self) -> None:
        with pytest.raises(Overflow):
            d(I64_MAX + 1)
        with pytest.raises(Overflow):
            d(I64_MIN - 1)

    def test_from_decimal_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            d(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            d(True)

    def test_to_decimal_overflow(self) -> None:
        with pytest.raises(Overflow, match="to_decimal"):
            t("+" * 41).to_decimal()

    def test_leading_zeros_never_overflow(self) -> None:
        assert t("0" * 100 + "+").to_decimal() == 1

    def test_int_dunder(self) -> None:
        assert int(t("+-0")) == 6


class TestUnbalancedConversion:
    """Тесты from_unbalanced / to_unbalanced"""

    def test_from_unbalanced(self) -> None:
        assert str(Ternary.from_unbalanced("-12")) == "-++"
        assert str(Ternary.from_unbalanced("11111")) == "+++++"

    def test_to_unbalanced(self) -> None:
        assert d(121).to_unbalanced() == "11111"
        assert d(-5).to_unbalanced() == "-12"
        assert d(0).to_unbalanced() == "0"

    def test_invalid(self) -> None:
        with pytest.raises(ParseError):
            Ternary.from_unbalanced("13")
        with pytest.raises(ParseError):
            Ternary.from_unbalanced("")


class TestOf:
    """Тесты Ternary.of"""

    def test_dispatch(self) -> None:
        assert str(Ternary.of("+-")) == "+-"
        assert str(Ternary.of(5)) == "+--"
        assert str(Ternary.of([1, 0, -1])) == "+0-"

    def test_identity(self) -> None:
        value = t("+0")
        assert Ternary.of(value) is value

    def test_from_other_sequence(self) -> None:
        assert str(Ternary.of(Tryte.parse("+"))) == "00000+"

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            Ternary.of(True)


# =============================================================================
# СТРУКТУРНЫЕ ОПЕРАЦИИ
# =============================================================================


class TestStructure:
    """Тесты trim / with_length / concat"""

    def test_trim(self) -> None:
        assert str(t("000+-").trim()) == "+-"
        assert str(t("+-").trim()) == "+-"

    def test_trim_zero_never_empty(self) -> None:
        assert str(t("000").trim()) == "0"
        assert str(t("").trim()) == "0"

    def test_trim_idempotent(self) -> None:
        value = t("00-0+")
        assert value.trim().trim() == value.trim()

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_trim_preserves_value(self, text: str) -> None:
        value = t(text)
        assert value.trim().to_decimal() == value.to_decimal()

    def test_trim_preserves_value_over_range(self) -> None:
        for number in range(-300, 301):
            padded = d(number).with_length(9)
            assert padded.trim().to_decimal() == number
            assert padded.trim() == d(number)

    def test_with_length_pads(self) -> None:
        padded = t("+-").with_length(5)
        assert str(padded) == "000+-"
        assert padded.to_decimal() == t("+-").to_decimal()

    def test_with_length_never_truncates(self) -> None:
        assert str(t("+-0").with_length(2)) == "+-0"

    def test_concat(self) -> None:
        assert str(t("+-").concat(t("0+"))) == "+-0+"


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметики через decimal"""

    def test_add(self) -> None:
        assert str(d(9) + d(4)) == "+++"

    def test_sub(self) -> None:
        assert str(d(20) - d(3)) == "+-0-"

    def test_mul(self) -> None:
        assert str(d(17) * d(2)) == "++-+"

    def test_div_truncates(self) -> None:
        assert str(d(61) / d(2)) == "+0+0"
        assert str(d(-241) // d(2)) == "----0"

    def test_method_forms(self) -> None:
        a, b = d(7), d(-3)
        assert a.add(b).to_decimal() == 4
        assert a.sub(b).to_decimal() == 10
        assert a.mul(b).to_decimal() == -21
        assert a.div(b).to_decimal() == -2

    def test_results_are_trimmed(self) -> None:
        assert str(t("000+") + t("0000")) == "+"

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivideByZero):
            d(5) / t("000")

    def test_overflow(self) -> None:
        with pytest.raises(Overflow):
            d(I64_MAX) + d(1)
        with pytest.raises(Overflow):
            d(I64_MIN) * d(-1)

    def test_non_ternary_operand(self) -> None:
        with pytest.raises(TypeError):
            d(1) + 1  # type: ignore[operator]


class TestRippleAdd:
    """Тесты поразрядного сложения"""

    def test_matches_decimal_addition(self) -> None:
        for a in range(-40, 41, 3):
            for b in range(-40, 41, 7):
                assert d(a).ripple_add(d(b)).to_decimal() == a + b
                assert d(a).ripple_sub(d(b)).to_decimal() == a - b

    def test_canonical_result(self) -> None:
        assert str(d(9).ripple_add(d(4))) == "+++"
        assert str(d(-5).ripple_add(d(5))) == "0"
        assert str(d(20).ripple_sub(d(3))) == "+-0-"

    def test_carry_out_kept(self) -> None:
        assert str(t("++").ripple_add(t("+"))) == "+--"


# =============================================================================
# ЛОГИКА
# =============================================================================


@pytest.fixture
def long_operand() -> Ternary:
    return t("---000+++")


@pytest.fixture
def other_operand() -> Ternary:
    return t("-0+-0+-0+")


class TestLogic:
    """Тесты логических операторов"""

    def test_negation(self) -> None:
        assert str(-t("+-0")) == "-+0"
        assert str(~t("+-0")) == "-+0"
        assert (-d(42)).to_decimal() == -42

    def test_and_or(self) -> None:
        assert str(t("++00") & t("0+00")) == "0+00"
        assert str(t("+000") & t("000-")) == "000-"
        assert str(t("+000") | t("000+")) == "+00+"

    def test_xor(self) -> None:
        assert str(t("+-0") ^ t("++-")) == "-+0"

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("and_", "----00-0+"),
            ("or_", "-0+00++++"),
            ("xor", "-0+000+0-"),
            ("bi3_and", "-0-000-0+"),
            ("bi3_or", "-0+000+0+"),
            ("k3_equiv", "+0-000-0+"),
            ("k3_imply", "+++00+-0+"),
            ("bi3_imply", "+0+000-0+"),
            ("l3_imply", "+++0++-0+"),
            ("rm3_imply", "+++-0+--+"),
            ("para_imply", "+++-0+-0+"),
            ("ht_imply", "+++-++-0+"),
        ],
    )
    def test_named_operators(
        self, long_operand: Ternary, other_operand: Ternary, method: str, expected: str
    ) -> None:
        result = getattr(long_operand, method)(other_operand)
        assert str(result) == expected

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_double_negation(self, text: str) -> None:
        """Двойное отрицание возвращает исходные цифры и значение"""
        value = t(text)
        assert value.negate().negate() == value
        assert value.negate().negate().to_decimal() == value.to_decimal()

    def test_negation_flips_sign_over_range(self) -> None:
        for number in range(-300, 301):
            assert d(number).negate().to_decimal() == -number
            assert (-(-d(number))).to_decimal() == number

    def test_logic_keeps_leading_zeros(self) -> None:
        """Логика поразрядная: ведущие нули не обрезаются"""
        assert str(t("00+") | t("00-")) == "00+"

    def test_non_ternary_operand(self) -> None:
        with pytest.raises(TypeError):
            t("+") & "+"  # type: ignore[operator]


# =============================================================================
# АРИФМЕТИКА ЦИФР
# =============================================================================


class TestDigitArithmetic:
    """Тесты digit_add / digit_sub / digit_increment / digit_decrement"""

    def test_digit_add(self) -> None:
        assert str(digit_add(Digit.POS, Digit.POS)) == "+-"
        assert str(digit_add(Digit.NEG, Digit.NEG)) == "-+"
        assert str(digit_add(Digit.POS, Digit.NEG)) == "0"
        assert str(digit_add(Digit.ZERO, Digit.NEG)) == "-"

    def test_digit_sub(self) -> None:
        assert str(digit_sub(Digit.NEG, Digit.POS)) == "-+"
        assert str(digit_sub(Digit.POS, Digit.POS)) == "0"

    def test_increment_decrement(self) -> None:
        assert str(digit_increment(Digit.NEG)) == "0"
        assert str(digit_increment(Digit.ZERO)) == "+"
        assert str(digit_increment(Digit.POS)) == "+-"
        assert str(digit_decrement(Digit.POS)) == "0"
        assert str(digit_decrement(Digit.ZERO)) == "-"
        assert str(digit_decrement(Digit.NEG)) == "-+"


# =============================================================================
# МОДЕЛЬ
# =============================================================================


class TestModel:
    """Тесты immutability и равенства"""

    def test_frozen(self) -> None:
        value = t("+")
        with pytest.raises(ValidationError):
            value.digits = (Digit.NEG,)  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        assert t("+-") == t("+-")
        assert t("0+") != t("+")
        assert t("0+").to_decimal() == t("+").to_decimal()

    def test_hashable(self) -> None:
        assert len({t("+"), t("+"), t("0+")}) == 2

    def test_repr(self) -> None:
        assert repr(t("+-0")) == "Ternary('+-0')"
