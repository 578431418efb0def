import pytest

from dsalab.bigint import (
    BigInt,
    BigIntBadDigit,
    BigIntBaseNotImplemented,
    BigIntDivisionByZero,
    create_number,
)

PAIRS = [(0, 0), (5, 3), (3, 5), (-12, 7), (12, -7), (-9, -4), (999, 1), (123456789, 987654321)]


@pytest.mark.parametrize(
    "text, base", [("0", 10), ("101", 2), ("-777", 8), ("1A3F", 16), ("-FF", 16)]
)
def test_text_round_trip(text, base):
    number = BigInt(text, base)
    assert str(number) == text
    assert int(number) == int(text, base)


def test_leading_zeros_are_dropped():
    assert str(BigInt("007")) == "7"
    assert len(BigInt("007")) == 1


def test_digits_are_indexed_least_significant_first():
    number = BigInt("1A3F", 16)
    assert number[0] == "F"
    assert number[3] == "1"
    assert len(number) == 4


@pytest.mark.parametrize("text, base", [("2", 2), ("G", 16), ("9", 8), ("", 10), ("-", 10)])
def test_bad_digit(text, base):
    with pytest.raises(BigIntBadDigit):
        BigInt(text, base)


def test_from_int_matches_python_formatting():
    assert str(BigInt(255, 16)) == format(255, "X")
    assert str(BigInt(-10, 2)) == "-" + format(10, "b")


@pytest.mark.parametrize("a, b", PAIRS)
def test_add_subtract_multiply(a, b):
    x, y = BigInt(a), BigInt(b)
    assert int(x + y) == a + b
    assert int(x - y) == a - b
    assert int(x * y) == a * b


@pytest.mark.parametrize("a, b", [(17, 5), (5, 17), (100, 10), (123456789, 1234), (0, 3)])
def test_division_and_remainder_of_positives(a, b):
    x, y = BigInt(a, 8), BigInt(b, 8)
    assert int(x // y) == a // b
    assert int(x % y) == a % b


def test_division_truncates_towards_zero():
    quotient = BigInt(-7) // BigInt(2)
    remainder = BigInt(-7) % BigInt(2)
    assert int(quotient) == -(7 // 2)
    assert int(quotient) * 2 + int(remainder) == -7


def test_division_by_zero():
    with pytest.raises(BigIntDivisionByZero):
        BigInt(5) // BigInt(0)
    with pytest.raises(BigIntDivisionByZero):
        BigInt(5) % BigInt("0")


def test_power():
    assert BigInt(3) ** 0 == 1
    assert int(BigInt("10", 2) ** BigInt(10)) == 2**10
    assert int(BigInt(-3) ** 3) == (-3) ** 3
    with pytest.raises(ValueError):
        BigInt(2) ** -1


def test_increment_and_decrement_return_new_values():
    number = BigInt("FF", 16)
    assert int(number.increment()) == int(number) + 1
    assert int(number.decrement()) == int(number) - 1
    assert str(number) == "FF"
    assert int(BigInt(0).decrement()) == -1


def test_negation_and_negative_flag():
    assert BigInt(-4).negative
    assert not (-BigInt(-4)).negative
    assert not (-BigInt(0)).negative
    assert not BigInt("-0").negative


@pytest.mark.parametrize("value", [0, 1, 7, 8, 255, 4096, -1234567])
@pytest.mark.parametrize("target", [2, 8, 10, 16])
def test_to_base_round_trip(value, target):
    number = BigInt(value, 10)
    converted = number.to_base(target)
    assert converted.base == target
    assert int(converted) == value
    assert converted.to_base(10) == number


def test_to_base_rejects_other_bases():
    with pytest.raises(BigIntBaseNotImplemented):
        BigInt(5).to_base(3)


def test_comparisons_order_like_ints():
    values = [5, -3, 0, 120, -120, 7, 99]
    ordered = sorted(BigInt(v) for v in values)
    assert [int(n) for n in ordered] == sorted(values)
    assert BigInt(3) <= BigInt(3)
    assert BigInt(-3) < BigInt(2)
    assert BigInt(10) >= BigInt(9)
    assert BigInt("FF", 16) == BigInt(255)


def test_number_operations_convert_the_other_operand():
    left = create_number(16, "FF")
    right = create_number(2, "11")
    for result, expected in [
        (left.add(right), int(left) + int(right)),
        (left.subtract(right), int(left) - int(right)),
        (left.multiply(right), int(left) * int(right)),
        (left.divide(right), int(left) // int(right)),
        (left.module(right), int(left) % int(right)),
        (left.power(right), int(left) ** int(right)),
    ]:
        assert result.base == 16
        assert int(result) == expected


def test_create_number_bases():
    assert create_number(8, "17").base == 8
    assert str(create_number(16, "1A")) == "1A"
    with pytest.raises(BigIntBaseNotImplemented):
        create_number(3, "12")


def test_equal_values_hash_alike():
    assert hash(BigInt("FF", 16)) == hash(BigInt(255))
    assert len({BigInt("FF", 16), BigInt(255, 10), BigInt("377", 8)}) == 1