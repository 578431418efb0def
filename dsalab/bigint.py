"""Signed arbitrary-size integers stored as digits in a fixed base."""

from __future__ import annotations

from itertools import zip_longest

_DIGITS = "0123456789ABCDEF"
_CONVERTIBLE_BASES = (2, 8, 10, 16)


class BigIntBaseNotImplemented(ValueError):
    """Raised for a base that numbers cannot be created in or converted to."""


class BigIntBadDigit(ValueError):
    """Raised when a digit does not belong to the number's base."""


class BigIntDivisionByZero(ZeroDivisionError):
    """Raised when dividing or taking the remainder by zero."""


def _trim(digits):
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _compare_magnitudes(first, second):
    if len(first) != len(second):
        return -1 if len(first) < len(second) else 1
    for a, b in zip(reversed(first), reversed(second)):
        if a != b:
            return -1 if a < b else 1
    return 0


def _add_magnitudes(first, second, base):
    result = []
    carry = 0
    for a, b in zip_longest(first, second, fillvalue=0):
        carry, digit = divmod(a + b + carry, base)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def _subtract_magnitudes(larger, smaller, base):
    result = []
    borrow = 0
    for a, b in zip_longest(larger, smaller, fillvalue=0):
        diff = a - b - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff + base if borrow else diff)
    return _trim(result)


def _multiply_magnitudes(first, second, base):
    result = [0] * (len(first) + len(second))
    for i, a in enumerate(first):
        carry = 0
        for j, b in enumerate(second):
            carry, result[i + j] = divmod(result[i + j] + a * b + carry, base)
        position = i + len(second)
        while carry:
            carry, result[position] = divmod(result[position] + carry, base)
            position += 1
    return _trim(result)


def _divmod_magnitudes(dividend, divisor, base):
    quotient = []
    remainder = [0]
    for digit in reversed(dividend):
        remainder = _trim([digit] + remainder)
        count = 0
        while _compare_magnitudes(remainder, divisor) >= 0:
            remainder = _subtract_magnitudes(remainder, divisor, base)
            count += 1
        quotient.append(count)
    quotient.reverse()
    return _trim(quotient or [0]), remainder


def _check_base(base):
    if not 2 <= base <= len(_DIGITS):
        raise BigIntBaseNotImplemented(f"base {base} is not supported")


class BigInt:
    """An immutable signed integer held as digits in ``base``.

    Digits are kept least significant first; indexing returns the digit
    character at that position.
    """

    __slots__ = ("base", "_digits", "_negative")

    def __init__(self, value=0, base=10):
        _check_base(base)
        self.base = base
        if isinstance(value, BigInt):
            converted = value.to_base(base) if value.base != base else value
            self._digits = list(converted._digits)
            self._negative = converted._negative
        elif isinstance(value, str):
            self._digits, self._negative = self._parse(value, base)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._digits, self._negative = self._from_int(value, base)
        else:
            raise TypeError(f"cannot build a BigInt from {type(value).__name__}")
        if self._digits == [0]:
            self._negative = False

    @staticmethod
    def _parse(text, base):
        text = text.strip()
        negative = text.startswith("-")
        body = text[1:] if negative else text
        if not body:
            raise BigIntBadDigit(f"no digits in {text!r}")
        digits = []
        for char in reversed(body):
            value = _DIGITS.find(char)
            if value < 0 or value >= base:
                raise BigIntBadDigit(f"digit {char!r} is not valid in base {base}")
            digits.append(value)
        return _trim(digits), negative

    @staticmethod
    def _from_int(value, base):
        magnitude = abs(value)
        digits = []
        while True:
            magnitude, digit = divmod(magnitude, base)
            digits.append(digit)
            if not magnitude:
                break
        return digits, value < 0

    @classmethod
    def _from_digits(cls, digits, negative, base):
        number = cls.__new__(cls)
        number.base = base
        number._digits = _trim(list(digits))
        number._negative = negative and number._digits != [0]
        return number

    def _coerce(self, other):
        if isinstance(other, BigInt):
            return other if other.base == self.base else other.to_base(self.base)
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other, self.base)
        return None

    @property
    def negative(self):
        """Whether the number is below zero."""
        return self._negative

    def __len__(self):
        return len(self._digits)

    def __getitem__(self, index):
        return _DIGITS[self._digits[index]]

    def __str__(self):
        sign = "-" if self._negative else ""
        return sign + "".join(_DIGITS[digit] for digit in reversed(self._digits))

    def __repr__(self):
        return f"BigInt({str(self)!r}, {self.base})"

    def __int__(self):
        value = 0
        for digit in reversed(self._digits):
            value = value * self.base + digit
        return -value if self._negative else value

    def __hash__(self):
        return hash(int(self))

    def _compare(self, other):
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = _compare_magnitudes(self._digits, other._digits)
        return -order if self._negative else order

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) >= 0

    def __neg__(self):
        return self._from_digits(self._digits, not self._negative, self.base)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        base = self.base
        if self._negative == other._negative:
            digits = _add_magnitudes(self._digits, other._digits, base)
            return self._from_digits(digits, self._negative, base)
        order = _compare_magnitudes(self._digits, other._digits)
        if order == 0:
            return BigInt(0, base)
        larger, smaller = (self, other) if order > 0 else (other, self)
        digits = _subtract_magnitudes(larger._digits, smaller._digits, base)
        return self._from_digits(digits, larger._negative, base)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        digits = _multiply_magnitudes(self._digits, other._digits, self.base)
        return self._from_digits(digits, self._negative != other._negative, self.base)

    __rmul__ = __mul__

    def _divmod(self, other):
        if other._digits == [0]:
            raise BigIntDivisionByZero("division by zero")
        quotient, remainder = _divmod_magnitudes(self._digits, other._digits, self.base)
        return (
            self._from_digits(quotient, self._negative != other._negative, self.base),
            self._from_digits(remainder, self._negative, self.base),
        )

    def __floordiv__(self, other):
        """Quotient truncated towards zero."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[0]

    def __mod__(self, other):
        """Remainder carrying the dividend's sign."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[1]

    def __pow__(self, other):
        exponent = self._coerce(other)
        if exponent is None:
            return NotImplemented
        if exponent.negative:
            raise ValueError(f"negative exponent: {exponent}")
        remaining = int(exponent)
        result = BigInt(1, self.base)
        factor = self
        while remaining:
            if remaining & 1:
                result = result * factor
            remaining >>= 1
            if remaining:
                factor = factor * factor
        return result

    def increment(self):
        """Return this number plus one."""
        return self + BigInt(1, self.base)

    def decrement(self):
        """Return this number minus one."""
        return self - BigInt(1, self.base)

    def to_base(self, base):
        """Return the same value written in base 2, 8, 10 or 16."""
        if base not in _CONVERTIBLE_BASES:
            raise BigIntBaseNotImplemented(f"cannot convert to base {base}")
        if base == self.base:
            return self._from_digits(self._digits, self._negative, base)
        source_base = [self.base] if self.base < base else BigInt._from_int(self.base, base)[0]
        digits = [0]
        for digit in reversed(self._digits):
            digits = _multiply_magnitudes(digits, source_base, base)
            digits = _add_magnitudes(digits, BigInt._from_int(digit, base)[0], base)
        return self._from_digits(digits, self._negative, base)

    def add(self, other):
        """Sum, written in this number's base."""
        return self + BigInt(other, self.base)

    def subtract(self, other):
        """Difference, written in this number's base."""
        return self - BigInt(other, self.base)

    def multiply(self, other):
        """Product, written in this number's base."""
        return self * BigInt(other, self.base)

    def divide(self, other):
        """Truncated quotient, written in this number's base."""
        return self // BigInt(other, self.base)

    def module(self, other):
        """Remainder, written in this number's base."""
        return self % BigInt(other, self.base)

    def power(self, other):
        """This number raised to ``other``, written in this number's base."""
        return self ** BigInt(other, self.base)


def create_number(base, text):
    """Build a number from its text in base 2, 8, 10 or 16."""
    if base not in _CONVERTIBLE_BASES:
        raise BigIntBaseNotImplemented(f"base {base} is not supported")
    return BigInt(text, base)