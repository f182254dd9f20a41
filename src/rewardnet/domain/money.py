"""Monetary amount and percentage value types.

Amounts are exact ``Decimal`` values held at cent scale. Percentages are
exact ``Fraction`` values so that shares such as one third add back up to
exactly 100%.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from fractions import Fraction
from typing import Sequence, Union

from rewardnet.domain.errors import InvalidAmountError

CENTS = Decimal("0.01")

AmountLike = Union["MonetaryAmount", Decimal, int, float, str]
PercentageLike = Union["Percentage", Fraction, Decimal, int, float, str]


def _to_decimal(value: AmountLike) -> Decimal:
    if isinstance(value, MonetaryAmount):
        return value.value
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid monetary amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"Invalid monetary amount: {value!r}")
    if not result.is_finite():
        raise InvalidAmountError(f"Invalid monetary amount: {value!r}")
    return result


@dataclass(frozen=True, order=True)
class MonetaryAmount:
    """An exact currency amount with two fractional digits.

    Every constructor quantizes to cents with ROUND_HALF_UP, so the stored
    value is always at currency scale.
    """

    value: Decimal

    def __post_init__(self):
        try:
            value = _to_decimal(self.value).quantize(CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidAmountError(f"Monetary amount out of range: {self.value!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: AmountLike) -> "MonetaryAmount":
        """Create an amount from a string, Decimal, int or float."""
        if isinstance(value, MonetaryAmount):
            return value
        return cls(_to_decimal(value))

    @classmethod
    def zero(cls) -> "MonetaryAmount":
        return cls(Decimal("0"))

    def as_decimal(self) -> Decimal:
        return self.value

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    def __add__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return MonetaryAmount(self.value + other.value)

    def __sub__(self, other: "MonetaryAmount") -> "MonetaryAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return MonetaryAmount(self.value - other.value)

    def multiply_by(self, percentage: PercentageLike) -> "MonetaryAmount":
        """Return this amount times ``percentage``, rounded half-up to cents.

        The product is computed from the exact fraction, so rounding happens
        exactly once.
        """
        rate = Percentage.of(percentage).value
        raw = self.value * Decimal(rate.numerator) / Decimal(rate.denominator)
        return MonetaryAmount(raw)

    def split(self, percentages: Sequence[PercentageLike]) -> list["MonetaryAmount"]:
        """Split this amount by ``percentages``; see ``allocation.allocate``."""
        from rewardnet.domain.allocation import allocate

        return allocate(self, [Percentage.of(p) for p in percentages])

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else ""
        return f"{sign}${abs(self.value):,.2f}"


def _to_fraction(value: PercentageLike) -> Fraction:
    if isinstance(value, Percentage):
        return value.value
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid percentage: {value!r}")
    if isinstance(value, (Fraction, int)):
        return Fraction(value)
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidAmountError(f"Invalid percentage: {value!r}")
        return Fraction(value)
    if not isinstance(value, str):
        raise InvalidAmountError(f"Invalid percentage: {value!r}")

    text = value.strip()
    is_percent = text.endswith("%")
    if is_percent:
        text = text[:-1].strip()
    try:
        result = Fraction(text)
    except (ValueError, ZeroDivisionError):
        raise InvalidAmountError(f"Invalid percentage: {value!r}")
    if is_percent:
        result = result / 100
    return result


@dataclass(frozen=True, order=True)
class Percentage:
    """An exact fraction in the range [0, 1].

    Accepts ``"50%"``, ``"0.5"``, ``"1/3"`` as text, or a Fraction, Decimal
    or int.
    """

    value: Fraction

    def __post_init__(self):
        value = _to_fraction(self.value)
        if value < 0 or value > 1:
            raise InvalidAmountError(
                f"Percentage must be between 0% and 100%, got {_format_percent(value)}"
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: PercentageLike) -> "Percentage":
        if isinstance(value, Percentage):
            return value
        return cls(value)

    @classmethod
    def zero(cls) -> "Percentage":
        return cls(Fraction(0))

    @classmethod
    def one_hundred(cls) -> "Percentage":
        return cls(Fraction(1))

    def as_decimal(self) -> Decimal:
        """Return the fraction as a Decimal (inexact for repeating values)."""
        return Decimal(self.value.numerator) / Decimal(self.value.denominator)

    def __str__(self) -> str:
        return _format_percent(self.value)


def total_percentage(percentages: Sequence["Percentage"]) -> Fraction:
    """Return the exact sum of ``percentages`` (may exceed 1)."""
    return sum((p.value for p in percentages), Fraction(0))


def format_fraction(value: Fraction) -> str:
    """Render a fraction as a percent string, e.g. ``Fraction(1, 3)`` as ``33.33%``."""
    return _format_percent(value)


def _format_percent(value: Fraction) -> str:
    scaled = Decimal(value.numerator) * 100 / Decimal(value.denominator)
    return f"{scaled.quantize(CENTS, rounding=ROUND_HALF_UP).normalize():f}%"
