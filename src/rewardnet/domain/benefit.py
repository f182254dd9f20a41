"""Benefit calculation strategies.

A restaurant carries one of a closed set of strategy values. All of them are
evaluated by ``calculate_benefit``, which is a pure function of its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Union

from rewardnet.domain.errors import ValidationError
from rewardnet.domain.money import MonetaryAmount, Percentage

if TYPE_CHECKING:
    from rewardnet.domain.entities import Account, Dining

FIXED = "fixed"
OVERRIDE = "override"
NONE = "none"

BENEFIT_TYPES = (FIXED, OVERRIDE, NONE)


@dataclass(frozen=True)
class FixedPercentage:
    """Benefit is a flat percentage of the dining amount."""

    rate: Percentage

    kind = FIXED


@dataclass(frozen=True)
class FixedPercentageWithOverride:
    """Flat percentage, with per-account rates taking precedence.

    ``overrides`` accepts a mapping or pairs of account number and rate, and
    is stored as a tuple of pairs sorted by account number.
    """

    rate: Percentage
    overrides: tuple[tuple[str, Percentage], ...] = ()

    kind = OVERRIDE

    def __post_init__(self):
        object.__setattr__(self, "overrides", tuple(sorted(dict(self.overrides).items())))

    def rate_for(self, account_number: str) -> Percentage:
        for number, rate in self.overrides:
            if number == account_number:
                return rate
        return self.rate


@dataclass(frozen=True)
class NoBenefit:
    """Restaurant is not eligible for rewards."""

    kind = NONE


BenefitStrategy = Union[FixedPercentage, FixedPercentageWithOverride, NoBenefit]


def calculate_benefit(strategy: BenefitStrategy, account: Account, dining: Dining) -> MonetaryAmount:
    """Calculate the benefit earned by ``account`` for ``dining``.

    The account does not need any beneficiaries. Rounding to cents happens
    once, in ``MonetaryAmount.multiply_by``.

    Raises:
        TypeError: If strategy is not a known benefit strategy
    """
    if isinstance(strategy, FixedPercentage):
        return dining.amount.multiply_by(strategy.rate)
    if isinstance(strategy, FixedPercentageWithOverride):
        return dining.amount.multiply_by(strategy.rate_for(account.number))
    if isinstance(strategy, NoBenefit):
        return MonetaryAmount.zero()
    raise TypeError(f"Unknown benefit strategy: {strategy!r}")


def create_strategy(
    benefit_type: str,
    rate: Percentage | None = None,
    overrides: Mapping[str, Percentage] | None = None,
) -> BenefitStrategy:
    """Build a strategy from its type name and parameters.

    Args:
        benefit_type: One of ``fixed``, ``override`` or ``none``
        rate: Benefit rate (required unless the type is ``none``)
        overrides: Per-account rates for the ``override`` type

    Raises:
        ValidationError: If the type is unknown or a rate is missing
    """
    if benefit_type == NONE:
        return NoBenefit()
    if benefit_type not in BENEFIT_TYPES:
        raise ValidationError(
            f"Unknown benefit type '{benefit_type}'. Supported types: {', '.join(BENEFIT_TYPES)}"
        )
    if rate is None:
        raise ValidationError(f"Benefit type '{benefit_type}' requires a rate")
    if benefit_type == OVERRIDE:
        return FixedPercentageWithOverride(rate=rate, overrides=overrides or ())
    return FixedPercentage(rate=rate)


def strategy_rate(strategy: BenefitStrategy) -> Percentage:
    """Return the base rate of a strategy (0% for NoBenefit)."""
    if isinstance(strategy, NoBenefit):
        return Percentage.zero()
    return strategy.rate
