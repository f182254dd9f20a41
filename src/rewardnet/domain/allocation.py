"""Splitting a contribution total across percentage shares."""

from typing import Sequence

from rewardnet.domain.errors import InvalidAmountError, InvalidContributionError
from rewardnet.domain.money import MonetaryAmount, Percentage


def allocate(total: MonetaryAmount, percentages: Sequence[Percentage]) -> list[MonetaryAmount]:
    """Split ``total`` into one amount per percentage.

    Every share but the last is ``total * percentage`` rounded half-up to
    cents. The last share is whatever remains, so the parts always add up to
    ``total`` exactly and none is negative. For 10.00 split three ways at 1/3
    this gives 3.33, 3.33 and 3.34.

    Args:
        total: Non-negative amount to split
        percentages: Shares in allocation order

    Returns:
        Amounts in the same order as ``percentages``

    Raises:
        InvalidAmountError: If total is negative
        InvalidContributionError: If there are no shares
    """
    if total.is_negative():
        raise InvalidAmountError(f"Cannot allocate a negative amount ({total})")
    if not percentages:
        raise InvalidContributionError("Cannot allocate an amount across zero shares")

    parts = []
    allocated = MonetaryAmount.zero()
    for percentage in percentages[:-1]:
        # Rounding up can overshoot on tiny totals; never hand out more than is left
        part = min(total.multiply_by(percentage), total - allocated)
        parts.append(part)
        allocated = allocated + part
    parts.append(total - allocated)
    return parts
