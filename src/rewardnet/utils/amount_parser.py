"""Amount and percentage parsing utilities."""

import re

from rewardnet.domain.errors import InvalidAmountError
from rewardnet.domain.money import MonetaryAmount, Percentage


def parse_amount(amount_str: str) -> MonetaryAmount:
    """Parse an amount string into a MonetaryAmount.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        MonetaryAmount rounded half-up to cents

    Raises:
        InvalidAmountError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise InvalidAmountError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Handle a sign placed before the currency symbol
    if amount_str.startswith("-"):
        is_negative = not is_negative
        amount_str = amount_str[1:]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = MonetaryAmount.of(amount_str)
    except InvalidAmountError as e:
        raise InvalidAmountError(f"Could not parse amount '{amount_str}': {e}")
    if is_negative:
        amount = MonetaryAmount.zero() - amount
    return amount


def parse_percentage(percentage_str: str) -> Percentage:
    """Parse a percentage such as "8%", "0.08" or "1/3".

    Raises:
        InvalidAmountError: If the string is not a percentage between 0% and 100%
    """
    if not percentage_str or not percentage_str.strip():
        raise InvalidAmountError("Empty percentage string")
    return Percentage.of(percentage_str.strip())


def parse_assignment(assignment: str) -> tuple[str, Percentage]:
    """Parse a ``NAME=PERCENT`` pair such as ``Annabelle=50%``.

    Raises:
        InvalidAmountError: If the pair is malformed
    """
    name, sep, value = assignment.rpartition("=")
    if not sep or not name.strip():
        raise InvalidAmountError(f"Expected NAME=PERCENT, got '{assignment}'")
    return name.strip(), parse_percentage(value)
