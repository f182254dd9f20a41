"""Utility functions for rewardnet."""

from rewardnet.utils.date_parser import parse_date, get_date_range
from rewardnet.utils.amount_parser import parse_amount, parse_percentage, parse_assignment

__all__ = ["parse_date", "get_date_range", "parse_amount", "parse_percentage", "parse_assignment"]
