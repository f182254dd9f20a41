"""Restaurant domain service."""

from typing import Mapping, Optional

from rewardnet.database.base import Database
from rewardnet.domain.benefit import NONE, OVERRIDE, create_strategy
from rewardnet.domain.entities import Restaurant as RestaurantEntity
from rewardnet.domain.errors import ConflictError, ValidationError
from rewardnet.domain.money import Percentage


class RestaurantService:
    """Service for managing restaurants."""

    def __init__(self, db: Database):
        """Initialize restaurant service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_restaurant(
        self,
        number: str,
        name: str,
        benefit_type: str,
        rate: Optional[Percentage] = None,
        overrides: Optional[Mapping[str, Percentage]] = None,
    ) -> int:
        """Create a restaurant.

        Args:
            number: Merchant number
            name: Restaurant name
            benefit_type: ``fixed``, ``override`` or ``none``
            rate: Benefit rate (ignored for ``none``)
            overrides: Per-account rates (``override`` only)

        Returns:
            Restaurant ID

        Raises:
            ValidationError: If parameters don't fit the benefit type
            ConflictError: If the merchant number is already registered
        """
        if not number or not number.strip():
            raise ValidationError("Merchant number cannot be empty")
        if overrides and benefit_type != OVERRIDE:
            raise ValidationError(
                f"Per-account overrides require benefit type '{OVERRIDE}', got '{benefit_type}'"
            )
        if benefit_type == NONE:
            rate = None

        strategy = create_strategy(benefit_type, rate=rate, overrides=overrides)

        if self.db.find_by_merchant_number(number) is not None:
            raise ConflictError(f"Restaurant with merchant number '{number}' already exists")

        return self.db.create_restaurant(number=number, name=name, benefit=strategy)

    def get_restaurant(self, number: str) -> Optional[RestaurantEntity]:
        """Get restaurant by merchant number."""
        return self.db.find_by_merchant_number(number)

    def list_restaurants(self) -> list[RestaurantEntity]:
        return self.db.list_restaurants()
