"""Reward domain services.

``RewardNetwork`` implements the "reward an account for dining" use case. It
coordinates the repositories with the domain objects and owns no state of
its own, so one instance can serve any number of calls.
"""

import logging
from contextlib import nullcontext
from datetime import date
from typing import Optional

from rewardnet.database.base import (
    AccountRepository,
    Database,
    RestaurantRepository,
    RewardRepository,
    UnitOfWork,
)
from rewardnet.domain import errors
from rewardnet.domain.entities import Dining, Reward, RewardConfirmation
from rewardnet.domain.errors import AccountNotFoundError, RestaurantNotFoundError

logger = logging.getLogger(__name__)


class RewardNetwork:
    """Rewards an account for dining at a restaurant."""

    def __init__(
        self,
        account_repository: AccountRepository,
        restaurant_repository: RestaurantRepository,
        reward_repository: RewardRepository,
        unit_of_work: Optional[UnitOfWork] = None,
    ):
        """Initialize the reward network.

        Args:
            account_repository: Loads accounts to reward and saves their beneficiaries
            restaurant_repository: Loads restaurants that determine how much to reward
            reward_repository: Records successful rewards
            unit_of_work: Commits the savings update and the reward record together.
                Without one, each repository write commits on its own
        """
        self.account_repository = account_repository
        self.restaurant_repository = restaurant_repository
        self.reward_repository = reward_repository
        self.unit_of_work = unit_of_work

    def _transaction(self):
        if self.unit_of_work is None:
            return nullcontext()
        return self.unit_of_work.transaction()

    def reward_account_for(self, dining: Dining) -> RewardConfirmation:
        """Reward the account that paid for ``dining``.

        Any failure aborts the remaining steps: beneficiaries are saved only
        after the contribution is allocated, and the reward is confirmed only
        after the save succeeds. Saving and confirming share one transaction
        of the unit of work, so a failed confirmation leaves the savings as
        they were.

        Args:
            dining: The dining transaction to reward

        Returns:
            Confirmation of the recorded reward

        Raises:
            AccountNotFoundError: If no account uses the dining's credit card
            RestaurantNotFoundError: If the merchant number is unknown
            InvalidContributionError: If the account cannot take a contribution
            ConcurrentModificationError: If another reward saved the account
                after it was loaded; nothing was stored and the dining can be
                submitted again
            PersistenceError: If saving or confirming fails
        """
        account = self.account_repository.find_by_credit_card(dining.credit_card_number)
        if account is None:
            logger.info("Account lookup failed", extra={"step": "find_account"})
            raise AccountNotFoundError(errors.account_not_found(dining.credit_card_number))

        restaurant = self.restaurant_repository.find_by_merchant_number(dining.merchant_number)
        if restaurant is None:
            logger.info(
                "Restaurant lookup failed",
                extra={"step": "find_restaurant", "merchant_number": dining.merchant_number},
            )
            raise RestaurantNotFoundError(errors.restaurant_not_found(dining.merchant_number))

        amount = restaurant.calculate_benefit_for(account, dining)
        logger.debug(
            "Calculated benefit",
            extra={"step": "calculate_benefit", "account_number": account.number, "amount": str(amount)},
        )

        contribution = account.make_contribution(amount)
        logger.debug(
            "Allocated contribution",
            extra={
                "step": "make_contribution",
                "account_number": account.number,
                "distributions": len(contribution.distributions),
            },
        )

        with self._transaction():
            self.account_repository.update_beneficiaries(account)
            confirmation = self.reward_repository.confirm_reward(contribution, dining)

        logger.info(
            "Reward confirmed",
            extra={
                "confirmation_number": confirmation.confirmation_number,
                "account_number": account.number,
                "amount": str(contribution.amount),
            },
        )
        return confirmation


class RewardService:
    """Service for querying recorded rewards."""

    def __init__(self, db: Database):
        """Initialize reward service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_rewards(
        self,
        account_number: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Reward]:
        """List rewards, optionally for one account and dining date range.

        Raises:
            NotFoundError: If account_number is given but unknown
            ValidationError: If start_date is after end_date
        """
        if account_number is not None and self.db.get_account(account_number) is None:
            raise errors.NotFoundError(errors.account_number_not_found(account_number))
        if start_date is not None and end_date is not None and start_date > end_date:
            raise errors.ValidationError(
                f"Start date {start_date} is after end date {end_date}"
            )
        return self.db.list_rewards(
            account_number=account_number, start_date=start_date, end_date=end_date
        )
