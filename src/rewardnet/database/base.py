"""Abstract repository and database interfaces."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date
from typing import Mapping, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from rewardnet.domain.benefit import BenefitStrategy
from rewardnet.domain.entities import (
    Account,
    AccountContribution,
    Dining,
    Restaurant,
    Reward,
    RewardConfirmation,
)
from rewardnet.domain.money import Percentage


class AccountRepository(ABC):
    """Loads accounts and saves their beneficiary state."""

    @abstractmethod
    def find_by_credit_card(self, credit_card_number: str) -> Optional[Account]:
        """Get the account linked to a credit card, or None."""
        pass

    @abstractmethod
    def update_beneficiaries(self, account: Account) -> None:
        """Persist the savings of every beneficiary of ``account``.

        The update is all-or-nothing. It is rejected if the stored account
        changed after ``account`` was loaded.

        Raises:
            ConcurrentModificationError: If the stored account is newer than ``account``
            PersistenceError: If the update could not be saved
        """
        pass


class RestaurantRepository(ABC):
    """Loads restaurants."""

    @abstractmethod
    def find_by_merchant_number(self, merchant_number: str) -> Optional[Restaurant]:
        """Get restaurant by merchant number, or None."""
        pass


class RewardRepository(ABC):
    """Records confirmed rewards."""

    @abstractmethod
    def confirm_reward(self, contribution: AccountContribution, dining: Dining) -> RewardConfirmation:
        """Record a contribution and return its confirmation.

        Raises:
            PersistenceError: If the reward could not be recorded
        """
        pass


class UnitOfWork(ABC):
    """Groups repository writes so they are committed or rolled back together."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Return a context manager spanning one transaction.

        Writes made through this object inside the block are committed when
        it exits normally and rolled back if it raises. Nested blocks join
        the outer transaction.
        """
        pass


class Database(AccountRepository, RestaurantRepository, RewardRepository, UnitOfWork):
    """Abstract database interface for rewardnet."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, number: str, name: str, credit_card_number: str) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, number: str) -> Optional[Account]:
        """Get account by account number."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def add_beneficiary(self, account_number: str, name: str, percentage: Percentage) -> int:
        """Add a beneficiary to an account. Returns beneficiary ID."""
        pass

    @abstractmethod
    def update_beneficiary_allocations(
        self, account_number: str, allocations: Mapping[str, Percentage]
    ) -> None:
        """Replace the allocation percentages of existing beneficiaries."""
        pass

    # Restaurant operations
    @abstractmethod
    def create_restaurant(self, number: str, name: str, benefit: BenefitStrategy) -> int:
        """Create a restaurant. Returns restaurant ID."""
        pass

    @abstractmethod
    def list_restaurants(self) -> list[Restaurant]:
        """List all restaurants."""
        pass

    # Reward operations
    @abstractmethod
    def list_rewards(
        self,
        account_number: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Reward]:
        """List recorded rewards with optional filters.

        Args:
            account_number: Optional account filter
            start_date: Optional start of dining date range (inclusive)
            end_date: Optional end of dining date range (inclusive)
        """
        pass
