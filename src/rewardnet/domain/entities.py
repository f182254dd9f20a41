"""Domain model entities for rewardnet.

These are plain data classes representing business concepts, independent of
database schema. ``Account`` and ``Beneficiary`` are the only mutable ones:
making a contribution credits each beneficiary's running savings.
"""

from dataclasses import dataclass, field
from datetime import date as date_type, datetime
from fractions import Fraction
from typing import Optional

from rewardnet.domain import errors
from rewardnet.domain.allocation import allocate
from rewardnet.domain.benefit import BenefitStrategy, calculate_benefit
from rewardnet.domain.errors import (
    InvalidAmountError,
    InvalidContributionError,
    ValidationError,
)
from rewardnet.domain.money import (
    AmountLike,
    MonetaryAmount,
    Percentage,
    format_fraction,
    total_percentage,
)


@dataclass(frozen=True)
class Dining:
    """A completed card transaction at a restaurant."""

    amount: MonetaryAmount
    credit_card_number: str
    merchant_number: str
    date: date_type = field(default_factory=date_type.today)

    def __post_init__(self):
        amount = MonetaryAmount.of(self.amount)
        if amount.value <= 0:
            raise InvalidAmountError(f"Dining amount must be greater than zero, got {amount}")
        object.__setattr__(self, "amount", amount)

    @classmethod
    def create(
        cls,
        amount: AmountLike,
        credit_card_number: str,
        merchant_number: str,
        date: Optional[date_type] = None,
    ) -> "Dining":
        """Create a dining from a textual amount such as ``"100.00"``."""
        if date is None:
            date = date_type.today()
        return cls(
            amount=MonetaryAmount.of(amount),
            credit_card_number=credit_card_number,
            merchant_number=merchant_number,
            date=date,
        )


@dataclass
class Beneficiary:
    """A named recipient of a fixed share of an account's contributions."""

    name: str
    allocation_percentage: Percentage
    savings: MonetaryAmount = field(default_factory=MonetaryAmount.zero)

    def credit(self, amount: MonetaryAmount) -> None:
        """Add ``amount`` to this beneficiary's running savings."""
        self.savings = self.savings + amount


@dataclass
class Account:
    """Reward account entity.

    Beneficiaries are kept in insertion order, which is also the order
    contributions are allocated in.

    ``version`` is the stored revision the account was loaded at. It is None
    for accounts that were never loaded from a repository.
    """

    number: str
    name: str
    credit_card_number: str
    beneficiaries: list[Beneficiary] = field(default_factory=list)
    id: Optional[int] = None
    version: Optional[int] = None

    def add_beneficiary(
        self, name: str, allocation_percentage: Optional[Percentage] = None
    ) -> Beneficiary:
        """Add a beneficiary with the given share (0% if omitted).

        Raises:
            ValidationError: If a beneficiary with the same name exists
        """
        if any(b.name == name for b in self.beneficiaries):
            raise ValidationError(errors.duplicate_beneficiary(name, self.number))
        if allocation_percentage is None:
            allocation_percentage = Percentage.zero()
        beneficiary = Beneficiary(name=name, allocation_percentage=Percentage.of(allocation_percentage))
        self.beneficiaries.append(beneficiary)
        return beneficiary

    def get_beneficiary(self, name: str) -> Beneficiary:
        for beneficiary in self.beneficiaries:
            if beneficiary.name == name:
                return beneficiary
        raise ValidationError(f"No beneficiary named '{name}' on account '{self.number}'")

    def total_allocation(self) -> Fraction:
        return total_percentage([b.allocation_percentage for b in self.beneficiaries])

    def is_valid(self) -> bool:
        """Return True if the beneficiary shares add up to exactly 100%.

        An account with no beneficiaries is valid; it just cannot receive
        contributions.
        """
        if not self.beneficiaries:
            return True
        return self.total_allocation() == 1

    def make_contribution(self, amount: MonetaryAmount) -> "AccountContribution":
        """Distribute ``amount`` across the beneficiaries and credit their savings.

        Args:
            amount: Total contribution, must not be negative

        Returns:
            The contribution, with one distribution per beneficiary

        Raises:
            InvalidAmountError: If amount is negative
            InvalidContributionError: If there are no beneficiaries or their
                shares do not total 100%
        """
        amount = MonetaryAmount.of(amount)
        if amount.is_negative():
            raise InvalidAmountError(f"Contribution amount cannot be negative, got {amount}")
        if not self.beneficiaries:
            raise InvalidContributionError(errors.no_beneficiaries(self.number))
        if not self.is_valid():
            raise InvalidContributionError(
                errors.allocations_do_not_total(self.number, format_fraction(self.total_allocation()))
            )

        parts = allocate(amount, [b.allocation_percentage for b in self.beneficiaries])
        distributions = []
        for beneficiary, part in zip(self.beneficiaries, parts):
            beneficiary.credit(part)
            distributions.append(
                Distribution(
                    beneficiary_name=beneficiary.name,
                    amount=part,
                    percentage=beneficiary.allocation_percentage,
                    total_savings=beneficiary.savings,
                )
            )
        return AccountContribution(
            account_number=self.number, amount=amount, distributions=tuple(distributions)
        )


@dataclass(frozen=True)
class Restaurant:
    """Restaurant entity; its benefit strategy decides how much to reward."""

    number: str
    name: str
    benefit: BenefitStrategy
    id: Optional[int] = None

    def calculate_benefit_for(self, account: Account, dining: Dining) -> MonetaryAmount:
        return calculate_benefit(self.benefit, account, dining)


@dataclass(frozen=True)
class Distribution:
    """The part of one contribution allocated to one beneficiary."""

    beneficiary_name: str
    amount: MonetaryAmount
    percentage: Percentage
    total_savings: MonetaryAmount


@dataclass(frozen=True)
class AccountContribution:
    """A contribution made to an account, with its per-beneficiary split."""

    account_number: str
    amount: MonetaryAmount
    distributions: tuple[Distribution, ...]

    def __post_init__(self):
        object.__setattr__(self, "distributions", tuple(self.distributions))
        distributed = MonetaryAmount.zero()
        for distribution in self.distributions:
            distributed = distributed + distribution.amount
        if distributed != self.amount:
            raise InvalidContributionError(
                f"Distributions total {distributed} but the contribution is {self.amount}"
            )

    def get_distribution(self, beneficiary_name: str) -> Distribution:
        for distribution in self.distributions:
            if distribution.beneficiary_name == beneficiary_name:
                return distribution
        raise ValidationError(f"No distribution for beneficiary '{beneficiary_name}'")


@dataclass(frozen=True)
class RewardConfirmation:
    """Proof that a reward was recorded."""

    confirmation_number: str
    account_contribution: AccountContribution


@dataclass(frozen=True)
class Reward:
    """A recorded reward, as stored by the reward repository."""

    confirmation_number: str
    account_number: str
    amount: MonetaryAmount
    dining_amount: MonetaryAmount
    dining_merchant_number: str
    dining_date: date_type
    created_at: datetime
