"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic: percentages are stored as exact
fraction text and benefit strategies are flattened into a type column, a
base rate and a list of per-account overrides.
"""

from fractions import Fraction

from rewardnet.domain import entities as domain
from rewardnet.domain.benefit import (
    BenefitStrategy,
    FixedPercentageWithOverride,
    create_strategy,
    strategy_rate,
)
from rewardnet.domain.money import MonetaryAmount, Percentage
from rewardnet.database.models import (
    Account as ORMAccount,
    Beneficiary as ORMBeneficiary,
    Restaurant as ORMRestaurant,
    RestaurantBenefitOverride as ORMRestaurantBenefitOverride,
    Reward as ORMReward,
)


def percentage_to_db(percentage: Percentage) -> str:
    """Serialize a percentage as exact fraction text (e.g. ``1/3``)."""
    return str(percentage.value)


def percentage_to_domain(value: str) -> Percentage:
    """Parse fraction text written by ``percentage_to_db``."""
    return Percentage(Fraction(value))


def beneficiary_to_domain(orm_beneficiary: ORMBeneficiary) -> domain.Beneficiary:
    """Convert SQLAlchemy Beneficiary model to domain Beneficiary entity."""
    return domain.Beneficiary(
        name=orm_beneficiary.name,
        allocation_percentage=percentage_to_domain(orm_beneficiary.allocation_percentage),
        savings=MonetaryAmount.of(orm_beneficiary.savings or 0),
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        number=orm_account.number,
        name=orm_account.name,
        credit_card_number=orm_account.credit_card_number,
        beneficiaries=[beneficiary_to_domain(b) for b in orm_account.beneficiaries],
        version=orm_account.version,
    )


def benefit_to_domain(orm_restaurant: ORMRestaurant) -> BenefitStrategy:
    """Rebuild the benefit strategy stored on a restaurant row."""
    overrides = {
        override.account_number: percentage_to_domain(override.benefit_percentage)
        for override in orm_restaurant.overrides
    }
    return create_strategy(
        orm_restaurant.benefit_type,
        rate=percentage_to_domain(orm_restaurant.benefit_percentage),
        overrides=overrides,
    )


def restaurant_to_domain(orm_restaurant: ORMRestaurant) -> domain.Restaurant:
    """Convert SQLAlchemy Restaurant model to domain Restaurant entity."""
    return domain.Restaurant(
        id=orm_restaurant.id,
        number=orm_restaurant.merchant_number,
        name=orm_restaurant.name,
        benefit=benefit_to_domain(orm_restaurant),
    )


def restaurant_to_orm(number: str, name: str, benefit: BenefitStrategy) -> ORMRestaurant:
    """Build a SQLAlchemy Restaurant (with overrides) from a domain strategy."""
    orm_restaurant = ORMRestaurant(
        merchant_number=number,
        name=name,
        benefit_type=benefit.kind,
        benefit_percentage=percentage_to_db(strategy_rate(benefit)),
    )
    if isinstance(benefit, FixedPercentageWithOverride):
        orm_restaurant.overrides = [
            ORMRestaurantBenefitOverride(
                account_number=account_number,
                benefit_percentage=percentage_to_db(rate),
            )
            for account_number, rate in benefit.overrides
        ]
    return orm_restaurant


def reward_to_domain(orm_reward: ORMReward) -> domain.Reward:
    """Convert SQLAlchemy Reward model to domain Reward entity."""
    return domain.Reward(
        confirmation_number=str(orm_reward.id),
        account_number=orm_reward.account_number,
        amount=MonetaryAmount.of(orm_reward.amount),
        dining_amount=MonetaryAmount.of(orm_reward.dining_amount),
        dining_merchant_number=orm_reward.dining_merchant_number,
        dining_date=orm_reward.dining_date,
        created_at=orm_reward.created_at,
    )
