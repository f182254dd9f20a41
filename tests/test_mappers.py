"""Tests for database mappers."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal
from fractions import Fraction

from rewardnet.database.models import (
    Account as ORMAccount,
    Beneficiary as ORMBeneficiary,
    Restaurant as ORMRestaurant,
    RestaurantBenefitOverride as ORMRestaurantBenefitOverride,
    Reward as ORMReward,
)
from rewardnet.database.mappers import (
    account_to_domain,
    beneficiary_to_domain,
    percentage_to_db,
    percentage_to_domain,
    restaurant_to_domain,
    restaurant_to_orm,
    reward_to_domain,
)
from rewardnet.domain.benefit import FixedPercentage, FixedPercentageWithOverride, NoBenefit
from rewardnet.domain.entities import Account, Beneficiary, Restaurant, Reward
from rewardnet.domain.money import MonetaryAmount, Percentage


class TestPercentageMapper:
    """Tests for percentage serialization."""

    @pytest.mark.parametrize("text", ["50%", "1/3", "0%", "100%", "8%"])
    def test_exact(self, text):
        """Test percentages are stored as exact fraction text."""
        percentage = Percentage.of(text)
        assert percentage_to_domain(percentage_to_db(percentage)) == percentage

    def test_format(self):
        assert percentage_to_db(Percentage.of("1/3")) == "1/3"
        assert percentage_to_db(Percentage.of("50%")) == "1/2"


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_domain(self):
        """Test converting ORM Account with beneficiaries to domain Account."""
        orm_account = ORMAccount(
            id=1,
            number="123456789",
            name="Keith and Keri Donald",
            credit_card_number="1234123412341234",
            created_at=datetime.now(UTC),
            version=3,
        )
        orm_account.beneficiaries = [
            ORMBeneficiary(id=1, name="Annabelle", allocation_percentage="1/2", savings=Decimal("4.00")),
            ORMBeneficiary(id=2, name="Corgan", allocation_percentage="1/2", savings=Decimal("0")),
        ]

        domain_account = account_to_domain(orm_account)

        assert isinstance(domain_account, Account)
        assert domain_account.id == 1
        assert domain_account.number == "123456789"
        assert domain_account.credit_card_number == "1234123412341234"
        assert domain_account.version == 3
        assert [b.name for b in domain_account.beneficiaries] == ["Annabelle", "Corgan"]
        assert domain_account.beneficiaries[0].savings == MonetaryAmount.of("4.00")
        assert domain_account.is_valid()

    def test_unsaved_beneficiary_has_zero_savings(self):
        """Test a beneficiary without a savings value maps to zero."""
        beneficiary = beneficiary_to_domain(ORMBeneficiary(name="A", allocation_percentage="1"))

        assert isinstance(beneficiary, Beneficiary)
        assert beneficiary.savings == MonetaryAmount.zero()
        assert beneficiary.allocation_percentage.value == Fraction(1)


class TestRestaurantMapper:
    """Tests for Restaurant mappers."""

    def test_fixed_restaurant_to_domain(self):
        """Test converting a flat-rate ORM Restaurant."""
        orm_restaurant = ORMRestaurant(
            id=3,
            merchant_number="1234567890",
            name="Apple Bees",
            benefit_type="fixed",
            benefit_percentage="2/25",
        )

        restaurant = restaurant_to_domain(orm_restaurant)

        assert isinstance(restaurant, Restaurant)
        assert restaurant.id == 3
        assert restaurant.number == "1234567890"
        assert restaurant.benefit == FixedPercentage(Percentage.of("8%"))

    def test_override_restaurant_to_domain(self):
        """Test overrides are gathered into the strategy."""
        orm_restaurant = ORMRestaurant(
            merchant_number="1",
            name="Olive Garden",
            benefit_type="override",
            benefit_percentage="1/20",
        )
        orm_restaurant.overrides = [
            ORMRestaurantBenefitOverride(account_number="123", benefit_percentage="1/10"),
        ]

        benefit = restaurant_to_domain(orm_restaurant).benefit

        assert isinstance(benefit, FixedPercentageWithOverride)
        assert benefit.rate_for("123") == Percentage.of("10%")
        assert benefit.rate_for("456") == Percentage.of("5%")

    def test_restaurant_to_orm(self):
        """Test flattening a strategy into ORM columns."""
        strategy = FixedPercentageWithOverride(
            rate=Percentage.of("5%"), overrides={"123": Percentage.of("10%")}
        )

        orm_restaurant = restaurant_to_orm("1", "Olive Garden", strategy)

        assert orm_restaurant.benefit_type == "override"
        assert orm_restaurant.benefit_percentage == "1/20"
        assert [(o.account_number, o.benefit_percentage) for o in orm_restaurant.overrides] == [("123", "1/10")]

    def test_no_benefit_to_orm(self):
        """Test NoBenefit is stored with a zero rate."""
        orm_restaurant = restaurant_to_orm("2", "Snack Shack", NoBenefit())

        assert orm_restaurant.benefit_type == "none"
        assert orm_restaurant.benefit_percentage == "0"
        assert orm_restaurant.overrides == []


class TestRewardMapper:
    """Tests for Reward mapper."""

    def test_reward_to_domain(self):
        """Test the row ID becomes the confirmation number."""
        created_at = datetime.now(UTC)
        orm_reward = ORMReward(
            id=42,
            account_number="123456789",
            amount=Decimal("8.00"),
            dining_amount=Decimal("100.00"),
            dining_merchant_number="1234567890",
            dining_date=date(2024, 1, 15),
            created_at=created_at,
        )

        reward = reward_to_domain(orm_reward)

        assert isinstance(reward, Reward)
        assert reward.confirmation_number == "42"
        assert reward.amount == MonetaryAmount.of("8.00")
        assert reward.dining_amount == MonetaryAmount.of("100.00")
        assert reward.dining_date == date(2024, 1, 15)
        assert reward.created_at == created_at
