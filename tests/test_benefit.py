"""Tests for benefit calculation strategies."""

import copy
import pytest
from datetime import date

from rewardnet.domain.benefit import (
    FixedPercentage,
    FixedPercentageWithOverride,
    NoBenefit,
    calculate_benefit,
    create_strategy,
    strategy_rate,
)
from rewardnet.domain.entities import Account, Dining, Restaurant
from rewardnet.domain.errors import ValidationError
from rewardnet.domain.money import MonetaryAmount, Percentage


@pytest.fixture
def account():
    account = Account(number="123456789", name="Keith", credit_card_number="1234123412341234")
    account.add_beneficiary("Annabelle", Percentage.of("50%"))
    account.add_beneficiary("Corgan", Percentage.of("50%"))
    return account


@pytest.fixture
def dining():
    return Dining.create("100.00", "1234123412341234", "1234567890", date=date(2024, 1, 15))


def test_fixed_percentage(account, dining):
    """Test the default flat percentage policy."""
    benefit = calculate_benefit(FixedPercentage(Percentage.of("8%")), account, dining)
    assert benefit == MonetaryAmount.of("8.00")


def test_fixed_percentage_rounds_once_half_up(account):
    """Test that the benefit is rounded to cents."""
    dining = Dining.create("12.34", "1234123412341234", "1234567890")
    benefit = calculate_benefit(FixedPercentage(Percentage.of("8%")), account, dining)
    # 12.34 * 0.08 = 0.9872
    assert benefit == MonetaryAmount.of("0.99")


def test_override_applies_to_listed_account(account, dining):
    """Test that a per-account override wins over the base rate."""
    strategy = FixedPercentageWithOverride(
        rate=Percentage.of("8%"), overrides={"123456789": Percentage.of("10%")}
    )
    assert calculate_benefit(strategy, account, dining) == MonetaryAmount.of("10.00")


def test_override_falls_back_to_base_rate(account, dining):
    """Test that other accounts get the base rate."""
    strategy = FixedPercentageWithOverride(
        rate=Percentage.of("8%"), overrides={"999999999": Percentage.of("10%")}
    )
    assert calculate_benefit(strategy, account, dining) == MonetaryAmount.of("8.00")


def test_no_benefit(account, dining):
    """Test that ineligible restaurants give nothing."""
    assert calculate_benefit(NoBenefit(), account, dining) == MonetaryAmount.zero()


def test_beneficiaries_not_required(dining):
    """Test that the calculation works for an account without beneficiaries."""
    bare = Account(number="1", name="Bare", credit_card_number="1")
    assert calculate_benefit(FixedPercentage(Percentage.of("8%")), bare, dining) == MonetaryAmount.of("8.00")


def test_unknown_strategy_rejected(account, dining):
    """Test that only known strategy types are accepted."""
    with pytest.raises(TypeError):
        calculate_benefit(object(), account, dining)


@pytest.mark.parametrize(
    "strategy",
    [
        FixedPercentage(Percentage.of("8%")),
        FixedPercentageWithOverride(Percentage.of("8%"), {"123456789": Percentage.of("1/3")}),
        NoBenefit(),
    ],
)
def test_deterministic_and_pure(strategy, account, dining):
    """Test repeated calls give the same result and leave inputs untouched."""
    account_before = copy.deepcopy(account)
    dining_before = copy.deepcopy(dining)

    first = calculate_benefit(strategy, account, dining)
    second = calculate_benefit(strategy, account, dining)

    assert first == second
    assert account == account_before
    assert dining == dining_before


def test_restaurant_delegates_to_strategy(account, dining):
    """Test Restaurant.calculate_benefit_for uses its strategy."""
    restaurant = Restaurant(number="1234567890", name="Apple Bees", benefit=FixedPercentage(Percentage.of("8%")))
    assert restaurant.calculate_benefit_for(account, dining) == MonetaryAmount.of("8.00")


class TestCreateStrategy:
    """Tests for building strategies from type names."""

    def test_fixed(self):
        strategy = create_strategy("fixed", rate=Percentage.of("8%"))
        assert strategy == FixedPercentage(Percentage.of("8%"))

    def test_override(self):
        strategy = create_strategy(
            "override", rate=Percentage.of("8%"), overrides={"1": Percentage.of("9%")}
        )
        assert isinstance(strategy, FixedPercentageWithOverride)
        assert strategy.rate_for("1") == Percentage.of("9%")

    def test_none_ignores_rate(self):
        assert create_strategy("none", rate=Percentage.of("8%")) == NoBenefit()
        assert strategy_rate(NoBenefit()) == Percentage.zero()

    def test_missing_rate(self):
        with pytest.raises(ValidationError, match="requires a rate"):
            create_strategy("fixed")

    def test_unknown_type(self):
        with pytest.raises(ValidationError, match="Unknown benefit type"):
            create_strategy("bogus", rate=Percentage.of("8%"))


def test_override_strategy_is_hashable():
    """Test override strategies can be hashed and compared regardless of order."""
    strategy = FixedPercentageWithOverride(
        rate=Percentage.of("5%"), overrides={"456": Percentage.of("1/8"), "123": Percentage.of("10%")}
    )
    same = FixedPercentageWithOverride(
        rate=Percentage.of("5%"), overrides=[("123", Percentage.of("10%")), ("456", Percentage.of("1/8"))]
    )

    assert strategy == same
    assert hash(strategy) == hash(same)
    assert strategy.overrides == (("123", Percentage.of("10%")), ("456", Percentage.of("1/8")))
    assert strategy.rate_for("456") == Percentage.of("1/8")


def test_restaurants_usable_as_set_members():
    strategy = create_strategy("override", rate=Percentage.of("5%"), overrides={"123": Percentage.of("10%")})
    restaurant = Restaurant(number="1", name="Olive Garden", benefit=strategy)
    twin = Restaurant(number="1", name="Olive Garden", benefit=strategy)

    assert {restaurant, twin} == {restaurant}
