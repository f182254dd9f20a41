"""Shared pytest fixtures for rewardnet tests."""

import tempfile
import os
import pytest

from rewardnet.database.factories import create_sqlite_database
from rewardnet.domain.account import AccountService
from rewardnet.domain.money import Percentage
from rewardnet.domain.restaurant import RestaurantService
from rewardnet.domain.reward import RewardNetwork, RewardService

ACCOUNT_NUMBER = "123456789"
CREDIT_CARD = "1234123412341234"
MERCHANT_NUMBER = "1234567890"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def restaurant_service(temp_db):
    """Create a RestaurantService with a temporary database."""
    return RestaurantService(temp_db)


@pytest.fixture
def reward_service(temp_db):
    """Create a RewardService with a temporary database."""
    return RewardService(temp_db)


@pytest.fixture
def reward_network(temp_db):
    """Create a RewardNetwork backed by the temporary database."""
    return RewardNetwork(temp_db, temp_db, temp_db, unit_of_work=temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create an account with two beneficiaries at 50% each."""
    account_service.create_account(
        number=ACCOUNT_NUMBER, name="Keith and Keri Donald", credit_card_number=CREDIT_CARD
    )
    account_service.add_beneficiary(ACCOUNT_NUMBER, "Annabelle", Percentage.of("50%"))
    account_service.add_beneficiary(ACCOUNT_NUMBER, "Corgan", Percentage.of("50%"))
    return account_service.get_account(ACCOUNT_NUMBER)


@pytest.fixture
def sample_restaurant(restaurant_service):
    """Create a restaurant giving a flat 8% benefit."""
    restaurant_service.create_restaurant(
        number=MERCHANT_NUMBER, name="Apple Bees", benefit_type="fixed", rate=Percentage.of("8%")
    )
    return restaurant_service.get_restaurant(MERCHANT_NUMBER)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
