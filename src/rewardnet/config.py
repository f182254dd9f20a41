"""Wiring of the reward network onto a database."""

from typing import Optional

from rewardnet.database.base import Database
from rewardnet.database.factories import create_database
from rewardnet.domain.reward import RewardNetwork


def create_reward_network(db: Optional[Database] = None) -> RewardNetwork:
    """Create a RewardNetwork whose repositories and unit of work are all ``db``.

    Args:
        db: Database instance. If None, one is created from the environment
            (see ``create_database``)

    Returns:
        RewardNetwork instance
    """
    if db is None:
        db = create_database()
        db.connect()
        db.initialize_schema()
    return RewardNetwork(
        account_repository=db,
        restaurant_repository=db,
        reward_repository=db,
        unit_of_work=db,
    )
