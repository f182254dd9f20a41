"""Database layer for rewardnet application."""

from rewardnet.database.base import (
    AccountRepository,
    Database,
    RestaurantRepository,
    RewardRepository,
    UnitOfWork,
)
from rewardnet.database.factories import create_database, create_sqlite_database

__all__ = [
    "AccountRepository",
    "Database",
    "RestaurantRepository",
    "RewardRepository",
    "UnitOfWork",
    "create_database",
    "create_sqlite_database",
]
