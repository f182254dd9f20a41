"""SQLAlchemy models for rewardnet database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Reward account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    number = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    credit_card_number = Column(String, unique=True, nullable=False)
    # Incremented by every savings update
    version = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    beneficiaries = relationship(
        "Beneficiary",
        back_populates="account",
        cascade="all, delete-orphan",
        order_by="Beneficiary.id",
    )


class Beneficiary(Base):
    """Account beneficiary model.

    ``allocation_percentage`` holds an exact fraction as text (e.g. ``1/3``).
    """

    __tablename__ = "beneficiaries"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    name = Column(String, nullable=False)
    allocation_percentage = Column(String, nullable=False)
    savings = Column(Numeric(12, 2), default=0, nullable=False)

    __table_args__ = (UniqueConstraint("account_id", "name", name="uq_account_beneficiary_name"),)

    # Relationships
    account = relationship("Account", back_populates="beneficiaries")


class Restaurant(Base):
    """Restaurant model with its benefit strategy parameters."""

    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True)
    merchant_number = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    benefit_type = Column(String, nullable=False)
    benefit_percentage = Column(String, nullable=False)

    # Relationships
    overrides = relationship(
        "RestaurantBenefitOverride",
        back_populates="restaurant",
        cascade="all, delete-orphan",
        order_by="RestaurantBenefitOverride.id",
    )


class RestaurantBenefitOverride(Base):
    """Per-account benefit rate for a restaurant."""

    __tablename__ = "restaurant_benefit_overrides"

    id = Column(Integer, primary_key=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"), nullable=False)
    account_number = Column(String, nullable=False)
    benefit_percentage = Column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("restaurant_id", "account_number", name="uq_restaurant_override_account"),
    )

    # Relationships
    restaurant = relationship("Restaurant", back_populates="overrides")


class Reward(Base):
    """Confirmed reward model. The row ID is the confirmation number."""

    __tablename__ = "rewards"

    id = Column(Integer, primary_key=True)
    account_number = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    dining_amount = Column(Numeric(12, 2), nullable=False)
    dining_merchant_number = Column(String, nullable=False)
    dining_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
