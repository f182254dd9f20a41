"""Account domain service."""

from typing import Mapping, Optional

from rewardnet.database.base import Database
from rewardnet.domain import errors
from rewardnet.domain.entities import Account as AccountEntity
from rewardnet.domain.errors import ConflictError, NotFoundError, ValidationError
from rewardnet.domain.money import Percentage, format_fraction, total_percentage


class AccountService:
    """Service for managing accounts and their beneficiaries."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, number: str, name: str, credit_card_number: str) -> int:
        """Create a new account.

        Args:
            number: Account number
            name: Account holder name
            credit_card_number: Card whose dinings earn rewards for this account

        Returns:
            Account ID

        Raises:
            ValidationError: If a field is blank
            ConflictError: If the account number or card is already in use
        """
        for label, value in (("Account number", number), ("Name", name), ("Credit card", credit_card_number)):
            if not value or not value.strip():
                raise ValidationError(f"{label} cannot be empty")

        if self.db.get_account(number) is not None:
            raise ConflictError(f"Account '{number}' already exists")

        existing = self.db.find_by_credit_card(credit_card_number)
        if existing is not None:
            raise ConflictError(
                f"Credit card '{credit_card_number}' is already linked to account '{existing.number}'"
            )

        return self.db.create_account(number=number, name=name, credit_card_number=credit_card_number)

    def get_account(self, number: str) -> Optional[AccountEntity]:
        """Get account by number.

        Args:
            number: Account number

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(number)

    def require_account(self, number: str) -> AccountEntity:
        """Get account by number or raise NotFoundError."""
        account = self.db.get_account(number)
        if account is None:
            raise NotFoundError(errors.account_number_not_found(number))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def add_beneficiary(
        self, account_number: str, name: str, percentage: Optional[Percentage] = None
    ) -> int:
        """Add a beneficiary to an account.

        The account's shares may total less than 100% while beneficiaries are
        being added, but never more.

        Args:
            account_number: Account number
            name: Beneficiary name, unique within the account
            percentage: Share of future contributions (0% if omitted)

        Returns:
            Beneficiary ID

        Raises:
            NotFoundError: If account not found
            ValidationError: If the name is taken or shares would exceed 100%
        """
        account = self.require_account(account_number)
        if not name or not name.strip():
            raise ValidationError("Beneficiary name cannot be empty")

        # Validates the name against existing beneficiaries
        beneficiary = account.add_beneficiary(name, percentage)

        total = account.total_allocation()
        if total > 1:
            raise ValidationError(
                f"Adding '{name}' would bring allocations for account '{account_number}' "
                f"to {format_fraction(total)}"
            )

        return self.db.add_beneficiary(
            account_number=account_number,
            name=name,
            percentage=beneficiary.allocation_percentage,
        )

    def set_allocations(self, account_number: str, allocations: Mapping[str, Percentage]) -> None:
        """Replace the allocation table of an account.

        Every beneficiary must be given a share, and the shares must total
        exactly 100%.

        Raises:
            NotFoundError: If account not found
            ValidationError: If beneficiaries are missing, unknown or the
                shares do not total 100%
        """
        account = self.require_account(account_number)
        known = {b.name for b in account.beneficiaries}

        unknown = sorted(set(allocations) - known)
        if unknown:
            raise ValidationError(
                f"Unknown beneficiaries for account '{account_number}': {', '.join(unknown)}"
            )
        missing = sorted(known - set(allocations))
        if missing:
            raise ValidationError(
                f"Missing allocations for account '{account_number}': {', '.join(missing)}"
            )

        total = total_percentage(list(allocations.values()))
        if total != 1:
            raise ValidationError(errors.allocations_do_not_total(account_number, format_fraction(total)))

        self.db.update_beneficiary_allocations(account_number, allocations)
