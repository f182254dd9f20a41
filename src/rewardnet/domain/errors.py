"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class IntegrityError(DomainError):
    """Stored or computed domain state violates an invariant."""


class StorageError(DomainError):
    """The storage layer failed to complete an operation."""


class InvalidAmountError(ValidationError):
    """Non-positive dining amount or malformed monetary input."""


class AccountNotFoundError(NotFoundError):
    """No account is linked to the given credit card."""


class RestaurantNotFoundError(NotFoundError):
    """No restaurant is registered under the given merchant number."""


class InvalidContributionError(IntegrityError):
    """A contribution cannot be allocated across the account's beneficiaries."""


class PersistenceError(StorageError):
    """Opaque failure surfaced from a repository."""


class ConcurrentModificationError(PersistenceError):
    """The account changed in storage after it was loaded."""


def account_not_found(credit_card_number: str) -> str:
    """Return message for a credit card with no linked account."""
    return f"No account found for credit card '{credit_card_number}'"


def account_number_not_found(account_number: str) -> str:
    """Return message for missing account by number."""
    return f"Account '{account_number}' not found"


def restaurant_not_found(merchant_number: str) -> str:
    """Return message for missing restaurant."""
    return f"No restaurant found for merchant number '{merchant_number}'"


def no_beneficiaries(account_number: str) -> str:
    """Return message for an account that has nowhere to send funds."""
    return f"Account '{account_number}' has no beneficiaries to allocate a contribution to"


def allocations_do_not_total(account_number: str, total: str) -> str:
    """Return message for beneficiary shares that do not add up to 100%."""
    return (
        f"Beneficiary allocations for account '{account_number}' total {total}, "
        "they must total 100%"
    )


def duplicate_beneficiary(name: str, account_number: str) -> str:
    """Return message for a beneficiary name already used on an account."""
    return f"Beneficiary '{name}' already exists for account '{account_number}'"


def account_modified_concurrently(account_number: str) -> str:
    """Return message for an account saved by someone else since it was loaded."""
    return f"Account '{account_number}' was modified by another update; reload it and retry"
