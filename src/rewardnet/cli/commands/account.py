"""Account management commands."""

import click

from rewardnet.cli.error_handling import handle_domain_error
from rewardnet.domain.account import AccountService
from rewardnet.domain.errors import DomainError
from rewardnet.utils.amount_parser import parse_assignment, parse_percentage


@click.group()
def account_group():
    """Manage accounts and beneficiaries."""
    pass


@account_group.command("create")
@click.argument("number", metavar="ACCOUNT_NUMBER")
@click.argument("name", metavar="NAME")
@click.option("--card", "credit_card", required=True, help="Credit card number linked to the account")
@click.pass_context
def create_account(ctx, number: str, name: str, credit_card: str):
    """Create a new account.

    Examples:
        rewardnet account create 123456789 "Keith and Keri Donald" --card 1234123412341234
    """
    service = AccountService(ctx.obj["db"])

    try:
        account_id = service.create_account(number=number, name=name, credit_card_number=credit_card)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{number}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 70)
    for acc in accounts:
        click.echo(
            f"{acc.number:12s} | {acc.name:24s} | Card: {acc.credit_card_number} "
            f"| Beneficiaries: {len(acc.beneficiaries)}"
        )


@account_group.command("show")
@click.argument("number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def show_account(ctx, number: str):
    """Show an account with its beneficiaries and savings."""
    service = AccountService(ctx.obj["db"])

    try:
        account = service.require_account(number)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Account {account.number}: {account.name}")
    click.echo(f"Card: {account.credit_card_number}")
    if not account.beneficiaries:
        click.echo("No beneficiaries.")
        return

    click.echo("\nBeneficiaries:")
    click.echo("-" * 50)
    for beneficiary in account.beneficiaries:
        click.echo(
            f"{beneficiary.name:20s} | {str(beneficiary.allocation_percentage):>8s} "
            f"| Savings: {beneficiary.savings}"
        )
    if not account.is_valid():
        click.echo("\nWarning: allocations do not total 100%.", err=True)


@account_group.command("add-beneficiary")
@click.argument("number", metavar="ACCOUNT_NUMBER")
@click.argument("name", metavar="NAME")
@click.option("--percentage", default="0%", show_default=True, help="Share of contributions (e.g. 50%, 1/3)")
@click.pass_context
def add_beneficiary(ctx, number: str, name: str, percentage: str):
    """Add a beneficiary to an account.

    Examples:
        rewardnet account add-beneficiary 123456789 Annabelle --percentage 50%
    """
    service = AccountService(ctx.obj["db"])

    try:
        share = parse_percentage(percentage)
        service.add_beneficiary(account_number=number, name=name, percentage=share)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added beneficiary '{name}' ({share}) to account '{number}'")


@account_group.command("allocate")
@click.argument("number", metavar="ACCOUNT_NUMBER")
@click.argument("allocations", metavar="NAME=PERCENT...", nargs=-1, required=True)
@click.pass_context
def allocate(ctx, number: str, allocations: tuple[str, ...]):
    """Set the allocation table of an account.

    Every beneficiary must be listed and the shares must total 100%.

    Examples:
        rewardnet account allocate 123456789 Annabelle=50% Corgan=50%
        rewardnet account allocate 123456789 A=1/3 B=1/3 C=1/3
    """
    service = AccountService(ctx.obj["db"])

    try:
        table = dict(parse_assignment(a) for a in allocations)
        service.set_allocations(number, table)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated allocations for account '{number}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
