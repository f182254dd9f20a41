"""Reward commands: reward a dining and browse reward history."""

import click

from rewardnet.cli.date_filters import resolve_cli_date_range
from rewardnet.cli.error_handling import handle_domain_error
from rewardnet.config import create_reward_network
from rewardnet.domain.entities import Dining
from rewardnet.domain.errors import DomainError
from rewardnet.domain.reward import RewardService
from rewardnet.utils.amount_parser import parse_amount
from rewardnet.utils.date_parser import PERIODS, parse_date


@click.group()
def reward_group():
    """Reward dinings and view reward history."""
    pass


@reward_group.command("dine")
@click.option("--amount", required=True, help="Dining amount (e.g. 100.00)")
@click.option("--card", "credit_card", required=True, help="Credit card number charged")
@click.option("--merchant", required=True, help="Restaurant merchant number")
@click.option(
    "--date",
    "dining_date",
    default="today",
    show_default=True,
    help="Dining date (YYYY-MM-DD or relative like 'yesterday')",
)
@click.pass_context
def dine(ctx, amount: str, credit_card: str, merchant: str, dining_date: str):
    """Reward the account that paid for a dining.

    Examples:
        rewardnet reward dine --amount 100.00 --card 1234123412341234 --merchant 1234567890
    """
    network = create_reward_network(ctx.obj["db"])

    try:
        dining = Dining.create(
            amount=parse_amount(amount),
            credit_card_number=credit_card,
            merchant_number=merchant,
            date=parse_date(dining_date),
        )
        confirmation = network.reward_account_for(dining)
    except DomainError as e:
        handle_domain_error(ctx, e)

    contribution = confirmation.account_contribution
    click.echo(f"Confirmation number: {confirmation.confirmation_number}")
    click.echo(f"  Account: {contribution.account_number}")
    click.echo(f"  Reward: {contribution.amount}")
    for distribution in contribution.distributions:
        click.echo(
            f"  {distribution.beneficiary_name:20s} {str(distribution.amount):>10s} "
            f"({distribution.percentage})  savings {distribution.total_savings}"
        )


@reward_group.command("history")
@click.option("--account", "account_number", help="Only rewards for this account number")
@click.option("--period", type=click.Choice(PERIODS), help="Named dining date range")
@click.option("--start", "start_date", help="Start dining date (inclusive)")
@click.option("--end", "end_date", help="End dining date (inclusive)")
@click.pass_context
def history(ctx, account_number: str | None, period: str | None, start_date: str | None, end_date: str | None):
    """List recorded rewards.

    Examples:
        rewardnet reward history --account 123456789 --period this-month
    """
    service = RewardService(ctx.obj["db"])
    start, end = resolve_cli_date_range(ctx, period=period, start_date=start_date, end_date=end_date)

    try:
        rewards = service.list_rewards(account_number=account_number, start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not rewards:
        click.echo("No rewards found.")
        return

    click.echo("\nRewards:")
    click.echo("-" * 70)
    for r in rewards:
        click.echo(
            f"#{r.confirmation_number:>6s} | {r.dining_date} | {r.account_number:12s} "
            f"| Dining: {str(r.dining_amount):>10s} at {r.dining_merchant_number} | Reward: {r.amount}"
        )


def register_commands(cli):
    """Register reward commands with main CLI."""
    cli.add_command(reward_group, name="reward")
