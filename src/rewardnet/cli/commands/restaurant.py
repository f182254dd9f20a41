"""Restaurant management commands."""

import click

from rewardnet.cli.error_handling import handle_domain_error
from rewardnet.domain.benefit import (
    BENEFIT_TYPES,
    FIXED,
    FixedPercentageWithOverride,
    NoBenefit,
)
from rewardnet.domain.errors import DomainError
from rewardnet.domain.restaurant import RestaurantService
from rewardnet.utils.amount_parser import parse_assignment, parse_percentage


@click.group()
def restaurant_group():
    """Manage restaurants."""
    pass


@restaurant_group.command("create")
@click.argument("number", metavar="MERCHANT_NUMBER")
@click.argument("name", metavar="NAME")
@click.option("--rate", help="Benefit rate (e.g. 8%); required unless --type none")
@click.option(
    "--type",
    "benefit_type",
    type=click.Choice(BENEFIT_TYPES),
    default=FIXED,
    show_default=True,
    help="Benefit strategy",
)
@click.option(
    "--override",
    "overrides",
    multiple=True,
    metavar="ACCOUNT=PERCENT",
    help="Per-account rate (with --type override); repeatable",
)
@click.pass_context
def create_restaurant(ctx, number: str, name: str, rate: str | None, benefit_type: str, overrides):
    """Create a restaurant.

    Examples:
        rewardnet restaurant create 1234567890 "Apple Bees" --rate 8%
        rewardnet restaurant create 1234567891 "Olive Garden" --rate 5% --type override --override 123456789=10%
        rewardnet restaurant create 1234567892 "Snack Shack" --type none
    """
    service = RestaurantService(ctx.obj["db"])

    try:
        parsed_rate = parse_percentage(rate) if rate is not None else None
        parsed_overrides = dict(parse_assignment(o) for o in overrides)
        restaurant_id = service.create_restaurant(
            number=number,
            name=name,
            benefit_type=benefit_type,
            rate=parsed_rate,
            overrides=parsed_overrides,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created restaurant '{name}' (ID: {restaurant_id})")


def describe_benefit(benefit) -> str:
    """Return a short human-readable description of a benefit strategy."""
    if isinstance(benefit, NoBenefit):
        return "no benefit"
    if isinstance(benefit, FixedPercentageWithOverride) and benefit.overrides:
        overrides = ", ".join(f"{acct}: {rate}" for acct, rate in benefit.overrides)
        return f"{benefit.rate} (overrides: {overrides})"
    return str(benefit.rate)


@restaurant_group.command("list")
@click.pass_context
def list_restaurants(ctx):
    """List all restaurants."""
    service = RestaurantService(ctx.obj["db"])

    restaurants = service.list_restaurants()
    if not restaurants:
        click.echo("No restaurants found.")
        return

    click.echo("\nRestaurants:")
    click.echo("-" * 70)
    for r in restaurants:
        click.echo(f"{r.number:12s} | {r.name:24s} | Benefit: {describe_benefit(r.benefit)}")


def register_commands(cli):
    """Register restaurant commands with main CLI."""
    cli.add_command(restaurant_group, name="restaurant")
