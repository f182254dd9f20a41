"""CLI helpers for date range resolution."""

from datetime import date

import click

from rewardnet.domain.errors import ValidationError
from rewardnet.utils.date_parser import get_date_range, parse_date


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
) -> tuple[date | None, date | None]:
    """Resolve a date range from --period or --start/--end, exiting on bad input."""
    if period and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --start or --end.", err=True)
        ctx.exit(1)

    try:
        if period:
            return get_date_range(period)
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    return (start, end)
