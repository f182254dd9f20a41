"""Main CLI entry point."""

import click

from rewardnet.database.factories import create_database
from rewardnet.log import setup_logging, teardown_logging

# Import and register all commands at module level
from rewardnet.cli.commands import account, restaurant, reward


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides REWARDNET_DB_PATH environment variable)",
    envvar="REWARDNET_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="REWARDNET_DATABASE_URL",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="REWARDNET_LOG_LEVEL",
    help="Log level for JSON logs written to stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None, log_level: str):
    """Rewardnet - Dining rewards network.

    Reward accounts for dining at participating restaurants and split each
    reward among the account's beneficiaries.
    """
    ctx.ensure_object(dict)
    handler = setup_logging(log_level)
    ctx.call_on_close(lambda: teardown_logging(handler))

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
restaurant.register_commands(cli)
reward.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
