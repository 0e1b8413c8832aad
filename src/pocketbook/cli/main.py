"""Main CLI entry point."""

import logging

import click
from pocketbook.database.factories import create_sqlite_database

# Import and register all commands at module level
from pocketbook.cli.commands import (
    account,
    income,
    expense,
    savings,
    transaction,
    dashboard,
    settings,
    admin,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides POCKETBOOK_DB_PATH environment variable)",
    envvar="POCKETBOOK_DB_PATH",
)
@click.option(
    "--user",
    "user_email",
    help="Email of the acting user (overrides POCKETBOOK_USER environment variable)",
    envvar="POCKETBOOK_USER",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="POCKETBOOK_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_email: str | None, log_level: str):
    """Pocketbook - Personal budget tracker.

    Record income, expenses and savings goals, and see where your money goes
    on a dashboard with a weekly, monthly, 6-month or yearly overview.
    """
    ctx.ensure_object(dict)
    ctx.obj["user_email"] = user_email

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        logging.basicConfig(
            level=log_level.upper(),
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
income.register_commands(cli)
expense.register_commands(cli)
savings.register_commands(cli)
transaction.register_commands(cli)
dashboard.register_commands(cli)
settings.register_commands(cli)
admin.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
