"""Main CLI entry point."""

import logging

import click
from ridelog.cli.error_handling import handle_domain_error
from ridelog.database.factories import DB_PATH_ENV, create_sqlite_database
from ridelog.domain.errors import StorageError

# Import and register all commands at module level
from ridelog.cli.commands import (
    dashboard,
    expense,
    hours,
    income,
    mileage,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Ridelog - income, expense, mileage and work hours tracker for drivers.

    Record what you earn, spend, drive and work, and review it per day,
    week, month, quarter or year.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path)
        except StorageError as e:
            handle_domain_error(ctx, e)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
dashboard.register_commands(cli)
expense.register_commands(cli)
income.register_commands(cli)
mileage.register_commands(cli)
hours.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
