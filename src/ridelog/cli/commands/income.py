"""Income commands."""

import click

from ridelog.cli.error_handling import handle_domain_error
from ridelog.cli.parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_id_or_exit,
    resolve_range_or_exit,
)
from ridelog.domain.entities import IncomeSource
from ridelog.domain.errors import DomainError, StorageError
from ridelog.domain.income import IncomeService

SOURCE_CHOICE = click.Choice([s.value for s in IncomeSource], case_sensitive=False)


@click.group()
def income_group():
    """Record and review income."""
    pass


@income_group.command("add")
@click.option("--date", "date_str", default="now", show_default=True, help="Income date (YYYY-MM-DD [HH:MM] or relative like 'yesterday')")
@click.option("--amount", required=True, help="Fare amount, excluding tips")
@click.option("--tip", default="0", show_default=True, help="Tip amount")
@click.option("--source", type=SOURCE_CHOICE, default=IncomeSource.UBER.value, show_default=True, help="Income source")
@click.option("--notes", help="Notes")
@click.pass_context
def add_income(ctx, date_str: str, amount: str, tip: str, source: str, notes: str | None):
    """Add an income entry.

    Examples:
        ridelog income add --amount 120 --tip 15 --source bolt
        ridelog income add --date "2024-03-10 18:30" --amount 80 --source cash
    """
    service = IncomeService(ctx.obj["db"])
    income_date = parse_date_or_exit(ctx, date_str)
    income_amount = parse_amount_or_exit(ctx, amount)
    tip_amount = parse_amount_or_exit(ctx, tip, "tip")

    try:
        income_id = service.create_income(
            date=income_date,
            amount=income_amount,
            tip_amount=tip_amount,
            source=IncomeSource(source.lower()),
            notes=notes,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    income = service.require_income(income_id)
    click.echo(f"Created income {income_id}")
    click.echo(f"  Date: {income.date:%Y-%m-%d %H:%M}")
    click.echo(f"  Source: {income.source.display_name}")
    click.echo(f"  Total: ${income.total_amount():,.2f} (tip ${income.tip_amount:,.2f})")


@income_group.command("list")
@click.option("--start-date", help="Start date (inclusive)")
@click.option("--end-date", help="End date (inclusive)")
@click.option("--source", type=SOURCE_CHOICE, help="Only show this source")
@click.pass_context
def list_income(ctx, start_date: str | None, end_date: str | None, source: str | None):
    """List income entries."""
    service = IncomeService(ctx.obj["db"])
    start, end = resolve_range_or_exit(ctx, start_date, end_date)

    try:
        entries = service.list_income(
            start=start,
            end=end,
            source=IncomeSource(source.lower()) if source else None,
        )
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No income found.")
        return

    click.echo(f"\nFound {len(entries)} income entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(f"{'ID':<37} {'Date':<17} {'Source':<10} {'Amount':>10} {'Tip':>10} {'Total':>10}")
    click.echo("-" * 100)
    for entry in entries:
        click.echo(
            f"{str(entry.id):<37} {entry.date:%Y-%m-%d %H:%M} {entry.source.display_name:<10} "
            f"{entry.amount:>10,.2f} {entry.tip_amount:>10,.2f} {entry.total_amount():>10,.2f}"
        )


@income_group.command("delete")
@click.argument("income_id", metavar="INCOME_ID")
@click.pass_context
def delete_income(ctx, income_id: str):
    """Delete an income entry."""
    service = IncomeService(ctx.obj["db"])
    record_id = parse_id_or_exit(ctx, income_id)

    try:
        service.delete_income(record_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted income {record_id}")


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
