"""Mileage commands."""

import click

from ridelog.cli.error_handling import handle_domain_error
from ridelog.cli.parsing import (
    parse_date_or_exit,
    parse_id_or_exit,
    resolve_range_or_exit,
)
from ridelog.domain.errors import DomainError, StorageError
from ridelog.domain.mileage import MileageService


@click.group()
def mileage_group():
    """Record and review mileage."""
    pass


@mileage_group.command("add")
@click.option("--date", "date_str", default="today", show_default=True, help="Trip date")
@click.option("--distance", type=float, default=0.0, help="Distance driven (ignored when both odometer readings are given)")
@click.option("--start", "start_mileage", type=float, help="Odometer reading at start")
@click.option("--end", "end_mileage", type=float, help="Odometer reading at end")
@click.option("--purpose", help="Trip purpose")
@click.option("--deductible/--not-deductible", default=True, show_default=True, help="Whether the trip is tax deductible")
@click.option("--percentage", type=int, default=100, show_default=True, help="Tax deductible percentage (0-100)")
@click.pass_context
def add_mileage(
    ctx,
    date_str: str,
    distance: float,
    start_mileage: float | None,
    end_mileage: float | None,
    purpose: str | None,
    deductible: bool,
    percentage: int,
):
    """Add a mileage entry.

    Examples:
        ridelog mileage add --distance 84.5
        ridelog mileage add --start 52010 --end 52190 --purpose "Airport runs"
    """
    service = MileageService(ctx.obj["db"])
    trip_date = parse_date_or_exit(ctx, date_str)

    try:
        mileage_id = service.create_mileage(
            date=trip_date,
            distance=distance,
            start_mileage=start_mileage,
            end_mileage=end_mileage,
            purpose=purpose,
            is_tax_deductible=deductible,
            tax_deductible_percentage=percentage,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    mileage = service.require_mileage(mileage_id)
    click.echo(f"Created mileage {mileage_id}")
    click.echo(f"  Date: {mileage.date:%Y-%m-%d}")
    click.echo(f"  Distance: {mileage.distance:,.1f}")
    click.echo(f"  Tax deductible: {mileage.tax_deductible_mileage():,.1f}")
    if purpose:
        click.echo(f"  Purpose: {purpose}")


@mileage_group.command("list")
@click.option("--start-date", help="Start date (inclusive)")
@click.option("--end-date", help="End date (inclusive)")
@click.pass_context
def list_mileage(ctx, start_date: str | None, end_date: str | None):
    """List mileage entries."""
    service = MileageService(ctx.obj["db"])
    start, end = resolve_range_or_exit(ctx, start_date, end_date)

    try:
        entries = service.list_mileage(start=start, end=end)
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No mileage found.")
        return

    click.echo(f"\nFound {len(entries)} mileage entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 100)
    click.echo(f"{'ID':<37} {'Date':<11} {'Distance':>10} {'Deductible':>11} {'Purpose':<28}")
    click.echo("-" * 100)
    for entry in entries:
        purpose = (entry.purpose or "")[:28]
        click.echo(
            f"{str(entry.id):<37} {entry.date:%Y-%m-%d} {entry.distance:>10,.1f} "
            f"{entry.tax_deductible_mileage():>11,.1f} {purpose:<28}"
        )


@mileage_group.command("delete")
@click.argument("mileage_id", metavar="MILEAGE_ID")
@click.pass_context
def delete_mileage(ctx, mileage_id: str):
    """Delete a mileage entry."""
    service = MileageService(ctx.obj["db"])
    record_id = parse_id_or_exit(ctx, mileage_id)

    try:
        service.delete_mileage(record_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted mileage {record_id}")


def register_commands(cli):
    """Register mileage commands with main CLI."""
    cli.add_command(mileage_group, name="mileage")
