"""Work hours commands."""

from datetime import datetime, timedelta

import click

from ridelog.cli.error_handling import handle_domain_error
from ridelog.cli.parsing import (
    parse_date_or_exit,
    parse_id_or_exit,
    resolve_range_or_exit,
)
from ridelog.domain.errors import DomainError, StorageError
from ridelog.domain.work_hours import WorkHoursService
from ridelog.utils.date_parser import parse_time_of_day


def _parse_shift_time(
    ctx: click.Context, value: str, work_date: datetime, label: str
) -> tuple[datetime, bool]:
    """Parse a shift bound; a bare time of day falls on the work date.

    Returns:
        The moment, and whether it was given as a bare time
    """
    try:
        time_of_day = parse_time_of_day(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
    if time_of_day is None:
        return parse_date_or_exit(ctx, value, label), False
    return datetime.combine(work_date.date(), time_of_day), True


@click.group()
def hours_group():
    """Record and review work hours."""
    pass


@hours_group.command("add")
@click.option("--date", "date_str", default="today", show_default=True, help="Work date")
@click.option("--hours", "total_hours", type=float, default=0.0, help="Hours worked (ignored when --start and --end are given)")
@click.option("--start", "start_str", help="Shift start (e.g., '08:00' or '2024-03-10 08:00')")
@click.option("--end", "end_str", help="Shift end; a bare time before --start falls on the next day")
@click.option("--notes", help="Notes")
@click.pass_context
def add_work_hours(
    ctx,
    date_str: str,
    total_hours: float,
    start_str: str | None,
    end_str: str | None,
    notes: str | None,
):
    """Add a work hours entry.

    Examples:
        ridelog hours add --hours 6.5
        ridelog hours add --start "2024-03-10 08:00" --end "2024-03-10 16:30"
        ridelog hours add --date 2024-03-10 --start 22:00 --end 02:00
    """
    service = WorkHoursService(ctx.obj["db"])
    work_date = parse_date_or_exit(ctx, date_str)
    start_time = end_time = None
    if start_str:
        start_time, _ = _parse_shift_time(ctx, start_str, work_date, "start time")
    if end_str:
        end_time, bare_end = _parse_shift_time(ctx, end_str, work_date, "end time")
        if bare_end and start_time is not None and end_time < start_time:
            end_time += timedelta(days=1)

    try:
        work_hours_id = service.create_work_hours(
            date=work_date,
            total_hours=total_hours,
            start_time=start_time,
            end_time=end_time,
            notes=notes,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    work_hours = service.require_work_hours(work_hours_id)
    click.echo(f"Created work hours {work_hours_id}")
    click.echo(f"  Date: {work_hours.date:%Y-%m-%d}")
    click.echo(f"  Hours: {work_hours.formatted_total_hours()}")


@hours_group.command("list")
@click.option("--start-date", help="Start date (inclusive)")
@click.option("--end-date", help="End date (inclusive)")
@click.pass_context
def list_work_hours(ctx, start_date: str | None, end_date: str | None):
    """List work hours entries."""
    service = WorkHoursService(ctx.obj["db"])
    start, end = resolve_range_or_exit(ctx, start_date, end_date)

    try:
        entries = service.list_work_hours(start=start, end=end)
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No work hours found.")
        return

    click.echo(f"\nFound {len(entries)} work hours entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 90)
    click.echo(f"{'ID':<37} {'Date':<11} {'Hours':>9} {'Notes':<30}")
    click.echo("-" * 90)
    for entry in entries:
        notes = (entry.notes or "")[:30]
        click.echo(
            f"{str(entry.id):<37} {entry.date:%Y-%m-%d} "
            f"{entry.formatted_total_hours():>9} {notes:<30}"
        )


@hours_group.command("delete")
@click.argument("work_hours_id", metavar="WORK_HOURS_ID")
@click.pass_context
def delete_work_hours(ctx, work_hours_id: str):
    """Delete a work hours entry."""
    service = WorkHoursService(ctx.obj["db"])
    record_id = parse_id_or_exit(ctx, work_hours_id)

    try:
        service.delete_work_hours(record_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted work hours {record_id}")


def register_commands(cli):
    """Register work hours commands with main CLI."""
    cli.add_command(hours_group, name="hours")
