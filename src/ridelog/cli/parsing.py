"""CLI helpers that parse option values or exit with an error."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

import click

from ridelog.domain.period import Period
from ridelog.utils.amount_parser import parse_amount
from ridelog.utils.date_parser import parse_date


def parse_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> datetime:
    """Parse a date option, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str, label: str = "amount") -> Decimal:
    """Parse an amount option, or exit with a CLI error."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_id_or_exit(ctx: click.Context, value: str) -> UUID:
    """Parse a record ID argument, or exit with a CLI error."""
    try:
        return UUID(value)
    except ValueError:
        click.echo(f"Error: Invalid ID '{value}'", err=True)
        ctx.exit(1)


def resolve_range_or_exit(
    ctx: click.Context, start_date: str | None, end_date: str | None
) -> tuple[datetime | None, datetime | None]:
    """Resolve optional --start-date/--end-date options into a half-open range.

    The end date is inclusive on the command line, so the returned end is
    midnight after it.
    """
    start = parse_date_or_exit(ctx, start_date, "start date") if start_date else None
    end = None
    if end_date:
        end_day = parse_date_or_exit(ctx, end_date, "end date")
        end = Period.DAY.date_range(end_day).end
    return start, end
