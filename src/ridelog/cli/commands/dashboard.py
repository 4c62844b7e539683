"""Dashboard command."""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import click

from ridelog.cli.error_handling import handle_domain_error
from ridelog.cli.parsing import parse_date_or_exit
from ridelog.domain.dashboard import DashboardService
from ridelog.domain.entities import DashboardData
from ridelog.domain.errors import StorageError
from ridelog.domain.period import Period

# Number of record queries a dashboard needs
DASHBOARD_QUERIES = 6


def _format_change(change: Optional[float]) -> str:
    if change is None:
        return "n/a"
    return f"{change:+.1f}%"


def _display_dashboard(data: DashboardData) -> None:
    summary = data.summary
    metrics = data.metrics
    chart = data.chart_data

    click.echo(
        f"\n{data.period.display_name}: "
        f"{data.date_range.start:%Y-%m-%d} to {data.date_range.end:%Y-%m-%d} (exclusive)"
    )
    click.echo("=" * 60)
    click.echo(
        f"{'Income':<24} {f'${summary.total_income:,.2f}':>16} "
        f"{_format_change(summary.income_change_percent):>12}"
    )
    click.echo(
        f"{'Expenses':<24} {f'${summary.total_expense:,.2f}':>16} "
        f"{_format_change(summary.expense_change_percent):>12}"
    )
    click.echo(
        f"{'Net income':<24} {f'${summary.net_income:,.2f}':>16} "
        f"{_format_change(summary.net_income_change_percent):>12}"
    )
    click.echo("-" * 60)
    click.echo(f"{'Hourly rate':<24} {f'${metrics.hourly_rate:,.2f}':>16}")
    click.echo(f"{'Cost per mile':<24} {f'${metrics.cost_per_mile:,.2f}':>16}")
    click.echo(f"{'Mileage':<24} {metrics.total_mileage:>16,.1f}")
    click.echo(f"{'Hours worked':<24} {metrics.total_work_hours:>16,.2f}")
    click.echo(f"{'Tax deductible':<24} {f'${metrics.total_tax_deductible:,.2f}':>16}")
    click.echo("-" * 60)
    click.echo(f"{'':<10} {'Income':>14} {'Expenses':>14}")
    for label, income, expense in zip(chart.labels, chart.income_data, chart.expense_data):
        click.echo(f"{label:<10} {income:>14,.2f} {expense:>14,.2f}")


@click.command("dashboard")
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period], case_sensitive=False),
    default=Period.MONTH.value,
    show_default=True,
    help="Period granularity",
)
@click.option(
    "--date",
    "reference",
    help="Any date inside the period (YYYY-MM-DD or relative like 'last month'); defaults to now",
)
@click.option(
    "--parallel", is_flag=True, help="Run the record queries on a thread pool"
)
@click.pass_context
def dashboard(ctx, period: str, reference: str | None, parallel: bool):
    """Show income, expenses and metrics for a period.

    Examples:
        ridelog dashboard
        ridelog dashboard --period week
        ridelog dashboard --period quarter --date 2024-05-01
    """
    db = ctx.obj["db"]
    selected = Period.parse(period)
    reference_date = parse_date_or_exit(ctx, reference) if reference else None

    try:
        if parallel:
            with ThreadPoolExecutor(max_workers=DASHBOARD_QUERIES) as executor:
                data = DashboardService(db, executor).compute_dashboard(
                    selected, reference_date
                )
        else:
            data = DashboardService(db).compute_dashboard(selected, reference_date)
    except StorageError as e:
        handle_domain_error(ctx, e)

    _display_dashboard(data)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
