"""Expense commands."""

import click

from ridelog.cli.error_handling import handle_domain_error
from ridelog.cli.parsing import (
    parse_amount_or_exit,
    parse_date_or_exit,
    parse_id_or_exit,
    resolve_range_or_exit,
)
from ridelog.domain.dashboard import DashboardService
from ridelog.domain.entities import ExpenseCategory
from ridelog.domain.errors import DomainError, StorageError
from ridelog.domain.expense import ExpenseService
from ridelog.domain.period import Period

CATEGORY_CHOICE = click.Choice([c.value for c in ExpenseCategory], case_sensitive=False)


@click.group()
def expense_group():
    """Record and review expenses."""
    pass


@expense_group.command("add")
@click.option("--date", "date_str", default="now", show_default=True, help="Expense date (YYYY-MM-DD [HH:MM] or relative like 'yesterday')")
@click.option("--amount", required=True, help="Amount paid (e.g., 45.20)")
@click.option("--category", type=CATEGORY_CHOICE, default=ExpenseCategory.OTHER.value, show_default=True, help="Expense category")
@click.option("--description", help="Expense description")
@click.option("--deductible/--not-deductible", default=None, help="Override the category's default tax deductibility")
@click.option("--percentage", type=int, default=100, show_default=True, help="Tax deductible percentage (0-100)")
@click.pass_context
def add_expense(
    ctx,
    date_str: str,
    amount: str,
    category: str,
    description: str | None,
    deductible: bool | None,
    percentage: int,
):
    """Add an expense.

    Examples:
        ridelog expense add --amount 52.40 --category fuel
        ridelog expense add --date 2024-03-10 --amount 30 --category parking --deductible
    """
    service = ExpenseService(ctx.obj["db"])
    expense_date = parse_date_or_exit(ctx, date_str)
    expense_amount = parse_amount_or_exit(ctx, amount)
    expense_category = ExpenseCategory(category.lower())

    try:
        expense_id = service.create_expense(
            date=expense_date,
            amount=expense_amount,
            category=expense_category,
            description=description,
            is_tax_deductible=deductible,
            tax_deductible_percentage=percentage,
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    expense = service.require_expense(expense_id)
    click.echo(f"Created expense {expense_id}")
    click.echo(f"  Date: {expense.date:%Y-%m-%d %H:%M}")
    click.echo(f"  Amount: ${expense.amount:,.2f}")
    click.echo(f"  Category: {expense.category.display_name}")
    if expense.is_tax_deductible:
        click.echo(f"  Tax deductible: ${expense.tax_deductible_amount():,.2f} ({expense.tax_deductible_percentage}%)")
    if description:
        click.echo(f"  Description: {description}")


@expense_group.command("list")
@click.option("--start-date", help="Start date (inclusive)")
@click.option("--end-date", help="End date (inclusive)")
@click.option("--category", type=CATEGORY_CHOICE, help="Only show this category")
@click.pass_context
def list_expenses(ctx, start_date: str | None, end_date: str | None, category: str | None):
    """List expenses."""
    service = ExpenseService(ctx.obj["db"])
    start, end = resolve_range_or_exit(ctx, start_date, end_date)

    try:
        expenses = service.list_expenses(
            start=start,
            end=end,
            category=ExpenseCategory(category.lower()) if category else None,
        )
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 110)
    click.echo(f"{'ID':<37} {'Date':<17} {'Amount':>12} {'Category':<12} {'Deductible':>12} {'Description':<20}")
    click.echo("-" * 110)
    for expense in expenses:
        amount_str = f"${expense.amount:,.2f}"
        deductible_str = f"${expense.tax_deductible_amount():,.2f}"
        description = (expense.description or "")[:20]
        click.echo(
            f"{str(expense.id):<37} {expense.date:%Y-%m-%d %H:%M} {amount_str:>12} "
            f"{expense.category.display_name:<12} {deductible_str:>12} {description:<20}"
        )


@expense_group.command("summary")
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period], case_sensitive=False),
    default=Period.MONTH.value,
    show_default=True,
    help="Period granularity",
)
@click.option("--date", "reference", help="Any date inside the period; defaults to now")
@click.pass_context
def summarize_expenses(ctx, period: str, reference: str | None):
    """Show spending per category for a period.

    Examples:
        ridelog expense summary
        ridelog expense summary --period year --date "last year"
    """
    selected = Period.parse(period)
    reference_date = parse_date_or_exit(ctx, reference) if reference else None

    try:
        analytics = DashboardService(ctx.obj["db"]).get_expense_analytics(
            selected, reference_date
        )
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not analytics.expenses_by_category:
        click.echo("No expenses found.")
        return

    click.echo(f"\n{'Category':<16} {'Amount':>14}")
    click.echo("-" * 31)
    for category, amount in analytics.top_categories:
        click.echo(f"{category.display_name:<16} {f'${amount:,.2f}':>14}")
    click.echo("-" * 31)
    click.echo(f"{'Total':<16} {f'${analytics.total_expense:,.2f}':>14}")
    click.echo(
        f"{'Tax deductible':<16} {f'${analytics.total_tax_deductible:,.2f}':>14} "
        f"({analytics.tax_deductible_percentage:.1f}%)"
    )


@expense_group.command("delete")
@click.argument("expense_id", metavar="EXPENSE_ID")
@click.pass_context
def delete_expense(ctx, expense_id: str):
    """Delete an expense."""
    service = ExpenseService(ctx.obj["db"])
    record_id = parse_id_or_exit(ctx, expense_id)

    try:
        service.delete_expense(record_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {record_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
