"""Dashboard and overview chart commands."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.commands.transaction import format_transaction
from pocketbook.cli.input_parsing import format_currency, parse_date_or_exit
from pocketbook.domain.dashboard import DashboardService
from pocketbook.domain.entities import ChartStatus, OverviewChart, Period
from pocketbook.domain.expense import ExpenseService
from pocketbook.domain.income import IncomeService
from pocketbook.domain.overview import LedgerProvider, OverviewChartLoader
from pocketbook.domain.transaction import TransactionService

PERIOD_CHOICES = [p.value for p in Period]


def print_chart(chart: OverviewChart) -> None:
    click.echo(f"\nOverview ({chart.period.value}, reference date {chart.reference_date}):")
    click.echo("-" * 70)
    click.echo(f"{'Period':<10s} {'Income':>15s} {'Expenses':>15s} {'Balance':>15s}")
    for bucket in chart.buckets:
        click.echo(
            f"{bucket.name:<10s} "
            f"{format_currency(bucket.income_total):>15s} "
            f"{format_currency(bucket.expense_total):>15s} "
            f"{format_currency(bucket.balance):>15s}"
        )
    click.echo("-" * 70)
    click.echo(
        f"Y-axis: {format_currency(chart.y_axis_min)} to {format_currency(chart.y_axis_max)}"
    )
    click.echo(f"Status: {chart.status.value}")
    if chart.status == ChartStatus.PLACEHOLDER:
        click.echo("Showing sample data. Add income or expenses to see your own numbers.")


@click.command("dashboard")
@click.pass_context
def show_dashboard(ctx):
    """Show summary cards and recent transactions."""
    auth = require_auth_or_exit(ctx)
    db = ctx.obj["db"]

    summary = DashboardService(db, auth).get_summary()
    recent = TransactionService(db, auth).recent_transactions()

    click.echo(f"\nWelcome back, {summary.display_name}")
    click.echo("=" * 70)
    click.echo(f"Total income:    {format_currency(summary.total_income):>15s}  ({summary.income_count} entries)")
    click.echo(f"Total expenses:  {format_currency(summary.total_expenses):>15s}  ({summary.expense_count} entries)")
    click.echo(f"Net savings:     {format_currency(summary.net_savings):>15s}")
    click.echo(
        f"Savings goals:   {format_currency(summary.total_saved)} of "
        f"{format_currency(summary.total_target)} ({summary.progress_percentage:.0f}%), "
        f"{summary.completed_goals}/{summary.goal_count} completed"
    )
    click.echo(f"Average progress: {summary.average_progress:.0f}%")
    if summary.closest_goal is not None:
        goal = summary.closest_goal
        click.echo(f"Closest goal:    {goal.name} ({goal.progress_percentage:.0f}%)")

    click.echo("\nRecent transactions:")
    click.echo("-" * 70)
    if not recent:
        click.echo("No transactions yet.")
    for txn in recent:
        click.echo(format_transaction(txn))


@click.command("chart")
@click.option(
    "--period",
    type=click.Choice(PERIOD_CHOICES),
    default=Period.MONTHLY.value,
    show_default=True,
    help="Reporting period",
)
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Reference date (YYYY-MM-DD or relative like 'today', 'last month')",
)
@click.pass_context
def show_chart(ctx, period: str, date_str: str):
    """Show income and expenses bucketed over a period.

    Examples:
        pocketbook chart
        pocketbook chart --period weekly
        pocketbook chart --period yearly --date 2024-06-30
    """
    auth = require_auth_or_exit(ctx)
    db = ctx.obj["db"]
    reference_date = parse_date_or_exit(ctx, date_str)

    ledger = LedgerProvider(IncomeService(db, auth), ExpenseService(db, auth))
    chart = OverviewChartLoader(ledger).load(Period.parse(period), reference_date)
    print_chart(chart)


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(show_dashboard)
    cli.add_command(show_chart)
