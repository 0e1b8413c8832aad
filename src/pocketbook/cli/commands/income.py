"""Income management commands."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.cli.input_parsing import format_currency, parse_amount_or_exit, parse_date_or_exit
from pocketbook.domain.errors import DomainError
from pocketbook.domain.income import IncomeService


@click.group()
def income_group():
    """Manage income entries."""
    pass


@income_group.command("add")
@click.option("--amount", required=True, help="Amount received (e.g., 1500 or 1,500.00)")
@click.option("--source", required=True, help="Where the money came from")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Date received (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_income(ctx, amount: str, source: str, date_str: str):
    """Record an income entry.

    Examples:
        pocketbook income add --amount 2500 --source "Salary" --date 2024-05-01
        pocketbook income add --amount 120.50 --source "Freelance"
    """
    auth = require_auth_or_exit(ctx)
    service = IncomeService(ctx.obj["db"], auth)

    income_amount = parse_amount_or_exit(ctx, amount)
    income_date = parse_date_or_exit(ctx, date_str)

    try:
        income_id = service.add_income(amount=income_amount, source=source, date=income_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added income {income_id}")
    click.echo(f"  Source: {source.strip()}")
    click.echo(f"  Date: {income_date}")
    click.echo(f"  Amount: {format_currency(income_amount)}")


@income_group.command("list")
@click.pass_context
def list_incomes(ctx):
    """List income entries, newest first."""
    auth = require_auth_or_exit(ctx)
    service = IncomeService(ctx.obj["db"], auth)

    incomes = service.list_incomes()
    if not incomes:
        click.echo("No income entries found.")
        return

    click.echo("\nIncome:")
    click.echo("-" * 70)
    for income in incomes:
        click.echo(
            f"ID: {income.id:4d} | {income.date} | {format_currency(income.amount):>14s} | {income.source}"
        )
    total = sum(i.amount for i in incomes)
    click.echo("-" * 70)
    click.echo(f"Total: {format_currency(total)} ({len(incomes)} entries)")


@income_group.command("edit")
@click.argument("income_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--source", help="New source")
@click.option("--date", "date_str", help="New date")
@click.pass_context
def edit_income(ctx, income_id: int, amount: str | None, source: str | None, date_str: str | None):
    """Edit an income entry. Omitted fields keep their current value."""
    auth = require_auth_or_exit(ctx)
    service = IncomeService(ctx.obj["db"], auth)

    existing = service.get_income(income_id)
    if existing is None:
        click.echo(f"Error: Income entry {income_id} not found", err=True)
        ctx.exit(1)

    new_amount = parse_amount_or_exit(ctx, amount) if amount is not None else existing.amount
    new_date = parse_date_or_exit(ctx, date_str) if date_str is not None else existing.date
    new_source = source if source is not None else existing.source

    try:
        service.update_income(income_id, amount=new_amount, source=new_source, date=new_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated income {income_id}")


@income_group.command("delete")
@click.argument("income_id", type=int)
@click.pass_context
def delete_income(ctx, income_id: int):
    """Delete an income entry."""
    auth = require_auth_or_exit(ctx)
    service = IncomeService(ctx.obj["db"], auth)

    existing = service.get_income(income_id)
    if existing is None:
        click.echo(f"Error: Income entry {income_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(
        f"Delete income '{existing.source}' of {format_currency(existing.amount)} on {existing.date}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_income(income_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted income {income_id}")


def register_commands(cli):
    """Register income commands with main CLI."""
    cli.add_command(income_group, name="income")
