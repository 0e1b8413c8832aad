"""Expense management commands."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.cli.input_parsing import format_currency, parse_amount_or_exit, parse_date_or_exit
from pocketbook.domain.errors import DomainError
from pocketbook.domain.expense import ExpenseService


@click.group()
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount spent")
@click.option("--description", required=True, help="What the money was spent on")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Date spent (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_expense(ctx, amount: str, description: str, date_str: str):
    """Record an expense.

    Examples:
        pocketbook expense add --amount 54.20 --description "Groceries"
        pocketbook expense add --amount 900 --description "Rent" --date 2024-05-01
    """
    auth = require_auth_or_exit(ctx)
    service = ExpenseService(ctx.obj["db"], auth)

    expense_amount = parse_amount_or_exit(ctx, amount)
    expense_date = parse_date_or_exit(ctx, date_str)

    try:
        expense_id = service.add_expense(
            amount=expense_amount, description=description, date=expense_date
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added expense {expense_id}")
    click.echo(f"  Description: {description.strip()}")
    click.echo(f"  Date: {expense_date}")
    click.echo(f"  Amount: {format_currency(expense_amount)}")


@expense_group.command("list")
@click.pass_context
def list_expenses(ctx):
    """List expenses, newest first."""
    auth = require_auth_or_exit(ctx)
    service = ExpenseService(ctx.obj["db"], auth)

    expenses = service.list_expenses()
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo("\nExpenses:")
    click.echo("-" * 70)
    for expense in expenses:
        click.echo(
            f"ID: {expense.id:4d} | {expense.date} | {format_currency(expense.amount):>14s} | {expense.description}"
        )
    total = sum(e.amount for e in expenses)
    click.echo("-" * 70)
    click.echo(f"Total: {format_currency(total)} ({len(expenses)} entries)")


@expense_group.command("edit")
@click.argument("expense_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.option("--date", "date_str", help="New date")
@click.pass_context
def edit_expense(
    ctx, expense_id: int, amount: str | None, description: str | None, date_str: str | None
):
    """Edit an expense. Omitted fields keep their current value."""
    auth = require_auth_or_exit(ctx)
    service = ExpenseService(ctx.obj["db"], auth)

    existing = service.get_expense(expense_id)
    if existing is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    new_amount = parse_amount_or_exit(ctx, amount) if amount is not None else existing.amount
    new_date = parse_date_or_exit(ctx, date_str) if date_str is not None else existing.date
    new_description = description if description is not None else existing.description

    try:
        service.update_expense(
            expense_id, amount=new_amount, description=new_description, date=new_date
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated expense {expense_id}")


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    auth = require_auth_or_exit(ctx)
    service = ExpenseService(ctx.obj["db"], auth)

    existing = service.get_expense(expense_id)
    if existing is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(
        f"Delete expense '{existing.description}' of {format_currency(existing.amount)} on {existing.date}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_expense(expense_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
