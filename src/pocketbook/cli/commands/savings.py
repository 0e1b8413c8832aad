"""Savings goal commands."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.cli.input_parsing import format_currency, parse_amount_or_exit, parse_date_or_exit
from pocketbook.domain.errors import DomainError
from pocketbook.domain.savings import SavingsGoalService


@click.group()
def savings_group():
    """Manage savings goals."""
    pass


@savings_group.command("add")
@click.option("--name", required=True, help="Goal name (e.g., 'Emergency fund')")
@click.option("--target", required=True, help="Amount to save")
@click.option("--current", help="Amount saved so far (default: 0)")
@click.option("--target-date", "target_date_str", help="Date you want to reach the goal by")
@click.pass_context
def add_goal(ctx, name: str, target: str, current: str | None, target_date_str: str | None):
    """Create a savings goal.

    Examples:
        pocketbook savings add --name "Emergency fund" --target 5000
        pocketbook savings add --name "Vacation" --target 2000 --current 350 --target-date 2025-07-01
    """
    auth = require_auth_or_exit(ctx)
    service = SavingsGoalService(ctx.obj["db"], auth)

    target_amount = parse_amount_or_exit(ctx, target, "target amount")
    current_amount = parse_amount_or_exit(ctx, current, "current amount") if current is not None else None
    target_date = (
        parse_date_or_exit(ctx, target_date_str, "target date") if target_date_str is not None else None
    )

    try:
        goal_id = service.add_goal(
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created savings goal '{name.strip()}' (ID: {goal_id})")


@savings_group.command("list")
@click.pass_context
def list_goals(ctx):
    """List savings goals with their progress."""
    auth = require_auth_or_exit(ctx)
    service = SavingsGoalService(ctx.obj["db"], auth)

    goals = service.list_goals()
    if not goals:
        click.echo("No savings goals found.")
        return

    click.echo("\nSavings goals:")
    click.echo("-" * 80)
    for goal in goals:
        line = (
            f"ID: {goal.id:4d} | {goal.name:<25s} | "
            f"{format_currency(goal.current_amount)} of {format_currency(goal.target_amount)} "
            f"({goal.progress_percentage:.0f}%)"
        )
        if goal.target_date:
            line += f" | by {goal.target_date}"
        if goal.is_completed:
            line += " | completed"
        click.echo(line)


@savings_group.command("edit")
@click.argument("goal_id", type=int)
@click.option("--name", help="New name")
@click.option("--target", help="New target amount")
@click.option("--current", help="New amount saved so far")
@click.option("--target-date", "target_date_str", help="New target date")
@click.option("--clear-target-date", is_flag=True, help="Remove the target date")
@click.pass_context
def edit_goal(
    ctx,
    goal_id: int,
    name: str | None,
    target: str | None,
    current: str | None,
    target_date_str: str | None,
    clear_target_date: bool,
):
    """Edit a savings goal. Omitted fields keep their current value.

    Examples:
        pocketbook savings edit 3 --current 900
        pocketbook savings edit 3 --clear-target-date
    """
    auth = require_auth_or_exit(ctx)
    service = SavingsGoalService(ctx.obj["db"], auth)

    existing = service.get_goal(goal_id)
    if existing is None:
        click.echo(f"Error: Savings goal {goal_id} not found", err=True)
        ctx.exit(1)

    if target_date_str is not None and clear_target_date:
        click.echo("Error: Cannot use --target-date together with --clear-target-date", err=True)
        ctx.exit(1)

    target_amount = (
        parse_amount_or_exit(ctx, target, "target amount") if target is not None else existing.target_amount
    )
    current_amount = (
        parse_amount_or_exit(ctx, current, "current amount") if current is not None else existing.current_amount
    )
    if clear_target_date:
        target_date = None
    elif target_date_str is not None:
        target_date = parse_date_or_exit(ctx, target_date_str, "target date")
    else:
        target_date = existing.target_date

    try:
        service.update_goal(
            goal_id,
            name=name if name is not None else existing.name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated savings goal {goal_id}")


@savings_group.command("delete")
@click.argument("goal_id", type=int)
@click.pass_context
def delete_goal(ctx, goal_id: int):
    """Delete a savings goal."""
    auth = require_auth_or_exit(ctx)
    service = SavingsGoalService(ctx.obj["db"], auth)

    existing = service.get_goal(goal_id)
    if existing is None:
        click.echo(f"Error: Savings goal {goal_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Delete savings goal '{existing.name}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_goal(goal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted savings goal {goal_id}")


def register_commands(cli):
    """Register savings commands with main CLI."""
    cli.add_command(savings_group, name="savings")
