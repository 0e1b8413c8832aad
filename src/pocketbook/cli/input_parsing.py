"""CLI helpers for parsing user-supplied dates and amounts."""

from datetime import date
from decimal import Decimal

import click

from pocketbook.utils.amount_parser import parse_amount
from pocketbook.utils.date_parser import parse_date


def parse_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str, label: str = "amount") -> Decimal:
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def format_currency(amount: Decimal) -> str:
    """Render an amount the way every listing does, e.g. ``$1,234.50``."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"
