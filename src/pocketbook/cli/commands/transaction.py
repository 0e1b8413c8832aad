"""Combined transaction listing."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.cli.input_parsing import format_currency
from pocketbook.domain.entities import Transaction, TransactionType
from pocketbook.domain.errors import DomainError
from pocketbook.domain.transaction import RECENT_TRANSACTION_COUNT, TransactionService

TYPE_CHOICES = ["all"] + [t.value for t in TransactionType]


def format_transaction(txn: Transaction) -> str:
    sign = "+" if txn.type == TransactionType.INCOME else "-"
    amount = sign + format_currency(txn.amount)
    return f"{txn.date} | {txn.type.value:<7s} | {amount:>14s} | {txn.description}"


@click.command("transactions")
@click.option("--limit", type=int, help="Maximum number of transactions to show")
@click.option(
    "--recent",
    is_flag=True,
    help=f"Show only the {RECENT_TRANSACTION_COUNT} most recent transactions",
)
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TYPE_CHOICES),
    default="all",
    show_default=True,
    help="Show only income or only expenses",
)
@click.option("--search", help="Show only transactions whose description contains this text (case-insensitive)")
@click.pass_context
def list_transactions(ctx, limit: int | None, recent: bool, transaction_type: str, search: str | None):
    """List income and expenses together, newest first.

    Examples:
        pocketbook transactions
        pocketbook transactions --limit 20
        pocketbook transactions --recent
        pocketbook transactions --type expense --search coffee
    """
    auth = require_auth_or_exit(ctx)
    service = TransactionService(ctx.obj["db"], auth)

    if recent:
        limit = RECENT_TRANSACTION_COUNT

    try:
        transactions = service.list_transactions(limit=limit, transaction_type=transaction_type, search=search)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo("\nTransactions:")
    click.echo("-" * 70)
    for txn in transactions:
        click.echo(format_transaction(txn))


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(list_transactions)
