"""User account commands: bootstrap, sign-up and identity."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.domain.auth import AuthService
from pocketbook.domain.errors import DomainError


@click.command("init-admin")
@click.argument("email")
@click.option("--name", help="Display name")
@click.pass_context
def init_admin(ctx, email: str, name: str | None):
    """Create the first administrator.

    Whitelists EMAIL, registers it and grants admin rights. Only works while
    no admin exists yet.

    Examples:
        pocketbook init-admin alice@example.com --name "Alice"
    """
    service = AuthService(ctx.obj["db"])
    try:
        auth = service.bootstrap_admin(email, full_name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created admin '{auth.user.email}' (ID: {auth.user_id})")
    click.echo(f"Use --user {auth.user.email} or set POCKETBOOK_USER to act as this user.")


@click.command("signup")
@click.argument("email")
@click.option("--name", help="Display name")
@click.pass_context
def signup(ctx, email: str, name: str | None):
    """Register a new user.

    The email must be on the whitelist with active status.

    Examples:
        pocketbook signup bob@example.com
        pocketbook signup bob@example.com --name "Bob"
    """
    service = AuthService(ctx.obj["db"])
    try:
        auth = service.sign_up(email, full_name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Registered '{auth.user.email}' (ID: {auth.user_id})")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the acting user."""
    auth = require_auth_or_exit(ctx)
    role = "admin" if auth.is_admin else "user"
    click.echo(f"{auth.user.display_name} <{auth.user.email}> (ID: {auth.user_id}, {role})")
    if auth.user.marked_for_deletion:
        click.echo("This account is marked for deletion.")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(init_admin)
    cli.add_command(signup)
    cli.add_command(whoami)
