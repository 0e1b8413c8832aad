"""Account settings commands."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.domain.errors import DomainError
from pocketbook.domain.settings import SettingsService


@click.group()
def settings_group():
    """Manage your profile and account."""
    pass


@settings_group.command("profile")
@click.argument("full_name")
@click.pass_context
def update_profile(ctx, full_name: str):
    """Change your display name."""
    auth = require_auth_or_exit(ctx)
    service = SettingsService(ctx.obj["db"], auth)

    try:
        service.update_profile(full_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Display name set to '{auth.user.display_name}'")


@settings_group.command("delete-account")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_account(ctx, yes: bool):
    """Request deletion of your account.

    The account is flagged and an administrator completes the deletion.
    """
    auth = require_auth_or_exit(ctx)
    service = SettingsService(ctx.obj["db"], auth)

    if auth.user.marked_for_deletion:
        click.echo("Your account is already marked for deletion.")
        return

    if not yes and not click.confirm(
        "Request deletion of your account? All your data will be removed."
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.mark_account_for_deletion()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Your account has been marked for deletion.")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
