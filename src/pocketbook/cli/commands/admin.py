"""Admin commands: email whitelist, admin users and deletion requests."""

import click
from pocketbook.cli.auth_resolution import require_auth_or_exit
from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.domain.admin import AdminUserService, WhitelistService
from pocketbook.domain.entities import WhitelistStatus
from pocketbook.domain.errors import DomainError


@click.group()
def admin_group():
    """Administration (requires admin rights)."""
    pass


@admin_group.group("whitelist")
def whitelist_group():
    """Manage the emails allowed to sign up."""
    pass


@whitelist_group.command("list")
@click.pass_context
def list_whitelist(ctx):
    """List whitelisted emails, newest first."""
    auth = require_auth_or_exit(ctx)
    service = WhitelistService(ctx.obj["db"], auth)

    try:
        entries = service.list_emails()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No whitelisted emails found.")
        return

    click.echo("\nWhitelisted emails:")
    click.echo("-" * 70)
    for entry in entries:
        line = f"ID: {entry.id:4d} | {entry.email:<35s} | {entry.status.value}"
        if entry.notes:
            line += f" | {entry.notes}"
        click.echo(line)


@whitelist_group.command("add")
@click.argument("email")
@click.option("--notes", help="Optional note about who this is")
@click.pass_context
def add_whitelist(ctx, email: str, notes: str | None):
    """Allow EMAIL to sign up.

    Examples:
        pocketbook admin whitelist add bob@example.com --notes "Brother"
    """
    auth = require_auth_or_exit(ctx)
    service = WhitelistService(ctx.obj["db"], auth)

    try:
        entry_id = service.add_email(email, notes=notes)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Whitelisted '{email.strip().lower()}' (ID: {entry_id})")


@whitelist_group.command("remove")
@click.argument("entry_id", type=int)
@click.pass_context
def remove_whitelist(ctx, entry_id: int):
    """Remove a whitelist entry."""
    auth = require_auth_or_exit(ctx)
    service = WhitelistService(ctx.obj["db"], auth)

    try:
        service.remove_email(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Removed whitelist entry {entry_id}")


@whitelist_group.command("status")
@click.argument("entry_id", type=int)
@click.argument("status", type=click.Choice([s.value for s in WhitelistStatus]))
@click.pass_context
def set_whitelist_status(ctx, entry_id: int, status: str):
    """Activate or deactivate a whitelist entry.

    Inactive emails can no longer sign up or sign in.
    """
    auth = require_auth_or_exit(ctx)
    service = WhitelistService(ctx.obj["db"], auth)

    try:
        service.update_status(entry_id, status)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Whitelist entry {entry_id} is now {status}")


@admin_group.group("users")
def users_group():
    """Manage admin users."""
    pass


@users_group.command("list")
@click.pass_context
def list_admins(ctx):
    """List admin users."""
    auth = require_auth_or_exit(ctx)
    service = AdminUserService(ctx.obj["db"], auth)

    try:
        admins = service.list_admins()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nAdmin users:")
    click.echo("-" * 70)
    for admin in admins:
        marker = " (you)" if admin.user_id == auth.user_id else ""
        click.echo(
            f"ID: {admin.user_id:4d} | {admin.user_email:<35s} | since {admin.created_at:%Y-%m-%d}{marker}"
        )


@users_group.command("add")
@click.argument("email")
@click.pass_context
def add_admin(ctx, email: str):
    """Grant admin rights to a signed-up, whitelisted user."""
    auth = require_auth_or_exit(ctx)
    service = AdminUserService(ctx.obj["db"], auth)

    try:
        user_id = service.add_admin(email)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Granted admin rights to '{email.strip().lower()}' (ID: {user_id})")


@users_group.command("remove")
@click.argument("user_id", type=int)
@click.pass_context
def remove_admin(ctx, user_id: int):
    """Revoke a user's admin rights."""
    auth = require_auth_or_exit(ctx)
    service = AdminUserService(ctx.obj["db"], auth)

    try:
        service.remove_admin(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Revoked admin rights of user {user_id}")


@admin_group.command("deletions")
@click.pass_context
def list_deletions(ctx):
    """List accounts whose owners requested deletion."""
    auth = require_auth_or_exit(ctx)
    service = AdminUserService(ctx.obj["db"], auth)

    try:
        requests = service.list_pending_deletions()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not requests:
        click.echo("No pending deletion requests.")
        return

    for request in requests:
        click.echo(f"{request.requested_at:%Y-%m-%d %H:%M} | {request.email} (user {request.user_id})")


def register_commands(cli):
    """Register admin commands with main CLI."""
    cli.add_command(admin_group, name="admin")
