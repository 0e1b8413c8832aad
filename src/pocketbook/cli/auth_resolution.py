"""CLI helpers for resolving the acting user."""

from __future__ import annotations

import click

from pocketbook.cli.error_handling import handle_domain_error
from pocketbook.domain.auth import AuthContext, AuthService
from pocketbook.domain.errors import DomainError


def require_auth_or_exit(ctx: click.Context) -> AuthContext:
    """Sign in the user given by --user / POCKETBOOK_USER, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    email = ctx.obj.get("user_email")
    if not email:
        click.echo(
            "Error: No user selected. Pass --user EMAIL or set POCKETBOOK_USER.", err=True
        )
        ctx.exit(1)

    try:
        return AuthService(ctx.obj["db"]).sign_in(email)
    except DomainError as e:
        handle_domain_error(ctx, e)
