"""Admin-only services: email whitelist and admin user management."""

import logging
from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.auth import AuthContext, normalize_email
from pocketbook.domain.entities import AdminUser, PendingDeletion, WhitelistedEmail, WhitelistStatus

logger = logging.getLogger(__name__)


class WhitelistService:
    """Service for managing which emails may sign up."""

    def __init__(self, db: Database, auth: AuthContext):
        """Initialize whitelist service.

        Args:
            db: Database instance
            auth: Context of the acting user; every operation requires admin rights
        """
        self.db = db
        self.auth = auth

    def list_emails(self) -> list[WhitelistedEmail]:
        """List whitelist entries, newest first."""
        self.auth.require_admin()
        return self.db.list_whitelisted_emails()

    def add_email(self, email: Optional[str], notes: Optional[str] = None) -> int:
        """Whitelist an email with active status.

        Raises:
            AuthorizationError: If the acting user is not an admin
            ValidationError: If the email is missing or malformed
            ConflictError: If the email is already whitelisted
        """
        self.auth.require_admin()
        email = normalize_email(email)
        notes = notes.strip() if notes and notes.strip() else None

        entry_id = self.db.add_whitelisted_email(email=email, notes=notes, status=WhitelistStatus.ACTIVE)
        logger.info("Admin %s whitelisted %s", self.auth.user_id, email)
        return entry_id

    def remove_email(self, entry_id: Optional[int]) -> None:
        self.auth.require_admin()
        if entry_id is None:
            raise errors.ValidationError("Email ID is required")
        self.db.delete_whitelisted_email(entry_id)
        logger.info("Admin %s removed whitelist entry %s", self.auth.user_id, entry_id)

    def update_status(self, entry_id: Optional[int], status: Optional[str]) -> None:
        """Activate or deactivate a whitelist entry.

        Raises:
            ValidationError: If ID or status is missing, or the status is unknown
            NotFoundError: If the entry does not exist
        """
        self.auth.require_admin()
        if entry_id is None or not status:
            raise errors.ValidationError("ID and status are required")
        try:
            new_status = WhitelistStatus(status)
        except ValueError:
            raise errors.ValidationError("Invalid status value")

        self.db.update_whitelist_status(entry_id, new_status)
        logger.info("Admin %s set whitelist entry %s to %s", self.auth.user_id, entry_id, new_status.value)


class AdminUserService:
    """Service for granting and revoking admin rights."""

    def __init__(self, db: Database, auth: AuthContext):
        self.db = db
        self.auth = auth

    def list_admins(self) -> list[AdminUser]:
        self.auth.require_admin()
        return self.db.list_admin_users()

    def add_admin(self, email: Optional[str]) -> int:
        """Grant admin rights to a registered, whitelisted user.

        Returns:
            The new admin's user ID

        Raises:
            ValidationError: If the email is malformed or not whitelisted
            NotFoundError: If nobody has signed up with this email
            ConflictError: If the user is already an admin
        """
        self.auth.require_admin()
        email = normalize_email(email)

        if self.db.get_whitelisted_email_by_address(email) is None:
            raise errors.ValidationError(
                "This email is not in the whitelist. Please add it to the whitelist first."
            )

        user = self.db.get_user_by_email(email)
        if user is None:
            raise errors.NotFoundError("User not found. Make sure they have signed up first.")

        self.db.add_admin_user(user.id, created_by=self.auth.user_id)
        logger.info("Admin %s granted admin rights to %s", self.auth.user_id, email)
        return user.id

    def remove_admin(self, user_id: Optional[int]) -> None:
        """Revoke a user's admin rights.

        Raises:
            ValidationError: If no user ID is given or it is the acting user's own
            NotFoundError: If the user is not an admin
        """
        self.auth.require_admin()
        if user_id is None:
            raise errors.ValidationError("User ID is required")
        if user_id == self.auth.user_id:
            raise errors.ValidationError("You cannot remove yourself as an admin.")

        self.db.remove_admin_user(user_id)
        logger.info("Admin %s revoked admin rights of user %s", self.auth.user_id, user_id)

    def list_pending_deletions(self) -> list[PendingDeletion]:
        """Accounts whose owners asked for deletion."""
        self.auth.require_admin()
        return self.db.list_pending_deletions()
