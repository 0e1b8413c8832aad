"""Authentication and authorization context.

Authentication proper (passwords, OAuth, sessions) is out of scope: a user is
identified by email, and only emails with an active whitelist entry may sign
up or sign in. The resulting :class:`AuthContext` is the single place where
admin rights are checked.
"""

import logging
import re
from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.entities import User, WhitelistStatus

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(email: Optional[str]) -> str:
    """Validate and normalize an email address.

    Raises:
        ValidationError: If the email is missing or malformed
    """
    if email is None or not email.strip():
        raise errors.ValidationError("Email is required")
    email = email.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise errors.ValidationError(errors.INVALID_EMAIL)
    return email


class AuthContext:
    """The signed-in principal and its privileges."""

    def __init__(self, db: Database, user: User):
        self.db = db
        self.user = user
        self._is_admin: Optional[bool] = None

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        """Whether the user holds an admin grant (looked up once per context)."""
        if self._is_admin is None:
            self._is_admin = self.db.is_admin(self.user.id)
        return self._is_admin

    def require_admin(self) -> None:
        """Raise AuthorizationError unless the user is an admin."""
        if not self.is_admin:
            raise errors.AuthorizationError(errors.UNAUTHORIZED)

    def refresh(self) -> None:
        """Reload the user row and forget the cached admin flag."""
        user = self.db.get_user(self.user.id)
        if user is None:
            raise errors.AuthorizationError(errors.UNAUTHORIZED)
        self.user = user
        self._is_admin = None


class AuthService:
    """Service for signing users up and in."""

    def __init__(self, db: Database):
        """Initialize auth service.

        Args:
            db: Database instance
        """
        self.db = db

    def _is_whitelisted(self, email: str) -> bool:
        entry = self.db.get_whitelisted_email_by_address(email)
        return entry is not None and entry.status == WhitelistStatus.ACTIVE

    def sign_up(self, email: str, full_name: Optional[str] = None) -> AuthContext:
        """Register a new user.

        Args:
            email: Email address, must be actively whitelisted
            full_name: Optional display name

        Returns:
            AuthContext for the new user

        Raises:
            ValidationError: If the email is malformed
            AuthorizationError: If the email is not on the active whitelist
            ConflictError: If a user with this email already exists
        """
        email = normalize_email(email)
        if not self._is_whitelisted(email):
            raise errors.AuthorizationError(errors.NOT_WHITELISTED)
        if self.db.get_user_by_email(email) is not None:
            raise errors.ConflictError(errors.duplicate_user_email(email))

        name = full_name.strip() if full_name and full_name.strip() else None
        user_id = self.db.create_user(email=email, full_name=name)
        logger.info("Registered user %s (ID: %s)", email, user_id)
        return AuthContext(self.db, self.db.get_user(user_id))

    def sign_in(self, email: Optional[str]) -> AuthContext:
        """Resolve the acting user.

        Raises:
            AuthorizationError: If the user does not exist or is no longer whitelisted
        """
        if email is None or not email.strip():
            raise errors.AuthorizationError(errors.UNAUTHORIZED)
        user = self.db.get_user_by_email(email.strip())
        if user is None:
            raise errors.AuthorizationError(errors.UNAUTHORIZED)
        if not self._is_whitelisted(user.email):
            raise errors.AuthorizationError(errors.NOT_WHITELISTED)
        return AuthContext(self.db, user)

    def bootstrap_admin(self, email: str, full_name: Optional[str] = None) -> AuthContext:
        """Create the first admin: whitelist the email, register the user and grant admin.

        Only allowed while no admin exists. An already registered user is
        promoted instead of re-created.

        Raises:
            ConflictError: If an admin already exists
        """
        email = normalize_email(email)
        if self.db.count_admin_users() > 0:
            raise errors.ConflictError("An admin already exists; ask an admin to grant access")

        entry = self.db.get_whitelisted_email_by_address(email)
        if entry is None:
            self.db.add_whitelisted_email(email=email, notes="Initial admin")
        elif entry.status != WhitelistStatus.ACTIVE:
            self.db.update_whitelist_status(entry.id, WhitelistStatus.ACTIVE)

        user = self.db.get_user_by_email(email)
        if user is None:
            context = self.sign_up(email, full_name=full_name)
        else:
            context = AuthContext(self.db, user)

        self.db.add_admin_user(context.user_id, created_by=None)
        logger.info("Bootstrapped admin %s", email)
        return context
