"""Profile settings and account deletion requests."""

import logging
from datetime import datetime, UTC

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.validation import is_blank

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for the signed-in user's own account settings."""

    def __init__(self, db: Database, auth: AuthContext):
        self.db = db
        self.auth = auth

    def update_profile(self, full_name: str) -> None:
        """Change the display name.

        Raises:
            ValidationError: If the name is blank
        """
        if is_blank(full_name):
            raise errors.ValidationError("Display name is required")
        self.db.update_user_profile(self.auth.user_id, full_name.strip())
        self.auth.refresh()

    def mark_account_for_deletion(self) -> int:
        """Record a deletion request for the signed-in user.

        Returns:
            ID of the pending deletion record
        """
        request_id = self.db.mark_user_for_deletion(self.auth.user_id, requested_at=datetime.now(UTC))
        logger.info("User %s requested account deletion", self.auth.user_id)
        self.auth.refresh()
        return request_id
