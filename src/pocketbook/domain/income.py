"""Income domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.entities import Income
from pocketbook.domain.validation import check_non_negative, is_blank

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = "Source, amount, and date are required"


class IncomeService:
    """Service for managing the signed-in user's income entries."""

    def __init__(self, db: Database, auth: AuthContext):
        """Initialize income service.

        Args:
            db: Database instance
            auth: Context of the acting user; every query is scoped to it
        """
        self.db = db
        self.auth = auth

    def list_incomes(self) -> list[Income]:
        """List income entries, newest first."""
        return self.db.list_incomes(self.auth.user_id)

    def get_income(self, income_id: int) -> Optional[Income]:
        """Get an income entry by ID, or None if it does not exist for this user."""
        return self.db.get_income(self.auth.user_id, income_id)

    def add_income(self, amount: Optional[Decimal], source: Optional[str], date: Optional[date]) -> int:
        """Record an income entry.

        Args:
            amount: Non-negative amount
            source: Where the money came from
            date: Date received

        Returns:
            Income ID

        Raises:
            ValidationError: If a field is missing or the amount is negative
        """
        if is_blank(source) or amount is None or date is None:
            raise errors.ValidationError(REQUIRED_FIELDS)
        amount = check_non_negative(amount)

        income_id = self.db.create_income(
            user_id=self.auth.user_id, amount=amount, source=source.strip(), date=date
        )
        logger.info("User %s added income %s", self.auth.user_id, income_id)
        return income_id

    def update_income(
        self,
        income_id: Optional[int],
        amount: Optional[Decimal],
        source: Optional[str],
        date: Optional[date],
    ) -> None:
        """Replace the fields of an income entry.

        Raises:
            ValidationError: If a field is missing or the amount is negative
            NotFoundError: If the entry does not exist for this user
        """
        if income_id is None or is_blank(source) or amount is None or date is None:
            raise errors.ValidationError("ID, source, amount, and date are required")
        amount = check_non_negative(amount)

        self.db.update_income(
            user_id=self.auth.user_id,
            income_id=income_id,
            amount=amount,
            source=source.strip(),
            date=date,
        )
        logger.info("User %s updated income %s", self.auth.user_id, income_id)

    def delete_income(self, income_id: Optional[int]) -> None:
        """Delete an income entry.

        Raises:
            ValidationError: If no ID is given
            NotFoundError: If the entry does not exist for this user
        """
        if income_id is None:
            raise errors.ValidationError("Income ID is required")
        self.db.delete_income(self.auth.user_id, income_id)
        logger.info("User %s deleted income %s", self.auth.user_id, income_id)
