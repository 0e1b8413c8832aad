"""Expense domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.entities import Expense
from pocketbook.domain.validation import check_non_negative, is_blank

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = "Description, amount, and date are required"


class ExpenseService:
    """Service for managing the signed-in user's expenses."""

    def __init__(self, db: Database, auth: AuthContext):
        self.db = db
        self.auth = auth

    def list_expenses(self) -> list[Expense]:
        """List expenses, newest first."""
        return self.db.list_expenses(self.auth.user_id)

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        return self.db.get_expense(self.auth.user_id, expense_id)

    def add_expense(
        self, amount: Optional[Decimal], description: Optional[str], date: Optional[date]
    ) -> int:
        """Record an expense. Returns the expense ID.

        Raises:
            ValidationError: If a field is missing or the amount is negative
        """
        if is_blank(description) or amount is None or date is None:
            raise errors.ValidationError(REQUIRED_FIELDS)
        amount = check_non_negative(amount)

        expense_id = self.db.create_expense(
            user_id=self.auth.user_id, amount=amount, description=description.strip(), date=date
        )
        logger.info("User %s added expense %s", self.auth.user_id, expense_id)
        return expense_id

    def update_expense(
        self,
        expense_id: Optional[int],
        amount: Optional[Decimal],
        description: Optional[str],
        date: Optional[date],
    ) -> None:
        """Replace the fields of an expense.

        Raises:
            ValidationError: If a field is missing or the amount is negative
            NotFoundError: If the expense does not exist for this user
        """
        if expense_id is None or is_blank(description) or amount is None or date is None:
            raise errors.ValidationError("ID, description, amount, and date are required")
        amount = check_non_negative(amount)

        self.db.update_expense(
            user_id=self.auth.user_id,
            expense_id=expense_id,
            amount=amount,
            description=description.strip(),
            date=date,
        )
        logger.info("User %s updated expense %s", self.auth.user_id, expense_id)

    def delete_expense(self, expense_id: Optional[int]) -> None:
        if expense_id is None:
            raise errors.ValidationError("Expense ID is required")
        self.db.delete_expense(self.auth.user_id, expense_id)
        logger.info("User %s deleted expense %s", self.auth.user_id, expense_id)
