"""Savings goal domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain import errors
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.entities import SavingsGoal
from pocketbook.domain.validation import check_non_negative, is_blank

logger = logging.getLogger(__name__)


class SavingsGoalService:
    """Service for managing the signed-in user's savings goals."""

    def __init__(self, db: Database, auth: AuthContext):
        """Initialize savings goal service.

        Args:
            db: Database instance
            auth: Context of the acting user
        """
        self.db = db
        self.auth = auth

    def list_goals(self) -> list[SavingsGoal]:
        """List savings goals, most recently created first."""
        return self.db.list_savings_goals(self.auth.user_id)

    def get_goal(self, goal_id: int) -> Optional[SavingsGoal]:
        return self.db.get_savings_goal(self.auth.user_id, goal_id)

    def _check_amounts(
        self, target_amount: Decimal, current_amount: Optional[Decimal]
    ) -> tuple[Decimal, Decimal]:
        target_amount = check_non_negative(target_amount, "Target amount")
        if current_amount is None:
            current_amount = Decimal("0")
        current_amount = check_non_negative(current_amount, "Current amount")
        return target_amount, current_amount

    def add_goal(
        self,
        name: Optional[str],
        target_amount: Optional[Decimal],
        current_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
    ) -> int:
        """Create a savings goal.

        Args:
            name: Goal name
            target_amount: Amount to save
            current_amount: Amount saved so far (missing means 0)
            target_date: Optional deadline

        Returns:
            Goal ID

        Raises:
            ValidationError: If name or target amount is missing, or an amount is negative
        """
        if is_blank(name) or target_amount is None:
            raise errors.ValidationError("Name and target amount are required")
        target_amount, current_amount = self._check_amounts(target_amount, current_amount)

        goal_id = self.db.create_savings_goal(
            user_id=self.auth.user_id,
            name=name.strip(),
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
        )
        logger.info("User %s added savings goal %s", self.auth.user_id, goal_id)
        return goal_id

    def update_goal(
        self,
        goal_id: Optional[int],
        name: Optional[str],
        target_amount: Optional[Decimal],
        current_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
    ) -> None:
        """Replace the fields of a savings goal.

        A None ``target_date`` clears the deadline.

        Raises:
            ValidationError: If ID, name or target amount is missing, or an amount is negative
            NotFoundError: If the goal does not exist for this user
        """
        if goal_id is None or is_blank(name) or target_amount is None:
            raise errors.ValidationError("ID, name, and target amount are required")
        target_amount, current_amount = self._check_amounts(target_amount, current_amount)

        self.db.update_savings_goal(
            user_id=self.auth.user_id,
            goal_id=goal_id,
            name=name.strip(),
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
        )
        logger.info("User %s updated savings goal %s", self.auth.user_id, goal_id)

    def delete_goal(self, goal_id: Optional[int]) -> None:
        """Delete a savings goal.

        Raises:
            ValidationError: If no ID is given
            NotFoundError: If the goal does not exist for this user
        """
        if goal_id is None:
            raise errors.ValidationError("Savings goal ID is required")
        self.db.delete_savings_goal(self.auth.user_id, goal_id)
        logger.info("User %s deleted savings goal %s", self.auth.user_id, goal_id)
