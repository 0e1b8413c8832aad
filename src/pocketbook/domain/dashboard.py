"""Dashboard summary domain service."""

from decimal import Decimal
from typing import Optional, Sequence

from pocketbook.database.base import Database
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.entities import DashboardSummary, SavingsGoal


def find_closest_goal(goals: Sequence[SavingsGoal]) -> Optional[SavingsGoal]:
    """Incomplete goal with the highest progress, ignoring goals with no progress."""
    closest = None
    highest = Decimal("0")
    for goal in goals:
        if goal.current_amount >= goal.target_amount:
            continue
        percentage = goal.current_amount / goal.target_amount * 100
        if percentage > highest:
            highest = percentage
            closest = goal
    return closest


def average_goal_progress(goals: Sequence[SavingsGoal]) -> Decimal:
    """Mean of the per-goal progress percentages, each capped at 100; 0 with no goals."""
    if not goals:
        return Decimal("0")
    return sum((g.progress_percentage for g in goals), Decimal("0")) / len(goals)


class DashboardService:
    """Service computing the dashboard summary cards."""

    def __init__(self, db: Database, auth: AuthContext):
        """Initialize dashboard service.

        Args:
            db: Database instance
            auth: Context of the acting user
        """
        self.db = db
        self.auth = auth

    def get_summary(self) -> DashboardSummary:
        """Totals of income, expenses and savings goals for the signed-in user."""
        user_id = self.auth.user_id
        incomes = self.db.list_incomes(user_id)
        expenses = self.db.list_expenses(user_id)
        goals = self.db.list_savings_goals(user_id)

        total_income = sum((i.amount for i in incomes), Decimal("0"))
        total_expenses = sum((e.amount for e in expenses), Decimal("0"))
        total_target = sum((g.target_amount for g in goals), Decimal("0"))
        total_saved = sum((g.current_amount for g in goals), Decimal("0"))

        progress = Decimal("0")
        if total_target > 0:
            progress = min(Decimal("100"), total_saved / total_target * 100)

        return DashboardSummary(
            display_name=self.auth.user.display_name,
            total_income=total_income,
            total_expenses=total_expenses,
            net_savings=total_income - total_expenses,
            income_count=len(incomes),
            expense_count=len(expenses),
            goal_count=len(goals),
            total_target=total_target,
            total_saved=total_saved,
            progress_percentage=progress,
            average_progress=average_goal_progress(goals),
            completed_goals=sum(1 for g in goals if g.is_completed),
            closest_goal=find_closest_goal(goals),
        )
