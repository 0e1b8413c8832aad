"""Tests for the dashboard summary."""

from datetime import date, datetime, UTC
from decimal import Decimal

from pocketbook.domain.dashboard import DashboardService, average_goal_progress, find_closest_goal
from pocketbook.domain.entities import SavingsGoal


def _goal(goal_id, target, current):
    now = datetime.now(UTC)
    return SavingsGoal(
        id=goal_id,
        user_id=1,
        name=f"Goal {goal_id}",
        target_amount=Decimal(target),
        current_amount=Decimal(current),
        target_date=None,
        created_at=now,
        updated_at=now,
    )


class TestFindClosestGoal:
    """Tests for picking the goal closest to completion."""

    def test_picks_highest_incomplete_progress(self):
        goals = [_goal(1, "100", "10"), _goal(2, "100", "80"), _goal(3, "100", "100")]
        assert find_closest_goal(goals).id == 2

    def test_ignores_goals_without_progress(self):
        assert find_closest_goal([_goal(1, "100", "0")]) is None

    def test_no_goals(self):
        assert find_closest_goal([]) is None

    def test_zero_target_is_complete(self):
        assert find_closest_goal([_goal(1, "0", "0")]) is None


class TestAverageGoalProgress:
    """Tests for the mean progress across goals."""

    def test_mean_of_capped_progress(self):
        goals = [_goal(1, "100", "25"), _goal(2, "100", "300")]
        assert average_goal_progress(goals) == Decimal("62.5")

    def test_no_goals(self):
        assert average_goal_progress([]) == Decimal("0")

    def test_zero_target_counts_as_complete(self):
        goals = [_goal(1, "0", "0"), _goal(2, "200", "0")]
        assert average_goal_progress(goals) == Decimal("50")


class TestDashboardService:
    """Tests for DashboardService.get_summary."""

    def test_empty_summary(self, temp_db, user_auth):
        summary = DashboardService(temp_db, user_auth).get_summary()

        assert summary.display_name == "Uma User"
        assert summary.total_income == Decimal("0")
        assert summary.total_expenses == Decimal("0")
        assert summary.net_savings == Decimal("0")
        assert summary.goal_count == 0
        assert summary.progress_percentage == Decimal("0")
        assert summary.average_progress == Decimal("0")
        assert summary.closest_goal is None

    def test_summary_totals(self, temp_db, user_auth, sample_ledger, savings_service):
        savings_service.add_goal("Car", Decimal("1000"), current_amount=Decimal("250"))
        savings_service.add_goal("Phone", Decimal("500"), current_amount=Decimal("500"))

        summary = DashboardService(temp_db, user_auth).get_summary()

        assert summary.total_income == Decimal("2800")
        assert summary.total_expenses == Decimal("966.70")
        assert summary.net_savings == Decimal("1833.30")
        assert summary.income_count == 2
        assert summary.expense_count == 3
        assert summary.goal_count == 2
        assert summary.total_target == Decimal("1500")
        assert summary.total_saved == Decimal("750")
        assert summary.progress_percentage == Decimal("50")
        assert summary.average_progress == Decimal("62.5")
        assert summary.completed_goals == 1
        assert summary.closest_goal.name == "Car"

    def test_progress_capped(self, temp_db, user_auth, savings_service):
        savings_service.add_goal("Overfunded", Decimal("100"), current_amount=Decimal("300"))

        summary = DashboardService(temp_db, user_auth).get_summary()

        assert summary.progress_percentage == Decimal("100")

    def test_only_own_data(self, temp_db, other_auth, sample_ledger):
        summary = DashboardService(temp_db, other_auth).get_summary()
        assert summary.income_count == 0
        assert summary.display_name == "other"
