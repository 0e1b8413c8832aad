"""Tests for SavingsGoalService."""

import pytest
from datetime import date
from decimal import Decimal

from pocketbook.domain.errors import NotFoundError, ValidationError
from pocketbook.domain.savings import SavingsGoalService


class TestSavingsGoalService:
    """Tests for savings goal management."""

    def test_add_goal_defaults_current_amount(self, savings_service):
        goal_id = savings_service.add_goal("Emergency fund", Decimal("5000"))

        goal = savings_service.get_goal(goal_id)
        assert goal.name == "Emergency fund"
        assert goal.target_amount == Decimal("5000")
        assert goal.current_amount == Decimal("0")
        assert goal.target_date is None
        assert goal.progress_percentage == Decimal("0")

    def test_add_goal_with_all_fields(self, savings_service):
        goal_id = savings_service.add_goal(
            "Vacation", Decimal("2000"), current_amount=Decimal("500"), target_date=date(2025, 7, 1)
        )

        goal = savings_service.get_goal(goal_id)
        assert goal.current_amount == Decimal("500")
        assert goal.target_date == date(2025, 7, 1)
        assert goal.progress_percentage == Decimal("25")

    def test_list_most_recent_first(self, savings_service):
        first = savings_service.add_goal("First", Decimal("100"))
        second = savings_service.add_goal("Second", Decimal("100"))

        assert [g.id for g in savings_service.list_goals()] == [second, first]

    @pytest.mark.parametrize("name, target", [("", Decimal("100")), ("Car", None)])
    def test_add_requires_name_and_target(self, savings_service, name, target):
        with pytest.raises(ValidationError, match="Name and target amount are required"):
            savings_service.add_goal(name, target)

    def test_add_rejects_negative_current_amount(self, savings_service):
        with pytest.raises(ValidationError, match="Current amount must not be negative"):
            savings_service.add_goal("Car", Decimal("100"), current_amount=Decimal("-1"))

    def test_update_goal(self, savings_service):
        goal_id = savings_service.add_goal(
            "Vacation", Decimal("2000"), current_amount=Decimal("500"), target_date=date(2025, 7, 1)
        )

        savings_service.update_goal(goal_id, "Big vacation", Decimal("3000"), Decimal("3000"))

        goal = savings_service.get_goal(goal_id)
        assert goal.name == "Big vacation"
        assert goal.target_amount == Decimal("3000")
        assert goal.is_completed
        # Omitting the target date clears it
        assert goal.target_date is None

    def test_update_requires_fields(self, savings_service):
        with pytest.raises(ValidationError, match="ID, name, and target amount are required"):
            savings_service.update_goal(None, "Car", Decimal("1"))

    def test_delete_goal(self, savings_service):
        goal_id = savings_service.add_goal("Car", Decimal("100"))
        savings_service.delete_goal(goal_id)
        assert savings_service.list_goals() == []

    def test_delete_requires_id(self, savings_service):
        with pytest.raises(ValidationError, match="Savings goal ID is required"):
            savings_service.delete_goal(None)

    def test_goals_are_private(self, temp_db, savings_service, other_auth):
        goal_id = savings_service.add_goal("Car", Decimal("100"))
        other = SavingsGoalService(temp_db, other_auth)

        assert other.get_goal(goal_id) is None
        with pytest.raises(NotFoundError, match=f"Savings goal {goal_id} not found"):
            other.update_goal(goal_id, "Mine now", Decimal("1"))
