"""Tests for income, expense, savings and transaction commands."""

from datetime import date
from decimal import Decimal

import pytest

USER = "user@example.com"


@pytest.fixture
def as_user(invoke, user_auth):
    def _invoke(args, input=None):
        return invoke(args, user=USER, input=input)

    return _invoke


class TestIncomeCommands:
    """Tests for the income command group."""

    def test_add_income(self, as_user, temp_db, user_auth):
        result = as_user(["income", "add", "--amount", "$2,500.00", "--source", "Salary", "--date", "2024-05-01"])

        assert result.exit_code == 0
        assert "Added income" in result.output
        assert "Amount: $2,500.00" in result.output

        temp_db.disconnect()
        incomes = temp_db.list_incomes(user_auth.user_id)
        assert len(incomes) == 1
        assert incomes[0].amount == Decimal("2500.00")
        assert incomes[0].date == date(2024, 5, 1)

    def test_add_income_defaults_to_today(self, as_user, temp_db, user_auth):
        result = as_user(["income", "add", "--amount", "10", "--source", "Tips"])

        assert result.exit_code == 0
        temp_db.disconnect()
        assert temp_db.list_incomes(user_auth.user_id)[0].date == date.today()

    def test_add_income_invalid_amount(self, as_user):
        result = as_user(["income", "add", "--amount", "lots", "--source", "Salary"])

        assert result.exit_code == 1
        assert "Error: Invalid amount" in result.output

    def test_add_income_negative_amount(self, as_user):
        result = as_user(["income", "add", "--amount", "-5", "--source", "Salary"])

        assert result.exit_code == 1
        assert "Amount must not be negative" in result.output

    def test_add_income_invalid_date(self, as_user):
        result = as_user(["income", "add", "--amount", "5", "--source", "Salary", "--date", "someday"])

        assert result.exit_code == 1
        assert "Error: Invalid date" in result.output

    def test_list_income(self, as_user, sample_ledger):
        result = as_user(["income", "list"])

        assert result.exit_code == 0
        assert "Salary" in result.output
        assert "Freelance" in result.output
        assert "Total: $2,800.00 (2 entries)" in result.output

    def test_list_income_empty(self, as_user):
        result = as_user(["income", "list"])

        assert result.exit_code == 0
        assert "No income entries found" in result.output

    def test_edit_income_keeps_omitted_fields(self, as_user, temp_db, user_auth, sample_ledger):
        income_id = sample_ledger["income"][1]

        result = as_user(["income", "edit", str(income_id), "--amount", "350"])

        assert result.exit_code == 0
        temp_db.disconnect()
        income = temp_db.get_income(user_auth.user_id, income_id)
        assert income.amount == Decimal("350")
        assert income.source == "Freelance"
        assert income.date == date(2024, 5, 13)

    def test_edit_missing_income(self, as_user):
        result = as_user(["income", "edit", "999", "--amount", "1"])

        assert result.exit_code == 1
        assert "Income entry 999 not found" in result.output

    def test_delete_income(self, as_user, temp_db, user_auth, sample_ledger):
        income_id = sample_ledger["income"][0]

        result = as_user(["income", "delete", str(income_id)], input="y\n")

        assert result.exit_code == 0
        assert f"Deleted income {income_id}" in result.output
        temp_db.disconnect()
        assert temp_db.get_income(user_auth.user_id, income_id) is None

    def test_delete_income_cancelled(self, as_user, sample_ledger):
        result = as_user(["income", "delete", str(sample_ledger["income"][0])], input="n\n")

        assert result.exit_code == 0
        assert "Deletion cancelled" in result.output

    def test_cannot_touch_other_users_income(self, invoke, other_auth, sample_ledger):
        income_id = sample_ledger["income"][0]

        result = invoke(["income", "delete", str(income_id)], user="other@example.com", input="y\n")

        assert result.exit_code == 1
        assert "not found" in result.output


class TestExpenseCommands:
    """Tests for the expense command group."""

    def test_add_and_list_expense(self, as_user):
        result = as_user(
            ["expense", "add", "--amount", "54.20", "--description", "Groceries", "--date", "2024-05-15"]
        )
        assert result.exit_code == 0
        assert "Added expense" in result.output

        result = as_user(["expense", "list"])
        assert result.exit_code == 0
        assert "Groceries" in result.output
        assert "$54.20" in result.output

    def test_add_expense_blank_description(self, as_user):
        result = as_user(["expense", "add", "--amount", "5", "--description", " "])

        assert result.exit_code == 1
        assert "Description, amount, and date are required" in result.output

    def test_edit_expense(self, as_user, temp_db, user_auth, sample_ledger):
        expense_id = sample_ledger["expense"][0]

        result = as_user(["expense", "edit", str(expense_id), "--description", "Rent (May)", "--date", "2024-05-02"])

        assert result.exit_code == 0
        temp_db.disconnect()
        expense = temp_db.get_expense(user_auth.user_id, expense_id)
        assert expense.description == "Rent (May)"
        assert expense.date == date(2024, 5, 2)
        assert expense.amount == Decimal("900")

    def test_delete_expense(self, as_user, sample_ledger):
        expense_id = sample_ledger["expense"][2]

        result = as_user(["expense", "delete", str(expense_id)], input="y\n")

        assert result.exit_code == 0
        result = as_user(["expense", "list"])
        assert "Coffee" not in result.output


class TestSavingsCommands:
    """Tests for the savings command group."""

    def test_add_and_list_goal(self, as_user):
        result = as_user(
            ["savings", "add", "--name", "Vacation", "--target", "2000", "--current", "500", "--target-date", "2025-07-01"]
        )
        assert result.exit_code == 0
        assert "Created savings goal 'Vacation'" in result.output

        result = as_user(["savings", "list"])
        assert result.exit_code == 0
        assert "Vacation" in result.output
        assert "$500.00 of $2,000.00 (25%)" in result.output
        assert "by 2025-07-01" in result.output

    def test_list_completed_goal(self, as_user, savings_service):
        savings_service.add_goal("Phone", Decimal("500"), current_amount=Decimal("600"))

        result = as_user(["savings", "list"])

        assert "(100%)" in result.output
        assert "completed" in result.output

    def test_edit_goal_clears_target_date(self, as_user, temp_db, user_auth, savings_service):
        goal_id = savings_service.add_goal(
            "Vacation", Decimal("2000"), current_amount=Decimal("500"), target_date=date(2025, 7, 1)
        )

        result = as_user(["savings", "edit", str(goal_id), "--current", "800", "--clear-target-date"])

        assert result.exit_code == 0
        temp_db.disconnect()
        goal = temp_db.get_savings_goal(user_auth.user_id, goal_id)
        assert goal.current_amount == Decimal("800")
        assert goal.target_amount == Decimal("2000")
        assert goal.target_date is None

    def test_edit_goal_keeps_target_date(self, as_user, temp_db, user_auth, savings_service):
        goal_id = savings_service.add_goal("Vacation", Decimal("2000"), target_date=date(2025, 7, 1))

        result = as_user(["savings", "edit", str(goal_id), "--name", "Trip"])

        assert result.exit_code == 0
        temp_db.disconnect()
        goal = temp_db.get_savings_goal(user_auth.user_id, goal_id)
        assert goal.name == "Trip"
        assert goal.target_date == date(2025, 7, 1)

    @pytest.mark.parametrize("option", ["--target", "--current"])
    def test_edit_goal_rejects_empty_amount(self, as_user, temp_db, user_auth, savings_service, option):
        goal_id = savings_service.add_goal("Vacation", Decimal("2000"), current_amount=Decimal("500"))

        result = as_user(["savings", "edit", str(goal_id), option, ""])

        assert result.exit_code == 1
        assert "Error: Invalid" in result.output
        temp_db.disconnect()
        goal = temp_db.get_savings_goal(user_auth.user_id, goal_id)
        assert goal.target_amount == Decimal("2000")
        assert goal.current_amount == Decimal("500")

    def test_add_goal_rejects_empty_current(self, as_user):
        result = as_user(["savings", "add", "--name", "Vacation", "--target", "2000", "--current", ""])

        assert result.exit_code == 1
        assert "Error: Invalid current amount" in result.output

    def test_delete_goal(self, as_user, savings_service):
        goal_id = savings_service.add_goal("Vacation", Decimal("2000"))

        result = as_user(["savings", "delete", str(goal_id)], input="y\n")

        assert result.exit_code == 0
        assert "No savings goals found" in as_user(["savings", "list"]).output


class TestTransactionsCommand:
    """Tests for the combined transactions listing."""

    def test_list_all(self, as_user, sample_ledger):
        result = as_user(["transactions"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if " | " in line]
        assert len(lines) == 5
        assert "Coffee" in lines[0]
        assert "+$2,500.00" in result.output
        assert "-$900.00" in result.output

    def test_limit(self, as_user, sample_ledger):
        result = as_user(["transactions", "--limit", "2"])

        lines = [line for line in result.output.splitlines() if " | " in line]
        assert len(lines) == 2

    def test_empty(self, as_user):
        result = as_user(["transactions", "--recent"])

        assert result.exit_code == 0
        assert "No transactions found" in result.output

    def test_filter_by_type(self, as_user, sample_ledger):
        result = as_user(["transactions", "--type", "income"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if " | " in line]
        assert len(lines) == 2
        assert all("income" in line for line in lines)

    def test_search(self, as_user, sample_ledger):
        result = as_user(["transactions", "--search", "GROC"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if " | " in line]
        assert len(lines) == 1
        assert "Groceries" in lines[0]

    def test_search_without_match(self, as_user, sample_ledger):
        result = as_user(["transactions", "--type", "expense", "--search", "salary"])

        assert result.exit_code == 0
        assert "No transactions found" in result.output

    def test_rejects_unknown_type(self, as_user):
        result = as_user(["transactions", "--type", "transfer"])

        assert result.exit_code == 2
        assert "Invalid value" in result.output
