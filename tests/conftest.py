"""Shared pytest fixtures for pocketbook tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from pocketbook.database.factories import create_sqlite_database
from pocketbook.domain.auth import AuthService
from pocketbook.domain.expense import ExpenseService
from pocketbook.domain.income import IncomeService
from pocketbook.domain.savings import SavingsGoalService

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "user@example.com"
OTHER_EMAIL = "other@example.com"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def auth_service(temp_db):
    return AuthService(temp_db)


@pytest.fixture
def admin_auth(auth_service):
    """Signed-in context of the bootstrapped administrator."""
    return auth_service.bootstrap_admin(ADMIN_EMAIL, full_name="Ada Admin")


@pytest.fixture
def user_auth(temp_db, admin_auth, auth_service):
    """Signed-in context of a regular whitelisted user."""
    temp_db.add_whitelisted_email(USER_EMAIL)
    return auth_service.sign_up(USER_EMAIL, full_name="Uma User")


@pytest.fixture
def other_auth(temp_db, admin_auth, auth_service):
    """Signed-in context of a second regular user."""
    temp_db.add_whitelisted_email(OTHER_EMAIL)
    return auth_service.sign_up(OTHER_EMAIL)


@pytest.fixture
def income_service(temp_db, user_auth):
    return IncomeService(temp_db, user_auth)


@pytest.fixture
def expense_service(temp_db, user_auth):
    return ExpenseService(temp_db, user_auth)


@pytest.fixture
def savings_service(temp_db, user_auth):
    return SavingsGoalService(temp_db, user_auth)


@pytest.fixture
def sample_ledger(income_service, expense_service):
    """A few income and expense entries in May 2024 for the regular user."""
    income_ids = [
        income_service.add_income(Decimal("2500.00"), "Salary", date(2024, 5, 1)),
        income_service.add_income(Decimal("300.00"), "Freelance", date(2024, 5, 13)),
    ]
    expense_ids = [
        expense_service.add_expense(Decimal("900.00"), "Rent", date(2024, 5, 1)),
        expense_service.add_expense(Decimal("54.20"), "Groceries", date(2024, 5, 15)),
        expense_service.add_expense(Decimal("12.50"), "Coffee", date(2024, 5, 31)),
    ]
    return {"income": income_ids, "expense": expense_ids}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def invoke(cli_runner, temp_db):
    """Invoke the CLI against the temporary database, optionally as a user."""
    from pocketbook.cli.main import cli

    def _invoke(args, user=None, input=None):
        base = ["--db-path", temp_db.database_path]
        if user is not None:
            base += ["--user", user]
        return cli_runner.invoke(cli, base + list(args), input=input, env={"POCKETBOOK_USER": None})

    return _invoke
