"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the ORM schema can change
without touching services or the CLI.
"""

from decimal import Decimal

from pocketbook.domain import entities as domain
from pocketbook.database.models import (
    User as ORMUser,
    Income as ORMIncome,
    Expense as ORMExpense,
    SavingsGoal as ORMSavingsGoal,
    EmailWhitelist as ORMEmailWhitelist,
    AdminUser as ORMAdminUser,
    PendingDeletion as ORMPendingDeletion,
)


def _decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        email=orm_user.email,
        full_name=orm_user.full_name,
        created_at=orm_user.created_at,
        marked_for_deletion=bool(orm_user.marked_for_deletion),
        deletion_requested_at=orm_user.deletion_requested_at,
    )


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy Income model to domain Income entity."""
    return domain.Income(
        id=orm_income.id,
        user_id=orm_income.user_id,
        amount=_decimal(orm_income.amount),
        source=orm_income.source,
        date=orm_income.date,
        created_at=orm_income.created_at,
        updated_at=orm_income.updated_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        user_id=orm_expense.user_id,
        amount=_decimal(orm_expense.amount),
        description=orm_expense.description,
        date=orm_expense.date,
        created_at=orm_expense.created_at,
        updated_at=orm_expense.updated_at,
    )


def savings_goal_to_domain(orm_goal: ORMSavingsGoal) -> domain.SavingsGoal:
    """Convert SQLAlchemy SavingsGoal model to domain SavingsGoal entity."""
    return domain.SavingsGoal(
        id=orm_goal.id,
        user_id=orm_goal.user_id,
        name=orm_goal.name,
        target_amount=_decimal(orm_goal.target_amount),
        current_amount=_decimal(orm_goal.current_amount or 0),
        target_date=orm_goal.target_date,
        created_at=orm_goal.created_at,
        updated_at=orm_goal.updated_at,
    )


def whitelisted_email_to_domain(orm_entry: ORMEmailWhitelist) -> domain.WhitelistedEmail:
    """Convert SQLAlchemy EmailWhitelist model to domain WhitelistedEmail entity."""
    return domain.WhitelistedEmail(
        id=orm_entry.id,
        email=orm_entry.email,
        notes=orm_entry.notes,
        status=domain.WhitelistStatus(orm_entry.status),
        created_at=orm_entry.created_at,
    )


def admin_user_to_domain(orm_admin: ORMAdminUser) -> domain.AdminUser:
    """Convert SQLAlchemy AdminUser model to domain AdminUser entity."""
    return domain.AdminUser(
        user_id=orm_admin.user_id,
        user_email=orm_admin.user.email if orm_admin.user is not None else "",
        created_by=orm_admin.created_by,
        created_at=orm_admin.created_at,
    )


def pending_deletion_to_domain(orm_request: ORMPendingDeletion) -> domain.PendingDeletion:
    return domain.PendingDeletion(
        id=orm_request.id,
        user_id=orm_request.user_id,
        email=orm_request.email,
        requested_at=orm_request.requested_at,
    )
