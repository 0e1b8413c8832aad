"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from pocketbook.domain.entities import (
    User,
    Income,
    Expense,
    SavingsGoal,
    WhitelistedEmail,
    WhitelistStatus,
    AdminUser,
    PendingDeletion,
)


class Database(ABC):
    """Abstract database interface for pocketbook.

    Every ledger operation takes the acting ``user_id`` and only ever touches
    rows owned by that user. A row owned by someone else is indistinguishable
    from a missing row.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, email: str, full_name: Optional[str] = None) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        pass

    @abstractmethod
    def update_user_profile(self, user_id: int, full_name: str) -> None:
        """Update the user's display name."""
        pass

    @abstractmethod
    def mark_user_for_deletion(self, user_id: int, requested_at: datetime) -> int:
        """Record a deletion request and flag the user. Returns request ID."""
        pass

    @abstractmethod
    def list_pending_deletions(self) -> list[PendingDeletion]:
        """List account deletion requests, newest first."""
        pass

    # Income operations
    @abstractmethod
    def create_income(self, user_id: int, amount: Decimal, source: str, date: date) -> int:
        """Create an income entry. Returns income ID."""
        pass

    @abstractmethod
    def get_income(self, user_id: int, income_id: int) -> Optional[Income]:
        """Get one of the user's income entries."""
        pass

    @abstractmethod
    def list_incomes(self, user_id: int) -> list[Income]:
        """List the user's income entries, newest date first."""
        pass

    @abstractmethod
    def update_income(
        self, user_id: int, income_id: int, amount: Decimal, source: str, date: date
    ) -> None:
        """Update one of the user's income entries."""
        pass

    @abstractmethod
    def delete_income(self, user_id: int, income_id: int) -> None:
        """Delete one of the user's income entries."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(self, user_id: int, amount: Decimal, description: str, date: date) -> int:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, user_id: int, expense_id: int) -> Optional[Expense]:
        """Get one of the user's expenses."""
        pass

    @abstractmethod
    def list_expenses(self, user_id: int) -> list[Expense]:
        """List the user's expenses, newest date first."""
        pass

    @abstractmethod
    def update_expense(
        self, user_id: int, expense_id: int, amount: Decimal, description: str, date: date
    ) -> None:
        """Update one of the user's expenses."""
        pass

    @abstractmethod
    def delete_expense(self, user_id: int, expense_id: int) -> None:
        """Delete one of the user's expenses."""
        pass

    # Savings goal operations
    @abstractmethod
    def create_savings_goal(
        self,
        user_id: int,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: Optional[date] = None,
    ) -> int:
        """Create a savings goal. Returns goal ID."""
        pass

    @abstractmethod
    def get_savings_goal(self, user_id: int, goal_id: int) -> Optional[SavingsGoal]:
        """Get one of the user's savings goals."""
        pass

    @abstractmethod
    def list_savings_goals(self, user_id: int) -> list[SavingsGoal]:
        """List the user's savings goals, most recently created first."""
        pass

    @abstractmethod
    def update_savings_goal(
        self,
        user_id: int,
        goal_id: int,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: Optional[date] = None,
    ) -> None:
        """Update one of the user's savings goals."""
        pass

    @abstractmethod
    def delete_savings_goal(self, user_id: int, goal_id: int) -> None:
        """Delete one of the user's savings goals."""
        pass

    # Whitelist operations
    @abstractmethod
    def add_whitelisted_email(
        self, email: str, notes: Optional[str] = None, status: WhitelistStatus = WhitelistStatus.ACTIVE
    ) -> int:
        """Add an email to the whitelist. Returns entry ID."""
        pass

    @abstractmethod
    def get_whitelisted_email(self, entry_id: int) -> Optional[WhitelistedEmail]:
        """Get whitelist entry by ID."""
        pass

    @abstractmethod
    def get_whitelisted_email_by_address(self, email: str) -> Optional[WhitelistedEmail]:
        """Get whitelist entry by email address (case-insensitive)."""
        pass

    @abstractmethod
    def list_whitelisted_emails(self) -> list[WhitelistedEmail]:
        """List whitelist entries, newest first."""
        pass

    @abstractmethod
    def update_whitelist_status(self, entry_id: int, status: WhitelistStatus) -> None:
        """Change the status of a whitelist entry."""
        pass

    @abstractmethod
    def delete_whitelisted_email(self, entry_id: int) -> None:
        """Remove a whitelist entry."""
        pass

    # Admin operations
    @abstractmethod
    def is_admin(self, user_id: int) -> bool:
        """Check whether the user holds an admin grant."""
        pass

    @abstractmethod
    def add_admin_user(self, user_id: int, created_by: Optional[int] = None) -> None:
        """Grant admin rights to a user."""
        pass

    @abstractmethod
    def list_admin_users(self) -> list[AdminUser]:
        """List admin grants, newest first."""
        pass

    @abstractmethod
    def remove_admin_user(self, user_id: int) -> None:
        """Revoke a user's admin grant."""
        pass

    @abstractmethod
    def count_admin_users(self) -> int:
        """Count admin grants."""
        pass
