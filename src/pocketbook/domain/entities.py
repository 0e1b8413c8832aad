"""Domain model entities for pocketbook.

These are pure data classes representing business concepts, independent of
database schema. Services and the CLI only ever see these, never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class WhitelistStatus(str, Enum):
    """Status of a whitelisted email."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TransactionType(str, Enum):
    """Kind of entry in the combined transaction feed."""

    INCOME = "income"
    EXPENSE = "expense"


class Period(str, Enum):
    """Reporting period of the overview chart."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    SIX_MONTH = "6month"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: "str | Period") -> "Period":
        """Parse a period selector, raising ValueError for unknown values."""
        if isinstance(value, Period):
            return value
        normalized = value.strip().lower()
        for period in cls:
            if period.value == normalized:
                return period
        supported = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown period: '{value}'. Supported periods: {supported}")


class ChartStatus(str, Enum):
    """Whether the overview chart shows real, outdated or illustrative data."""

    OK = "ok"
    STALE = "stale"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class User:
    """Registered user (the authenticated principal)."""

    id: int
    email: str
    full_name: Optional[str]
    created_at: datetime
    marked_for_deletion: bool = False
    deletion_requested_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        """Full name if set, otherwise the local part of the email."""
        if self.full_name:
            return self.full_name
        return self.email.split("@")[0] or "User"


@dataclass(frozen=True)
class Income:
    """Income entry domain entity."""

    id: int
    user_id: int
    amount: Decimal
    source: str
    date: date
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    user_id: int
    amount: Decimal
    description: str
    date: date
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MoneyEntry:
    """A dated, amount-bearing ledger entry as seen by the chart aggregation."""

    id: int
    amount: Decimal
    label: str
    date: date

    @classmethod
    def from_income(cls, income: Income) -> "MoneyEntry":
        return cls(id=income.id, amount=income.amount, label=income.source, date=income.date)

    @classmethod
    def from_expense(cls, expense: Expense) -> "MoneyEntry":
        return cls(
            id=expense.id, amount=expense.amount, label=expense.description, date=expense.date
        )


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal domain entity."""

    id: int
    user_id: int
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: Optional[date]
    created_at: datetime
    updated_at: datetime

    @property
    def progress_percentage(self) -> Decimal:
        """Progress towards the target, capped at 100."""
        if self.target_amount <= 0:
            return Decimal("100")
        return min(Decimal("100"), self.current_amount / self.target_amount * 100)

    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.target_amount


@dataclass(frozen=True)
class WhitelistedEmail:
    """Email address allowed to sign up."""

    id: int
    email: str
    notes: Optional[str]
    status: WhitelistStatus
    created_at: datetime


@dataclass(frozen=True)
class AdminUser:
    """Admin grant for a user."""

    user_id: int
    user_email: str
    created_by: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class PendingDeletion:
    """Account deletion request."""

    id: int
    user_id: int
    email: str
    requested_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Entry of the combined income/expense feed."""

    id: int
    type: TransactionType
    amount: Decimal
    description: str
    date: date
    created_at: datetime


@dataclass(frozen=True)
class Bucket:
    """A contiguous date sub-range of a reporting period with aggregated totals.

    Both ends of the range are inclusive.
    """

    range_start: date
    range_end: date
    name: str
    income_total: Decimal = Decimal("0")
    expense_total: Decimal = Decimal("0")

    @property
    def balance(self) -> Decimal:
        return self.income_total - self.expense_total

    def contains(self, day: date) -> bool:
        return self.range_start <= day <= self.range_end


@dataclass(frozen=True)
class OverviewChart:
    """Bucketed series handed to the chart renderer."""

    period: Period
    reference_date: date
    buckets: tuple[Bucket, ...]
    status: ChartStatus
    y_axis_max: Decimal
    y_axis_min: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown in the dashboard summary cards."""

    display_name: str
    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    income_count: int
    expense_count: int
    goal_count: int
    total_target: Decimal
    total_saved: Decimal
    progress_percentage: Decimal
    average_progress: Decimal
    completed_goals: int
    closest_goal: Optional[SavingsGoal]
