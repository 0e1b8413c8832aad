"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist (or is not visible to the caller)."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class AuthorizationError(DomainError):
    """The acting user is not allowed to perform the operation."""


UNAUTHORIZED = "Unauthorized"
NOT_WHITELISTED = "Your email is not on the authorized whitelist"
INVALID_EMAIL = "Please enter a valid email address"


def income_not_found(income_id: int) -> str:
    """Return message for missing income entry."""
    return f"Income entry {income_id} not found"


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def savings_goal_not_found(goal_id: int) -> str:
    """Return message for missing savings goal."""
    return f"Savings goal {goal_id} not found"


def whitelist_entry_not_found(entry_id: int) -> str:
    """Return message for missing whitelist entry."""
    return f"Whitelist entry {entry_id} not found"


def user_not_found(user_id: int) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def admin_user_not_found(user_id: int) -> str:
    return f"User {user_id} is not an admin"


def duplicate_whitelist_email(email: str) -> str:
    return f"Email '{email}' is already on the whitelist"


def duplicate_user_email(email: str) -> str:
    return f"A user with email '{email}' already exists"
