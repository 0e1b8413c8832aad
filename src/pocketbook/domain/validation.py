"""Field checks shared by the ledger services."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from pocketbook.domain.errors import ValidationError


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def check_non_negative(amount: Decimal, field: str = "Amount") -> Decimal:
    """Return ``amount`` as a Decimal, rejecting negative or non-finite values."""
    try:
        amount = Decimal(amount)
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a number")
    if amount < 0:
        raise ValidationError(f"{field} must not be negative")
    return amount
