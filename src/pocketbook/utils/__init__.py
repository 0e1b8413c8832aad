"""Utility functions for pocketbook."""

from pocketbook.utils.date_parser import parse_date
from pocketbook.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
