"""Parsing of money amounts typed on the command line."""

import re
from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")
CURRENCY_SYMBOLS = re.compile(r"[$€£¥]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money amount into a Decimal with two decimal places.

    Accepts "1234.5", "$1,234.50", "€20" and the negative forms "-5" and
    "(5.00)". Sign checks are left to the services.

    Raises:
        ValueError: If the text is not a finite number with at most two decimals
    """
    text = (amount_str or "").strip()
    if not text:
        raise ValueError("Empty amount string")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    cleaned = CURRENCY_SYMBOLS.sub("", text).replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
        cents = amount.quantize(CENT) if amount.is_finite() else None
    except InvalidOperation:
        cents = None
    if cents is None:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")
    if cents != amount:
        raise ValueError(f"Amount '{amount_str.strip()}' has more than two decimal places")

    return -cents if negative else cents
