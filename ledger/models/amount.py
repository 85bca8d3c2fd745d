"""
Fixed-point money amounts.

Every amount in the ledger is an integer number of "units", where one unit
is 1/10,000 of the currency (4 fractional digits). $1.50 is stored as
15000. Integer arithmetic is exact, so balances never drift the way binary
floating point does (0.1 + 0.2 != 0.3).

Input text with more than 4 fractional digits is truncated toward zero at
parse time: "0.55559" becomes 5555 units. Nothing downstream ever rounds.
"""

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation

# Units per whole currency unit
SCALE = 10_000
FRACTIONAL_DIGITS = 4

_QUANTUM = Decimal(1).scaleb(-FRACTIONAL_DIGITS)

# Plain decimal notation only: no digit separators, NaN or Infinity
_DECIMAL_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_amount(text: str) -> int:
    """
    Convert decimal text ("1.5", " 2.0001 ", "3") into scaled units.

    Raises:
        ValueError: If the text is empty, not a number, NaN or infinite.
    """
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("amount is empty")
    if not _DECIMAL_TEXT.fullmatch(cleaned):
        raise ValueError(f"amount {cleaned!r} is not a decimal number")

    value = Decimal(cleaned)
    try:
        truncated = value.quantize(_QUANTUM, rounding=ROUND_DOWN)
    except InvalidOperation:
        # More digits than the decimal context can hold
        raise ValueError(f"amount {cleaned!r} is out of range") from None
    return int(truncated.scaleb(FRACTIONAL_DIGITS))


def format_amount(units: int) -> str:
    """Render scaled units with exactly 4 fractional digits (15000 -> "1.5000")."""
    sign = "-" if units < 0 else ""
    whole, fraction = divmod(abs(units), SCALE)
    return f"{sign}{whole}.{fraction:0{FRACTIONAL_DIGITS}d}"
