# domain/services/thai_numbers.py --> locale-formatted numbers ("1,000,000 บาท", "500,000 หุ้น")
from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

# ASCII only: Thai digits and unit words (บาท, หุ้น, คน, shares...) are dropped.
_NOT_NUMERIC_RE = re.compile(r"[^0-9.\-]")


def parse_thai_number(s: Any) -> float:
    """
    "1,000,000 บาท" -> 1000000.0, "500,000 หุ้น" -> 500000.0.
    Empty or non-numeric input gives 0, never an error.
    """
    if s is None:
        return 0.0
    if isinstance(s, (int, float)) and not isinstance(s, bool):
        return float(s) if s == s else 0.0  # NaN -> 0
    cleaned = _NOT_NUMERIC_RE.sub("", str(s).replace(",", ""))
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        # "1.2.3", "-", "--5" ...
        return 0.0


def is_numeric_text(s: str) -> bool:
    """True for cells that are only a number ("3", "1,000", "12.5")."""
    t = (s or "").strip()
    return bool(t) and re.fullmatch(r"[0-9][0-9,]*(\.[0-9]+)?", t) is not None


def round_half_up(value: float, places: int = 2) -> float:
    """Round on the last kept digit with .5 going up (33.335 -> 33.34)."""
    try:
        q = Decimal(1).scaleb(-places)
        return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def format_number(n: float) -> str:
    """1000000 -> "1,000,000"; keeps up to 2 decimals when present."""
    if float(n).is_integer():
        return f"{int(n):,}"
    return f"{n:,.2f}".rstrip("0").rstrip(".")


def format_money(n: float) -> str:
    return f"{format_number(n)} บาท"
