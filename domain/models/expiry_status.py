# domain/models/expiry_status.py
from typing import Dict, Literal


# Derived on every read, never stored.
ExpiryStatus = Literal[
    "expired",       # expiry date already passed
    "expiring-7d",   # 0..7 days left (inclusive)
    "expiring-30d",  # 8..30 days left (inclusive)
    "ok",            # more than 30 days left
    "unknown",       # no date, or a date we can't parse
]

# Urgency rank, most urgent first. "unknown" sorts last.
EXPIRY_RANK: Dict[str, int] = {
    "expired": 0,
    "expiring-7d": 1,
    "expiring-30d": 2,
    "ok": 3,
    "unknown": 4,
}
