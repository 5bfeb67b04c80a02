# domain/services/expiry_classifier.py
from __future__ import annotations
import math
from datetime import date, datetime
from typing import Any, Optional

from domain.models.expiry_status import ExpiryStatus
from domain.services.dates import BANGKOK_TZ, bangkok_today, parse_registry_date

_ALERTING = ("expired", "expiring-7d", "expiring-30d")


def classify_expiry(expiry_date: Any, today: Optional[date] = None) -> ExpiryStatus:
    """
    Bucket a document expiry date by how soon it lapses.

        diff_days < 0      -> "expired"
        0  <= diff <= 7    -> "expiring-7d"
        8  <= diff <= 30   -> "expiring-30d"
        otherwise          -> "ok"

    Missing or unparseable dates are "unknown". `today` defaults to the
    current date in Asia/Bangkok; pass it explicitly for repeatable results.
    """
    if expiry_date is None or (isinstance(expiry_date, str) and not expiry_date.strip()):
        return "unknown"

    expiry = parse_registry_date(expiry_date)
    if expiry is None:
        return "unknown"

    ref = today or bangkok_today()
    if isinstance(ref, datetime):
        ref = ref.astimezone(BANGKOK_TZ).date() if ref.tzinfo else ref.date()
    today_midnight = datetime(ref.year, ref.month, ref.day, tzinfo=BANGKOK_TZ)

    diff_days = math.ceil((expiry - today_midnight).total_seconds() / 86400)

    if diff_days < 0:
        return "expired"
    if diff_days <= 7:
        return "expiring-7d"
    if diff_days <= 30:
        return "expiring-30d"
    return "ok"


def is_alerting(status: str) -> bool:
    return status in _ALERTING
