# domain/services/dates.py
from __future__ import annotations
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

# Registry dates are always read as Asia/Bangkok (no DST, fixed UTC+7).
BANGKOK_TZ = timezone(timedelta(hours=7), name="Asia/Bangkok")

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DMY_RE = re.compile(r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})$")


def parse_registry_date(d: Any) -> Optional[datetime]:
    """
    Turn "2026-03-31", "31/03/2026" or "31-3-2026" into midnight UTC+7.

    Only those two shapes are accepted. Anything else (Buddhist-era text,
    "Dec 9, 2025", impossible days like 30/02/2026) gives None.
    """
    if d is None:
        return None
    if isinstance(d, datetime):
        d = d.astimezone(BANGKOK_TZ) if d.tzinfo else d
        return datetime(d.year, d.month, d.day, tzinfo=BANGKOK_TZ)
    if isinstance(d, date):
        return datetime(d.year, d.month, d.day, tzinfo=BANGKOK_TZ)

    s = str(d).strip()
    m = _ISO_RE.match(s)
    if m:
        yyyy, mm, dd = m.groups()
    else:
        m = _DMY_RE.match(s)
        if not m:
            return None
        dd, mm, yyyy = m.groups()

    try:
        return datetime(int(yyyy), int(mm), int(dd), tzinfo=BANGKOK_TZ)
    except ValueError:
        return None


def bangkok_now() -> datetime:
    return datetime.now(BANGKOK_TZ)


def bangkok_today() -> date:
    return bangkok_now().date()


def thai_now() -> str:
    """Wall-clock timestamp in Bangkok, "YYYY-MM-DDTHH:MM:SS"."""
    return bangkok_now().strftime("%Y-%m-%dT%H:%M:%S")


def thai_date_stamp(day: Optional[date] = None) -> str:
    """DD/MM/YYYY, the format used in document names and update dates."""
    d = day or bangkok_today()
    return d.strftime("%d/%m/%Y")
