# domain/services/document_lookup.py
from __future__ import annotations
import re
from datetime import date
from typing import Optional, Sequence

from domain.models.company import CompanyDocument
from domain.services.dates import thai_date_stamp

_DATE_SUFFIX_RE = re.compile(r"\s*\(\d{2}/\d{2}/\d{4}\)\s*$")


def find_document_index(names: Sequence[str], wanted: str) -> Optional[int]:
    """
    Documents are identified by name, and names drift ("Certificate" vs
    "Certificate (01/02/2026)"). Exact match first, then containment
    in either direction; first hit in list order wins.
    """
    if not wanted:
        return None
    for i, n in enumerate(names):
        if n == wanted:
            return i
    for i, n in enumerate(names):
        if n and (wanted in n or n in wanted):
            return i
    return None


def find_document(documents: Sequence[CompanyDocument], wanted: str) -> Optional[CompanyDocument]:
    idx = find_document_index([d.name for d in documents], wanted)
    return None if idx is None else documents[idx]


def strip_date_suffix(name: str) -> str:
    """"Certificate (01/02/2026)" -> "Certificate"."""
    return _DATE_SUFFIX_RE.sub("", name or "").strip()


def stamp_document_name(name: str, day: Optional[date] = None) -> str:
    """Replace any old "(DD/MM/YYYY)" stamp with the given (default: today) date."""
    return f"{strip_date_suffix(name)} ({thai_date_stamp(day)})"
