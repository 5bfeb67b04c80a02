# domain/services/drive_ids.py --> file-reference ids vs. full links
from __future__ import annotations
import re
from typing import Tuple

RECOGNIZED_FILE_HOSTS = ("drive.google.com", "docs.google.com")
INTERNAL_SHEET_PREFIX = "_"

_PATH_ID_RE = re.compile(r"/d/([a-zA-Z0-9_-]+)")
_QUERY_ID_RE = re.compile(r"id=([a-zA-Z0-9_-]+)")


def extract_drive_file_id(url_or_id: str) -> str:
    """
    "https://drive.google.com/file/d/ABC123/view" -> "ABC123"
    "https://drive.google.com/open?id=XYZ"        -> "XYZ"
    "ABC123"                                      -> "ABC123" (already an id)
    "https://unrelated.example/x"                 -> ""
    """
    if not url_or_id:
        return ""
    s = str(url_or_id).strip()
    if "/" not in s:
        return s
    m = _PATH_ID_RE.search(s) or _QUERY_ID_RE.search(s)
    return m.group(1) if m else ""


def is_http_link(s: str) -> bool:
    return (s or "").strip().lower().startswith("http")


def is_recognized_file_host(url: str) -> bool:
    low = (url or "").lower()
    return any(h in low for h in RECOGNIZED_FILE_HOSTS)


def split_seal_reference(raw: str) -> Tuple[str, str]:
    """
    Seal value -> (drive_file_id, external_url). Exactly one side is filled,
    or neither when raw is empty. Links outside Drive go to the URL side;
    anything else is a file reference, kept as written when no id can be
    pulled out of it ("/uploads/seal.png").
    """
    s = (raw or "").strip()
    if not s:
        return "", ""
    if is_http_link(s) and not is_recognized_file_host(s):
        return "", s
    return extract_drive_file_id(s) or s, ""


def is_special_sheet(name: str) -> bool:
    """Internal sheets (_permissions, _versions, ...) are not companies."""
    return (name or "").startswith(INTERNAL_SHEET_PREFIX)
