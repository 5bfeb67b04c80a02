from __future__ import annotations
from typing import Protocol, Dict, Any, List, Optional, Sequence
from dataclasses import dataclass

from domain.models.company import Company, VersionEntry

Grid = List[List[Optional[str]]]


class CompanyNotFoundError(LookupError):
    """The requested company key has no backing sheet or store record."""

    def __init__(self, sheet_name: str) -> None:
        super().__init__(f'Company "{sheet_name}" not found')
        self.sheet_name = sheet_name


class DuplicateCompanyError(ValueError):
    def __init__(self, sheet_name: str) -> None:
        super().__init__(f'Company "{sheet_name}" already exists')
        self.sheet_name = sheet_name


# =========================
# Read side
# =========================

class CompanyGridSource(Protocol):
    """Port: one free-text grid (rows of optional cells) per company key."""

    def list_sheets(self) -> List[str]:
        """Company keys only; internal sheets ("_...") are left out."""
        ...

    def load_rows(self, sheet_name: str) -> Optional[Grid]:
        """Rows top-to-bottom, or None if there is no such sheet."""
        ...


class CompanyStore(Protocol):
    """Port: column-shaped company records plus their child tables."""

    def list_keys(self) -> List[str]: ...

    def load_tables(self, sheet_name: str) -> Optional[Dict[str, Any]]:
        """
        Return {"company": {...}, "directors": [...], "shareholders": [...],
        "documents": [...]} or None when the key is unknown.
        """
        ...

    def create(self, sheet_name: str, company_row: Dict[str, Any]) -> None: ...
    def delete(self, sheet_name: str) -> bool: ...

    def update_columns(self, sheet_name: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Apply column updates; return the previous values of those columns."""
        ...

    # Child tables are replaced as a whole, in one write.
    def replace_directors(self, sheet_name: str, rows: List[Dict[str, Any]]) -> None: ...
    def replace_shareholders(self, sheet_name: str, rows: List[Dict[str, Any]]) -> None: ...

    def insert_document(self, sheet_name: str, row: Dict[str, Any]) -> int: ...
    def update_document(self, sheet_name: str, doc_id: int, updates: Dict[str, Any]) -> None: ...
    def delete_document(self, sheet_name: str, doc_id: int) -> bool: ...


class CompanyLoader(Protocol):
    """Use-case seam: anything that yields Company records by key."""

    def list_keys(self) -> List[str]: ...

    def load(self, sheet_name: str) -> Company:
        """Raise CompanyNotFoundError when the key has no record."""
        ...


class CompanyCache(Protocol):
    def get(self, sheet_name: str) -> Optional[Company]: ...
    def put(self, sheet_name: str, company: Company) -> None: ...
    def invalidate(self, sheet_name: Optional[str] = None) -> None: ...


# =========================
# Write side / outputs
# =========================

class VersionLog(Protocol):
    def append(self, entry: VersionEntry) -> None: ...
    def history(self, company_sheet: Optional[str] = None) -> List[VersionEntry]: ...


class ExpiryReportWriter(Protocol):
    def write(self, rows: Sequence[Dict[str, Any]]) -> Dict[str, str]: ...


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration shared by the read/write use cases."""
    max_workers: int = 8
    cache_ttl_seconds: float = 300.0
    fetch_timeout: int = 15
    log_every: int = 25
