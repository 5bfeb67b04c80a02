# application/company_loaders.py
from __future__ import annotations
import logging
from typing import List, Optional

from application.ports import CompanyGridSource, CompanyNotFoundError, CompanyStore
from domain.models.company import Company
from domain.services.drive_ids import is_special_sheet
from domain.services.record_mapper import company_from_tables
from domain.services.sheet_scanner import parse_rows

_log = logging.getLogger("registry.loaders")


class GridCompanyLoader:
    """Hand-maintained sheet grids, read through the heuristic row scanner."""

    def __init__(self, source: CompanyGridSource) -> None:
        self.source = source

    def list_keys(self) -> List[str]:
        return [k for k in self.source.list_sheets() if k and not is_special_sheet(k)]

    def load(self, sheet_name: str) -> Company:
        rows = self.source.load_rows(sheet_name)
        if rows is None:
            raise CompanyNotFoundError(sheet_name)
        _log.debug("scanning %s (%d rows)", sheet_name, len(rows))
        return parse_rows(sheet_name, rows)


class StoreCompanyLoader:
    """Column-shaped records: mapped directly, the scanner is never involved."""

    def __init__(self, store: CompanyStore) -> None:
        self.store = store

    def list_keys(self) -> List[str]:
        return sorted(self.store.list_keys())

    def load(self, sheet_name: str) -> Company:
        tables: Optional[dict] = self.store.load_tables(sheet_name)
        if not tables or not tables.get("company"):
            raise CompanyNotFoundError(sheet_name)
        return company_from_tables(
            tables["company"],
            tables.get("directors") or [],
            tables.get("shareholders") or [],
            tables.get("documents") or [],
        )
