# infrastructure/sources/google_sheet_csv_source.py
from __future__ import annotations
import io
import logging
import random
import time
from typing import List, Optional, Sequence

import requests

from application.ports import CompanyGridSource, Grid
from domain.services.drive_ids import is_special_sheet
from infrastructure.sources.csv_grid_source import read_grid

EXPORT_URL = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/gviz/tq"

_log = logging.getLogger("registry.sources")


class GoogleSheetCsvSource(CompanyGridSource):
    """
    Company sheets of one (link-shared) spreadsheet, pulled as CSV exports.

    The export endpoint can't enumerate tabs, so the company sheet names
    are configured up front. Timeouts and retries live here, not in the
    scanner.
    """

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_names: Sequence[str],
        session: Optional[requests.Session] = None,
        timeout: int = 15,
        retries: int = 3,
        backoff: float = 0.8,
    ) -> None:
        if not spreadsheet_id:
            raise ValueError("spreadsheet_id is required")
        self.spreadsheet_id = spreadsheet_id
        self.sheet_names = [s.strip() for s in sheet_names if s and s.strip()]
        self.session = session or requests.Session()
        self.timeout = timeout
        self.retries = max(1, int(retries))
        self.backoff = backoff

    def list_sheets(self) -> List[str]:
        return [n for n in self.sheet_names if not is_special_sheet(n)]

    def _fetch(self, sheet_name: str) -> requests.Response:
        url = EXPORT_URL.format(spreadsheet_id=self.spreadsheet_id)
        params = {"tqx": "out:csv", "sheet": sheet_name, "range": "A:Z"}
        last: Optional[Exception] = None
        for attempt in range(1, self.retries + 1):
            try:
                r = self.session.get(url, params=params, timeout=self.timeout)
                if r.status_code in (429, 500, 502, 503, 504):
                    r.raise_for_status()
                return r
            except requests.RequestException as e:
                last = e
                _log.debug("sheet fetch %s attempt %d failed: %s", sheet_name, attempt, e)
                if attempt < self.retries:
                    time.sleep(self.backoff * (2 ** (attempt - 1)) * (1 + random.uniform(0, 0.2)))
        raise last if last else RuntimeError("sheet fetch failed")

    def load_rows(self, sheet_name: str) -> Optional[Grid]:
        # gviz falls back to the first tab for unknown names, so gate on the configured list
        if sheet_name not in self.sheet_names:
            return None
        r = self._fetch(sheet_name)
        if r.status_code in (400, 404):
            return None
        r.raise_for_status()
        text = r.content.decode("utf-8-sig")
        if not text.strip():
            return []
        return read_grid(io.StringIO(text))
