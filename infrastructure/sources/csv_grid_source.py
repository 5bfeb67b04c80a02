# infrastructure/sources/csv_grid_source.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union
import io
import logging

import pandas as pd

from application.ports import CompanyGridSource, Grid
from domain.services.drive_ids import is_special_sheet

GRID_COLUMNS = 26  # A:Z, same window the sheets are read with

_log = logging.getLogger("registry.sources")


def read_grid(src: Union[Path, str, io.StringIO]) -> Grid:
    """
    Read a ragged CSV (rows of different lengths, blank spacer rows) as a
    grid of strings. Empty cells are "", trailing empties are dropped.
    Rows wider than A:Z are cut to the window, not skipped.
    """
    df = pd.read_csv(
        src,
        header=None,
        names=list(range(GRID_COLUMNS)),
        usecols=list(range(GRID_COLUMNS)),  # extra fields are ignored instead of failing the line
        index_col=False,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
        encoding="utf-8-sig" if not isinstance(src, io.StringIO) else None,
        on_bad_lines="warn",
    )
    rows: Grid = []
    for values in df.itertuples(index=False, name=None):
        # short rows and blank spacer rows come back as NaN even with dtype=str
        row = ["" if v is None or pd.isna(v) else str(v) for v in values]
        while row and not row[-1].strip():
            row.pop()
        rows.append(row)
    return rows


class CsvGridSource(CompanyGridSource):
    """
    A directory of exported sheets, one `<sheet name>.csv` per company.
    Files starting with "_" are internal sheets and are not listed.
    """

    def __init__(self, grid_dir: Path) -> None:
        self.grid_dir = Path(grid_dir)
        if not self.grid_dir.exists():
            raise FileNotFoundError(f"Grid directory not found: {self.grid_dir}")

    def list_sheets(self) -> List[str]:
        names = sorted(p.stem for p in self.grid_dir.glob("*.csv"))
        return [n for n in names if not is_special_sheet(n)]

    def load_rows(self, sheet_name: str) -> Optional[Grid]:
        p = self.grid_dir / f"{sheet_name}.csv"
        if not p.exists():
            _log.debug("no grid for %s", sheet_name)
            return None
        try:
            return read_grid(p)
        except pd.errors.EmptyDataError:
            return []
