# infrastructure/reporting/expiry_report_writer.py

from __future__ import annotations
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from application.ports import ExpiryReportWriter

REPORT_COLUMNS = ["sheet_name", "company_name_th", "doc_name", "expiry_date", "status"]


class CsvJsonExpiryReportWriter(ExpiryReportWriter):
    """
    Persist an expiring-documents pass to CSV + JSON (public) and a small
    run summary (internal).
    """

    def __init__(self, public_dir: Path, internal_dir: Path) -> None:
        self._public_dir = Path(public_dir)
        self._internal_dir = Path(internal_dir)
        self._public_dir.mkdir(parents=True, exist_ok=True)
        self._internal_dir.mkdir(parents=True, exist_ok=True)

    def write(self, rows: Sequence[Dict[str, Any]]) -> Dict[str, str]:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")

        latest_csv = self._public_dir / "latest_expiring.csv"
        latest_json = self._public_dir / "latest_expiring.json"
        run_json = self._internal_dir / f"expiry_run_{stamp}.json"

        records: List[Dict[str, Any]] = [dict(r) for r in rows]

        # CSV keeps a fixed column order even when there is nothing to report
        df = pd.DataFrame(records, columns=REPORT_COLUMNS)
        df.to_csv(latest_csv, index=False, encoding="utf-8-sig")

        latest_json.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")

        counts = df["status"].value_counts().to_dict() if not df.empty else {}
        run_payload = {
            "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "rows_count": len(records),
            "by_status": {str(k): int(v) for k, v in counts.items()},
            "companies": int(df["sheet_name"].nunique()) if not df.empty else 0,
        }
        run_json.write_text(json.dumps(run_payload, indent=2), encoding="utf-8")

        return {
            "csv": str(latest_csv),
            "json": str(latest_json),
            "run": str(run_json),
        }
