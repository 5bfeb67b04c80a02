# infrastructure/repositories/json_version_log.py
from __future__ import annotations
import json
import threading
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from application.ports import VersionLog
from domain.models.company import VersionEntry


class JsonVersionLog(VersionLog):
    """Append-only change history kept as a JSON list; read back newest first."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _load(self) -> List[dict]:
        if not self.path.exists():
            return []
        return json.loads(self.path.read_text(encoding="utf-8")) or []

    def append(self, entry: VersionEntry) -> None:
        with self._lock:
            rows = self._load()
            rows.append(asdict(entry))
            self.path.write_text(json.dumps(rows, ensure_ascii=False, indent=2), encoding="utf-8")

    def history(self, company_sheet: Optional[str] = None) -> List[VersionEntry]:
        with self._lock:
            rows = self._load()
        entries = [VersionEntry(**r) for r in rows]
        if company_sheet:
            entries = [e for e in entries if e.company_sheet == company_sheet]
        return list(reversed(entries))
