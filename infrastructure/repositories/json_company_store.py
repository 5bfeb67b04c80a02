# infrastructure/repositories/json_company_store.py
from __future__ import annotations
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from application.ports import CompanyNotFoundError, CompanyStore, DuplicateCompanyError

_log = logging.getLogger("registry.store")

_EMPTY_TABLES = ("directors", "shareholders", "documents")


class JsonCompanyStore(CompanyStore):
    """
    One JSON file per company under `root`:

        {"company": {...columns...},
         "directors": [...], "shareholders": [...], "documents": [...]}

    Every write rewrites the file through a temp file + os.replace, so a
    reader sees either the old or the new collection, never half of one.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()

    # ---------- file helpers ----------

    def _path(self, sheet_name: str) -> Path:
        safe = sheet_name.replace("/", "_").replace("\\", "_")
        return self.root / f"{safe}.json"

    def _read(self, sheet_name: str) -> Optional[Dict[str, Any]]:
        p = self._path(sheet_name)
        if not p.exists():
            return None
        data = json.loads(p.read_text(encoding="utf-8"))
        for t in _EMPTY_TABLES:
            data.setdefault(t, [])
        return data

    def _write(self, sheet_name: str, data: Dict[str, Any]) -> None:
        p = self._path(sheet_name)
        fd, tmp = tempfile.mkstemp(prefix=".tmp_", suffix=".json", dir=str(self.root))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, p)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def _require(self, sheet_name: str) -> Dict[str, Any]:
        data = self._read(sheet_name)
        if data is None:
            raise CompanyNotFoundError(sheet_name)
        return data

    # ---------- read ----------

    def list_keys(self) -> List[str]:
        keys = []
        for p in sorted(self.root.glob("*.json")):
            if p.name.startswith(".tmp_"):
                continue
            try:
                row = json.loads(p.read_text(encoding="utf-8")).get("company") or {}
            except (OSError, ValueError) as e:
                _log.warning("unreadable store file %s: %s", p, e)
                continue
            keys.append(str(row.get("sheet_name") or p.stem))
        return sorted(keys)

    def load_tables(self, sheet_name: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._read(sheet_name)

    # ---------- company rows ----------

    def create(self, sheet_name: str, company_row: Dict[str, Any]) -> None:
        with self._lock:
            if self._path(sheet_name).exists():
                raise DuplicateCompanyError(sheet_name)
            row = dict(company_row)
            row["sheet_name"] = sheet_name
            self._write(sheet_name, {"company": row, "directors": [], "shareholders": [], "documents": []})
        _log.debug("store: created %s", sheet_name)

    def delete(self, sheet_name: str) -> bool:
        # children go with the file
        with self._lock:
            p = self._path(sheet_name)
            if not p.exists():
                return False
            p.unlink()
        _log.debug("store: deleted %s", sheet_name)
        return True

    def update_columns(self, sheet_name: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            data = self._require(sheet_name)
            row = data["company"]
            old = {k: row.get(k) for k in updates}
            row.update(updates)
            self._write(sheet_name, data)
        _log.debug("store: %s updated %s", sheet_name, sorted(updates))
        return old

    # ---------- child tables ----------

    def _replace(self, sheet_name: str, table: str, rows: List[Dict[str, Any]]) -> None:
        with self._lock:
            data = self._require(sheet_name)
            data[table] = [dict(r) for r in rows]
            self._write(sheet_name, data)
        _log.debug("store: %s %s replaced (%d rows)", sheet_name, table, len(rows))

    def replace_directors(self, sheet_name: str, rows: List[Dict[str, Any]]) -> None:
        self._replace(sheet_name, "directors", rows)

    def replace_shareholders(self, sheet_name: str, rows: List[Dict[str, Any]]) -> None:
        self._replace(sheet_name, "shareholders", rows)

    def insert_document(self, sheet_name: str, row: Dict[str, Any]) -> int:
        with self._lock:
            data = self._require(sheet_name)
            docs = data["documents"]
            new_id = max((int(d.get("id") or 0) for d in docs), default=0) + 1
            docs.append({**row, "id": new_id})
            self._write(sheet_name, data)
        return new_id

    def update_document(self, sheet_name: str, doc_id: int, updates: Dict[str, Any]) -> None:
        with self._lock:
            data = self._require(sheet_name)
            for d in data["documents"]:
                if int(d.get("id") or 0) == doc_id:
                    d.update(updates)
                    break
            else:
                raise KeyError(f"document {doc_id} not found in {sheet_name}")
            self._write(sheet_name, data)

    def delete_document(self, sheet_name: str, doc_id: int) -> bool:
        with self._lock:
            data = self._require(sheet_name)
            before = len(data["documents"])
            data["documents"] = [d for d in data["documents"] if int(d.get("id") or 0) != doc_id]
            if len(data["documents"]) == before:
                return False
            self._write(sheet_name, data)
        return True
