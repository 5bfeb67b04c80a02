# application/company_edit_service.py
from __future__ import annotations
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence
import logging

from application.ports import (
    CompanyCache,
    CompanyNotFoundError,
    CompanyStore,
    DuplicateCompanyError,
    VersionLog,
)
from domain.models.company import Director, Shareholder, VersionEntry
from domain.services.dates import bangkok_today, thai_date_stamp, thai_now
from domain.services.document_lookup import find_document_index, stamp_document_name
from domain.services.drive_ids import extract_drive_file_id, split_seal_reference
from domain.services.record_mapper import directors_to_rows, shareholders_to_rows
from domain.services.registry_labels import column_for_label
from domain.services.thai_numbers import parse_thai_number

NUMERIC_COLUMNS = ("total_shares", "par_value", "paid_up_shares", "paid_up_amount", "registered_capital")


class CompanyEditService:
    """
    Write path for the column store.

    Every write records a VersionEntry and drops the cached copy of that
    company, so the next read re-extracts it.
    """

    def __init__(
        self,
        store: CompanyStore,
        version_log: Optional[VersionLog] = None,
        cache: Optional[CompanyCache] = None,
        today: Optional[Callable[[], date]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.store = store
        self.version_log = version_log
        self.cache = cache
        self.today = today or bangkok_today
        self.log = logger or logging.getLogger("registry.edit")

    # ---------- bookkeeping ----------

    def _record(self, sheet_name: str, field_changed: str, old: Any, new: Any, changed_by: str) -> None:
        if self.cache is not None:
            self.cache.invalidate(sheet_name)
        if self.version_log is None:
            return
        self.version_log.append(VersionEntry(
            timestamp=thai_now(),
            company_sheet=sheet_name,
            field_changed=field_changed,
            old_value="" if old is None else str(old),
            new_value="" if new is None else str(new),
            changed_by=changed_by,
        ))

    def _tables(self, sheet_name: str) -> Dict[str, Any]:
        tables = self.store.load_tables(sheet_name)
        if not tables:
            raise CompanyNotFoundError(sheet_name)
        return tables

    @staticmethod
    def _key(sheet_name: str) -> str:
        key = (sheet_name or "").strip()
        if not key:
            raise ValueError("sheet_name is required")
        return key

    # ---------- company lifecycle ----------

    def create_company(self, sheet_name: str, changed_by: str = "admin") -> str:
        key = self._key(sheet_name)
        if key in self.store.list_keys():
            raise DuplicateCompanyError(key)
        self.store.create(key, {"sheet_name": key, "data_date": thai_date_stamp(self.today())})
        self.log.info("created company %s", key)
        self._record(key, "สร้างบริษัทใหม่", "", key, changed_by)
        return key

    def delete_company(self, sheet_name: str, changed_by: str = "admin") -> None:
        key = self._key(sheet_name)
        if not self.store.delete(key):
            raise CompanyNotFoundError(key)
        self.log.info("deleted company %s", key)
        self._record(key, "ลบบริษัท", key, "", changed_by)

    # ---------- scalar fields ----------

    def update_field(
        self, sheet_name: str, label: str, value: str, changed_by: str = "admin"
    ) -> Optional[Dict[str, Any]]:
        """
        Write one labelled value. Returns {"column", "old_value"}, or None
        when the label doesn't map to any column.
        """
        key = self._key(sheet_name)
        if value is None:
            raise ValueError("value is required")
        column = column_for_label(label)
        if column is None:
            self.log.debug("no column for label %r", label)
            return None

        text = str(value)
        updates: Dict[str, Any] = {column: parse_thai_number(text) if column in NUMERIC_COLUMNS else text}
        if column == "capital_text":
            num = parse_thai_number(text)
            if num > 0:
                updates["registered_capital"] = num

        old = self.store.update_columns(key, updates)
        old_value = "" if old.get(column) is None else str(old.get(column))
        self._record(key, label, old_value, text, changed_by)
        return {"column": column, "old_value": old_value}

    # ---------- collections (replaced whole) ----------

    def replace_directors(
        self, sheet_name: str, directors: Sequence[Director], changed_by: str = "admin"
    ) -> None:
        key = self._key(sheet_name)
        before = len(self._tables(key).get("directors") or [])
        self.store.replace_directors(key, directors_to_rows(directors))
        self.store.update_columns(key, {"director_count": len(directors)})
        self._record(key, "กรรมการ", f"{before} คน", f"{len(directors)} คน", changed_by)

    def replace_shareholders(
        self, sheet_name: str, shareholders: Sequence[Shareholder], changed_by: str = "admin"
    ) -> None:
        key = self._key(sheet_name)
        before = len(self._tables(key).get("shareholders") or [])
        self.store.replace_shareholders(key, shareholders_to_rows(shareholders))
        self._record(key, "ผู้ถือหุ้น", f"{before} ราย", f"{len(shareholders)} ราย", changed_by)

    # ---------- documents ----------

    def _documents(self, key: str) -> List[Dict[str, Any]]:
        return list(self._tables(key).get("documents") or [])

    def update_document(
        self,
        sheet_name: str,
        document_name: str,
        new_url: str,
        expiry_date: Optional[str] = None,
        changed_by: str = "admin",
    ) -> Optional[Dict[str, Any]]:
        """
        Point a document at a new file. The name is re-stamped with today's
        date; expiry is kept unless a new one is given. None if no document
        matches the name.
        """
        key = self._key(sheet_name)
        docs = self._documents(key)
        idx = find_document_index([str(d.get("name") or "") for d in docs], document_name)
        if idx is None:
            return None
        doc = docs[idx]
        day = self.today()
        old_link = doc.get("drive_url") or ""
        self.store.update_document(key, int(doc["id"]), {
            "name": stamp_document_name(document_name, day),
            "drive_url": new_url,
            "drive_file_id": extract_drive_file_id(new_url),
            "updated_date": thai_date_stamp(day),
            "expiry_date": expiry_date if expiry_date is not None else (doc.get("expiry_date") or ""),
        })
        self._record(key, f"เอกสาร: {document_name}", old_link, new_url, changed_by)
        return {"doc_id": int(doc["id"]), "old_link": old_link}

    def add_document(
        self,
        sheet_name: str,
        document_name: str,
        url: str,
        expiry_date: Optional[str] = None,
        changed_by: str = "admin",
    ) -> int:
        key = self._key(sheet_name)
        self._tables(key)
        day = self.today()
        doc_id = self.store.insert_document(key, {
            "name": stamp_document_name(document_name, day),
            "drive_file_id": extract_drive_file_id(url),
            "drive_url": url,
            "updated_date": thai_date_stamp(day),
            "expiry_date": expiry_date or "",
        })
        self._record(key, f"เพิ่มเอกสาร: {document_name}", "", url, changed_by)
        return doc_id

    def remove_document(self, sheet_name: str, document_name: str, changed_by: str = "admin") -> bool:
        """Exact name only; a fuzzy delete could remove the wrong file."""
        key = self._key(sheet_name)
        for d in self._documents(key):
            if d.get("name") == document_name:
                ok = self.store.delete_document(key, int(d["id"]))
                if ok:
                    self._record(key, f"ลบเอกสาร: {document_name}", document_name, "", changed_by)
                return ok
        return False

    def update_document_expiry(
        self, sheet_name: str, document_name: str, expiry_date: str, changed_by: str = "admin"
    ) -> Optional[int]:
        key = self._key(sheet_name)
        docs = self._documents(key)
        idx = find_document_index([str(d.get("name") or "") for d in docs], document_name)
        if idx is None:
            return None
        doc = docs[idx]
        self.store.update_document(key, int(doc["id"]), {"expiry_date": expiry_date or ""})
        self._record(key, f"วันหมดอายุ: {doc.get('name')}", doc.get("expiry_date") or "", expiry_date or "", changed_by)
        return int(doc["id"])

    # ---------- seal ----------

    def update_seal(self, sheet_name: str, url_or_id: str, changed_by: str = "admin") -> None:
        """Links outside Drive are kept as a URL; anything else is stored as a file id."""
        key = self._key(sheet_name)
        raw = (url_or_id or "").strip()
        drive_id, url = split_seal_reference(raw)
        updates = {"seal_image_drive_id": drive_id, "seal_image_url": url}
        old = self.store.update_columns(key, updates)
        old_ref = old.get("seal_image_url") or old.get("seal_image_drive_id") or ""
        self._record(key, "ตราประทับ", old_ref, raw, changed_by)
