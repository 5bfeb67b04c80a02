# application/sheet_import_service.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import time

from application.ports import CompanyCache, CompanyLoader, CompanyStore
from domain.services.record_mapper import (
    company_to_row,
    directors_to_rows,
    documents_to_rows,
    shareholders_to_rows,
)


class SheetImportService:
    """
    Copy companies extracted from sheet grids into the column store.

    Existing store records are skipped unless overwrite=True, in which case
    the company row is updated and its three collections are replaced.
    One company failing doesn't stop the rest; a company that was new to the
    store is removed again so the next run retries it.
    """

    def __init__(
        self,
        grid_loader: CompanyLoader,
        store: CompanyStore,
        cache: Optional[CompanyCache] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.grid_loader = grid_loader
        self.store = store
        self.cache = cache
        self.log = logger or logging.getLogger("registry.import")

    def run(self, overwrite: bool = False, only: Optional[List[str]] = None) -> Dict[str, Any]:
        t0 = time.time()
        keys = self.grid_loader.list_keys()
        if only:
            wanted = set(only)
            keys = [k for k in keys if k in wanted]
        existing = set(self.store.list_keys())
        self.log.info("Importing %d sheets (%d already in store)", len(keys), len(existing & set(keys)))

        results: List[Dict[str, Any]] = []
        counts = {"companies": 0, "directors": 0, "shareholders": 0, "documents": 0}
        for key in keys:
            if key in existing and not overwrite:
                results.append({"sheet_name": key, "status": "skipped"})
                continue
            created = False
            try:
                co = self.grid_loader.load(key)
                row = company_to_row(co)
                if key in existing:
                    self.store.update_columns(key, row)
                    self._drop_documents(key)
                else:
                    self.store.create(key, row)
                    created = True
                for d in documents_to_rows(co.documents):
                    self.store.insert_document(key, d)
                self.store.replace_directors(key, directors_to_rows(co.directors))
                self.store.replace_shareholders(key, shareholders_to_rows(co.shareholders))
            except Exception as e:
                self.log.warning("import failed for %s: %s", key, e)
                if created:
                    self._rollback(key)
                results.append({"sheet_name": key, "status": "error", "error": str(e)})
                continue
            if self.cache is not None:
                self.cache.invalidate(key)
            counts["companies"] += 1
            counts["directors"] += len(co.directors)
            counts["shareholders"] += len(co.shareholders)
            counts["documents"] += len(co.documents)
            self.log.debug("imported %s: %d directors, %d shareholders, %d documents",
                           key, len(co.directors), len(co.shareholders), len(co.documents))
            results.append({"sheet_name": key, "status": "imported"})

        self.log.info("Import done in %.2fs: %s", time.time() - t0, counts)
        return {"counts": counts, "results": results}

    def _rollback(self, key: str) -> None:
        # new keys are all-or-nothing
        try:
            self.store.delete(key)
        except Exception as e:
            self.log.error("could not remove partial import of %s: %s", key, e)

    def _drop_documents(self, key: str) -> None:
        tables = self.store.load_tables(key) or {}
        for d in tables.get("documents") or []:
            self.store.delete_document(key, int(d["id"]))
