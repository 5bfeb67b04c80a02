# application/company_query_service.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging
import time

from application.ports import CompanyCache, CompanyLoader, RegistryConfig
from domain.models.company import Company, CompanySummary
from domain.models.expiry_status import EXPIRY_RANK
from domain.services.dates import bangkok_today
from domain.services.expiry_classifier import classify_expiry, is_alerting


def _summary(c: Company) -> CompanySummary:
    return CompanySummary(
        sheet_name=c.sheet_name,
        company_name_th=c.display_name,
        company_name_en=c.company_name_en,
        registration_number=c.registration_number,
        registered_capital=c.registered_capital,
        director_count=len(c.directors),
        shareholder_count=len(c.shareholders),
        document_count=len(c.documents),
    )


class CompanyQueryService:
    """
    Read side over any CompanyLoader (sheet grids or the column store).

    Batch passes extract every company on a bounded thread pool; a company
    that fails is reported in place and never aborts the others.
    """

    def __init__(
        self,
        loader: CompanyLoader,
        cache: Optional[CompanyCache] = None,
        cfg: Optional[RegistryConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.loader = loader
        self.cache = cache
        self.cfg = cfg or RegistryConfig()
        self.log = logger or logging.getLogger("registry.query")

    # ---------- single record ----------

    def get_company(self, sheet_name: str) -> Company:
        key = (sheet_name or "").strip()
        if not key:
            raise ValueError("sheet_name is required")
        if self.cache is not None:
            hit = self.cache.get(key)
            if hit is not None:
                self.log.debug("cache hit: %s", key)
                return hit
        company = self.loader.load(key)
        if self.cache is not None:
            self.cache.put(key, company)
        return company

    def _load_fresh(self, key: str) -> Company:
        company = self.loader.load(key)
        if self.cache is not None:
            self.cache.put(key, company)
        return company

    # ---------- batch plumbing ----------

    def _fan_out(
        self,
        keys: List[str],
        fn: Callable[[str], Any],
        label: str,
    ) -> List[Tuple[str, Any, Optional[Exception]]]:
        """Run fn over keys; results come back in key order as (key, value, error)."""
        total = len(keys)
        if total == 0:
            return []
        order_map: Dict[str, int] = {k: i for i, k in enumerate(keys)}
        results: List[Tuple[int, Tuple[str, Any, Optional[Exception]]]] = []
        workers = max(1, int(self.cfg.max_workers or 1))
        log_every = max(1, int(self.cfg.log_every or 1))
        done = 0

        with ThreadPoolExecutor(max_workers=workers) as ex:
            futs = {ex.submit(fn, k): k for k in keys}
            for f in as_completed(futs):
                k = futs[f]
                try:
                    results.append((order_map[k], (k, f.result(), None)))
                except Exception as e:
                    self.log.warning("%s failed for %s: %s", label, k, e)
                    results.append((order_map[k], (k, None, e)))
                done += 1
                if (done % log_every) == 0 or done == total:
                    self.log.info("%s progress: %d / %d", label, done, total)

        results.sort(key=lambda x: x[0])
        return [r for _, r in results]

    # ---------- listings ----------

    def list_companies(self) -> List[CompanySummary]:
        keys = self.loader.list_keys()
        self.log.info("Listing %d companies", len(keys))
        out: List[CompanySummary] = []
        for key, company, err in self._fan_out(keys, self.get_company, "list"):
            if err is not None:
                out.append(CompanySummary(sheet_name=key, company_name_th=key, error=True))
            else:
                out.append(_summary(company))
        return out

    def sync_all(self) -> Dict[str, Any]:
        """Re-extract every company, refreshing the cache."""
        t0 = time.time()
        keys = self.loader.list_keys()
        self.log.info("Sync started: %d companies", len(keys))
        summary: List[Dict[str, Any]] = []
        for key, company, err in self._fan_out(keys, self._load_fresh, "sync"):
            if err is not None:
                summary.append({"sheet_name": key, "success": False, "error": str(err)})
            else:
                summary.append({"sheet_name": key, "success": True, "company_name_th": company.display_name})
        failed = sum(1 for s in summary if not s["success"])
        self.log.info("Sync done: %d ok, %d failed in %.2fs", len(summary) - failed, failed, time.time() - t0)
        return {"synced": len(summary), "failed": failed, "results": summary}

    def expiring_documents(self, today: Optional[date] = None) -> List[Dict[str, Any]]:
        """
        Every document that is expired or expires within 30 days, across all
        companies, most urgent first. Companies that fail to load are skipped.
        """
        ref = today or bangkok_today()
        rows: List[Dict[str, Any]] = []
        for key, company, err in self._fan_out(self.loader.list_keys(), self.get_company, "expiry"):
            if err is not None:
                continue
            for doc in company.documents:
                if not doc.expiry_date:
                    continue
                status = classify_expiry(doc.expiry_date, today=ref)
                if is_alerting(status):
                    rows.append({
                        "sheet_name": company.sheet_name,
                        "company_name_th": company.display_name,
                        "doc_name": doc.name,
                        "expiry_date": doc.expiry_date,
                        "status": status,
                    })
        rows.sort(key=lambda r: EXPIRY_RANK.get(r["status"], len(EXPIRY_RANK)))
        self.log.info("Expiring documents: %d", len(rows))
        return rows

    def people_directory(self) -> Dict[str, List[str]]:
        """Unique director and shareholder names across all companies, sorted."""
        directors: set = set()
        shareholders: set = set()
        for _, company, err in self._fan_out(self.loader.list_keys(), self.get_company, "people"):
            if err is not None:
                continue
            directors.update(d.name for d in company.directors if d.name)
            shareholders.update(s.name for s in company.shareholders if s.name)
        return {"directors": sorted(directors), "shareholders": sorted(shareholders)}
