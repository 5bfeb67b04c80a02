# infrastructure/cache/ttl_company_cache.py
from __future__ import annotations
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from application.ports import CompanyCache
from domain.models.company import Company


class TtlCompanyCache(CompanyCache):
    """
    Extracted companies keyed by sheet name, each entry valid for `ttl`
    seconds. The write path calls invalidate(key); invalidate() clears all.
    """

    def __init__(self, ttl: float = 300.0, clock: Optional[Callable[[], float]] = None, max_entries: int = 1024) -> None:
        self.ttl = float(ttl)
        self.max_entries = max(1, int(max_entries))
        self._clock = clock or time.monotonic
        self._items: Dict[str, Tuple[float, Company]] = {}
        self._lock = threading.Lock()

    def get(self, sheet_name: str) -> Optional[Company]:
        with self._lock:
            item = self._items.get(sheet_name)
            if item is None:
                return None
            expires_at, company = item
            if self._clock() >= expires_at:
                del self._items[sheet_name]
                return None
            return company

    def put(self, sheet_name: str, company: Company) -> None:
        if self.ttl <= 0:
            return
        with self._lock:
            if sheet_name not in self._items and len(self._items) >= self.max_entries:
                # drop the entry closest to expiry
                oldest = min(self._items, key=lambda k: self._items[k][0])
                del self._items[oldest]
            self._items[sheet_name] = (self._clock() + self.ttl, company)

    def invalidate(self, sheet_name: Optional[str] = None) -> None:
        with self._lock:
            if sheet_name is None:
                self._items.clear()
            else:
                self._items.pop(sheet_name, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
