from domain.models.company import Company
from infrastructure.cache.ttl_company_cache import TtlCompanyCache


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_entries_expire_after_ttl():
    clock = Clock()
    cache = TtlCompanyCache(ttl=300, clock=clock)
    cache.put("a", Company(sheet_name="a"))
    clock.now += 299
    assert cache.get("a").sheet_name == "a"
    clock.now += 1
    assert cache.get("a") is None
    assert len(cache) == 0


def test_invalidate_one_or_all():
    cache = TtlCompanyCache(ttl=60)
    cache.put("a", Company(sheet_name="a"))
    cache.put("b", Company(sheet_name="b"))
    cache.invalidate("a")
    assert cache.get("a") is None and cache.get("b") is not None
    cache.invalidate()
    assert len(cache) == 0


def test_zero_ttl_disables_caching():
    cache = TtlCompanyCache(ttl=0)
    cache.put("a", Company(sheet_name="a"))
    assert cache.get("a") is None


def test_bounded_size_drops_soonest_expiry():
    clock = Clock()
    cache = TtlCompanyCache(ttl=60, clock=clock, max_entries=2)
    cache.put("a", Company(sheet_name="a"))
    clock.now += 1
    cache.put("b", Company(sheet_name="b"))
    cache.put("c", Company(sheet_name="c"))
    assert cache.get("a") is None
    assert cache.get("b") is not None and cache.get("c") is not None
