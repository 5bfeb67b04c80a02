from datetime import date, datetime, timedelta

from domain.services.dates import BANGKOK_TZ, parse_registry_date, thai_date_stamp


def test_iso_and_day_month_year_are_midnight_bangkok():
    iso = parse_registry_date("2026-03-31")
    dmy = parse_registry_date("31/03/2026")
    dashed = parse_registry_date("31-3-2026")
    assert iso == dmy == dashed
    assert iso.tzinfo is BANGKOK_TZ
    assert iso.utcoffset() == timedelta(hours=7)
    assert (iso.hour, iso.minute) == (0, 0)


def test_unrecognised_shapes_give_none():
    assert parse_registry_date("") is None
    assert parse_registry_date(None) is None
    assert parse_registry_date("Dec 9, 2025") is None
    assert parse_registry_date("31 มี.ค. 2569") is None
    assert parse_registry_date("30/02/2026") is None


def test_date_objects_are_accepted():
    assert parse_registry_date(date(2026, 1, 2)) == datetime(2026, 1, 2, tzinfo=BANGKOK_TZ)


def test_thai_date_stamp():
    assert thai_date_stamp(date(2026, 2, 1)) == "01/02/2026"
