from domain.models.company import Director, Shareholder
from domain.services.record_mapper import (
    company_from_tables,
    company_to_row,
    directors_to_rows,
    documents_to_rows,
    shareholders_to_rows,
)
from domain.services.sheet_scanner import parse_rows


def test_company_from_tables_sorts_children_and_defaults_par():
    c = company_from_tables(
        {"sheet_name": "abc", "company_name_th": "", "registered_capital": "5000000", "total_shares": 50000},
        directors=[
            {"name": "คนที่สอง", "position": "กรรมการ", "sort_order": 2},
            {"name": "คนแรก", "position": None, "sort_order": 1},
        ],
        shareholders=[{"sort_order": 1, "name": "บริษัท แม่", "shares": "50000", "percentage": 100}],
        documents=[{"id": 1, "name": "หนังสือรับรอง", "drive_file_id": "F1", "expiry_date": "2026-12-31"}],
    )
    assert c.display_name == "abc"
    assert [d.name for d in c.directors] == ["คนแรก", "คนที่สอง"]
    assert [d.order for d in c.directors] == [1, 2]
    assert c.directors[0].position is None
    assert c.director_count == 2
    assert c.registered_capital == 5_000_000
    assert c.share_breakdown.par_value == 100
    assert c.shareholders[0].shares == 50000 and c.shareholders[0].percentage == 100
    assert c.documents[0].drive_file_id == "F1"
    assert c.documents[0].drive_url is None


def test_child_rows_get_sequential_sort_order():
    rows = directors_to_rows([Director(0, "ก"), Director(2, "ข", "กรรมการ")])
    assert [r["sort_order"] for r in rows] == [1, 2]
    rows = shareholders_to_rows([Shareholder(order=0, name="ก", shares=1), Shareholder(order=5, name="ข", shares=2)])
    assert [r["sort_order"] for r in rows] == [1, 5]


def test_store_round_trip_keeps_sheet_extraction(thai_rows):
    scanned = parse_rows("ตัวอย่าง", thai_rows)
    back = company_from_tables(
        company_to_row(scanned),
        directors_to_rows(scanned.directors),
        shareholders_to_rows(scanned.shareholders),
        documents_to_rows(scanned.documents),
    )
    assert back == scanned
