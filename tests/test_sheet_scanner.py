from domain.services.sheet_scanner import (
    find_value,
    parse_directors,
    parse_documents,
    parse_rows,
    parse_shareholders,
)
from domain.services.registry_labels import DATA_DATE


def test_scalar_fields(thai_rows):
    c = parse_rows("ตัวอย่าง", thai_rows)
    assert c.sheet_name == "ตัวอย่าง"
    assert c.data_date == "15/01/2026"
    assert c.company_name_th == "บริษัท ตัวอย่าง จำกัด"
    assert c.company_name_en == "Example Co., Ltd."
    assert c.registration_number == "0105551234567"
    assert c.authorized_signatory == "กรรมการคนใดคนหนึ่งลงลายมือชื่อ"
    assert c.capital_text == "1,000,000 บาท"
    assert c.registered_capital == 1_000_000.0
    assert c.head_office_address == "99 ถนนสุขุมวิท กรุงเทพฯ"
    assert c.objectives == "ซื้อขายสินค้า"
    assert c.seal_image_drive_id == "SEAL123"
    assert c.seal_image_url == ""


def test_share_breakdown_defaults(thai_rows):
    sb = parse_rows("ตัวอย่าง", thai_rows).share_breakdown
    assert sb.total_shares == 10_000
    assert sb.par_value == 100
    assert sb.paid_up_shares == 10_000
    assert sb.paid_up_amount == 1_000_000


def test_directors_stop_at_authority_label(thai_rows):
    directors = parse_directors(thai_rows)
    assert [d.name for d in directors] == ["นายสมชาย ใจดี", "นางสาวสมหญิง รักดี", "Mr. John Smith"]
    assert directors[0].position == "กรรมการผู้จัดการ"
    assert directors[2].position == "Director"
    assert parse_rows("ตัวอย่าง", thai_rows).director_count == 3


def test_english_directors_stop_at_director_authority(english_rows):
    directors = parse_directors(english_rows)
    assert [d.name for d in directors] == ["Alice Walker", "Bob Stone"]
    assert all("director signs" not in d.name for d in directors)


def test_director_named_on_label_row():
    rows = [
        ["กรรมการ", "นายหนึ่ง ทดสอบ", "กรรมการ"],
        ["", "นายสอง ทดสอบ", "กรรมการ"],
        ["ทุนจดทะเบียน", "100,000"],
    ]
    assert [d.name for d in parse_directors(rows)] == ["นายหนึ่ง ทดสอบ", "นายสอง ทดสอบ"]


def test_shareholders_keep_written_percentages(thai_rows):
    shs = parse_shareholders(thai_rows)
    assert [(s.order, s.name, s.shares, s.percentage) for s in shs] == [
        (1, "นายสมชาย ใจดี", 6000.0, 60.0),
        (2, "นางสาวสมหญิง รักดี", 4000.0, 40.0),
    ]


def test_shareholder_percentages_derived_from_shares(english_rows):
    shs = parse_shareholders(english_rows)
    assert [s.name for s in shs] == ["Alice Walker", "Bob Stone"]
    assert [s.percentage for s in shs] == [75.0, 25.0]


def test_derived_percentages_sum_to_about_100():
    rows = [["ผู้ถือหุ้น"]] + [[str(i), f"ผู้ถือหุ้นราย {i}", "1"] for i in range(1, 4)]
    shs = parse_shareholders(rows)
    assert [s.order for s in shs] == [1, 2, 3]
    assert [s.percentage for s in shs] == [33.33, 33.33, 33.33]
    assert abs(sum(s.percentage for s in shs) - 100) < 0.05


def test_shareholder_placeholders_skipped():
    rows = [
        ["ผู้ถือหุ้น"],
        ["ลำดับ", "ชื่อ", "จำนวนหุ้น"],
        ["1", "-", ""],
        ["2", "บริษัท แม่ จำกัด", "900 หุ้น", "คิดเป็น 90%"],
        ["3", "นายเล็ก", "100"],
    ]
    shs = parse_shareholders(rows)
    assert [(s.order, s.name, s.shares) for s in shs] == [(1, "บริษัท แม่ จำกัด", 900.0), (2, "นายเล็ก", 100.0)]


def test_documents(thai_rows):
    docs = parse_documents(thai_rows)
    assert [d.name for d in docs] == ["หนังสือรับรอง", "ภพ.20"]
    cert, vat = docs
    assert cert.drive_file_id == "DOC1"
    assert cert.drive_url == "https://drive.google.com/file/d/DOC1/view"
    assert cert.updated_date == "01/01/2026"
    assert cert.expiry_date == "31/03/2026"
    assert vat.drive_file_id == "DOC2"
    assert vat.drive_url is None
    assert vat.expiry_date is None


def test_documents_stop_at_internal_prefix():
    rows = [
        ["เอกสาร"],
        ["1", "บอจ.5", "FILE5", "", "2027-01-01"],
        ["_versions", "x", "y"],
        ["ไม่ควรมา", "FILE6"],
    ]
    docs = parse_documents(rows)
    assert [(d.name, d.drive_file_id, d.expiry_date) for d in docs] == [("บอจ.5", "FILE5", "2027-01-01")]


def test_english_sheet_falls_back_to_sheet_name(english_rows):
    c = parse_rows("acme", english_rows)
    assert c.company_name_th == "acme"
    assert c.display_name == "acme"
    assert c.company_name_en == "Acme Trading Co., Ltd."
    assert c.registered_capital == 2_500_000.0
    assert c.seal_image_drive_id == ""
    assert c.seal_image_url == "https://cdn.example.com/seals/acme.png"


def test_empty_sheet_never_raises():
    c = parse_rows("ว่าง", [])
    assert c.company_name_th == "ว่าง"
    assert c.directors == [] and c.shareholders == [] and c.documents == []
    assert c.director_count == 0
    assert c.share_breakdown.par_value == 100


def test_same_rows_same_company(thai_rows):
    assert parse_rows("ตัวอย่าง", thai_rows) == parse_rows("ตัวอย่าง", thai_rows)


def test_empty_value_falls_through_to_next_label():
    rows = [["ณ วันที่", ""], ["As of", "2026-01-31"]]
    assert find_value(rows, DATA_DATE) == "2026-01-31"


def test_directors_numbered_in_sheet_order(thai_rows):
    assert [(d.order, d.name) for d in parse_directors(thai_rows)] == [
        (1, "นายสมชาย ใจดี"),
        (2, "นางสาวสมหญิง รักดี"),
        (3, "Mr. John Smith"),
    ]


def test_director_order_skips_header_rows():
    rows = [
        ["กรรมการ"],
        ["ลำดับ", "ชื่อ", "ตำแหน่ง"],
        ["1", "นายหนึ่ง ทดสอบ"],
        ["2", "นายสอง ทดสอบ"],
    ]
    assert [(d.order, d.name) for d in parse_directors(rows)] == [(1, "นายหนึ่ง ทดสอบ"), (2, "นายสอง ทดสอบ")]


def test_head_count_on_label_row_is_not_a_director():
    for count in ("3 ท่าน", "3 ราย", "3 คน", "3", "3 persons"):
        rows = [
            ["กรรมการ", count],
            ["1", "นายหนึ่ง ทดสอบ"],
            ["2", "นายสอง ทดสอบ"],
            ["3", "นายสาม ทดสอบ"],
        ]
        c = parse_rows("x", rows)
        assert [d.name for d in c.directors] == ["นายหนึ่ง ทดสอบ", "นายสอง ทดสอบ", "นายสาม ทดสอบ"], count
        assert c.director_count == 3
