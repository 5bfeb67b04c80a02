from domain.services.registry_labels import (
    AUTHORIZED_SIGNATORY,
    DIRECTOR_COUNT,
    DIRECTORS,
    SHAREHOLDERS,
    column_for_label,
    is_header_cell,
    terminators_for,
)


def test_compound_labels_do_not_open_the_director_section():
    assert DIRECTORS.matches("กรรมการ")
    assert DIRECTORS.matches("Directors")
    assert not DIRECTORS.matches("จำนวนกรรมการ")
    assert not DIRECTORS.matches("อำนาจกรรมการ")
    assert not DIRECTORS.matches("Director Authority")
    assert DIRECTOR_COUNT.matches("จำนวนกรรมการ")
    assert AUTHORIZED_SIGNATORY.matches("Director Authority")


def test_matching_is_case_insensitive():
    assert SHAREHOLDERS.matches("SHAREHOLDERS")
    assert not SHAREHOLDERS.matches("Number of Shareholders")


def test_terminators_exclude_own_section():
    fields = {r.field for r in terminators_for(DIRECTORS)}
    assert "directors" not in fields
    assert {"authorized_signatory", "shareholders", "documents"} <= fields


def test_header_cells():
    assert is_header_cell("ลำดับ")
    assert is_header_cell("No.")
    assert is_header_cell("#")
    assert not is_header_cell("Border Logistics Co., Ltd.")
    assert not is_header_cell("")


def test_column_for_label():
    assert column_for_label("ทุนจดทะเบียน") == "capital_text"
    assert column_for_label("Company Name") == "company_name_en"
    assert column_for_label("ที่ตั้งสำนักงานใหญ่ (ปัจจุบัน)") == "head_office_address"
    assert column_for_label("ไม่มีช่องนี้") is None
    assert column_for_label("") is None
