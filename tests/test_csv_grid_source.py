import pytest

from application.company_loaders import GridCompanyLoader
from application.ports import CompanyNotFoundError
from infrastructure.sources.csv_grid_source import CsvGridSource, read_grid

RAGGED = (
    "ชื่อบริษัท,บริษัท ทดสอบ จำกัด\n"
    "\n"
    "กรรมการ,2 คน\n"
    "1,นายหนึ่ง ทดสอบ,กรรมการผู้จัดการ\n"
    "2,นายสอง ทดสอบ\n"
    "ทุนจดทะเบียน,\"1,000,000 บาท\"\n"
)


@pytest.fixture
def grid_dir(tmp_path):
    d = tmp_path / "sheets"
    d.mkdir()
    (d / "ทดสอบ.csv").write_text(RAGGED, encoding="utf-8-sig")
    (d / "_permissions.csv").write_text("user_id,role\nU1,admin\n", encoding="utf-8")
    (d / "ว่าง.csv").write_text("", encoding="utf-8")
    return d


def test_read_grid_keeps_blank_rows_and_trims(grid_dir):
    rows = read_grid(grid_dir / "ทดสอบ.csv")
    assert rows[0] == ["ชื่อบริษัท", "บริษัท ทดสอบ จำกัด"]
    assert rows[1] == []
    assert rows[4] == ["2", "นายสอง ทดสอบ"]
    assert rows[5] == ["ทุนจดทะเบียน", "1,000,000 บาท"]


def test_source_lists_company_sheets_only(grid_dir):
    src = CsvGridSource(grid_dir)
    assert "_permissions" not in src.list_sheets()
    assert src.load_rows("missing") is None
    assert src.load_rows("ว่าง") == []


def test_grid_loader_end_to_end(grid_dir):
    loader = GridCompanyLoader(CsvGridSource(grid_dir))
    c = loader.load("ทดสอบ")
    assert c.company_name_th == "บริษัท ทดสอบ จำกัด"
    assert [d.name for d in c.directors] == ["นายหนึ่ง ทดสอบ", "นายสอง ทดสอบ"]
    assert c.registered_capital == 1_000_000
    with pytest.raises(CompanyNotFoundError):
        loader.load("missing")


def test_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvGridSource(tmp_path / "nope")


def test_rows_wider_than_grid_are_cut_not_dropped(tmp_path):
    wide = ["ผู้ถือหุ้น"] + [""] * 26 + ["หมายเหตุท้ายแถว"]
    assert len(wide) == 28
    text = (
        "ชื่อบริษัท,บริษัท กว้าง จำกัด\n"
        + ",".join(wide) + "\n"
        + "1,นายหนึ่ง ทดสอบ,600\n"
        + "2,นายสอง ทดสอบ,400\n"
    )
    d = tmp_path / "sheets"
    d.mkdir()
    (d / "กว้าง.csv").write_text(text, encoding="utf-8")

    rows = read_grid(d / "กว้าง.csv")
    assert len(rows) == 4
    assert rows[1] == ["ผู้ถือหุ้น"]
    assert all(len(r) <= 26 for r in rows)

    c = GridCompanyLoader(CsvGridSource(d)).load("กว้าง")
    assert [(s.name, s.shares, s.percentage) for s in c.shareholders] == [
        ("นายหนึ่ง ทดสอบ", 600.0, 60.0),
        ("นายสอง ทดสอบ", 400.0, 40.0),
    ]
