from domain.models.company import VersionEntry
from infrastructure.repositories.json_version_log import JsonVersionLog


def _entry(sheet, field, ts):
    return VersionEntry(timestamp=ts, company_sheet=sheet, field_changed=field,
                        old_value="", new_value="x", changed_by="admin")


def test_history_is_newest_first_and_filterable(tmp_path):
    log = JsonVersionLog(tmp_path / "store" / "version_history.json")
    assert log.history() == []
    log.append(_entry("a", "ชื่อบริษัท", "2026-03-01T09:00:00"))
    log.append(_entry("b", "ทุนจดทะเบียน", "2026-03-01T10:00:00"))
    log.append(_entry("a", "ที่อยู่", "2026-03-02T08:00:00"))

    assert [e.field_changed for e in log.history()] == ["ที่อยู่", "ทุนจดทะเบียน", "ชื่อบริษัท"]
    assert [e.field_changed for e in log.history("a")] == ["ที่อยู่", "ชื่อบริษัท"]
    # survives a reopen
    assert len(JsonVersionLog(tmp_path / "store" / "version_history.json").history()) == 3
