from domain.services.drive_ids import (
    extract_drive_file_id,
    is_special_sheet,
    split_seal_reference,
)


def test_extract_from_file_path():
    assert extract_drive_file_id("https://drive.google.com/file/d/ABC123/view?usp=sharing") == "ABC123"


def test_extract_from_query():
    assert extract_drive_file_id("https://drive.google.com/open?id=XYZ_9-a") == "XYZ_9-a"


def test_bare_id_passes_through():
    assert extract_drive_file_id("ABC123") == "ABC123"


def test_unrelated_link_and_empty():
    assert extract_drive_file_id("https://example.com/files/report.pdf") == ""
    assert extract_drive_file_id("") == ""


def test_seal_reference():
    assert split_seal_reference("https://drive.google.com/file/d/S1/view") == ("S1", "")
    assert split_seal_reference("S1") == ("S1", "")
    assert split_seal_reference("https://cdn.example.com/seal.png") == ("", "https://cdn.example.com/seal.png")
    assert split_seal_reference("") == ("", "")


def test_special_sheets():
    assert is_special_sheet("_permissions")
    assert not is_special_sheet("บริษัท ก")


def test_seal_reference_without_extractable_id_is_kept():
    assert split_seal_reference("/uploads/seal.png") == ("/uploads/seal.png", "")
