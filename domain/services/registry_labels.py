# domain/services/registry_labels.py --> every label the company sheets are scanned for
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple


def _norm(s: str) -> str:
    return (s or "").strip().casefold()


@dataclass(frozen=True)
class LabelRule:
    """
    A field (or section) and the labels that introduce it.

    Labels are tried in order, most specific first; a cell matches a label
    when it equals it or contains it. A cell containing any of `excludes`
    never matches, which keeps compound labels ("จำนวนกรรมการ") out of a
    broader one ("กรรมการ").
    """

    field: str
    labels: Tuple[str, ...]
    excludes: Tuple[str, ...] = ()
    column_offset: int = 1

    def matching_label(self, cell: str) -> Optional[str]:
        c = _norm(cell)
        if not c:
            return None
        if any(_norm(x) in c for x in self.excludes):
            return None
        for label in self.labels:
            lab = _norm(label)
            if c == lab or lab in c:
                return label
        return None

    def matches(self, cell: str) -> bool:
        return self.matching_label(cell) is not None


# ---------- Scalar fields (value is `column_offset` cells to the right) ----------

DATA_DATE = LabelRule("data_date", ("ณ วันที่", "วันที่", "As of"))
COMPANY_NAME_TH = LabelRule("company_name_th", ("ชื่อบริษัท",))
COMPANY_NAME_EN = LabelRule("company_name_en", ("Company Name", "ชื่อภาษาอังกฤษ"))
REGISTRATION_NUMBER = LabelRule(
    "registration_number", ("เลขทะเบียนนิติบุคคล", "เลขทะเบียน", "Registration No")
)
DIRECTOR_COUNT = LabelRule("director_count", ("จำนวนกรรมการ", "Director Count", "Number of Directors"))
AUTHORIZED_SIGNATORY = LabelRule(
    "authorized_signatory", ("อำนาจกรรมการ", "Director Authority", "Authorized Signatory")
)
CAPITAL_TEXT = LabelRule("capital_text", ("ทุนจดทะเบียน", "Registered Capital"))
HEAD_OFFICE_ADDRESS = LabelRule("head_office_address", ("ที่ตั้งสำนักงานใหญ่", "ที่อยู่", "Head Office"))
OBJECTIVES = LabelRule("objectives", ("วัตถุประสงค์", "Objectives"))
SEAL = LabelRule("seal", ("ตราประทับ", "Company Seal"))
TOTAL_SHARES = LabelRule("total_shares", ("จำนวนหุ้น", "หุ้นทั้งหมด", "Total Shares"))
PAR_VALUE = LabelRule("par_value", ("มูลค่าหุ้นละ", "มูลค่าที่ตราไว้", "Par Value"))
PAID_UP_AMOUNT = LabelRule("paid_up_amount", ("ชำระแล้ว", "ทุนชำระแล้ว", "Paid-up"))

# Priority order matters: it is the order fields are resolved in.
SCALAR_RULES: List[LabelRule] = [
    DATA_DATE,
    COMPANY_NAME_TH,
    COMPANY_NAME_EN,
    REGISTRATION_NUMBER,
    DIRECTOR_COUNT,
    AUTHORIZED_SIGNATORY,
    CAPITAL_TEXT,
    HEAD_OFFICE_ADDRESS,
    OBJECTIVES,
    SEAL,
    TOTAL_SHARES,
    PAR_VALUE,
    PAID_UP_AMOUNT,
]

# ---------- Sections (rows below the label until a terminator) ----------

DIRECTORS = LabelRule(
    "directors",
    ("กรรมการ", "Directors", "Director"),
    excludes=(
        "จำนวนกรรมการ", "อำนาจกรรมการ",
        "Director Count", "Number of Directors", "Director Authority",
    ),
)
SHAREHOLDERS = LabelRule(
    "shareholders",
    ("ผู้ถือหุ้น", "Shareholders", "Shareholder"),
    excludes=("จำนวนผู้ถือหุ้น", "Number of Shareholders"),
)
DOCUMENTS = LabelRule("documents", ("เอกสาร", "Documents"))
NOTES = LabelRule("notes", ("หมายเหตุ", "Notes"))

SECTION_RULES: List[LabelRule] = [DIRECTORS, SHAREHOLDERS, DOCUMENTS, NOTES]

ALL_RULES: List[LabelRule] = SCALAR_RULES + SECTION_RULES

# Column-header row markers inside a section ("ลำดับ | ชื่อ | จำนวนหุ้น | ...")
HEADER_MARKERS: Tuple[str, ...] = ("ลำดับ",)
HEADER_WORDS: Tuple[str, ...] = ("order", "no.", "no", "#")
PLACEHOLDER_NAMES: Tuple[str, ...] = ("-", "–", "—", "ลำดับ", "ชื่อ", "ชื่อ-สกุล", "ชื่อผู้ถือหุ้น", "name")
DOCUMENT_HEADER_MARKERS: Tuple[str, ...] = ("ชื่อเอกสาร", "ลำดับ", "document name")


def terminators_for(section: LabelRule) -> List[LabelRule]:
    """Every known label except the section's own."""
    return [r for r in ALL_RULES if r.field != section.field]


def match_any(cell: str, rules: Iterable[LabelRule]) -> Optional[LabelRule]:
    for rule in rules:
        if rule.matches(cell):
            return rule
    return None


def is_header_cell(cell: str, markers: Iterable[str] = HEADER_MARKERS) -> bool:
    """Thai markers match anywhere in the cell; short English words only as the whole cell."""
    c = _norm(cell)
    if not c:
        return False
    return any(_norm(m) in c for m in markers) or c in HEADER_WORDS


def is_placeholder(cell: str) -> bool:
    return _norm(cell) in PLACEHOLDER_NAMES


# ---------- Write path: edit label -> store column ----------

LABEL_TO_COLUMN: Dict[str, str] = {
    "ณ วันที่": "data_date",
    "วันที่": "data_date",
    "ชื่อบริษัท": "company_name_th",
    "Company Name": "company_name_en",
    "ชื่อภาษาอังกฤษ": "company_name_en",
    "เลขทะเบียนนิติบุคคล": "registration_number",
    "เลขทะเบียน": "registration_number",
    "อำนาจกรรมการ": "authorized_signatory",
    "ทุนจดทะเบียน": "capital_text",
    "ที่ตั้งสำนักงานใหญ่": "head_office_address",
    "ที่อยู่": "head_office_address",
    "วัตถุประสงค์": "objectives",
    "ตราประทับ": "seal_image_drive_id",
    "จำนวนหุ้น": "total_shares",
    "หุ้นทั้งหมด": "total_shares",
    "มูลค่าหุ้นละ": "par_value",
    "มูลค่าที่ตราไว้": "par_value",
    "ชำระแล้ว": "paid_up_amount",
    "ทุนชำระแล้ว": "paid_up_amount",
}


def column_for_label(label: str) -> Optional[str]:
    """Exact label first, then the first label contained in it (or containing it)."""
    s = (label or "").strip()
    if not s:
        return None
    if s in LABEL_TO_COLUMN:
        return LABEL_TO_COLUMN[s]
    for key, column in LABEL_TO_COLUMN.items():
        if key in s or s in key:
            return column
    return None
