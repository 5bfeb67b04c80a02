# domain/models/company.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Director:
    order: int                           # 1-based, source order
    name: str
    position: Optional[str] = None       # e.g. "กรรมการ", "กรรมการผู้จัดการ"


@dataclass
class Shareholder:
    order: int                           # 1-based, source order
    name: str
    shares: float
    percentage: Optional[float] = None   # as written in the sheet, or derived from shares


@dataclass
class ShareBreakdown:
    total_shares: float = 0.0
    par_value: float = 0.0               # baht per share
    paid_up_shares: float = 0.0
    paid_up_amount: float = 0.0


@dataclass
class CompanyDocument:
    name: str
    drive_file_id: str = ""              # bare file id, "" when the link is not a Drive link
    type: Optional[str] = None           # e.g. "หนังสือรับรอง", "บอจ.5"
    drive_url: Optional[str] = None      # raw http(s) link as written
    updated_date: Optional[str] = None   # วัน update ล่าสุด, free text
    expiry_date: Optional[str] = None    # "YYYY-MM-DD" or "DD/MM/YYYY"


@dataclass
class Company:
    """
    Aggregate root for one registered company.

    Directors, shareholders and documents belong to the company and are
    always replaced as whole lists, never patched one by one.
    """

    sheet_name: str                      # unique key ("sheet" in the source spreadsheet)
    data_date: str = ""                  # ณ วันที่ ..., as written
    company_name_th: str = ""
    company_name_en: str = ""
    registration_number: str = ""
    director_count: int = 0
    directors: List[Director] = field(default_factory=list)
    authorized_signatory: str = ""
    registered_capital: float = 0.0
    capital_text: str = ""
    share_breakdown: ShareBreakdown = field(default_factory=ShareBreakdown)
    head_office_address: str = ""
    objectives: str = ""
    seal_image_drive_id: str = ""
    seal_image_url: str = ""             # full URL for seals hosted outside Drive
    shareholders: List[Shareholder] = field(default_factory=list)
    documents: List[CompanyDocument] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.company_name_th or self.sheet_name


@dataclass
class CompanySummary:
    """One row of the company listing. error=True when extraction failed for that key."""

    sheet_name: str
    company_name_th: str
    company_name_en: str = ""
    registration_number: str = ""
    registered_capital: float = 0.0
    director_count: int = 0
    shareholder_count: int = 0
    document_count: int = 0
    error: bool = False


@dataclass(frozen=True)
class VersionEntry:
    timestamp: str           # ISO, Asia/Bangkok wall clock
    company_sheet: str
    field_changed: str
    old_value: str
    new_value: str
    changed_by: str
