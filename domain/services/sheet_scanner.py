# domain/services/sheet_scanner.py --> free-text company sheet (grid of cells) -> Company
from __future__ import annotations
import re
from typing import Iterator, List, Optional, Sequence, Tuple

from domain.models.company import (
    Company,
    CompanyDocument,
    Director,
    ShareBreakdown,
    Shareholder,
)
from domain.services.drive_ids import (
    INTERNAL_SHEET_PREFIX,
    extract_drive_file_id,
    is_http_link,
    split_seal_reference,
)
from domain.services.registry_labels import (
    AUTHORIZED_SIGNATORY,
    CAPITAL_TEXT,
    COMPANY_NAME_EN,
    COMPANY_NAME_TH,
    DATA_DATE,
    DIRECTOR_COUNT,
    DIRECTORS,
    DOCUMENTS,
    DOCUMENT_HEADER_MARKERS,
    HEAD_OFFICE_ADDRESS,
    NOTES,
    OBJECTIVES,
    PAID_UP_AMOUNT,
    PAR_VALUE,
    REGISTRATION_NUMBER,
    SEAL,
    SHAREHOLDERS,
    TOTAL_SHARES,
    LabelRule,
    is_header_cell,
    is_placeholder,
    match_any,
    terminators_for,
)
from domain.services.thai_numbers import is_numeric_text, parse_thai_number, round_half_up

Row = Sequence[Optional[str]]

DEFAULT_PAR_VALUE = 100.0  # baht, when the sheet doesn't say

_ORDINAL_RE = re.compile(r"^\d+\.?$")                 # "2", "2."
_ORDINAL_PREFIX_RE = re.compile(r"^\d+(\.\s*|\s+)")   # "2. นาย..." -> "นาย..."
_COUNT_RE = re.compile(r"^\d+\s*(คน|ท่าน|ราย|persons?|people)?\.?$", re.IGNORECASE)  # "3", "3 คน", "3 ท่าน"
_DASHES = ("-", "–", "—")


# ---------- Cell helpers ----------

def _cell(row: Row, idx: int) -> str:
    if row is None or idx < 0 or idx >= len(row):
        return ""
    v = row[idx]
    if v is None:
        return ""
    if isinstance(v, float) and v != v:  # NaN from pandas
        return ""
    return str(v).strip()


def _is_dash(s: str) -> bool:
    return s in _DASHES


def _clean_name(s: str) -> str:
    return _ORDINAL_PREFIX_RE.sub("", s).strip()


def _looks_like_name(s: str) -> bool:
    """Non-numeric text longer than two characters that isn't a placeholder."""
    if not s or _is_dash(s) or is_placeholder(s):
        return False
    if _ORDINAL_RE.match(s) or is_numeric_text(s):
        return False
    return len(s) > 2


def find_row_index(rows: Sequence[Row], rule: LabelRule) -> int:
    for i, row in enumerate(rows):
        if rule.matches(_cell(row, 0)):
            return i
    return -1


def find_value(rows: Sequence[Row], rule: LabelRule) -> str:
    """
    Try each label in priority order. For a label, the first row whose
    leading cell matches wins; if its value cell is empty we fall back
    to the next label.
    """
    for label in rule.labels:
        single = LabelRule(rule.field, (label,), rule.excludes, rule.column_offset)
        for row in rows:
            if single.matches(_cell(row, 0)):
                value = _cell(row, rule.column_offset)
                if value:
                    return value
                break
    return ""


def _section_body(
    rows: Sequence[Row],
    start: int,
    terminators: Sequence[LabelRule],
    stop_prefixes: Tuple[str, ...] = (),
) -> Iterator[Row]:
    """
    Rows after `start` up to (not including) the first row whose leading
    cell begins with a stop prefix or matches a terminator label.
    """
    for row in rows[start + 1:]:
        lead = _cell(row, 0)
        if lead and (lead.startswith(stop_prefixes) or match_any(lead, terminators)):
            return
        yield row


# ---------- Sections ----------

def parse_directors(rows: Sequence[Row]) -> List[Director]:
    directors: List[Director] = []
    start = find_row_index(rows, DIRECTORS)
    if start < 0:
        return directors

    def add(name: str, position: str) -> None:
        directors.append(Director(order=len(directors) + 1, name=_clean_name(name), position=position or None))

    # value cell of the label row is either a head count or the first director
    first = _cell(rows[start], 1)
    if _looks_like_name(first) and not _COUNT_RE.match(first):
        add(first, _cell(rows[start], 2))

    for row in _section_body(rows, start, terminators_for(DIRECTORS)):
        lead, nxt = _cell(row, 0), _cell(row, 1)
        if is_header_cell(lead):
            continue
        if _ORDINAL_RE.match(lead):
            # "2." | name | position
            if _looks_like_name(nxt):
                add(nxt, _cell(row, 2))
        elif lead:
            # name | position
            if _looks_like_name(lead):
                add(lead, nxt)
        elif _looks_like_name(nxt):
            # (blank) | name | position
            add(nxt, _cell(row, 2))
    return directors

    # value cell of the label row is either a head count or the first director
    first = _cell(rows[start], 1)
    if _looks_like_name(first) and not _COUNT_RE.match(first):
        directors.append(Director(name=_clean_name(first), position=_cell(rows[start], 2) or None))

    for row in _section_body(rows, start, terminators_for(DIRECTORS)):
        lead, nxt = _cell(row, 0), _cell(row, 1)
        if is_header_cell(lead):
            continue
        if _ORDINAL_RE.match(lead):
            # "2." | name | position
            if _looks_like_name(nxt):
                directors.append(Director(name=_clean_name(nxt), position=_cell(row, 2) or None))
        elif lead:
            # name | position
            if _looks_like_name(lead):
                directors.append(Director(name=_clean_name(lead), position=nxt or None))
        elif _looks_like_name(nxt):
            # (blank) | name | position
            directors.append(Director(name=_clean_name(nxt), position=_cell(row, 2) or None))
    return directors


def _derive_percentages(shareholders: List[Shareholder]) -> None:
    if any(s.percentage for s in shareholders):
        return
    total = sum(s.shares for s in shareholders)
    if total <= 0:
        return
    for s in shareholders:
        s.percentage = round_half_up(s.shares / total * 100, 2)


def parse_shareholders(rows: Sequence[Row]) -> List[Shareholder]:
    shareholders: List[Shareholder] = []
    start = find_row_index(rows, SHAREHOLDERS)
    if start < 0:
        return shareholders

    body = list(_section_body(rows, start, terminators_for(SHAREHOLDERS)))
    if body and is_header_cell(_cell(body[0], 0)):
        body = body[1:]

    order = 1
    for row in body:
        if is_header_cell(_cell(row, 0)):
            continue
        name_idx = 1 if _cell(row, 1) else 0
        name = _cell(row, name_idx)
        if not name or _is_dash(name) or is_placeholder(name) or is_numeric_text(name):
            continue

        # percentage is the cell with '%'; share count is the biggest other number
        # NOTE: a second large numeric column (amount paid, etc.) can win here
        percentage: Optional[float] = None
        shares = 0.0
        for c in range(name_idx + 1, len(row)):
            cell = _cell(row, c)
            if not cell or _is_dash(cell) or "คิดเป็น" in cell:
                continue
            if "%" in cell:
                percentage = parse_thai_number(cell)
                continue
            num = parse_thai_number(cell)
            if num > shares:
                shares = num

        name = _clean_name(name)
        if name and (shares > 0 or percentage or len(name) > 1):
            shareholders.append(
                Shareholder(order=order, name=name, shares=shares, percentage=percentage or None)
            )
            order += 1

    _derive_percentages(shareholders)
    return shareholders


def parse_documents(rows: Sequence[Row]) -> List[CompanyDocument]:
    docs: List[CompanyDocument] = []
    start = find_row_index(rows, DOCUMENTS)
    if start < 0:
        return docs

    for row in _section_body(rows, start, [NOTES], stop_prefixes=(INTERNAL_SHEET_PREFIX,)):
        filled = [i for i in range(len(row)) if _cell(row, i)]
        if not filled:
            continue
        k = filled[0]
        if _ORDINAL_RE.match(_cell(row, k)) and len(filled) > 1:
            k = filled[1]

        name = _cell(row, k)
        if _is_dash(name) or is_header_cell(name, DOCUMENT_HEADER_MARKERS):
            continue

        link = _cell(row, k + 1)
        updated = _cell(row, k + 2)
        expiry = _cell(row, k + 3)
        if not (link or updated or expiry):
            continue

        docs.append(
            CompanyDocument(
                name=_clean_name(name),
                drive_file_id=extract_drive_file_id(link),
                drive_url=link if is_http_link(link) else None,
                updated_date=updated if updated and not is_http_link(updated) else None,
                expiry_date=expiry or None,
            )
        )
    return docs


def parse_share_breakdown(rows: Sequence[Row]) -> ShareBreakdown:
    total_shares = parse_thai_number(find_value(rows, TOTAL_SHARES))
    par_value = parse_thai_number(find_value(rows, PAR_VALUE)) or DEFAULT_PAR_VALUE
    paid_up_amount = parse_thai_number(find_value(rows, PAID_UP_AMOUNT))
    return ShareBreakdown(
        total_shares=total_shares,
        par_value=par_value,
        paid_up_shares=total_shares,
        paid_up_amount=paid_up_amount or total_shares * par_value,
    )


# ---------- Whole sheet ----------

def parse_rows(sheet_name: str, rows: Sequence[Row]) -> Company:
    """
    Extract one company from its sheet rows.

    Never raises on content: anything not found becomes "", 0 or [].
    The same rows always give the same Company.
    """
    grid: List[Row] = [list(r) if r else [] for r in (rows or [])]

    directors = parse_directors(grid)
    capital_text = find_value(grid, CAPITAL_TEXT)
    seal_drive_id, seal_url = split_seal_reference(find_value(grid, SEAL))

    return Company(
        sheet_name=sheet_name,
        data_date=find_value(grid, DATA_DATE),
        company_name_th=find_value(grid, COMPANY_NAME_TH) or sheet_name,
        company_name_en=find_value(grid, COMPANY_NAME_EN),
        registration_number=find_value(grid, REGISTRATION_NUMBER),
        director_count=len(directors) or int(parse_thai_number(find_value(grid, DIRECTOR_COUNT))),
        directors=directors,
        authorized_signatory=find_value(grid, AUTHORIZED_SIGNATORY),
        registered_capital=parse_thai_number(capital_text),
        capital_text=capital_text,
        share_breakdown=parse_share_breakdown(grid),
        head_office_address=find_value(grid, HEAD_OFFICE_ADDRESS),
        objectives=find_value(grid, OBJECTIVES),
        seal_image_drive_id=seal_drive_id,
        seal_image_url=seal_url,
        shareholders=parse_shareholders(grid),
        documents=parse_documents(grid),
    )
