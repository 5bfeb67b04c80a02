# domain/services/record_mapper.py --> pre-split store rows (one column per field) -> Company
from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

from domain.models.company import (
    Company,
    CompanyDocument,
    Director,
    ShareBreakdown,
    Shareholder,
)

DEFAULT_PAR_VALUE = 100.0


def _num(x: Any) -> float:
    """Store columns are numeric or numeric text; anything else is 0."""
    try:
        if x is None or isinstance(x, bool):
            return 0.0
        if isinstance(x, (int, float)):
            return 0.0 if x != x else float(x)
        s = str(x).strip()
        if s == "" or s.lower() in ("nan", "none", "null"):
            return 0.0
        return float(s)
    except (TypeError, ValueError):
        return 0.0


def _opt_num(x: Any) -> Optional[float]:
    if x is None or (isinstance(x, str) and not x.strip()):
        return None
    return _num(x)


def _s(x: Any) -> str:
    return "" if x is None else str(x)


def company_from_tables(
    company_row: Dict[str, Any],
    directors: Sequence[Dict[str, Any]] = (),
    shareholders: Sequence[Dict[str, Any]] = (),
    documents: Sequence[Dict[str, Any]] = (),
) -> Company:
    """
    Map the column form straight onto Company; no label scanning.
    Child rows are expected already ordered by sort_order, but we sort again.
    """
    dirs = sorted(directors, key=lambda d: _num(d.get("sort_order")))
    shs = sorted(shareholders, key=lambda s: _num(s.get("sort_order")))

    sheet_name = _s(company_row.get("sheet_name"))
    director_list = [
        Director(
            order=int(_num(d.get("sort_order"))) or i + 1,
            name=_s(d.get("name")),
            position=d.get("position") or None,
        )
        for i, d in enumerate(dirs)
    ]

    return Company(
        sheet_name=sheet_name,
        data_date=_s(company_row.get("data_date")),
        company_name_th=_s(company_row.get("company_name_th")) or sheet_name,
        company_name_en=_s(company_row.get("company_name_en")),
        registration_number=_s(company_row.get("registration_number")),
        director_count=int(_num(company_row.get("director_count"))) or len(director_list),
        directors=director_list,
        authorized_signatory=_s(company_row.get("authorized_signatory")),
        registered_capital=_num(company_row.get("registered_capital")),
        capital_text=_s(company_row.get("capital_text")),
        share_breakdown=ShareBreakdown(
            total_shares=_num(company_row.get("total_shares")),
            par_value=_num(company_row.get("par_value")) or DEFAULT_PAR_VALUE,
            paid_up_shares=_num(company_row.get("paid_up_shares")),
            paid_up_amount=_num(company_row.get("paid_up_amount")),
        ),
        head_office_address=_s(company_row.get("head_office_address")),
        objectives=_s(company_row.get("objectives")),
        seal_image_drive_id=_s(company_row.get("seal_image_drive_id")),
        seal_image_url=_s(company_row.get("seal_image_url")),
        shareholders=[
            Shareholder(
                order=int(_num(s.get("sort_order"))),
                name=_s(s.get("name")),
                shares=_num(s.get("shares")),
                percentage=_opt_num(s.get("percentage")),
            )
            for s in shs
        ],
        documents=[
            CompanyDocument(
                name=_s(d.get("name")),
                drive_file_id=_s(d.get("drive_file_id")),
                type=d.get("type") or None,
                drive_url=d.get("drive_url") or None,
                updated_date=d.get("updated_date") or None,
                expiry_date=d.get("expiry_date") or None,
            )
            for d in documents
        ],
    )


def company_to_row(c: Company) -> Dict[str, Any]:
    """Company scalars -> store columns (child tables go separately)."""
    sb = c.share_breakdown
    return {
        "sheet_name": c.sheet_name,
        "data_date": c.data_date,
        "company_name_th": c.company_name_th,
        "company_name_en": c.company_name_en,
        "registration_number": c.registration_number,
        "director_count": c.director_count,
        "authorized_signatory": c.authorized_signatory,
        "registered_capital": c.registered_capital,
        "capital_text": c.capital_text,
        "total_shares": sb.total_shares,
        "par_value": sb.par_value,
        "paid_up_shares": sb.paid_up_shares,
        "paid_up_amount": sb.paid_up_amount,
        "head_office_address": c.head_office_address,
        "objectives": c.objectives,
        "seal_image_drive_id": c.seal_image_drive_id,
        "seal_image_url": c.seal_image_url,
    }


def documents_to_rows(documents: Sequence[CompanyDocument]) -> List[Dict[str, Any]]:
    return [
        {
            "name": d.name,
            "drive_file_id": d.drive_file_id or "",
            "type": d.type,
            "drive_url": d.drive_url,
            "updated_date": d.updated_date,
            "expiry_date": d.expiry_date,
        }
        for d in documents
    ]


def directors_to_rows(directors: Sequence[Director]) -> List[Dict[str, Any]]:
    return [
        {"name": d.name, "position": d.position or None, "sort_order": d.order or i + 1}
        for i, d in enumerate(directors)
    ]


def shareholders_to_rows(shareholders: Sequence[Shareholder]) -> List[Dict[str, Any]]:
    return [
        {
            "sort_order": s.order or i + 1,
            "name": s.name,
            "shares": s.shares or 0,
            "percentage": s.percentage,
        }
        for i, s in enumerate(shareholders)
    ]
