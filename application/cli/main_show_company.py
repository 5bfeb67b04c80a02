## application/cli/main_show_company.py
from __future__ import annotations
from dataclasses import asdict
import argparse
import json

from application.cli.common import add_common_args, build_query_service, setup_logging
from application.ports import CompanyNotFoundError
from domain.services.expiry_classifier import classify_expiry
from domain.services.thai_numbers import format_money


def main():
    ap = argparse.ArgumentParser(description="Print one extracted company as JSON.")
    add_common_args(ap)
    ap.add_argument("sheet_name")
    args = ap.parse_args()

    setup_logging(args.verbose)
    svc = build_query_service(args)

    try:
        company = svc.get_company(args.sheet_name)
    except CompanyNotFoundError as e:
        raise SystemExit(str(e))

    payload = asdict(company)
    payload["registered_capital_text"] = format_money(company.registered_capital)
    for doc in payload["documents"]:
        doc["expiry_status"] = classify_expiry(doc.get("expiry_date"))
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
