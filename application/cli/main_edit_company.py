## application/cli/main_edit_company.py
from __future__ import annotations
from dataclasses import asdict
from pathlib import Path
import argparse
import json
import logging

from application.cli.common import ROOT, setup_logging
from application.company_edit_service import CompanyEditService
from application.ports import CompanyNotFoundError, DuplicateCompanyError
from infrastructure.config.paths import RepoPaths
from infrastructure.repositories.json_company_store import JsonCompanyStore
from infrastructure.repositories.json_version_log import JsonVersionLog


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Edit one company in the JSON column store.")
    ap.add_argument("--root", type=str, default=str(ROOT), help="Project root (data/ lives here)")
    ap.add_argument("--by", type=str, default="admin", help="recorded as changed_by in the history")
    ap.add_argument("--verbose", "-v", action="count", default=1, help="-v INFO, -vv DEBUG")

    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create"); p.add_argument("sheet_name")
    p = sub.add_parser("delete"); p.add_argument("sheet_name")

    p = sub.add_parser("set", help="write one labelled field, e.g. ทุนจดทะเบียน")
    p.add_argument("sheet_name"); p.add_argument("label"); p.add_argument("value")

    p = sub.add_parser("seal", help="Drive link/id or external image URL")
    p.add_argument("sheet_name"); p.add_argument("ref")

    p = sub.add_parser("doc-add")
    p.add_argument("sheet_name"); p.add_argument("name"); p.add_argument("url")
    p.add_argument("--expiry", type=str, default=None)

    p = sub.add_parser("doc-update", help="point a document (matched by name) at a new file")
    p.add_argument("sheet_name"); p.add_argument("name"); p.add_argument("url")
    p.add_argument("--expiry", type=str, default=None)

    p = sub.add_parser("doc-expiry")
    p.add_argument("sheet_name"); p.add_argument("name"); p.add_argument("expiry")

    p = sub.add_parser("doc-remove", help="exact document name")
    p.add_argument("sheet_name"); p.add_argument("name")

    p = sub.add_parser("history")
    p.add_argument("sheet_name", nargs="?", default=None)
    p.add_argument("--limit", type=int, default=20)
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("registry.edit")

    paths = RepoPaths.from_root(Path(args.root))
    log = JsonVersionLog(paths.version_log)
    svc = CompanyEditService(JsonCompanyStore(paths.store), version_log=log, logger=logger)
    by = args.by

    try:
        if args.command == "create":
            print("✅ created", svc.create_company(args.sheet_name, changed_by=by))
        elif args.command == "delete":
            svc.delete_company(args.sheet_name, changed_by=by)
            print("✅ deleted", args.sheet_name)
        elif args.command == "set":
            out = svc.update_field(args.sheet_name, args.label, args.value, changed_by=by)
            if out is None:
                raise SystemExit(f"❌ no column for label {args.label!r}")
            print(f"✅ {out['column']}: {out['old_value']!r} → {args.value!r}")
        elif args.command == "seal":
            svc.update_seal(args.sheet_name, args.ref, changed_by=by)
            print("✅ seal updated")
        elif args.command == "doc-add":
            doc_id = svc.add_document(args.sheet_name, args.name, args.url, args.expiry, changed_by=by)
            print(f"✅ document {doc_id} added")
        elif args.command == "doc-update":
            out = svc.update_document(args.sheet_name, args.name, args.url, args.expiry, changed_by=by)
            if out is None:
                raise SystemExit(f"❌ no document matching {args.name!r}")
            print(f"✅ document {out['doc_id']} updated (was {out['old_link'] or '-'})")
        elif args.command == "doc-expiry":
            doc_id = svc.update_document_expiry(args.sheet_name, args.name, args.expiry, changed_by=by)
            if doc_id is None:
                raise SystemExit(f"❌ no document matching {args.name!r}")
            print(f"✅ document {doc_id} expires {args.expiry}")
        elif args.command == "doc-remove":
            if not svc.remove_document(args.sheet_name, args.name, changed_by=by):
                raise SystemExit(f"❌ no document named {args.name!r}")
            print("✅ document removed")
        elif args.command == "history":
            rows = [asdict(e) for e in log.history(args.sheet_name)[: max(0, args.limit)]]
            print(json.dumps(rows, ensure_ascii=False, indent=2))
    except (CompanyNotFoundError, DuplicateCompanyError) as e:
        raise SystemExit(f"❌ {e}")


if __name__ == "__main__":
    main()
