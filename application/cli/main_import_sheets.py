## application/cli/main_import_sheets.py
from __future__ import annotations
from pathlib import Path
import argparse
import logging

from application.cli.common import add_common_args, build_config, build_loader, setup_logging
from application.sheet_import_service import SheetImportService
from infrastructure.config.paths import RepoPaths
from infrastructure.repositories.json_company_store import JsonCompanyStore


def main():
    ap = argparse.ArgumentParser(description="Copy companies extracted from sheets into the JSON column store.")
    add_common_args(ap)
    ap.add_argument("--overwrite", action="store_true", help="re-import companies already in the store")
    ap.add_argument("--only", type=str, default="", help="comma-separated sheet names to import")
    args = ap.parse_args()
    if args.source == "store":
        args.source = "sheets"

    setup_logging(args.verbose)
    logger = logging.getLogger("registry.import")

    cfg = build_config(args)
    loader = build_loader(args, cfg)
    store = JsonCompanyStore(RepoPaths.from_root(Path(args.root)).store)

    only = [s.strip() for s in args.only.split(",") if s.strip()] or None
    out = SheetImportService(loader, store, logger=logger).run(overwrite=args.overwrite, only=only)

    for r in out["results"]:
        if r["status"] == "error":
            print(f"❌ {r['sheet_name']}: {r['error']}")
        elif r["status"] == "skipped":
            print(f"⏭  {r['sheet_name']}: already in store")
        else:
            print(f"✅ {r['sheet_name']}")
    c = out["counts"]
    print(f"Imported {c['companies']} companies, {c['directors']} directors, "
          f"{c['shareholders']} shareholders, {c['documents']} documents")
    if any(r["status"] == "error" for r in out["results"]):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
