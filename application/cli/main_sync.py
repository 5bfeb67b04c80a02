## application/cli/main_sync.py
from __future__ import annotations
from dataclasses import asdict
import argparse
import json
import logging

from application.cli.common import add_common_args, build_query_service, setup_logging


def main():
    ap = argparse.ArgumentParser(description="Re-extract every company and report per-company results.")
    add_common_args(ap)
    ap.add_argument("--list", action="store_true", help="print the company listing instead of a sync summary")
    args = ap.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("registry.sync")
    logger.info("Starting sync (source=%s)", args.source)

    svc = build_query_service(args)

    if args.list:
        rows = [asdict(s) for s in svc.list_companies()]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    result = svc.sync_all()
    for r in result["results"]:
        if r["success"]:
            print(f"✅ {r['sheet_name']}: {r['company_name_th']}")
        else:
            print(f"❌ {r['sheet_name']}: {r['error']}")
    print(f"Synced {result['synced']} companies ({result['failed']} failed)")
    if result["failed"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
