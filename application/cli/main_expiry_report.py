## application/cli/main_expiry_report.py
from __future__ import annotations
from datetime import date
from pathlib import Path
import argparse
import logging

from application.cli.common import add_common_args, build_query_service, setup_logging
from infrastructure.config.paths import RepoPaths
from infrastructure.reporting.expiry_report_writer import CsvJsonExpiryReportWriter


def main():
    ap = argparse.ArgumentParser(description="Documents that are expired or expire within 30 days.")
    add_common_args(ap)
    ap.add_argument("--today", type=str, help="YYYY-MM-DD, defaults to today in Asia/Bangkok")
    args = ap.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger("registry.expiry")

    today = date.fromisoformat(args.today) if args.today else None
    svc = build_query_service(args)
    rows = svc.expiring_documents(today=today)

    paths = RepoPaths.from_root(Path(args.root))
    writer = CsvJsonExpiryReportWriter(paths.reports_public, paths.reports_internal)
    out = writer.write(rows)

    logger.info("Expiry report: %d documents → %s", len(rows), out["csv"])
    print("Expiry report →", out["csv"])


if __name__ == "__main__":
    main()
