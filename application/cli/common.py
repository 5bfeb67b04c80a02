# application/cli/common.py --> shared flags + wiring for the registry commands
from __future__ import annotations
from pathlib import Path
import argparse
import logging
import os

from application.company_loaders import GridCompanyLoader, StoreCompanyLoader
from application.company_query_service import CompanyQueryService
from application.ports import CompanyLoader, RegistryConfig
from infrastructure.cache.ttl_company_cache import TtlCompanyCache
from infrastructure.config.paths import RepoPaths
from infrastructure.repositories.json_company_store import JsonCompanyStore
from infrastructure.sources.csv_grid_source import CsvGridSource
from infrastructure.sources.google_sheet_csv_source import GoogleSheetCsvSource

ROOT = Path(os.environ.get("REGISTRY_ROOT", Path.cwd()))
SPREADSHEET_ID = os.environ.get("REGISTRY_SPREADSHEET_ID", "")
SHEET_NAMES = os.environ.get("REGISTRY_SHEET_NAMES", "")
CACHE_TTL = float(os.environ.get("REGISTRY_CACHE_TTL", "300"))


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--root", type=str, default=str(ROOT), help="Project root (data/ and reports/ live here)")
    ap.add_argument("--source", choices=["sheets", "google", "store"], default="store",
                    help="sheets: data/sheets/*.csv, google: spreadsheet export, store: JSON column store")
    ap.add_argument("--spreadsheet-id", type=str, default=SPREADSHEET_ID)
    ap.add_argument("--sheet-names", type=str, default=SHEET_NAMES, help="comma-separated company sheets (google)")
    ap.add_argument("--max-workers", type=int, default=8)
    ap.add_argument("--fetch-timeout", type=int, default=15)
    ap.add_argument("--log-every", type=int, default=25)
    ap.add_argument("--verbose", "-v", action="count", default=1,
                    help="-v INFO, -vv DEBUG")


def setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1: level = logging.INFO
    elif verbose >= 2: level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")


def build_config(args: argparse.Namespace) -> RegistryConfig:
    return RegistryConfig(
        max_workers=args.max_workers,
        cache_ttl_seconds=CACHE_TTL,
        fetch_timeout=args.fetch_timeout,
        log_every=args.log_every,
    )


def build_loader(args: argparse.Namespace, cfg: RegistryConfig) -> CompanyLoader:
    paths = RepoPaths.from_root(Path(args.root))
    if args.source == "sheets":
        return GridCompanyLoader(CsvGridSource(paths.grids))
    if args.source == "google":
        if not args.spreadsheet_id:
            raise SystemExit("--spreadsheet-id (or REGISTRY_SPREADSHEET_ID) is required for --source google")
        names = [n.strip() for n in (args.sheet_names or "").split(",") if n.strip()]
        return GridCompanyLoader(GoogleSheetCsvSource(args.spreadsheet_id, names, timeout=cfg.fetch_timeout))
    return StoreCompanyLoader(JsonCompanyStore(paths.store))


def build_query_service(args: argparse.Namespace) -> CompanyQueryService:
    cfg = build_config(args)
    loader = build_loader(args, cfg)
    cache = TtlCompanyCache(ttl=cfg.cache_ttl_seconds)
    return CompanyQueryService(loader, cache=cache, cfg=cfg, logger=logging.getLogger("registry.query"))
