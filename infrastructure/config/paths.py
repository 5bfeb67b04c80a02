#infrastructure/config/paths.py
from dataclasses import dataclass
from pathlib import Path

@dataclass
class RepoPaths:
    root: Path
    grids: Path          # exported company sheets, one CSV each
    store: Path          # column store, one JSON per company
    version_log: Path
    reports_public: Path
    reports_internal: Path

    @classmethod
    def from_root(cls, root: Path) -> "RepoPaths":
        root = Path(root)
        return cls(
            root=root,
            grids=root / "data" / "sheets",
            store=root / "data" / "store" / "companies",
            version_log=root / "data" / "store" / "version_history.json",
            reports_public=root / "reports" / "public",
            reports_internal=root / "reports" / "internal",
        )
