"""Write the built-in timetable as JSON, as a starting point for TIMETABLE_FILE."""
from __future__ import annotations

import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.classtrack.classtrack.timetable.catalog import build_default_catalog, catalog_to_dict


def main() -> None:
    out_path = Path(sys.argv[1]) if len(sys.argv) > 1 else REPO_ROOT / "timetable.json"
    out_path.write_text(json.dumps(catalog_to_dict(build_default_catalog()), indent=2), encoding="utf-8")
    print(f"[classtrack] timetable written to {out_path}")


if __name__ == "__main__":
    main()
