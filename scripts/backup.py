"""Backup the stored snapshot.

Writes the decoded snapshot, re-encoded as pretty JSON, to backups/.
Works the same for the file and MySQL backends.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.fieldforce.fieldforce.container import build_store
from src.fieldforce.fieldforce.state.snapshot import snapshot_to_dict


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=settings.STORE_BACKEND,
        store_path=settings.STORE_PATH,
        storage_key=settings.STORAGE_KEY,
        db_config=dict(settings.DB_CONFIG),
    )

    snap = store.load()
    if snap is None:
        raise SystemExit("Nothing stored yet, no backup written.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{settings.STORAGE_KEY}_{ts}.json"
    out_file.write_text(json.dumps(snapshot_to_dict(snap), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
