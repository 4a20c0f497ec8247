"""Reset the stored snapshot to the seed roster and tasks (attendance cleared)."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.fieldforce.fieldforce.container import build_store
from src.fieldforce.fieldforce.state.app_state import AppState


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(
        backend=settings.STORE_BACKEND,
        store_path=settings.STORE_PATH,
        storage_key=settings.STORAGE_KEY,
        db_config=dict(settings.DB_CONFIG),
    )

    state = AppState(store)
    state.reset_to_seed()
    print(f"OK: Seeded snapshot -> {settings.STORE_BACKEND} (users={len(state.users)}, tasks={len(state.tasks)})")


if __name__ == "__main__":
    main()
