from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.constants import STORAGE_KEY
from ..core.exceptions import SnapshotError
from ..state import snapshot as codec
from ..state.snapshot import AppSnapshot
from .repository import SnapshotStore


class JsonFileSnapshotStore(SnapshotStore):
    """Local key-value file: a JSON object mapping keys to serialized blobs.

    Other keys in the file are preserved. Each save rewrites the file through
    a temp file and ``os.replace``, so a reader sees either the old or the new
    content.
    """

    def __init__(self, path: str | Path, *, key: str = STORAGE_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except ValueError as e:
            raise SnapshotError(f"Store file {self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise SnapshotError(f"Store file {self._path} must hold a JSON object")
        return data

    def load(self) -> Optional[AppSnapshot]:
        blob = self._read_all().get(self._key)
        if blob is None:
            return None
        return codec.loads(blob)

    def save(self, snapshot: AppSnapshot) -> None:
        try:
            data = self._read_all()
        except SnapshotError:
            # A corrupt file is replaced rather than blocking every later write.
            data = {}
        data[self._key] = codec.dumps(snapshot)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp, self._path)
        except Exception:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
