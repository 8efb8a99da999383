# src/todo_keeper/storage/local_storage.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class CorruptStorageFile(ValueError):
    """The storage file exists but is not a JSON object of string slots."""


class JsonFileStorage:
    """
    localStorage-style key-value store kept in one JSON file.

    Layout on disk: {"<key>": "<string value>", ...}

    - a missing file is an empty storage
    - every write rewrites the whole file via tmp + os.replace
    - values are opaque strings; callers do their own serialization
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("JsonFileStorage ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text("utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStorageFile(f"{self._path}: invalid JSON ({e.msg})") from e
        if not isinstance(data, dict):
            raise CorruptStorageFile(f"{self._path}: expected a JSON object at top level")
        bad = [k for k, v in data.items() if not isinstance(v, str)]
        if bad:
            raise CorruptStorageFile(f"{self._path}: non-string values for keys {bad}")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = str(value)
        self._write_all(data)
        logger.debug("storage set key=%s bytes=%d", key, len(data[key]))

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key not in data:
            return
        del data[key]
        self._write_all(data)
        logger.debug("storage removed key=%s", key)

    def clear(self) -> None:
        self._write_all({})
        logger.debug("storage cleared path=%s", self._path)

    def keys(self) -> list[str]:
        return list(self._read_all().keys())
