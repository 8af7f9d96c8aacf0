"""Snapshot stores used to persist referral and phone state between runs."""
from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

LOGGER = logging.getLogger(__name__)

Snapshot = Dict[str, Any]


class StoreError(RuntimeError):
    """Raised when a store cannot be read or written."""


class SnapshotStore(Protocol):
    """Key-value interface the core reads snapshots from and saves them to."""

    def load(self, key: str) -> Optional[Any]:  # pragma: no cover - runtime protocol
        """Return the value saved under ``key`` or ``None``."""

    def save(self, key: str, snapshot: Any) -> None:  # pragma: no cover - runtime protocol
        """Persist ``snapshot`` under ``key``, replacing any previous value."""


class MemoryStore:
    """In-process store; values are deep-copied on the way in and out."""

    def __init__(self, initial: Optional[Snapshot] = None) -> None:
        self._data: Snapshot = copy.deepcopy(dict(initial or {}))

    def load(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))

    def save(self, key: str, snapshot: Any) -> None:
        self._data[key] = copy.deepcopy(snapshot)


class JsonFileStore:
    """Store every key in a single UTF-8 JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Snapshot:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreError(f"Store file '{self.path}' is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StoreError(f"Store file '{self.path}' must contain a JSON object")
        return data

    def load(self, key: str) -> Optional[Any]:
        return self._read().get(key)

    def save(self, key: str, snapshot: Any) -> None:
        data = self._read()
        data[key] = snapshot
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.debug("Saved %s to %s", key, self.path)


__all__ = ["JsonFileStore", "MemoryStore", "Snapshot", "SnapshotStore", "StoreError"]
