"""Editing helpers for the multi-number input list.

Every helper returns a new list; entries are immutable and are replaced
rather than mutated when their text changes.
"""
from __future__ import annotations

import uuid
from typing import Callable, List, Optional, Sequence

from .models import PhoneEntry
from .networks import classify

IdFactory = Callable[[], str]


def _new_id() -> str:
    return str(uuid.uuid4())


def new_entry(id_factory: Optional[IdFactory] = None) -> PhoneEntry:
    return PhoneEntry(id=(id_factory or _new_id)())


def entry_from_text(raw: str, *, entry_id: Optional[str] = None, id_factory: Optional[IdFactory] = None) -> PhoneEntry:
    """Classify ``raw`` and wrap the result in a :class:`PhoneEntry`."""

    result = classify(raw)
    return PhoneEntry(
        id=entry_id or (id_factory or _new_id)(),
        raw=raw,
        phone=result.normalized,
        digits=result.digits,
        network=result.network,
        is_valid=result.is_valid,
    )


def reset_entries(id_factory: Optional[IdFactory] = None) -> List[PhoneEntry]:
    return [new_entry(id_factory)]


def add_entry(entries: Sequence[PhoneEntry], id_factory: Optional[IdFactory] = None) -> List[PhoneEntry]:
    return [*entries, new_entry(id_factory)]


def remove_entry(entries: Sequence[PhoneEntry], entry_id: str) -> List[PhoneEntry]:
    """Remove the entry with ``entry_id``; the last remaining row is kept."""

    if len(entries) <= 1:
        return list(entries)
    return [entry for entry in entries if entry.id != entry_id]


def update_entry(entries: Sequence[PhoneEntry], entry_id: str, raw: str) -> List[PhoneEntry]:
    return [entry_from_text(raw, entry_id=entry.id) if entry.id == entry_id else entry for entry in entries]


def all_valid(entries: Sequence[PhoneEntry]) -> bool:
    return bool(entries) and all(entry.is_valid for entry in entries)


__all__ = [
    "add_entry",
    "all_valid",
    "entry_from_text",
    "new_entry",
    "remove_entry",
    "reset_entries",
    "update_entry",
]
