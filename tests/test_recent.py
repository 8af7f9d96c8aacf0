from __future__ import annotations

from datadome.recent import last_number, recent_numbers, remember_number
from datadome.store import MemoryStore


def test_recent_numbers_keep_two_most_recent_distinct_numbers() -> None:
    store = MemoryStore()

    remember_number(store, "0803 123 4567")
    remember_number(store, "08051234567")
    remember_number(store, "0803-123-4567")
    numbers = remember_number(store, "08091234567")

    assert numbers == ["08091234567", "08031234567"]
    assert recent_numbers(store) == ["08091234567", "08031234567"]
    assert last_number(store) == "08091234567"


def test_empty_store_has_no_recent_numbers() -> None:
    store = MemoryStore()

    assert recent_numbers(store) == []
    assert last_number(store) is None
    assert remember_number(store, "") == []
