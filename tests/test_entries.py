from __future__ import annotations

from datadome.entries import (
    add_entry,
    all_valid,
    entry_from_text,
    new_entry,
    remove_entry,
    reset_entries,
    update_entry,
)


def test_update_entry_reclassifies_only_the_target_row() -> None:
    entries = [new_entry(lambda: "a"), new_entry(lambda: "b")]

    updated = update_entry(entries, "b", "0805-123-4567")

    assert updated[0] is entries[0]
    assert updated[1].id == "b"
    assert updated[1].raw == "0805-123-4567"
    assert updated[1].phone == "0805 123 4567"
    assert updated[1].network is not None and updated[1].network.name == "Glo"
    assert updated[1].is_valid is True
    assert entries[1].is_blank


def test_add_and_remove_entries() -> None:
    entries = add_entry(reset_entries(lambda: "first"), lambda: "second")

    assert [entry.id for entry in entries] == ["first", "second"]
    assert [entry.id for entry in remove_entry(entries, "first")] == ["second"]


def test_last_entry_cannot_be_removed() -> None:
    entries = reset_entries(lambda: "only")

    assert remove_entry(entries, "only") == entries


def test_all_valid_requires_every_row() -> None:
    valid = entry_from_text("0809 123 4567")
    partial = entry_from_text("0809 12")

    assert all_valid([valid]) is True
    assert all_valid([valid, partial]) is False
    assert all_valid([]) is False


def test_entry_row_for_export() -> None:
    entry = entry_from_text("+2347031234567", entry_id="x")

    assert entry.as_row() == {
        "phone": "0703 123 4567",
        "digits": "07031234567",
        "network": "MTN",
        "is_valid": True,
    }
