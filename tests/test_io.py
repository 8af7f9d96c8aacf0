from __future__ import annotations

import pandas as pd
import pytest

from datadome.entries import entry_from_text
from datadome.extraction import extract
from datadome.io import UnsupportedFileTypeError, load_text, write_entries


def test_load_text_from_plain_text(tmp_path) -> None:
    path = tmp_path / "paste.txt"
    path.write_text("Ada 0803 123 4567\nBola +234 805 123 4567\n", encoding="utf-8")

    assert extract(load_text(path)) == ["08031234567", "08051234567"]


def test_load_text_from_ragged_csv(tmp_path) -> None:
    path = tmp_path / "contacts.csv"
    path.write_text("name,phone\nAda,08031234567,extra\nBola,0809-123-4567\n", encoding="utf-8")

    text = load_text(path)

    assert text.splitlines() == ["name", "phone", "Ada", "08031234567", "extra", "Bola", "0809-123-4567"]
    assert extract(text) == ["08031234567", "08091234567"]


def test_load_text_from_excel(tmp_path) -> None:
    pytest.importorskip("openpyxl", reason="Excel support requires openpyxl")
    path = tmp_path / "contacts.xlsx"
    pd.DataFrame({"name": ["Ada", "Bola"], "phone": ["0803 123 4567", "07011234567"]}).to_excel(path, index=False)

    assert extract(load_text(path)) == ["08031234567", "07011234567"]


def test_load_text_rejects_unknown_suffix(tmp_path) -> None:
    path = tmp_path / "numbers.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        load_text(path)


def test_load_text_rejects_legacy_xls(tmp_path) -> None:
    path = tmp_path / "contacts.xls"
    path.write_bytes(b"\xd0\xcf\x11\xe0")

    with pytest.raises(UnsupportedFileTypeError):
        load_text(path)


def test_write_entries_to_csv_and_excel(tmp_path) -> None:
    entries = [entry_from_text("08031234567"), entry_from_text("0800 000")]

    csv_path = write_entries(tmp_path / "out" / "numbers.csv", entries)
    frame = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

    assert list(frame.columns) == ["phone", "digits", "network", "is_valid"]
    assert frame.loc[0, "digits"] == "08031234567"
    assert frame.loc[0, "network"] == "MTN"
    assert frame.loc[1, "is_valid"] == "False"

    pytest.importorskip("openpyxl", reason="Excel export requires openpyxl")
    excel_path = write_entries(tmp_path / "numbers.xlsx", entries)
    excel_frame = pd.read_excel(excel_path, dtype=str)
    assert excel_frame.loc[0, "phone"] == "0803 123 4567"


def test_write_entries_rejects_unknown_suffix(tmp_path) -> None:
    with pytest.raises(UnsupportedFileTypeError):
        write_entries(tmp_path / "numbers.json", [])
