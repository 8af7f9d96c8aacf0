"""Input/output helpers for bulk number lists."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from .models import PhoneEntry

PathLike = Union[str, Path]

_TEXT_SUFFIXES = {".txt", ".text", ""}
_DELIMITED_SUFFIXES = {".csv", ".tsv"}
_EXCEL_SUFFIXES = {".xlsx", ".xlsm"}

ENTRY_COLUMNS = ["phone", "digits", "network", "is_valid"]


class UnsupportedFileTypeError(ValueError):
    """Raised when an unsupported file format is passed to the loader or exporter."""


def load_text(path: PathLike) -> str:
    """Return the textual content of a paste dump or spreadsheet.

    Spreadsheet cells are read as strings without a header row and every
    non-empty cell becomes one line of the returned text.
    """

    file_path = Path(path)
    suffix = file_path.suffix.lower()

    if suffix in _TEXT_SUFFIXES:
        return file_path.read_text(encoding="utf-8-sig")

    if suffix in _DELIMITED_SUFFIXES:
        delimiter = "\t" if suffix == ".tsv" else ","
        with file_path.open(newline="", encoding="utf-8-sig") as handle:
            rows = list(csv.reader(handle, delimiter=delimiter))
        return "\n".join(cell.strip() for row in rows for cell in row if cell.strip())

    if suffix in _EXCEL_SUFFIXES:
        sheets = pd.read_excel(file_path, sheet_name=None, header=None, dtype=str, engine="openpyxl")
        return _join_cells(sheets.values())

    raise UnsupportedFileTypeError(f"Unsupported file extension: {file_path.suffix}")


def _join_cells(frames: Iterable[pd.DataFrame]) -> str:
    cells: List[str] = []
    for frame in frames:
        for value in frame.to_numpy().ravel():
            if pd.isna(value):
                continue
            text = str(value).strip()
            if text:
                cells.append(text)
    return "\n".join(cells)


def entries_to_dataframe(entries: Iterable[PhoneEntry]) -> pd.DataFrame:
    return pd.DataFrame([entry.as_row() for entry in entries], columns=ENTRY_COLUMNS)


def write_entries(path: PathLike, entries: Iterable[PhoneEntry]) -> Path:
    """Write phone entries to a CSV/TSV file or an Excel workbook."""

    output_path = Path(path)
    suffix = output_path.suffix.lower()
    dataframe = entries_to_dataframe(entries)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if suffix in _DELIMITED_SUFFIXES:
        dataframe.to_csv(output_path, index=False, sep="\t" if suffix == ".tsv" else ",")
        return output_path

    if suffix in _EXCEL_SUFFIXES:
        dataframe.to_excel(output_path, index=False, sheet_name="Numbers", engine="openpyxl")
        return output_path

    raise UnsupportedFileTypeError(f"Unsupported export file extension: {output_path.suffix}")


__all__ = ["ENTRY_COLUMNS", "UnsupportedFileTypeError", "entries_to_dataframe", "load_text", "write_entries"]
