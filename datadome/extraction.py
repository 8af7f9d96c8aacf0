"""Bulk extraction of Nigerian phone numbers from free-form text."""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from .entries import IdFactory, entry_from_text, reset_entries
from .models import PhoneEntry
from .networks import COUNTRY_CODE, LOCAL_NUMBER_LENGTH, strip_digits

LOGGER = logging.getLogger(__name__)

AUTH_REQUIRED_ABOVE = 5

# 08031234567, 0803 123 4567, +234-803-1234-567, 0803.123.4567 ...
# Never starts or ends inside a longer run of digits.
PHONE_PATTERN = re.compile(r"(?<!\d)(?:\+?234[\s.\-]?|0)?[789]\d{2}[\s.\-]?\d{3,4}[\s.\-]?\d{4}(?!\d)")


def _normalise_match(text: str) -> str:
    digits = strip_digits(text)
    if digits.startswith(COUNTRY_CODE):
        digits = "0" + digits[len(COUNTRY_CODE):]
    return digits


def extract(text: str) -> List[str]:
    """Return the distinct 11-digit local numbers found in ``text``.

    Numbers are returned in order of first appearance. Fragments that do not
    normalise to an 11-digit local number starting with ``0`` are dropped.
    """

    numbers: List[str] = []
    for match in PHONE_PATTERN.finditer(text or ""):
        digits = _normalise_match(match.group(0))
        if len(digits) != LOCAL_NUMBER_LENGTH or not digits.startswith("0"):
            LOGGER.debug("Discarding fragment %r (%d digits)", match.group(0), len(digits))
            continue
        if digits not in numbers:
            numbers.append(digits)
    return numbers


def merge_entries(
    existing: Sequence[PhoneEntry],
    numbers: Iterable[str],
    *,
    id_factory: Optional[IdFactory] = None,
) -> List[PhoneEntry]:
    """Append valid extracted numbers after the valid entries already present.

    Invalid or blank existing rows are dropped, numbers already in the list
    are skipped, and an empty result becomes a single blank row.
    """

    merged = [entry for entry in existing if entry.is_valid]
    seen = {entry.digits for entry in merged}

    for number in numbers:
        entry = entry_from_text(number, id_factory=id_factory)
        if not entry.is_valid:
            LOGGER.debug("Skipping %s: no known network prefix", entry.digits)
            continue
        if entry.digits in seen:
            continue
        seen.add(entry.digits)
        merged.append(entry)

    if not merged:
        return reset_entries(id_factory)
    return merged


def valid_count(entries: Iterable[PhoneEntry]) -> int:
    return sum(1 for entry in entries if entry.is_valid)


def requires_auth(count: int) -> bool:
    """Return ``True`` when a bulk purchase of ``count`` numbers needs a login."""

    return count > AUTH_REQUIRED_ABOVE


__all__ = [
    "AUTH_REQUIRED_ABOVE",
    "PHONE_PATTERN",
    "extract",
    "merge_entries",
    "requires_auth",
    "valid_count",
]
