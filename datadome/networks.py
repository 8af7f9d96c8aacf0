"""Nigerian network detection and phone number normalisation."""
from __future__ import annotations

import re
from typing import Dict, Optional

from .models import Classification, Network

COUNTRY_CODE = "234"
LOCAL_NUMBER_LENGTH = 11

_NON_DIGITS = re.compile(r"\D")

NETWORKS: Dict[str, Network] = {
    "mtn": Network(
        id="mtn",
        name="MTN",
        color="#FFCC00",
        prefixes=frozenset(
            {"0703", "0706", "0803", "0806", "0810", "0813", "0814", "0816", "0903", "0906", "0913", "0916"}
        ),
    ),
    "airtel": Network(
        id="airtel",
        name="Airtel",
        color="#FF0000",
        prefixes=frozenset(
            {"0701", "0708", "0802", "0808", "0812", "0901", "0902", "0904", "0907", "0911", "0912"}
        ),
    ),
    "glo": Network(
        id="glo",
        name="Glo",
        color="#00A651",
        prefixes=frozenset({"0705", "0805", "0807", "0811", "0815", "0905", "0915"}),
    ),
    "9mobile": Network(
        id="9mobile",
        name="9mobile",
        color="#006B3F",
        prefixes=frozenset({"0809", "0817", "0818", "0908", "0909"}),
    ),
}

NETWORK_PREFIXES: Dict[str, Network] = {
    prefix: network for network in NETWORKS.values() for prefix in network.prefixes
}


def get_network(network_id: str) -> Network:
    """Return the network registered under ``network_id`` (case-insensitive)."""

    try:
        return NETWORKS[network_id.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown network '{network_id}'") from exc


def strip_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def normalise_digits(raw: str) -> str:
    """Return the local-format digits for ``raw``, at most 11 long.

    A leading ``234`` country code is replaced by a single ``0`` before the
    number is truncated.
    """

    digits = strip_digits(raw)
    if digits.startswith(COUNTRY_CODE):
        digits = "0" + digits[len(COUNTRY_CODE):]
    return digits[:LOCAL_NUMBER_LENGTH]


def format_phone_number(raw: str) -> str:
    """Group the normalised digits as ``XXXX XXX XXXX`` while they accumulate."""

    digits = normalise_digits(raw)
    if len(digits) <= 4:
        return digits
    if len(digits) <= 7:
        return f"{digits[:4]} {digits[4:]}"
    return f"{digits[:4]} {digits[4:7]} {digits[7:]}"


def detect_network(raw: str) -> Optional[Network]:
    digits = normalise_digits(raw)
    if len(digits) < 4:
        return None
    return NETWORK_PREFIXES.get(digits[:4])


def classify(raw: str) -> Classification:
    """Normalise ``raw`` and determine its network and validity."""

    digits = normalise_digits(raw)
    network = detect_network(digits)
    is_valid = len(digits) == LOCAL_NUMBER_LENGTH and digits.startswith("0") and network is not None
    return Classification(
        digits=digits,
        normalized=format_phone_number(digits),
        network=network,
        is_valid=is_valid,
    )


__all__ = [
    "NETWORKS",
    "NETWORK_PREFIXES",
    "classify",
    "detect_network",
    "format_phone_number",
    "get_network",
    "normalise_digits",
    "strip_digits",
]
