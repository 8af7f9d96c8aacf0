"""Share links for referral codes."""
from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qs, quote, urlencode, urlsplit

WHATSAPP_URL = "https://wa.me/"


def share_link(base_url: str, code: str) -> str:
    return f"{base_url.rstrip('/')}?{urlencode({'ref': code})}"


def share_message(link: str) -> str:
    return f"Get fast data topups on Datadome! Use my referral link: {link}"


def whatsapp_share_url(message: str) -> str:
    return f"{WHATSAPP_URL}?text={quote(message, safe='')}"


def code_from_url(url: str) -> Optional[str]:
    """Return the upper-cased ``ref`` query parameter of ``url``, if present."""

    values = parse_qs(urlsplit(url).query).get("ref")
    if not values or not values[0].strip():
        return None
    return values[0].strip().upper()


__all__ = ["code_from_url", "share_link", "share_message", "whatsapp_share_url"]
