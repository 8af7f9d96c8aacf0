"""Decision logic for the Datadome data and airtime storefront."""

from .extraction import extract, merge_entries, requires_auth, valid_count
from .models import (
    Classification,
    LedgerError,
    LedgerResult,
    Network,
    PhoneEntry,
    ReferralAccount,
    Reward,
    RewardType,
)
from .networks import NETWORKS, classify, detect_network, format_phone_number
from .referrals import ReferralService
from .store import JsonFileStore, MemoryStore, SnapshotStore

__all__ = [
    "Classification",
    "JsonFileStore",
    "LedgerError",
    "LedgerResult",
    "MemoryStore",
    "NETWORKS",
    "Network",
    "PhoneEntry",
    "ReferralAccount",
    "ReferralService",
    "Reward",
    "RewardType",
    "SnapshotStore",
    "classify",
    "detect_network",
    "extract",
    "format_phone_number",
    "merge_entries",
    "requires_auth",
    "valid_count",
]
