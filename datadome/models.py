"""Unified data models for phone classification, bulk entry and referral rewards."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional


# --- Networks & Phone Numbers ---

@dataclass(frozen=True, slots=True)
class Network:
    """A Nigerian mobile network operator and the prefixes it owns."""

    id: str
    name: str
    color: str
    prefixes: FrozenSet[str] = frozenset()


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of classifying a single piece of phone number text."""

    digits: str
    normalized: str
    network: Optional[Network] = None
    is_valid: bool = False

    @property
    def network_id(self) -> Optional[str]:
        return self.network.id if self.network else None


@dataclass(frozen=True, slots=True)
class PhoneEntry:
    """One row of the phone number input list."""

    id: str
    raw: str = ""
    phone: str = ""
    digits: str = ""
    network: Optional[Network] = None
    is_valid: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.digits

    def as_row(self) -> Dict[str, Any]:
        """Return a serialisable representation of the entry."""
        return {
            "phone": self.phone,
            "digits": self.digits,
            "network": self.network.name if self.network else "",
            "is_valid": self.is_valid,
        }


# --- Referral Rewards ---

class RewardType(str, Enum):
    DATA = "data"
    AIRTIME = "airtime"


REWARD_VALUES: Dict[RewardType, str] = {
    RewardType.DATA: "1GB",
    RewardType.AIRTIME: "₦500",
}


class LedgerError(str, Enum):
    """Business-rule outcomes reported by the referral ledger."""

    INVALID_CODE = "invalid_code"
    ALREADY_REDEEMED = "already_redeemed"
    REWARD_NOT_FOUND = "reward_not_found"


@dataclass(slots=True)
class Reward:
    """A reward earned from referral points, claimable exactly once."""

    id: str
    earned_at: datetime
    type: Optional[RewardType] = None
    value: Optional[str] = None
    claimed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value if self.type else None,
            "value": self.value,
            "claimed": self.claimed,
            "earned_at": self.earned_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reward":
        reward_type = data.get("type")
        earned_at = data.get("earned_at")
        return cls(
            id=str(data["id"]),
            earned_at=datetime.fromisoformat(earned_at) if earned_at else datetime.now(timezone.utc),
            type=RewardType(reward_type) if reward_type else None,
            value=data.get("value"),
            claimed=bool(data.get("claimed", False)),
        )


@dataclass(slots=True)
class ReferralAccount:
    """Snapshot of a single account's referral state."""

    code: str = ""
    points: int = 0
    rewards: List[Reward] = field(default_factory=list)
    has_redeemed_code: bool = False
    redeemed_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "points": self.points,
            "rewards": [reward.to_dict() for reward in self.rewards],
            "has_redeemed_code": self.has_redeemed_code,
            "redeemed_code": self.redeemed_code,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ReferralAccount":
        """Build an account from a stored snapshot, defaulting missing fields."""

        if not data:
            return cls()
        return cls(
            code=str(data.get("code") or ""),
            points=max(0, int(data.get("points") or 0)),
            rewards=[Reward.from_dict(item) for item in data.get("rewards") or []],
            has_redeemed_code=bool(data.get("has_redeemed_code", False)),
            redeemed_code=data.get("redeemed_code"),
        )


@dataclass(slots=True)
class LedgerResult:
    """Updated account snapshot plus the error, if the operation was refused."""

    account: ReferralAccount
    error: Optional[LedgerError] = None
    reward: Optional[Reward] = None

    @property
    def ok(self) -> bool:
        return self.error is None
