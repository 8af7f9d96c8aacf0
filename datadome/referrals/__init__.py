"""Referral codes, redemption and reward claiming."""

from .codes import ALPHABET, RandomSource, generate_referral_code
from .ledger import (
    POINTS_PER_REWARD,
    claim_reward,
    claimed_rewards,
    ensure_rewards,
    issue_code_if_absent,
    pending_reward_count,
    redeem_code,
    unclaimed_rewards,
)
from .service import ReferralService
from .sharing import code_from_url, share_link, share_message, whatsapp_share_url

__all__ = [
    "ALPHABET",
    "POINTS_PER_REWARD",
    "RandomSource",
    "ReferralService",
    "claim_reward",
    "claimed_rewards",
    "code_from_url",
    "ensure_rewards",
    "generate_referral_code",
    "issue_code_if_absent",
    "pending_reward_count",
    "redeem_code",
    "share_link",
    "share_message",
    "unclaimed_rewards",
    "whatsapp_share_url",
]
