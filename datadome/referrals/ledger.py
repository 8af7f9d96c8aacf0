"""Referral ledger: codes, one-time redemption and points-to-reward conversion.

Every operation takes an account snapshot and returns a :class:`LedgerResult`
holding a new snapshot; the input is never mutated. Refusals are reported
through :attr:`LedgerResult.error` rather than raised.
"""
from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from ..models import REWARD_VALUES, LedgerError, LedgerResult, ReferralAccount, Reward, RewardType
from .codes import CODE_LENGTH, RandomSource, generate_referral_code

POINTS_PER_REWARD = 5

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _copy(account: ReferralAccount, **changes) -> ReferralAccount:
    rewards = changes.pop("rewards", None)
    if rewards is None:
        rewards = [replace(reward) for reward in account.rewards]
    return replace(account, rewards=rewards, **changes)


def issue_code_if_absent(account: ReferralAccount, random_source: Optional[RandomSource] = None) -> LedgerResult:
    if account.code:
        return LedgerResult(account=_copy(account))
    code = generate_referral_code(CODE_LENGTH, random_source)
    return LedgerResult(account=_copy(account, code=code))


def redeem_code(account: ReferralAccount, input_code: str) -> LedgerResult:
    """Record that ``account`` used somebody else's referral code.

    The comparison with the account's own code ignores case. Redeeming does
    not credit points to anyone.
    """

    code = (input_code or "").strip().upper()
    if not code or code == account.code.upper():
        return LedgerResult(account=_copy(account), error=LedgerError.INVALID_CODE)
    if account.has_redeemed_code:
        return LedgerResult(account=_copy(account), error=LedgerError.ALREADY_REDEEMED)
    return LedgerResult(account=_copy(account, has_redeemed_code=True, redeemed_code=code))


def earned_reward_count(points: int) -> int:
    return max(0, points) // POINTS_PER_REWARD


def ensure_rewards(
    account: ReferralAccount,
    *,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> LedgerResult:
    """Materialise unclaimed rewards until there is one per 5 points."""

    clock = clock or utc_now
    id_factory = id_factory or _new_id
    rewards = [replace(reward) for reward in account.rewards]
    while len(rewards) < earned_reward_count(account.points):
        rewards.append(Reward(id=id_factory(), earned_at=clock()))
    return LedgerResult(account=_copy(account, rewards=rewards))


def unclaimed_rewards(account: ReferralAccount) -> List[Reward]:
    return [reward for reward in account.rewards if not reward.claimed]


def claimed_rewards(account: ReferralAccount) -> List[Reward]:
    return [reward for reward in account.rewards if reward.claimed]


def pending_reward_count(account: ReferralAccount) -> int:
    """Number of rewards waiting to be claimed once the ledger has caught up with the points."""

    return len(unclaimed_rewards(ensure_rewards(account).account))


def claim_reward(
    account: ReferralAccount,
    reward_id: str,
    chosen_type: Union[RewardType, str],
) -> LedgerResult:
    """Claim an unclaimed reward as data or airtime and spend 5 points for it."""

    reward_type = RewardType(chosen_type)
    rewards = [replace(reward) for reward in account.rewards]
    target = next((reward for reward in rewards if reward.id == reward_id and not reward.claimed), None)
    if target is None:
        return LedgerResult(account=_copy(account), error=LedgerError.REWARD_NOT_FOUND)

    target.type = reward_type
    target.value = REWARD_VALUES[reward_type]
    target.claimed = True
    points = max(0, account.points - POINTS_PER_REWARD)
    return LedgerResult(account=_copy(account, rewards=rewards, points=points), reward=target)


__all__ = [
    "POINTS_PER_REWARD",
    "claim_reward",
    "claimed_rewards",
    "earned_reward_count",
    "ensure_rewards",
    "issue_code_if_absent",
    "pending_reward_count",
    "redeem_code",
    "unclaimed_rewards",
    "utc_now",
]
