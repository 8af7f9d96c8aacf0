"""Referral service that persists ledger snapshots through a store."""
from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from ..models import LedgerResult, ReferralAccount, RewardType
from ..store import SnapshotStore
from . import ledger
from .codes import RandomSource

LOGGER = logging.getLogger(__name__)

REFERRAL_KEY = "referral"


class ReferralService:
    """Loads the account snapshot, applies one ledger operation and saves the result."""

    def __init__(
        self,
        store: SnapshotStore,
        *,
        random_source: Optional[RandomSource] = None,
        clock: Optional[ledger.Clock] = None,
        id_factory: Optional[ledger.IdFactory] = None,
        key: str = REFERRAL_KEY,
    ) -> None:
        self._store = store
        self._random_source = random_source
        self._clock = clock
        self._id_factory = id_factory
        self._key = key

    def _load(self) -> ReferralAccount:
        account = ReferralAccount.from_dict(self._store.load(self._key))
        issued = ledger.issue_code_if_absent(account, self._random_source).account
        if issued.code != account.code:
            LOGGER.info("Issued referral code %s", issued.code)
        return ledger.ensure_rewards(issued, clock=self._clock, id_factory=self._id_factory).account

    def _apply(self, operation: Callable[[ReferralAccount], LedgerResult]) -> LedgerResult:
        result = operation(self._load())
        self._store.save(self._key, result.account.to_dict())
        return result

    def account(self) -> ReferralAccount:
        """Return the current account, issuing a code and rewards as needed."""

        return self._apply(LedgerResult).account

    def pending_rewards(self) -> int:
        return ledger.pending_reward_count(self.account())

    def redeem(self, code: str) -> LedgerResult:
        result = self._apply(lambda account: ledger.redeem_code(account, code))
        if result.ok:
            LOGGER.info("Redeemed referral code %s", result.account.redeemed_code)
        else:
            LOGGER.warning("Referral code %r refused: %s", code, result.error.value)
        return result

    def claim(self, reward_id: str, chosen_type: Union[RewardType, str]) -> LedgerResult:
        result = self._apply(lambda account: ledger.claim_reward(account, reward_id, chosen_type))
        if result.ok and result.reward is not None:
            LOGGER.info("Claimed reward %s as %s (%s)", reward_id, result.reward.type.value, result.reward.value)
        else:
            LOGGER.warning("Reward %s could not be claimed: %s", reward_id, result.error.value)
        return result


__all__ = ["REFERRAL_KEY", "ReferralService"]
