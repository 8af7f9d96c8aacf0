from __future__ import annotations

import itertools
import random

import pytest

from datadome.models import LedgerError, RewardType
from datadome.referrals.service import REFERRAL_KEY, ReferralService
from datadome.store import JsonFileStore, MemoryStore


@pytest.fixture
def service_factory():
    def build(store):
        counter = itertools.count(1)
        return ReferralService(
            store,
            random_source=random.Random(42),
            id_factory=lambda: f"reward-{next(counter)}",
        )

    return build


def test_account_issues_and_persists_a_code_once(service_factory) -> None:
    store = MemoryStore()
    service = service_factory(store)

    first = service.account()
    second = ReferralService(store, random_source=random.Random(99)).account()

    assert len(first.code) == 6
    assert second.code == first.code
    assert store.load(REFERRAL_KEY)["code"] == first.code


def test_points_to_rewards_scenario(service_factory) -> None:
    store = MemoryStore({REFERRAL_KEY: {"code": "K7QZ2M", "points": 12}})
    service = service_factory(store)

    assert service.pending_rewards() == 2

    result = service.claim("reward-1", RewardType.DATA)

    assert result.ok
    assert result.account.points == 7
    assert service.pending_rewards() == 1
    saved = store.load(REFERRAL_KEY)
    assert saved["points"] == 7
    assert [reward["claimed"] for reward in saved["rewards"]] == [True, False]
    assert saved["rewards"][0]["value"] == "1GB"


def test_redeem_persists_the_flag(service_factory, tmp_path) -> None:
    store = JsonFileStore(tmp_path / "state.json")
    service = service_factory(store)
    own_code = service.account().code

    assert service.redeem(own_code.lower()).error is LedgerError.INVALID_CODE
    assert service.redeem("FRND22").ok
    assert service.redeem("OTHER9").error is LedgerError.ALREADY_REDEEMED

    reloaded = service_factory(JsonFileStore(tmp_path / "state.json")).account()
    assert reloaded.has_redeemed_code is True
    assert reloaded.redeemed_code == "FRND22"


def test_claim_unknown_reward_is_reported(service_factory, caplog) -> None:
    service = service_factory(MemoryStore({REFERRAL_KEY: {"code": "K7QZ2M", "points": 5}}))

    with caplog.at_level("WARNING"):
        result = service.claim("nope", "airtime")

    assert result.error is LedgerError.REWARD_NOT_FOUND
    assert "nope" in caplog.text
