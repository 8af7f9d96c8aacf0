"""Command line interface for the datadome number and referral tools."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Settings, load_configuration
from .extraction import extract, merge_entries, requires_auth, valid_count
from .io import load_text, write_entries
from .networks import classify
from .recent import last_number, recent_numbers, remember_number
from .referrals import ReferralService, share_link, share_message, unclaimed_rewards
from .store import JsonFileStore

LOGGER = logging.getLogger(__name__)

_ERROR_MESSAGES = {
    "invalid_code": "You can't use your own referral code",
    "already_redeemed": "You have already used a referral code",
    "reward_not_found": "No unclaimed reward with that id",
}


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Classify Nigerian phone numbers, extract bulk lists and manage referral rewards",
    )
    parser.add_argument("--config", help="Path to a configuration file (YAML or JSON)")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    classify_parser = commands.add_parser("classify", help="Detect the network of one or more numbers")
    classify_parser.add_argument("numbers", nargs="+", help="Phone numbers in any common format")
    classify_parser.add_argument("--remember", action="store_true", help="Save valid numbers as recently used")
    classify_parser.add_argument("--store", help="Path of the JSON store (overrides the configuration)")

    extract_parser = commands.add_parser("extract", help="Extract phone numbers from pasted text or a file")
    extract_parser.add_argument("text", nargs="?", help="Free-form text to scan")
    extract_parser.add_argument("--file", help="Text, CSV or Excel file to scan instead of TEXT")
    extract_parser.add_argument("--output", help="Write the extracted entries to a CSV or Excel file")

    referral_parser = commands.add_parser("referral", help="Inspect and update the referral ledger")
    referral_parser.add_argument("--store", help="Path of the JSON store (overrides the configuration)")
    referral_commands = referral_parser.add_subparsers(dest="action", required=True)
    referral_commands.add_parser("show", help="Show the referral code, points and rewards")
    referral_commands.add_parser("share", help="Print the share link and message")
    redeem_parser = referral_commands.add_parser("redeem", help="Apply somebody else's referral code")
    redeem_parser.add_argument("code")
    claim_parser = referral_commands.add_parser("claim", help="Claim a pending reward")
    claim_parser.add_argument("reward_id")
    claim_parser.add_argument("type", choices=["data", "airtime"])

    recent_parser = commands.add_parser("recent", help="Show the recently used numbers")
    recent_parser.add_argument("--store", help="Path of the JSON store (overrides the configuration)")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _store(args: argparse.Namespace, settings: Settings) -> JsonFileStore:
    return JsonFileStore(Path(args.store) if args.store else settings.store_path)


def _run_classify(args: argparse.Namespace, settings: Settings) -> int:
    store = _store(args, settings) if args.remember else None
    for number in args.numbers:
        result = classify(number)
        if store is not None and result.is_valid:
            remember_number(store, result.digits)
        network = result.network.name if result.network else "-"
        status = "valid" if result.is_valid else "invalid"
        print(f"{result.digits}\t{result.normalized}\t{network}\t{status}")
    return 0


def _run_extract(args: argparse.Namespace, settings: Settings) -> int:
    if args.file:
        text = load_text(args.file)
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()

    numbers = extract(text)
    entries = merge_entries([], numbers)
    for number in numbers:
        print(number)

    count = valid_count(entries)
    LOGGER.info("Extracted %s numbers, %s valid", len(numbers), count)
    if requires_auth(count):
        print(f"Login required: {count} valid numbers exceeds the guest limit", file=sys.stderr)
    if args.output:
        output = write_entries(args.output, entries)
        LOGGER.info("Entries written to %s", Path(output).resolve())
    return 0


def _run_referral(args: argparse.Namespace, settings: Settings) -> int:
    service = ReferralService(_store(args, settings))

    if args.action == "redeem":
        result = service.redeem(args.code)
    elif args.action == "claim":
        result = service.claim(args.reward_id, args.type)
    else:
        result = None

    if result is not None and not result.ok:
        print(_ERROR_MESSAGES[result.error.value], file=sys.stderr)
        return 1

    account = service.account()
    if args.action == "share":
        link = share_link(settings.share_base_url, account.code)
        print(link)
        print(share_message(link))
        return 0
    if args.action == "claim":
        print(f"Claimed {result.reward.value} {result.reward.type.value}")

    pending = unclaimed_rewards(account)
    print(f"code: {account.code}")
    print(f"points: {account.points}")
    print(f"pending rewards: {len(pending)}")
    for reward in pending:
        print(f"  {reward.id}")
    if account.has_redeemed_code:
        print(f"redeemed code: {account.redeemed_code}")
    return 0


def _run_recent(args: argparse.Namespace, settings: Settings) -> int:
    store = _store(args, settings)
    for number in recent_numbers(store):
        print(number)
    last = last_number(store)
    print(f"last number: {last or '-'}")
    return 0


_COMMANDS = {
    "classify": _run_classify,
    "extract": _run_extract,
    "referral": _run_referral,
    "recent": _run_recent,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_mapping(load_configuration(args.config) if args.config else None)
    log_level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    return _COMMANDS[args.command](args, settings)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
