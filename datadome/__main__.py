"""Run the datadome number and referral tools with ``python -m datadome``."""
from __future__ import annotations

import sys

from . import cli


def main(argv: list[str] | None = None) -> int:
    """Dispatch to the classify, extract, referral or recent command.

    Without a command the usage text is printed and 2 is returned.
    """

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser = cli.build_parser(prog="python -m datadome")
        parser.print_help()
        return 2
    return cli.main(argv)


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
