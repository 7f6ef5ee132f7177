"""
asyncshield.__main__ - Demo entry point

Usage:
    python -m asyncshield --log-level DEBUG --delay 0.05
"""

import argparse
import asyncio
import json
import logging
import sys

from asyncshield.demo import run_demo
from asyncshield.settings import LOG_LEVELS, get_settings


def build_parser() -> argparse.ArgumentParser:
    """Build the demo argument parser."""
    parser = argparse.ArgumentParser(
        prog="asyncshield",
        description="Run the asyncshield FALSE_STYLE shielding demo",
    )
    parser.add_argument(
        "--log-level",
        default=get_settings().log_level,
        choices=list(LOG_LEVELS),
        help="Logging level (default: ASYNCSHIELD_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.01,
        help="Simulated latency of each fetch in seconds (default: 0.01)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the demo."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        results = asyncio.run(run_demo(delay=args.delay))
    except KeyboardInterrupt:
        sys.exit(0)
    print(json.dumps(results, indent=2, default=str))


if __name__ == "__main__":
    main()
