"""
Command-line SKU normalizer.

Parses each SKU given on the command line (or one per line on stdin) and
prints its canonical form, or its parsed fields as JSON with --json.

Exit codes: 0 if every SKU parsed, 2 if any failed.
"""

import argparse
import json
import logging
import sys
from collections.abc import Iterable

from tf2sku.config import settings
from tf2sku.models.failure import SkuParseError
from tf2sku.parsers.sku import parse_sku, parse_sku_lenient

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_skus(args: argparse.Namespace) -> Iterable[str]:
    if args.skus:
        return args.skus
    return (line.strip() for line in sys.stdin if line.strip())


def run(skus: Iterable[str], lenient: bool, as_json: bool) -> int:
    """Parse and print each SKU. Returns the process exit code."""
    parse = parse_sku_lenient if lenient else parse_sku
    failures = 0

    for text in skus:
        try:
            sku = parse(text)
        except SkuParseError as e:
            failures += 1
            logger.error("Invalid SKU %r: %s", text, e.message)
            continue

        if as_json:
            print(json.dumps({"sku": str(sku), **sku.to_dict()}))
        else:
            print(sku)

    if failures:
        logger.warning("%d SKU(s) failed to parse", failures)
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="tf2sku",
        description="Parse TF2 item SKUs and print their canonical form.",
    )
    parser.add_argument("skus", nargs="*", help="SKU strings (default: read lines from stdin)")
    parser.add_argument(
        "--lenient",
        action=argparse.BooleanOptionalAction,
        default=settings.lenient_quality,
        help="Default an invalid quality to Normal instead of failing "
        "(--no-lenient forces strict parsing)",
    )
    parser.add_argument("--json", action="store_true", help="Print parsed fields as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    return run(_read_skus(args), lenient=args.lenient, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
