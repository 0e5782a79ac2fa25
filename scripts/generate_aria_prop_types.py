from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from estreepy.aria import GENERATED_MODULE, AuthoredDataError, generate

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate the static ARIA attribute type table.")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path(GENERATED_MODULE),
        help=f"Output module path (defaults to {GENERATED_MODULE}).",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the generated module instead of writing it.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the output module differs from freshly generated text.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    try:
        text = generate()
    except AuthoredDataError as exc:
        print(f"Failed to generate ARIA prop types: {exc}", file=sys.stderr)
        return 1

    if args.stdout:
        sys.stdout.write(text)
        return 0

    if args.check:
        current = args.out.read_text(encoding="utf-8") if args.out.exists() else None
        if current != text:
            print(f"{args.out} is out of date; rerun scripts/generate_aria_prop_types.py", file=sys.stderr)
            return 1
        logger.info("%s is up to date", args.out)
        return 0

    args.out.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
