"""
Text mask command-line interface.

Reads values (one per line) from a file or standard input, formats each of
them with a pattern and writes the results (one per line) to a file or
standard output.

---

# Quick ways to run the script

1. Using a file

>>> text-mask-format "(999) 999-9999" examples/phones.txt -o formatted.txt

*If you omit `-o …` the result will be printed on the console.*


2. Piping data

>>> echo "5551234567" | text-mask-format "(999) 999-9999"
(555) 123-4567

3. Extracting raw values from formatted ones

>>> echo "(555) 123-4567" | text-mask-format "(999) 999-9999" --strip
5551234567
"""

import argparse
import sys
from typing import List, Optional

from text_mask_lib.constants import DEFAULT_PLACEHOLDER, LOG_LEVEL
from text_mask_lib.core.text_mask import create_text_mask
from text_mask_lib.exceptions import ConfigurationError
from text_mask_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format values with a text mask pattern."
    )
    parser.add_argument(
        "pattern",
        help="Mask pattern, e.g. '(999) 999-9999'. Slots: 9 digit, "
        "A upper letter, a lower letter, * letter or digit.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file, one value per line (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "--placeholder",
        default=DEFAULT_PLACEHOLDER,
        help="Character shown in unfilled slots.",
    )
    parser.add_argument(
        "--no-guide",
        action="store_true",
        help="Truncate after the last filled slot instead of showing placeholders.",
    )
    parser.add_argument(
        "--strip",
        action="store_true",
        help="Write the raw slot characters instead of the formatted value.",
    )
    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Write an empty line for empty values instead of the skeleton.",
    )
    parser.add_argument(
        "--only-complete",
        action="store_true",
        help="Skip values that do not fill every slot of the pattern.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger("text_mask_cli", LOG_LEVEL)

    try:
        mask = create_text_mask(
            pattern=args.pattern,
            placeholder=args.placeholder,
            guide=not args.no_guide,
            allow_empty=args.allow_empty,
            logger=logger,
        )
    except ConfigurationError as exc:
        print(f"text-mask-format: {exc}", file=sys.stderr)
        return 2

    skipped = 0
    for line in args.input:
        raw = mask.normalize(line.rstrip("\r\n"), None)
        if args.only_complete and not mask.is_complete(raw):
            skipped += 1
            continue
        result = raw if args.strip else mask.format(raw)
        args.output.write(result + "\n")

    if skipped:
        logger.info("Skipped %d incomplete value(s)", skipped)
    args.output.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
