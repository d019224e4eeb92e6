"""Command-line interface for decoding scrambled seven-segment displays."""

import argparse
import sys

from .batch import decode_lines, total
from .export import to_ascii_art, to_json, to_wiring_table
from .truth_tables import print_truth_table


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Unscramble seven-segment digits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each line in FILENAME is one 4-digit display: ten signal patterns, a '|',
then the four patterns shown on the display. Letter order within a pattern
is not significant.

Examples:
  segment-decode input.txt                  Print the two totals
  segment-decode --exact input.txt          Map wires with the SAT solver
  segment-decode --format json input.txt    One JSON document per line
  segment-decode --format art input.txt     Draw each decoded readout
  segment-decode --truth-table              Show the digit truth table
        """,
    )

    parser.add_argument(
        "filename",
        nargs="?",
        help="Input file, one display per line ('-' for stdin)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Use SAT-based exact mapping instead of deduction",
    )
    parser.add_argument(
        "--truth-table",
        action="store_true",
        help="Print the seven-segment digit truth table and exit",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json", "art"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--workers", "-j",
        type=int,
        default=None,
        help="Decode lines in this many worker processes",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Report and skip lines that fail to decode instead of stopping",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    if args.truth_table:
        print_truth_table()
        return 0

    if args.filename is None:
        parser.print_usage(sys.stderr)
        return 1

    method = "exact" if args.exact else "deductive"

    try:
        if args.filename == "-":
            lines = sys.stdin.readlines()
        else:
            with open(args.filename, encoding="utf-8") as f:
                lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = decode_lines(lines, method=method, workers=args.workers)

    for result in results:
        if not result.ok:
            err = result.error
            print(
                f"Error: line {result.lineno} ({err.stage}): {err}",
                file=sys.stderr,
            )
            if args.verbose:
                print(f"  {result.line}", file=sys.stderr)
            if not args.skip_invalid:
                return 1
            continue

        display = result.display
        if args.format == "json":
            print(to_json(display))
        elif args.format == "art":
            print(f"Line {result.lineno}: {display.value:04d}")
            print(to_ascii_art(display.readout))
            if args.verbose:
                print(to_wiring_table(display.segment_map))
            print()
        elif args.verbose:
            print(f"Line {result.lineno}: {display.value:04d} "
                  f"({display.simple_digit_count} simple)")

    totals = total(results)
    if args.format == "text":
        print(f"Found {totals.simple_digits} ones, fours, sevens, and eights")
        print(f"Sum: {totals.value_sum}")
        if totals.failed:
            print(f"Skipped {totals.failed} invalid line(s)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
