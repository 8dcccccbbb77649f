import argparse
import logging
from collections.abc import Sequence
from typing import Optional

from .formatting import format_global_alignment, format_local_alignments
from .global_align import needleman_wunsch
from .local_align import smith_waterman
from .scoring import ScoringConfig

logger = logging.getLogger(__name__)

_DEFAULTS = ScoringConfig()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seq-align",
        description="Align two sequences with Needleman-Wunsch (global) or Smith-Waterman (local).",
    )
    parser.add_argument("mode", choices=("global", "local"), help="Alignment algorithm.")
    parser.add_argument("row", help="Sequence laid along the matrix rows.")
    parser.add_argument("col", help="Sequence laid along the matrix columns.")
    parser.add_argument("--match", type=int, default=_DEFAULTS.match_weight, help="Match weight (default: %(default)s).")
    parser.add_argument(
        "--mismatch", type=int, default=_DEFAULTS.mismatch_weight, help="Mismatch weight (default: %(default)s)."
    )
    parser.add_argument("--gap", type=int, default=_DEFAULTS.gap_weight, help="Gap weight (default: %(default)s).")
    parser.add_argument("--width", type=int, default=80, help="Alignment columns per block (default: %(default)s).")
    parser.add_argument("--row-name", default="row", help="Label for the row sequence.")
    parser.add_argument("--col-name", default="column", help="Label for the column sequence.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.width < 1:
        parser.error("--width must be positive")

    config = ScoringConfig(match_weight=args.match, mismatch_weight=args.mismatch, gap_weight=args.gap)
    logger.debug("Running %s alignment with %s", args.mode, config)
    if args.mode == "global":
        result = needleman_wunsch(args.row, args.col, config)
        report = format_global_alignment(result, args.row_name, args.col_name, args.width)
    else:
        results = smith_waterman(args.row, args.col, config)
        report = format_local_alignments(results, args.row_name, args.col_name, args.width)
    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
