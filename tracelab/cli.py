"""Command line front end for the batch runner.

CLI:
    tracelab "glyphs/*.png" -o out/ --close
    tracelab scan.png --foreground 255
    tracelab "scans/*.png" --threshold 128 --log-level DEBUG

Writes one SVG per image plus out/summary.json; with --print the path data
of each file is also echoed to stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import TracingError
from .logging_config import setup_logging
from .pipeline import TraceOptions, process_images

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracelab",
        description="Trace binary rasters into rectilinear SVG outlines and holes.",
    )
    parser.add_argument("input_glob", help="image file or glob pattern (quote it)")
    parser.add_argument("-o", "--out-dir", default="out", help="output directory (default: out)")
    parser.add_argument("--close", action="store_true", help="end every contour with Z")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--foreground", type=int, help="exact gray value that counts as foreground")
    mode.add_argument("--threshold", type=int, help="gray values at or below this are foreground (default: Otsu)")
    parser.add_argument("--print", dest="print_paths", action="store_true", help="echo path data to stdout")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    options = TraceOptions(
        close_paths=args.close,
        foreground=args.foreground,
        threshold=args.threshold,
    )
    try:
        rows = process_images(args.input_glob, args.out_dir, options)
    except (TracingError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if args.print_paths:
        for row in rows:
            print(f"{row['file']}\t{row['d']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
