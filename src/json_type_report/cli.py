from __future__ import annotations
import argparse, sys
from typing import List, Optional

from . import __version__
from .config import ConfigError, load_config
from .interpret import analyse_file
from .logs import setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="json-type-report",
        description="Parse a file of JSON objects (one per line) and display per-type counts and byte sizes",
    )
    ap.add_argument("input_file", help="Path to the file to parse")
    ap.add_argument("--config", default=None, help="YAML config file")
    ap.add_argument("--raw", action="store_true", default=None, help="Print a mapping dump instead of the table")
    ap.add_argument("--log-level", default=None, help="Diagnostic level (DEBUG, INFO, WARNING, ERROR)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        ap.error(str(e))
    if args.log_level:
        cfg.logging.level = args.log_level.upper()
    if args.raw is not None:
        cfg.report.raw = args.raw
    try:
        log = setup_logging(cfg.logging)
    except (ValueError, OSError) as e:
        ap.error(str(e))

    out = analyse_file(args.input_file, log, raw=cfg.report.raw, max_column_width=cfg.report.max_column_width)
    if out is None:
        return 1
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
