# --------------------------
# Entry point
# --------------------------

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from spancalc.config import load_settings
from spancalc.repl import REPL

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spancalc",
        description="Interactive integer calculator with source-located error messages.",
    )
    parser.add_argument(
        "--rpn",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print each expression in postfix (RPN) form instead of evaluating it; "
        "--no-rpn overrides SPANCALC_RPN.",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        help="Prompt shown on interactive terminals (default: '> ').",
    )
    parser.add_argument(
        "--history-file",
        type=str,
        help="History file for interactive sessions; pass '' to disable (default: ~/.spancalc_history).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        settings = load_settings(
            rpn=args.rpn,
            prompt=args.prompt,
            history_file=args.history_file,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("settings: %s", settings)

    REPL(settings).repl_loop()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
