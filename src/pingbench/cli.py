from __future__ import annotations

import sys

from .config import build_parser, parse_args
from .console import say
from .dispatcher import run
from .report import format_report


def main(argv=None) -> int:
    parser = build_parser()
    config = parse_args(argv, parser)
    if not config.is_runnable():
        parser.print_help(sys.stderr)
        return 0

    result = run(config)
    say(format_report(result))
    return 0
