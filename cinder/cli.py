"""Command line entry point: `cinder`."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cinder import __version__, config
from cinder.errors import CinderError
from cinder.interpreter import Interpreter
from cinder.log_support import setup_loggers
from cinder.printer import to_string
from cinder.repl import Repl

logger = logging.getLogger("cinder")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="cinder",
        description="Evaluate Cinder expressions interactively or from the command line.",
    )
    parser.add_argument("-e", "--eval", dest="exprs", action="append", default=[],
                        metavar="EXPR", help="evaluate EXPR, print the result and exit")
    parser.add_argument("-l", "--load", dest="files", action="append", default=[],
                        metavar="FILE", help="evaluate FILE into the global scope first")
    parser.add_argument("--prompt", default=config.get_prompt(),
                        help="REPL prompt (default: %(default)r, env CINDER_PROMPT)")
    parser.add_argument("--history", type=Path, default=config.get_history_file(),
                        help="readline history file (env CINDER_HISTORY)")
    parser.add_argument("--no-history", action="store_true",
                        help="do not read or write a history file")
    parser.add_argument("--no-builtins", action="store_true",
                        help="start with an empty global scope")
    parser.add_argument("--log-level", default=config.get_log_level(),
                        help="logging level (default: %(default)s, env CINDER_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        setup_loggers(args.log_level.upper())
    except ValueError as e:
        print(f"cinder: {e}", file=sys.stderr)
        return 2

    interp = Interpreter(builtins=not args.no_builtins)

    for path in args.files:
        try:
            interp.load(path)
        except (CinderError, OSError) as e:
            logger.error("failed to load %s: %s", path, e)
            return 1

    if args.exprs:
        status = 0
        for expr in args.exprs:
            try:
                result = interp.eval(expr)
            except (CinderError, RecursionError) as e:
                print(f"error: {e}", file=sys.stderr)
                status = 1
                continue
            if result is not None:
                print(to_string(result))
        return status

    history = None if args.no_history else args.history
    repl = Repl(interp, prompt=args.prompt, history_file=history)
    repl.start()
    repl.run()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
