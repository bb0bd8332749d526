"""Command-line interface for trying option tables against argument vectors.

WHY: When designing an option table it helps to see exactly how a given
command line will be split into options, values, and positionals, and
which error a bad command line produces. The CLI wires table loading,
parsing, and rendering together behind one command.

HOW: Everything after the first ``--`` is the argument vector to parse;
everything before it is for argscan itself and is handled by argparse.
The program name (``--program-name``) is prepended as token 0. The
result, or the parse error, is rendered by the selected formatter and
written to stdout.

RULES:
- Usage: python -m argscan --table TABLE.json [options] -- TOKEN...
- --min / --max override the bounds stored in the table
- Exit codes: 0 = parsed, 1 = parse error or unreadable table,
  2 = bad argscan usage (argparse)
- Rendered output goes to stdout; status and log messages go to stderr
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, Tuple

from argscan.config import (
    DEFAULT_FORMAT,
    DEFAULT_PROGRAM_NAME,
    LOG_LEVEL,
    resolve_format,
)
from argscan.core.errors import ParseError
from argscan.core.parser import TERMINATOR, parse
from argscan.formatters import FORMATTERS
from argscan.table import OptionTableError, load_option_table

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """Split at the first ``--`` into (argscan args, tokens to parse).

    Later ``--`` tokens belong to the parsed vector and are left alone.
    """
    if TERMINATOR in argv:
        idx = argv.index(TERMINATOR)
        return argv[:idx], argv[idx + 1:]
    return argv, []


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for argscan's own options.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a parse.
    """
    parser = argparse.ArgumentParser(
        prog="argscan",
        description="Parse an argument vector against an option table and "
                    "show the resulting options, values, and positionals.",
        epilog="Pass the argument vector to parse after '--'.",
    )

    parser.add_argument(
        "--table",
        required=True,
        help="Path to the option table JSON file.",
    )

    parser.add_argument(
        "--min",
        type=int,
        default=None,
        dest="min_positional",
        help="Minimum number of positional arguments (overrides the table).",
    )

    parser.add_argument(
        "--max",
        type=int,
        default=None,
        dest="max_positional",
        help="Maximum number of positional arguments (overrides the table).",
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Output format. Available: {}. Default: %(default)s.".format(
            ", ".join(sorted(FORMATTERS.keys()))
        ),
    )

    parser.add_argument(
        "--program-name",
        default=DEFAULT_PROGRAM_NAME,
        help="Token 0 of the parsed vector (default: %(default)s).",
    )

    return parser


def run(args: argparse.Namespace, tokens: List[str]) -> int:
    """Load the table, parse ``tokens``, print the rendered outcome.

    Returns:
        Process exit code.
    """
    try:
        format_key = resolve_format(args.format)
    except ValueError as e:
        _status("Error: {}".format(e))
        return 1

    try:
        table = load_option_table(args.table)
    except OptionTableError as e:
        _status("Error: {}".format(e))
        return 1

    overrides = {}
    if args.min_positional is not None:
        overrides["min_positional"] = args.min_positional
    if args.max_positional is not None:
        overrides["max_positional"] = args.max_positional
    if overrides:
        table = dataclasses.replace(table, **overrides)

    config = table.to_config([args.program_name] + tokens)
    formatter = FORMATTERS[format_key]()

    try:
        parsed = parse(config)
    except ParseError as e:
        logger.info("Parse failed: %s (%s)", e.message, e.kind.value)
        output = formatter.format(error=e)
        sys.stdout.write(output.content)
        return 1

    logger.info("Parsed %d record(s) from %d token(s)", len(parsed), len(tokens))
    output = formatter.format(parsed=parsed)
    sys.stdout.write(output.content)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    own_args, tokens = split_argv(list(argv))
    args = build_parser().parse_args(own_args)
    sys.exit(run(args, tokens))


if __name__ == "__main__":
    main()
