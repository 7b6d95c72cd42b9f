"""CLI entry and startup wiring."""

import argparse
import os
import sys

from todoview import dispatcher
from todoview.config import apply_overrides, load_config
from todoview.errors import AppError, UsageError
from todoview.formatters import render_error
from todoview.logging_utils import setup_logging

USAGE_HINT = "Run 'todoview help' for usage."
_VALUE_FLAGS = frozenset(("--file", "--verbose"))


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split leading ``--flags`` from ``OPTION [TERM...]``.

    Flags stop at the first token that does not start with ``--`` or after a
    literal ``--``, so negated terms and offsets such as ``-2weeks`` are
    never mistaken for flags.
    """
    flags: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if token == "--":
            return flags, argv[i + 1:]
        if not token.startswith("--"):
            break
        flags.append(token)
        if token in _VALUE_FLAGS and i + 1 < len(argv):
            flags.append(argv[i + 1])
            i += 2
            continue
        i += 1
    return flags, argv[i:]


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="todoview",
        usage="todoview [--file PATH] [--verbose LEVEL] [--plain] OPTION [TERM...]",
        description="View a plain-text todo file grouped by context or date.",
        epilog="Run 'todoview help' for the list of options.",
    )
    parser.add_argument(
        "--file",
        help="Todo file (absolute, relative, or mapped with ~ / @). Overrides $TODOVIEW_FILE.",
    )
    parser.add_argument(
        "--verbose",
        type=int,
        help="0 = no statistics, 1 = match counts, 2 = also filter diagnostics.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Skip the final output filter hook.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    flag_args, command_args = split_argv(list(argv))

    try:
        args = _build_parser().parse_args(flag_args)
        config = apply_overrides(
            load_config(os.environ),
            todo_file=args.file,
            verbosity=args.verbose,
            plain=args.plain,
        )
        setup_logging(config.verbosity)
        output = dispatcher.execute_option(command_args, config)
    except SystemExit as exc:
        # only --help reaches here; argparse errors raise UsageError
        return exc.code if isinstance(exc.code, int) else 0
    except UsageError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        print(USAGE_HINT, file=sys.stderr)
        return 1
    except AppError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
