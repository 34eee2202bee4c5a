"""Command-line interface for the Platypus language.

    platypus run <file>     Run a Platypus program
    platypus repl           Start the interactive REPL
    platypus parse <file>   Show the parsed AST of a program
"""

__all__ = ["main", "run_file", "show_ast"]

import argparse
import logging
import sys
from pathlib import Path

import platypus

logger = logging.getLogger(__name__)


def _read_source(filename):
    try:
        return Path(filename).read_text(encoding="utf-8")
    except OSError as e:
        reason = e.strerror or str(e)
        raise platypus.EvalError(f"Cannot read file '{filename}': {reason}") from None


def run_file(filename, max_depth=platypus.DEFAULT_MAX_DEPTH):
    """Run a program file, reporting any failure on stderr.

    Returns:
        (int) Process exit status, 0 on success and 1 on any error
    """
    try:
        source = _read_source(filename)
        interp = platypus.Interpreter(max_depth=max_depth)
        interp.run(source, filename)
    except (platypus.ParseError, platypus.EvalError) as e:
        logger.debug("%s failed with %s", filename, type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def show_ast(filename):
    """Print the AST for a program file."""
    try:
        program = platypus.parse(_read_source(filename), filename)
    except (platypus.ParseError, platypus.EvalError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    program.print_tree()
    return 0


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="platypus",
        description="Platypus programming language")
    parser.add_argument("--version", action="version",
        version=f"Platypus v{platypus.__version__}")

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    run = commands.add_parser("run",
        help="Execute a Platypus source file")
    run.add_argument("file",
        help="Source file to run")
    _add_runtime_options(run)

    repl = commands.add_parser("repl",
        help="Start an interactive REPL")
    repl.add_argument("--rich", action="store_true",
        help="Use rich formatting for errors")
    _add_runtime_options(repl)

    parse = commands.add_parser("parse",
        help="Show the parsed AST of a source file")
    parse.add_argument("file",
        help="Source file to parse")
    return parser


def _add_runtime_options(parser):
    parser.add_argument("--max-depth", type=int, default=platypus.DEFAULT_MAX_DEPTH,
        help="Maximum nested call depth (default %(default)s)")
    parser.add_argument("--trace", action="store_true",
        help="Log calls and class registration to stderr")


def main(argv=None):
    """Main entry point for the platypus command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if getattr(args, "trace", False):
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    if args.command == "run":
        return run_file(args.file, max_depth=args.max_depth)
    if args.command == "repl":
        from . import repl
        repl.repl(rich=args.rich, max_depth=args.max_depth)
        return 0
    return show_ast(args.file)
