"""Command-line interface: answer membership queries read from stdin."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from relang import __version__
from relang.config import Config
from relang.definition import example_builder, load_definition_file
from relang.exceptions import RelangError
from relang.recognizer.recognizer import Recognizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relang",
        description=(
            "Read one chain per line from standard input and print whether "
            "the automaton accepts it."
        ),
    )
    parser.add_argument(
        "-d",
        "--definition",
        metavar="FILE",
        help="JSON automaton definition (default: built-in example automaton)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug output to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def strip_line_ending(line: str) -> str:
    """Remove only the line terminator, leaving other whitespace intact."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def run(recognizer: Recognizer, stream: TextIO, out: TextIO, config: Config) -> None:
    """Answer one query per line until end of stream or a read error."""
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Stopping on read error: %s", e)
            return
        if not line:
            return
        chain = strip_line_ending(line)
        token = config.accept_token if recognizer.accepts(chain) else config.reject_token
        out.write(token + "\n")
        out.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = Config.default()
    try:
        if args.definition:
            builder = load_definition_file(args.definition)
        else:
            builder = example_builder()
        automaton = builder.build(config)
    except RelangError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    run(Recognizer(automaton, config), sys.stdin, sys.stdout, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
