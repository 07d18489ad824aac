"""Command-line interface for bibicode.

WHY: Users need a simple way to convert numbers between numeral systems
from the terminal or a shell pipeline. The CLI wires together alphabet
resolution (tags, description files, data directories), optional regex
extraction, batch conversion, and pluggable output formatting behind a
single command.

HOW: Uses argparse to accept input numbers, source/target numeral
systems, and output options. Numbers come from positional arguments or,
when none are given, from whitespace-separated stdin. The converted
batch goes through the selected formatter and is printed on stdout.
Status and errors go to stderr.

RULES:
- Positional arguments: input numbers (any count; stdin when none)
- -f/--from and -t/--to accept a tag, a description file path, or the
  stem of a description in a data directory; default from config ("dec")
- -f auto detects each number's system from its prefix among the
  predefined systems, falling back to the configured default
- -r/--regex splits every input with extract_numbers() first
- -c/--concat is shorthand for --format concat
- -s/--outseparator, -p/--outprefix, -x/--outsuffix shape the output
- Any BibiError prints "Error: ..." to stderr and exits with status 1
- Stops at the first failing number; nothing is printed for the batch
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from bibicode import __version__
from bibicode.config import (
    AUTODETECT_TAG,
    DEFAULT_FORMAT,
    DEFAULT_FROM,
    DEFAULT_SEPARATOR,
    DEFAULT_TO,
)
from bibicode.core.batch import convert_batch
from bibicode.core.extractor import extract_numbers
from bibicode.core.registry import DESCRIPTIONS, predefined_alphabets
from bibicode.formatters import FORMATTERS
from bibicode.formatters.base import OutputOptions
from bibicode.sources.discovery import data_dirs, discover_descriptions, resolve_alphabet

_FALLBACK_SOURCE = "dec"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _gather_numbers(numbers: List[str], pattern: Optional[str]) -> List[str]:
    """Collect the input numbers from arguments or stdin.

    RULES:
    - No positional numbers -> read stdin, split on whitespace
    - With a pattern, each raw input is replaced by its captured groups
    """
    raw = list(numbers) if numbers else sys.stdin.read().split()

    if not pattern:
        return raw

    extracted: List[str] = []
    for text in raw:
        extracted.extend(extract_numbers(text, pattern))
    return extracted


def _list_alphabets() -> str:
    """Describe predefined systems and discovered description files."""
    lines = ["Predefined numeral systems:"]
    for tag, alphabet in predefined_alphabets().items():
        details = "radix {}".format(alphabet.radix)
        if alphabet.prefix:
            details += ", prefix {}".format(alphabet.prefix)
        lines.append("  {:<8}{} ({})".format(tag, DESCRIPTIONS[tag], details))

    discovered = discover_descriptions()
    lines.append("")
    if discovered:
        lines.append("Numeral system files:")
        for stem, path in discovered.items():
            lines.append("  {:<8}{}".format(stem, path))
    else:
        lines.append("No numeral system files found in:")
        for directory in data_dirs():
            lines.append("  {}".format(directory))
    return "\n".join(lines)


def _run(args: argparse.Namespace) -> str:
    """Resolve alphabets, convert the inputs, and format the result.

    Raises:
        BibiError: On any alphabet, input, or extraction error.
    """
    candidates = None
    if args.source == AUTODETECT_TAG:
        default_name = DEFAULT_FROM if DEFAULT_FROM != AUTODETECT_TAG else _FALLBACK_SOURCE
        source = resolve_alphabet(default_name)
        candidates = list(predefined_alphabets().values())
    else:
        source = resolve_alphabet(args.source)
    target = resolve_alphabet(args.target)

    numbers = _gather_numbers(args.numbers, args.regex)
    if not numbers:
        raise ValueError("No input number given.")

    batch = convert_batch(numbers, source, target, candidates=candidates)

    format_key = "concat" if args.concat else args.format
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise ValueError("Unknown output format '{}'. Available: {}".format(
            format_key, ", ".join(sorted(FORMATTERS))
        ))
    formatter = formatter_cls()
    options = OutputOptions(
        separator=args.outseparator,
        prefix=args.outprefix,
        suffix=args.outsuffix,
    )
    return formatter.format(batch, options)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="bibicode",
        description="Convert natural numbers of any length from one numeral system "
                    "to another. A numeral system is defined by its digits, which can "
                    "be any combination of UTF-8 characters.",
        epilog="Predefined numeral systems: {}. A numeral system can also be a JSON "
               "file such as {{\"prefix\": \"0b\", \"digits\": [\"0\", \"1\"]}} or "
               "{{\"digits\": [[\"H\", \"B\", \"K\", \"D\"], [\"O\", \"A\", \"E\", \"I\"]]}}."
               .format(", ".join(DESCRIPTIONS)),
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="NUMBER",
        help="Input natural number, no limitation in length. Several numbers can "
             "be given. If none is given, numbers are read from standard input.",
    )

    parser.add_argument(
        "-f", "--from",
        dest="source",
        default=DEFAULT_FROM,
        metavar="NUMERAL_SYSTEM",
        help="Numeral system (tag, file, or data-directory name) of the input "
             "numbers, or '{}' to detect it from each number's prefix "
             "(default: %(default)s).".format(AUTODETECT_TAG),
    )

    parser.add_argument(
        "-t", "--to",
        dest="target",
        default=DEFAULT_TO,
        metavar="NUMERAL_SYSTEM",
        help="Numeral system to convert into (default: %(default)s).",
    )

    parser.add_argument(
        "-c", "--concat",
        action="store_true",
        help="Concatenate the converted numbers into one number behind a single prefix.",
    )

    parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS.keys()),
        default=DEFAULT_FORMAT,
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "-s", "--outseparator",
        default=DEFAULT_SEPARATOR,
        help="Separator printed between numbers (default: a space).",
    )

    parser.add_argument(
        "-p", "--outprefix",
        default="",
        help="Text printed before the result.",
    )

    parser.add_argument(
        "-x", "--outsuffix",
        default="",
        help="Text printed after the result.",
    )

    parser.add_argument(
        "-r", "--regex",
        default=None,
        help="Regular expression whose capture groups are the numbers to read "
             "from each input.",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available numeral systems and exit.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.list:
        print(_list_alphabets())
        return

    try:
        result = _run(args)
    except ValueError as e:
        # BibiError and its subclasses are ValueErrors
        _status("Error: {}".format(e))
        sys.exit(1)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)

    print(result)


if __name__ == "__main__":
    main()
