"""Command-line integration -- argparse value type and the ``durationflex`` command.

Usage:
    durationflex normalize [--allow-numeric] VALUE...
                                         Print the canonical form of each duration
    durationflex seconds VALUE...        Print each duration as total seconds
    durationflex from-seconds N...       Print the canonical form of N seconds

Any argparse-based program can take durations as arguments::

    parser.add_argument("--timeout", type=duration_type, default=Duration(300))

``str()`` of the default is the canonical text, so ``%(default)s`` in help shows ``5m``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from durationflex._constants import MAX_SECONDS
from durationflex._errors import (
    ERR_MSG_OUT_OF_RANGE,
    DurationError,
    DurationRangeError,
    ParseError,
)
from durationflex._parser import amount_from_digits, parse
from durationflex.duration import Duration
from durationflex.serialization import deserialize

logger = logging.getLogger(__name__)


def describe_error(error: DurationError) -> str:
    """User-facing message for a rejected value, with the offset when known."""
    if not isinstance(error, ParseError) or error.text is None:
        return str(error)
    message = f"invalid duration {error.text!r}: {error}"
    if error.position is not None:
        message += f" (at position {error.position})"
    return message


def duration_type(text: str) -> Duration:
    """argparse ``type=`` callable for duration arguments."""
    try:
        return parse(text)
    except DurationError as e:
        raise argparse.ArgumentTypeError(describe_error(e)) from e


def _seconds_from_digits(value: str) -> int:
    seconds = amount_from_digits(value)
    if seconds is None:
        raise DurationRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{len(value)}-digit second count {value[:32]!r}... exceeds {MAX_SECONDS}",
        )
    return seconds


def _cmd_normalize(args: argparse.Namespace) -> list[str]:
    lines = []
    for value in args.values:
        if args.allow_numeric and value.isascii() and value.isdigit():
            seconds = _seconds_from_digits(value)
            lines.append(str(deserialize(seconds, allow_numeric=True)))
        else:
            lines.append(str(parse(value)))
    return lines


def _cmd_seconds(args: argparse.Namespace) -> list[str]:
    return [str(parse(value).seconds) for value in args.values]


def _cmd_from_seconds(args: argparse.Namespace) -> list[str]:
    return [str(Duration.from_seconds(value)) for value in args.values]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="durationflex",
        description="Convert between duration text (1w6d23h49m59s) and seconds.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    normalize = sub.add_parser("normalize", help="print the canonical form of durations")
    normalize.add_argument("values", nargs="+", metavar="VALUE")
    normalize.add_argument(
        "--allow-numeric",
        action="store_true",
        help="accept plain integers as a number of seconds",
    )
    normalize.set_defaults(func=_cmd_normalize)

    seconds = sub.add_parser("seconds", help="print durations as total seconds")
    seconds.add_argument("values", nargs="+", metavar="VALUE")
    seconds.set_defaults(func=_cmd_seconds)

    from_seconds = sub.add_parser(
        "from-seconds", help="print the canonical form of second counts"
    )
    from_seconds.add_argument("values", nargs="+", type=int, metavar="N")
    from_seconds.set_defaults(func=_cmd_from_seconds)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = args.func(args)
    except DurationError as e:
        logger.debug("conversion failed: %s", e.internal())
        print(f"durationflex: {describe_error(e)}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
