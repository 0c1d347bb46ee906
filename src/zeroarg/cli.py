"""
Command-line front end for the argument classifier.

Options for the command itself come first; everything after the first ``--``
is handed to the classifier untouched::

    zeroarg --format json -- --verbose+level=3 -xf=out.txt build
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from zeroarg.common.exceptions import ClassificationError, ConfigurationError
from zeroarg.common.logging import LogFormat, configure_logging
from zeroarg.config.app_config import AppConfig, LogLevel
from zeroarg.domain.tokens import Attribute, Flag, Operand, Token, dump_tokens
from zeroarg.services.argument_classifier import classify

EXIT_OK = 0
EXIT_USAGE = 2

CLI_SEPARATOR = "--"


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="zeroarg",
        description="Classify command-line arguments into operands, flags and attributes",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default="text",
        help="Output format for the classified tokens",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=[level.value for level in LogLevel],
        help="Override ZEROARG_LOG_LEVEL",
    )
    parser.add_argument(
        "--log-format",
        dest="log_format",
        choices=[fmt.value for fmt in LogFormat],
        help="Override ZEROARG_LOG_FORMAT",
    )
    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Arguments to classify (put them after '--')",
    )
    return parser


def parse_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command's own options and collect the arguments to classify.

    A ``--`` only separates the command's options when no argument to
    classify precedes it; otherwise it is passed through as data.
    """
    raw = list(sys.argv[1:] if argv is None else argv)
    passthrough: list[str] = []
    separated = CLI_SEPARATOR in raw
    if separated:
        split = raw.index(CLI_SEPARATOR)
        raw, passthrough = raw[:split], raw[split + 1 :]

    args = build_cli_parser().parse_args(raw)
    if separated and args.arguments:
        args.arguments = [*args.arguments, CLI_SEPARATOR, *passthrough]
    else:
        args.arguments = [*args.arguments, *passthrough]
    return args


def format_token(token: Token) -> str:
    """Render one token as a line of text output."""
    if isinstance(token, Operand):
        return f"Operand: `{token.text}`"
    if isinstance(token, Flag):
        return f"Flag `{token.name}`"
    if isinstance(token, Attribute):
        return f"Attribute `{token.name}`: {token.value}"
    raise TypeError(f"Unknown token type: {type(token).__name__}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = parse_cli_args(argv)

    try:
        config = AppConfig.from_env().with_overrides(
            level=args.log_level, log_format=args.log_format
        )
    except ConfigurationError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(config.logging.level.value, config.logging.format)

    try:
        tokens = classify(args.arguments)
    except ClassificationError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return EXIT_USAGE

    if args.output_format == "json":
        print(json.dumps(dump_tokens(tokens), indent=2))
    else:
        for token in tokens:
            print(format_token(token))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
