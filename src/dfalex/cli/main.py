# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dfalex command-line interface."""

import argparse
import sys
from pathlib import Path

from dfalex.cli.config import CONFIG_FILE_NAME, ConfigError, LexConfig, find_config, load_config
from dfalex.lexer.tokenizer import error_tokens, tokenize
from dfalex.report.render import build_report, render_json, render_source_echo, render_table

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dfalex CLI."""
    parser = argparse.ArgumentParser(
        prog="dfalex",
        description="dfalex: DFA-based lexical analyzer",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokenize subcommand
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Print the tokens of a source file",
        description="Read a source file and print every token with its kind.",
    )
    tokenize_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Source file to tokenize (prompted for when omitted)",
    )
    tokenize_parser.add_argument(
        "--format",
        dest="output_format",
        choices=["table", "json"],
        default=None,
        help="Output format (default: table, or the value from the config file)",
    )
    tokenize_parser.add_argument(
        "--echo-source",
        action="store_true",
        default=None,
        help="Print the source text before the tokens",
    )
    tokenize_parser.add_argument(
        "--fail-on-error",
        action="store_true",
        default=None,
        help="Exit with code 1 if the source contains invalid characters",
    )
    tokenize_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a config file (default: {CONFIG_FILE_NAME} in the current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report invalid characters in source files",
        description="Tokenize source files and list every lexical error with its location.",
    )
    check_parser.add_argument(
        "files",
        nargs="+",
        help="Source files to check",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_FILENAME_PROMPT = "Enter the source code filename (e.g., example.txt): "


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "tokenize":
        return _cmd_tokenize(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _read_source(filename: str) -> str | None:
    """Read a whole source file, or report the failure and return None."""
    try:
        # Decoded from bytes so that line endings are preserved verbatim.
        return Path(filename).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        print(
            f"Error: Could not open the file '{filename}'. Please check the path and filename.",
            file=sys.stderr,
        )
        return None


def _load_effective_config(args: argparse.Namespace) -> LexConfig:
    """Merge the config file with command-line overrides."""
    if args.config is not None:
        config = load_config(Path(args.config))
    else:
        config = find_config(Path.cwd())

    overrides = {
        "output_format": args.output_format,
        "echo_source": args.echo_source,
        "fail_on_error": args.fail_on_error,
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def _cmd_tokenize(args: argparse.Namespace) -> int:
    """Handle the tokenize subcommand."""
    try:
        config = _load_effective_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    filename = args.file
    if filename is None:
        try:
            filename = input(_FILENAME_PROMPT).strip()
        except EOFError:
            print("Error: no source filename given.", file=sys.stderr)
            return 1

    source = _read_source(filename)
    if source is None:
        return 1

    tokens = tokenize(source)

    if config.echo_source:
        print(render_source_echo(filename, source))
    if config.output_format == "json":
        print(render_json(build_report(filename, tokens)))
    else:
        print(render_table(tokens))

    if config.fail_on_error and error_tokens(tokens):
        return 1
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for filename in args.files:
        source = _read_source(filename)
        if source is None:
            has_errors = True
            continue
        for tok in error_tokens(tokenize(source)):
            print(
                f"Error: {filename}:{tok.line}:{tok.column}: invalid character {tok.text!r}",
                file=sys.stderr,
            )
            has_errors = True

    if has_errors:
        return 1

    print("No lexical errors found.")
    return 0
