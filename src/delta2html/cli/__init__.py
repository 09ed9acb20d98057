"""Command-line interface for delta2html.

Converts a Quill delta stored as JSON (``{"ops": [...]}`` or a bare list of
ops) to HTML, to the JSON form of the grouped document tree, or to a tree
view in the terminal.

Examples
--------
Render HTML to stdout::

    $ delta2html document.json

Read from stdin, write to a file::

    $ cat document.json | delta2html - --out document.html

Inspect grouping::

    $ delta2html document.json --format tree

Keep every code line in its own block::

    $ delta2html document.json --no-multi-line-code-block

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Dict, Optional

from delta2html import __version__
from delta2html.api import convert, to_html
from delta2html.cli.config import discover_config_file, load_config_file, merge_configs
from delta2html.cli.output import format_json, print_tree_view
from delta2html.constants import DEFAULT_OUTPUT_FORMAT
from delta2html.exceptions import Delta2HtmlError
from delta2html.logging_utils import configure_logging
from delta2html.options import ConverterOptions, GroupingOptions, HtmlRendererOptions
from delta2html.parsers.delta import load_delta_json

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

OPTION_SECTIONS = {
    "grouping": GroupingOptions,
    "html": HtmlRendererOptions,
}

__all__ = ["create_parser", "main"]


def _add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per simple option field of the grouping and HTML options.

    Boolean fields defaulting to True get a ``--no-<name>`` flag, other
    booleans a ``--<name>`` flag and string fields a ``--<name> VALUE``
    argument. Flags that are not given leave the config value untouched.
    """
    for section, options_class in OPTION_SECTIONS.items():
        group = parser.add_argument_group(f"{section} options")
        for f in fields(options_class):
            if f.metadata.get("exclude_from_cli") or f.default is MISSING:
                continue
            flag = f.name.replace("_", "-")
            dest = f"{section}__{f.name}"
            help_text = f.metadata.get("help", f"Set {f.name.replace('_', ' ')}")
            if isinstance(f.default, bool):
                if f.default:
                    group.add_argument(
                        f"--no-{flag}",
                        dest=dest,
                        action="store_false",
                        default=argparse.SUPPRESS,
                        help=f"Disable: {help_text}",
                    )
                else:
                    group.add_argument(
                        f"--{flag}", dest=dest, action="store_true", default=argparse.SUPPRESS, help=help_text
                    )
            elif f.default is None or isinstance(f.default, str):
                group.add_argument(f"--{flag}", dest=dest, default=argparse.SUPPRESS, metavar="VALUE", help=help_text)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="delta2html",
        description="Convert a Quill delta to HTML or inspect its grouped document tree.",
    )
    parser.add_argument("input", help="Delta JSON file, or '-' to read from stdin")
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        choices=["html", "json", "tree"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Do not discover a configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_options_arguments(parser)
    return parser


def _cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    overrides: Dict[str, Dict[str, Any]] = {}
    for key, value in vars(parsed_args).items():
        section, sep, name = key.partition("__")
        if sep and section in OPTION_SECTIONS:
            overrides.setdefault(section, {})[name] = value
    return overrides


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    if parsed_args.config:
        return load_config_file(parsed_args.config)
    if parsed_args.no_config:
        return {}
    config_path = discover_config_file()
    if config_path is None:
        return {}
    logger.info(f"Using configuration from {config_path}")
    return load_config_file(config_path)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, out: Optional[str]) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def build_options(parsed_args: argparse.Namespace) -> ConverterOptions:
    """Build converter options from the config file and CLI flags; flags win."""
    config = merge_configs(_load_config(parsed_args), _cli_overrides(parsed_args))
    return ConverterOptions.from_config(config)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except Delta2HtmlError as e:
        logger.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    try:
        raw = load_delta_json(_read_input(parsed_args.input))
        if parsed_args.format == "html":
            _write_output(to_html(raw, options), parsed_args.out)
        elif parsed_args.format == "json":
            _write_output(format_json(convert(raw, options)), parsed_args.out)
        else:
            tree = convert(raw, options)
            title = "stdin" if parsed_args.input == "-" else Path(parsed_args.input).name
            if parsed_args.out:
                with open(parsed_args.out, "w", encoding="utf-8") as f:
                    print_tree_view(tree, file=f, title=title)
            else:
                print_tree_view(tree, title=title)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Delta2HtmlError as e:
        logger.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS
