"""Command-line interface for Markscan."""

from __future__ import annotations

import argparse
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from markscan.logger import get_logger
from markscan.snippet import DEFAULT_LANGUAGE

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    language: str
    line_numbers: bool
    copy: bool
    check: bool
    watch: bool
    debug: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="markscan",
        description="Highlight a markup code block into numbered HTML lines",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-l",
        "--language",
        default=None,
        metavar="LABEL",
        help=f"Language label shown in the badge (default: {DEFAULT_LANGUAGE})",
    )
    p.add_argument(
        "--no-lines",
        dest="line_numbers",
        action="store_const",
        const=False,
        default=None,
        help="Hide line numbers",
    )
    p.add_argument(
        "--lines",
        dest="line_numbers",
        action="store_const",
        const=True,
        help="Show line numbers (overrides config)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover markscan.toml)",
    )
    p.add_argument(
        "--copy",
        action="store_true",
        help="Write the dedented source (clipboard text) instead of HTML",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Report unterminated comments, strings and tags; exit 1 if any",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-render")
    p.add_argument("--debug", action="store_true", help="Dump tokens and lines to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "markscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    language = DEFAULT_LANGUAGE
    line_numbers = True
    cfg_display = config.get("display")
    if isinstance(cfg_display, dict):
        cfg_language = cfg_display.get("language")
        if isinstance(cfg_language, str):
            language = cfg_language
        cfg_lines = cfg_display.get("line_numbers")
        if isinstance(cfg_lines, bool):
            line_numbers = cfg_lines
    if args.language is not None:
        language = args.language
    if args.line_numbers is not None:
        line_numbers = args.line_numbers

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        language=language,
        line_numbers=line_numbers,
        copy=args.copy,
        check=args.check,
        watch=args.watch,
        debug=args.debug,
        verbose=args.verbose,
    )


def render_file(options: CliOptions) -> str:
    """Read the input file and return rendered HTML, or the copy text."""
    from markscan import dedent, scan
    from markscan.debug import dump_lines, dump_tokens
    from markscan.render import render
    from markscan.snippet import Snippet

    source = options.input_file.read_text(encoding="utf-8")
    snippet = Snippet(source, language=options.language, line_numbers=options.line_numbers)

    if options.debug:
        dump_tokens(scan(dedent(source)), file=sys.stderr)
        dump_lines(snippet.lines, file=sys.stderr)

    if options.copy:
        return snippet.copy_text
    return render(snippet)


def check_file(options: CliOptions) -> int:
    """Print a warning for every unterminated construct. Returns the count."""
    from markscan import scan
    from markscan.diagnostics import check

    source = options.input_file.read_text(encoding="utf-8")
    diagnostics = check(scan(source))
    for diag in diagnostics:
        print(diag.format(source, str(options.input_file)), file=sys.stderr)
    return len(diagnostics)


def _write(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-render on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write(options, render_file(options))
                    print(f"Rendered {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    logger.debug("options: %s", options)

    if options.watch:
        watch_loop(options)
        return 0

    try:
        if options.check:
            return 1 if check_file(options) else 0
        text = render_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _write(options, text)
    return 0
