"""Command-line interface for the Dium lexer."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Any

from dium.errors import Diagnostic, FileOpenError, LexError
from dium.lexer import MAX_ID_LENGTH, MAX_INT, LexerOptions

FORMATS = ("text", "kinds", "table")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    name: str
    format: str
    lexer: LexerOptions
    brief: bool
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="dium",
        description="Dium lexer: print the tokens of a source file",
    )
    p.add_argument("input", help="Input .dm file")
    p.add_argument("--name", help="Source name used in diagnostics (default: file name)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover dium.toml)",
    )
    p.add_argument(
        "--max-identifier-length",
        type=int,
        default=None,
        metavar="N",
        help=f"Longest identifier accepted (default: {MAX_ID_LENGTH})",
    )
    p.add_argument("--brief", action="store_true", help="One-line diagnostics without context")
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-lex")
    p.add_argument("--debug", action="store_true", help="Dump the token table to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "dium.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def _positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise argparse.ArgumentTypeError(f"{key} must be a positive integer, got {value!r}")
    return value


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    max_id = MAX_ID_LENGTH
    max_int = MAX_INT
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        if "max_identifier_length" in cfg_lexer:
            max_id = _positive_int(cfg_lexer["max_identifier_length"], "max_identifier_length")
        if "max_int" in cfg_lexer:
            max_int = _positive_int(cfg_lexer["max_int"], "max_int")
    if args.max_identifier_length is not None:
        max_id = _positive_int(args.max_identifier_length, "--max-identifier-length")

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_fmt = cfg_output.get("format")
        if cfg_fmt is not None:
            if cfg_fmt not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"output.format must be one of {', '.join(FORMATS)}, got {cfg_fmt!r}"
                )
            fmt = cfg_fmt
    if args.format is not None:
        fmt = args.format

    return CliOptions(
        input_file=input_file,
        name=args.name or input_file.name,
        format=fmt,
        lexer=LexerOptions(max_identifier_length=max_id, max_int=max_int),
        brief=args.brief,
        watch=args.watch,
        debug=args.debug,
    )


def render_tokens(
    options: CliOptions, on_warning: Callable[[Diagnostic], None] | None = None
) -> str:
    """Read and tokenize the input file, returning the formatted output."""
    from dium.debug import dump_tokens, format_line
    from dium.lexer import Lexer
    from dium.source import CharSource

    source = CharSource.open(options.input_file, options.name)
    tokens = Lexer(source, options.lexer, on_warning).tokenize()

    if options.debug:
        dump_tokens(tokens)

    if options.format == "kinds":
        return "".join(f"{t.type.name}\n" for t in tokens)
    if options.format == "table":
        buf = StringIO()
        dump_tokens(tokens, file=buf)
        return buf.getvalue()
    return format_line(tokens) + "\n"


def _print_warning(diag: Diagnostic) -> None:
    print(diag.format(), file=sys.stderr)


def _print_error(exc: LexError, options: CliOptions) -> None:
    print(exc.summary() if options.brief else exc.format(), file=sys.stderr)


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-lex on each modification."""
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
                    sys.stdout.write(render_tokens(options, _print_warning))
                    sys.stdout.flush()
                    print(f"Lexed {options.input_file}", file=sys.stderr)
                except LexError as exc:
                    _print_error(exc, options)
                except FileOpenError as exc:
                    print(str(exc), file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        output = render_tokens(options, _print_warning)
    except FileOpenError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except LexError as exc:
        _print_error(exc, options)
        return 1

    sys.stdout.write(output)
    return 0
