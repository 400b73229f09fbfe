"""Command-line interface for foamls."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from foamls.errors import LexError
from foamls.tokens import Span, TokenStream


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    hover: tuple[int, int] | None
    tokens: bool
    hints: bool
    identifiers: bool
    watch: bool
    debug: bool


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Everything derived from one scan of the input file."""

    source: str
    stream: TokenStream
    errors: dict[Span, str]
    hints: dict[Span, str]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="foamls",
        description="Check OpenFOAM dictionary files",
    )
    p.add_argument("input", help="Dictionary file to check")
    p.add_argument(
        "--hover",
        metavar="LINE:COL",
        help="Print documentation for the token at a 0-based position",
    )
    p.add_argument("--tokens", action="store_true", help="Print the token stream")
    p.add_argument("--hints", action="store_true", help="Print unit hints for dimensions")
    p.add_argument(
        "--identifiers",
        action="store_true",
        default=None,
        help="Accept words outside the keyword catalog (default: from config, else off)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover foamls.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-check")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def parse_position_arg(s: str) -> tuple[int, int]:
    """Parse a LINE:COL string into a (line, col) pair."""
    line, sep, col = s.partition(":")
    if not sep or not line.isdigit() or not col.isdigit():
        raise argparse.ArgumentTypeError(f"invalid position (expected LINE:COL): {s}")
    return int(line), int(col)


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "foamls.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    identifiers = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_identifiers = cfg_lexer.get("identifiers")
        if isinstance(cfg_identifiers, bool):
            identifiers = cfg_identifiers
    if args.identifiers is not None:
        identifiers = args.identifiers

    hover = parse_position_arg(args.hover) if args.hover else None

    return CliOptions(
        input_file=input_file,
        hover=hover,
        tokens=args.tokens,
        hints=args.hints,
        identifiers=identifiers,
        watch=args.watch,
        debug=args.debug,
    )


def check_file(options: CliOptions) -> CheckResult:
    """Read and scan the input file, then run validation and unit hints."""
    from foamls.debug import dump_tokens
    from foamls.lexer import scan
    from foamls.validate import find_errors, unit_hints

    source = options.input_file.read_text(encoding="utf-8")
    stream = scan(source, identifiers=options.identifiers)

    if options.debug:
        dump_tokens(stream, source, file=sys.stderr)

    return CheckResult(
        source=source,
        stream=stream,
        errors=find_errors(stream),
        hints=unit_hints(stream),
    )


def report(options: CliOptions, result: CheckResult) -> None:
    """Write the requested views of result to stdout."""
    from foamls.debug import dump_tokens
    from foamls.hover import hover
    from foamls.positions import PositionIndex

    index = PositionIndex(result.source)
    name = str(options.input_file)

    if options.tokens:
        dump_tokens(result.stream, result.source, file=sys.stdout)

    if options.hints:
        for span, label in sorted(result.hints.items(), key=lambda item: item[0].start):
            line, col = index.position(span.start)
            print(f"{name}:{line + 1}:{col + 1}: {label}")

    if options.hover is not None:
        line, col = options.hover
        info = hover(result.source, line, col, identifiers=options.identifiers)
        if info is None:
            print("no hover information")
        else:
            print(info.documentation)

    for span, message in sorted(result.errors.items(), key=lambda item: item[0].start):
        line, col = index.position(span.start)
        print(f"{name}:{line + 1}:{col + 1}: warning: {message}")


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-check on each modification."""
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
                    result = check_file(options)
                    report(options, result)
                    print(
                        f"Checked {options.input_file}: {len(result.errors)} problem(s)",
                        file=sys.stderr,
                    )
                except LexError as exc:
                    print(exc.format(str(options.input_file)), file=sys.stderr)
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
        result = check_file(options)
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    report(options, result)
    return 2 if result.errors else 0
