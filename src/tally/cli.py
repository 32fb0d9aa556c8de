"""CLI module for tally."""

from __future__ import annotations

import argparse
import logging
import runpy
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from tally.config import TallyConfig, load_config
from tally.demos import DEMOS
from tally.errors import ConfigError
from tally.reports import Reporter, resolve_reporter
from tally.testing import Tally, reporter_scope

logger = logging.getLogger("tally")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the tally CLI."""
    raise SystemExit(run(argv))


def run(argv: Sequence[str] | None = None) -> int:
    console = Console(stderr=True)
    try:
        config = load_config()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        return 2

    parser = _build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    # addopts hold subcommand flags, so they go right after the subcommand
    if raw and raw[0] in ("demo", "run"):
        raw = [raw[0], *config.addopts, *raw[1:]]
    raw, script_args = _split_script_args(raw)
    args, extras = parser.parse_known_args(raw)
    if args.command == "run":
        script_args = [*extras, *script_args]
    elif extras or script_args:
        parser.error(f"unrecognized arguments: {' '.join([*extras, *script_args])}")

    if args.command is None:
        parser.print_help()
        return 0

    verbosity = _resolve_verbosity(args, config)
    setup_logging(verbosity)

    try:
        reporter = _resolve_reporter(args, config, verbosity)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        return 2

    if args.command == "demo":
        return _run_demo(args.name, reporter, summary=_resolve_summary(args, config))
    if args.command == "run":
        return _run_script(
            Path(args.script), script_args, reporter, summary=_resolve_summary(args, config)
        )

    parser.print_help()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tally", description="Inline checks with a pass/fail trace")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--reporter", help="Reporter name or import string (module:Class)")
    common.add_argument(
        "--no-summary", action="store_true", help="Do not print the closing summary line"
    )
    common.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")

    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser(
        "demo", parents=[common], help="Run the bundled demonstration programs"
    )
    demo_parser.add_argument(
        "name", nargs="?", default="all", choices=[*DEMOS, "all"], help="Demo to run"
    )

    run_parser = subparsers.add_parser(
        "run",
        parents=[common],
        help="Run a Python script and fail on failed checks",
        description="Unrecognized options and anything after '--' are passed to the script.",
    )
    run_parser.add_argument("script", help="Path to the script")

    return parser


def setup_logging(verbosity: int) -> None:
    """Send tally log records to stderr at a level chosen by ``verbosity``."""
    logger.handlers.clear()
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt="[%(asctime)s] %(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
    )
    logger.addHandler(handler)


def _resolve_verbosity(args: argparse.Namespace, config: TallyConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_summary(args: argparse.Namespace, config: TallyConfig) -> bool:
    return config.summary and not args.no_summary


def _resolve_reporter(args: argparse.Namespace, config: TallyConfig, verbosity: int) -> Reporter:
    return resolve_reporter(args.reporter or config.reporter, verbosity=verbosity)


def _split_script_args(raw: list[str]) -> tuple[list[str], list[str]]:
    """Split off everything after the first ``--`` for the script."""
    if "--" not in raw:
        return raw, []
    index = raw.index("--")
    return raw[:index], raw[index + 1 :]


def _run_demo(name: str, reporter: Reporter, *, summary: bool) -> int:
    demos = list(DEMOS.values()) if name == "all" else [DEMOS[name]]
    with reporter_scope(reporter), Tally() as tally:
        for demo in demos:
            demo()
    if summary:
        reporter.on_summary(tally)
    return tally.exit_code


def _run_script(path: Path, script_args: list[str], reporter: Reporter, *, summary: bool) -> int:
    if not path.is_file():
        Console(stderr=True).print(f"[red]Script not found: {path}[/red]")
        return 2

    exit_code = 0
    saved_argv = sys.argv
    sys.argv = [str(path), *script_args]
    try:
        with reporter_scope(reporter), Tally() as tally:
            try:
                runpy.run_path(str(path), run_name="__main__")
            except SystemExit as exc:
                if exc.code not in (None, 0):
                    exit_code = exc.code if isinstance(exc.code, int) else 1
            except Exception:
                logger.exception("Script %s raised", path)
                exit_code = 1
    finally:
        sys.argv = saved_argv

    if summary:
        reporter.on_summary(tally)
    return exit_code or tally.exit_code


__all__ = ["main", "run"]
