"""CLI entry point for ftg — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import NoReturn, TextIO

from ftg import AUTHOR, DONATION, REPOSITORY, FtgError, __version__
from ftg.document import write_document
from ftg.exclusion import ExclusionSet, build_exclusions, parse_name_list
from ftg.renderer import RenderOptions, RenderStats, TreeRenderer
from ftg.selector import UnsupportedSelector

logger = logging.getLogger(__name__)

USAGE = """\
Usage: ftg [-e pattern1,pattern2,...] [-o output_location] [-d input_directory] [-i] [-c] [-h] [-v]
Options:
  -e, --exclude      Exclude directories or files (comma-separated)(.git,node_modules,.vscode)
  -o, --output       Specify an output location; default output is in the pwd ('-' for stdout)
  -d, --directory    Specify an input directory; default is the pwd
  -i, --interactive  Interactive mode to select items to exclude
  -c, --clear        Clear the exclusion list
  -h, --help         Show this help message and exit
  -v, --version      Show version information and exit
      --order        Sibling order: asc (default), desc or none (file-system order)
      --charset      Character set for tree drawing: unicode (default) or ascii
      --verbose      Enable debug logging
"""

STDOUT_TARGET = "-"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one successful run.

    Attributes:
        output_path: File the document was written to, ``None`` for stdout.
        stats: Tree statistics and recoverable failures.
    """

    output_path: Path | None
    stats: RenderStats


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    ``-h`` and ``-v`` are plain flags so that their banners and exit codes
    stay under our control.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``ftg`` command.
    """
    parser = argparse.ArgumentParser(
        prog="ftg",
        description="generate a markdown file tree of a directory",
        add_help=False,
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        dest="exclude",
        help="Comma-separated names to exclude (can be specified multiple times)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Output file; default file_tree_<HH-MM-SS>.md, '-' for stdout",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=str,
        default=None,
        help="Root directory to scan (default: current directory)",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Interactive mode to select items to exclude",
    )
    parser.add_argument(
        "-c",
        "--clear",
        action="store_true",
        help="Clear the exclusion list before applying defaults and -e names",
    )
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("-v", "--version", action="store_true", dest="show_version")
    parser.add_argument(
        "--order",
        choices=["asc", "desc", "none"],
        default="asc",
        help="Sibling order: asc (default), desc, or none for file-system order",
    )
    parser.add_argument(
        "--charset",
        choices=["unicode", "ascii"],
        default="unicode",
        help="Character set for tree drawing (default: unicode)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def show_usage(stream: TextIO | None = None) -> NoReturn:
    """Print usage and exit with status 1."""
    (stream or sys.stdout).write(USAGE)
    sys.exit(1)


def show_version(stream: TextIO | None = None) -> NoReturn:
    """Print version, project links and exit with status 0."""
    (stream or sys.stdout).write(
        f"File Tree Generator version: {__version__}\n"
        f"Leave us a star at {REPOSITORY}\n"
        f"Author: {AUTHOR}\n"
        f"Buy me a coffee: {DONATION}\n"
    )
    sys.exit(0)


def default_output_path(now: datetime | None = None) -> Path:
    """Return ``file_tree_<HH-MM-SS>.md`` relative to the working directory."""
    stamp = (now or datetime.now()).strftime("%H-%M-%S")
    return Path(f"file_tree_{stamp}.md")


def _build_exclusions(args: argparse.Namespace) -> ExclusionSet:
    """Build exclusion set from CLI options.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ExclusionSet: Defaults merged with every ``-e`` name.
    """
    user_names: list[str] = []
    for value in args.exclude:
        user_names.extend(parse_name_list(value))
    return build_exclusions(user_names, clear=args.clear)


def _resolve_root(directory: str | None) -> tuple[Path, str]:
    """Resolve the root directory and the form shown in the heading.

    Args:
        directory: ``-d`` argument, ``None`` for the working directory.

    Returns:
        tuple[Path, str]: Root path and its display string.

    Raises:
        FtgError: If the directory does not exist or is not a directory.
    """
    display = directory if directory else os.getcwd()
    root = Path(display)
    if not root.is_dir():
        raise FtgError(f"'{display}' is not a directory")
    return root, display


def _report(status: TextIO, stats: RenderStats) -> None:
    status.write(f"{stats.report_line()}\n")
    if stats.skipped:
        count = len(stats.skipped)
        status.write(f"Warning: skipped {count} unreadable director(ies)\n")
    if stats.write_errors:
        status.write(f"Warning: {stats.write_errors} line(s) could not be written\n")


def _run_with_args(
    args: argparse.Namespace,
    stdout: TextIO,
    stderr: TextIO,
) -> RunResult:
    """Run the exclusion/render pipeline for parsed arguments.

    Args:
        args: Parsed CLI namespace.
        stdout: Stream for progress messages and ``-o -`` output.
        stderr: Stream for progress messages when the document goes to stdout.

    Returns:
        RunResult: Where the document went and what was rendered.

    Raises:
        FtgError: On any fatal input or output error.
    """
    if args.show_help:
        show_usage(stdout)
    if args.show_version:
        show_version(stdout)

    exclusions = _build_exclusions(args)
    if args.interactive:
        exclusions = UnsupportedSelector().select(
            Path(args.directory or os.getcwd()), exclusions
        )

    root, display = _resolve_root(args.directory)
    renderer = TreeRenderer(
        exclusions,
        RenderOptions(charset=args.charset, order=args.order),
    )
    # Listed before the output file exists so a file created inside the
    # root never shows up in its own tree.
    entries = renderer.list_root(root)
    logger.debug("Excluding: %s", ", ".join(sorted(exclusions.names)))

    if args.output_file == STDOUT_TARGET:
        stderr.write(f"Generating your file tree for {display}, while you wait...\n")
        stats = write_document(renderer, root, stdout, display, entries)
        _report(stderr, stats)
        return RunResult(output_path=None, stats=stats)

    output_path = (
        Path(args.output_file) if args.output_file else default_output_path()
    )
    stdout.write(
        f"Generating your file tree for {display}, while you wait... \n"
        f"Give the project a star at {REPOSITORY}\n"
    )
    try:
        # Undecodable names are written back as their original bytes.
        sink = output_path.open("w", encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise FtgError(
            f"cannot write to output location '{output_path}': {exc}"
        ) from exc
    with sink:
        stats = write_document(renderer, root, sink, display, entries)

    stdout.write(f"File tree has been written to {output_path}\n")
    _report(stdout, stats)
    return RunResult(output_path=output_path, stats=stats)


def run_ftg(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> RunResult:
    """Run ftg with provided CLI args.

    This function does not configure logging and is the primary test
    target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.
        stdout: Progress stream. Defaults to ``sys.stdout``.
        stderr: Progress stream for ``-o -``. Defaults to ``sys.stderr``.

    Returns:
        RunResult: Where the document went and what was rendered.

    Raises:
        FtgError: On any fatal input or output error.
        SystemExit: For ``-h`` (status 1) and ``-v`` (status 0).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args, stdout or sys.stdout, stderr or sys.stderr)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="ftg: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once. Exits with code 1 on fatal errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse
    _configure_logging(args.verbose)

    try:
        _run_with_args(args, sys.stdout, sys.stderr)
    except FtgError as exc:
        sys.stderr.write(f"ftg: {exc}\n")
        sys.exit(1)
