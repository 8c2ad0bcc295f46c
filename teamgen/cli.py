"""
Command line entry point.

Usage
-----
  teamgen students.xlsx teams.xlsx [SHEET] [TEAM_SIZE] [--seed N] [--no-shuffle]
                                   [--split-sheets] [--summary] [--stats] [--dedupe]
  teamgen                       # interactive mode, asks for each value
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .pipeline import RunResult, RunStatus, generate_teams
from .settings import Settings, load_settings, setup_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="teamgen",
        description="Split a student roster spreadsheet into teams.",
    )
    p.add_argument("input", nargs="?", help="roster file (.xlsx or .csv)")
    p.add_argument("output", nargs="?", help="output workbook (.xlsx)")
    p.add_argument("sheet", nargs="?", default=None, help="sheet to read (default: first sheet)")
    p.add_argument("team_size", nargs="?", type=int, default=None, help="students per team")
    p.add_argument("--seed", type=int, default=None, help="seed for a reproducible shuffle")
    p.add_argument("--no-shuffle", action="store_true", help="keep roster order")
    p.add_argument("--split-sheets", action="store_true", help="add one sheet per team")
    p.add_argument("--summary", action="store_true", help="add a Summary sheet")
    p.add_argument("--stats", action="store_true", help="print team statistics")
    p.add_argument("--dedupe", action="store_true", help="drop repeated student ids")
    p.add_argument("--config", type=Path, default=None, help="settings JSON file")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    return p


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _interactive(args: argparse.Namespace, settings: Settings) -> argparse.Namespace:
    print("=== Student Team Generator ===")
    print()
    args.input = _ask("Enter input Excel file path: ")
    args.output = _ask("Enter output Excel file path: ")
    args.sheet = _ask("Enter sheet name to read from (press Enter for first sheet): ") or None
    size = _ask(f"Enter team size (default: {settings.team_size}): ")
    args.team_size = int(size) if size else None
    print()
    return args


def _report(result: RunResult, show_stats: bool) -> int:
    if result.status is RunStatus.EMPTY_ROSTER:
        print("No students found in the Excel file!")
        return 0

    if result.status is RunStatus.FAILED:
        print(f"Error ({result.error_kind}): {result.error.message}", file=sys.stderr)
        if result.error.recommendation:
            print(result.error.recommendation, file=sys.stderr)
        return 1

    print(f"Found {result.students_found} students")
    if show_stats:
        print()
        print(result.stats.render())
        print()
    print("✓ Successfully created team assignments!")
    print(f"✓ Output file: {result.output_path}")
    print(f"✓ Created {result.teams_created} teams")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())
    setup_logging(settings)

    if args.input is None:
        try:
            args = _interactive(args, settings)
        except ValueError:
            print("Error: team size must be a whole number", file=sys.stderr)
            return 2
        except (EOFError, KeyboardInterrupt):
            print()
            return 2

    if not args.input or not args.output:
        parser.print_usage(sys.stderr)
        print("Error: both input and output files are required", file=sys.stderr)
        return 2

    team_size = args.team_size if args.team_size is not None else settings.team_size

    print("Reading students and creating teams...")
    result = generate_teams(
        args.input,
        args.output,
        args.sheet,
        team_size,
        shuffle=settings.shuffle and not args.no_shuffle,
        seed=args.seed,
        dedupe=args.dedupe,
        split_sheets=settings.split_sheets or args.split_sheets,
        include_summary=settings.include_summary or args.summary,
    )
    return _report(result, args.stats)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
