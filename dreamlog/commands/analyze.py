# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
analyze command - Score and rank a dream journal.

Reads a journal of dated entries, scores each dream, and writes the
ranked report to a file or stdout.
"""

import argparse
import sys
from pathlib import Path

from dreamlog.analysis import analyze_file, render_report, write_report
from dreamlog.core.config import ConfigError
from dreamlog.logging import log_analysis_end, log_analysis_start, log_error


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the analyze command."""
    parser = argparse.ArgumentParser(
        prog="dreamlog analyze",
        description="Score, rank and summarize a dream journal.",
        epilog="Entries start with a line holding only a date (YYYY-MM-DD).",
    )
    parser.add_argument(
        "journal",
        help="Path to the dream journal text file",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help="Write the report to PATH instead of stdout",
    )
    parser.add_argument(
        "--bad-dreams",
        "-b",
        action="store_true",
        help="Also print how many dreams scored below zero",
    )
    return parser


def run(args: list[str]) -> int:
    """
    Run the analyze command.

    Args:
        args: Command line arguments

    Returns:
        Exit code (0 for success)
    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    journal_path = Path(parsed.journal)

    try:
        log_analysis_start(journal_path)
    except ConfigError as e:
        print(f"Config error: {e}")
        return 1
    except OSError as e:
        print(f"Could not set up logging: {e}")
        return 1

    try:
        result = analyze_file(journal_path)
    except OSError as e:
        log_error(f"Reading {journal_path}", e)
        print(f"Could not read journal: {journal_path} ({e.strerror or e})")
        return 1

    if parsed.output:
        output_path = Path(parsed.output)
        try:
            write_report(result, output_path)
        except OSError as e:
            log_error(f"Writing {output_path}", e)
            print(f"Could not write report: {output_path} ({e.strerror or e})")
            return 1
        print(f"Analyzed {result.summary.count} dreams → {output_path}")
    else:
        print(render_report(result), end="")

    if parsed.bad_dreams:
        print(f"Bad Dreams: {result.summary.bad_dream_count}")

    log_analysis_end(
        count=result.summary.count,
        average_score=result.summary.average_score,
        most_common_tag=result.summary.most_common_tag,
        bad_dreams=result.summary.bad_dream_count,
    )
    return 0


if __name__ == "__main__":
    sys.exit(run(sys.argv[1:]))
