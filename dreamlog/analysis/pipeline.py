# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Analysis pipeline: parse → classify → rank → summarize.

Single batch run, no state kept between calls.
"""

from pathlib import Path
from typing import Iterable

from dreamlog.analysis.classifier import classify_all
from dreamlog.analysis.parser import parse_lines
from dreamlog.analysis.ranking import rank, summarize
from dreamlog.core.config import get_config
from dreamlog.core.types import AnalysisResult
from dreamlog.logging import get_logger, log_warning


def analyze_lines(lines: Iterable[str]) -> AnalysisResult:
    """Run the full analysis over journal lines."""
    log = get_logger("analysis")

    records = parse_lines(lines)
    log.debug(f"Parsed {len(records)} dream records")
    if not records:
        log_warning("Journal has no date lines (YYYY-MM-DD), nothing to analyze")

    entries = classify_all(records)
    lucid_count = sum(1 for entry in entries if entry.is_lucid)
    log.debug(f"Classified {len(entries)} entries ({lucid_count} lucid)")

    ranked = rank(entries)
    summary = summarize(ranked)
    log.debug(
        f"Summary: count={summary.count}, average={summary.average_score}, "
        f"top tag={summary.most_common_tag}, bad={summary.bad_dream_count}"
    )

    return AnalysisResult(entries=ranked, summary=summary)


def analyze_file(journal_path: Path) -> AnalysisResult:
    """
    Read a journal file and analyze it.

    Raises:
        OSError: If the journal cannot be read
    """
    with Path(journal_path).open(encoding=get_config().report.encoding) as journal:
        return analyze_lines(journal)
