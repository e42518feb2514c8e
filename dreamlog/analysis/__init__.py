# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Dream journal analysis.

Stages:
- parser: split journal lines into dated records
- classifier: lucid detection and keyword scoring
- ranking: order by score, aggregate statistics
- report: plain-text rendering
"""

from dreamlog.analysis.classifier import (
    LUCID_PHRASES,
    NEGATIVE_TERMS,
    POSITIVE_TERMS,
    classify,
    classify_all,
    detect_variant,
    score_keywords,
)
from dreamlog.analysis.parser import parse_lines, parse_text
from dreamlog.analysis.pipeline import analyze_file, analyze_lines
from dreamlog.analysis.ranking import rank, summarize
from dreamlog.analysis.report import render_report, write_report

__all__ = [
    "LUCID_PHRASES",
    "NEGATIVE_TERMS",
    "POSITIVE_TERMS",
    "classify",
    "classify_all",
    "detect_variant",
    "score_keywords",
    "parse_lines",
    "parse_text",
    "analyze_file",
    "analyze_lines",
    "rank",
    "summarize",
    "render_report",
    "write_report",
]
