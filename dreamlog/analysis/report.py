# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Plain-text analysis report.

Format:

    [2024-01-01] Score: 2 | Tags: happy, safe
    [2024-01-02] Score: -2 | Tags: falling, scared

    Total Dreams Analyzed: 2
    Average Dream Score: 0.0
    Most Common Emotion: happy
"""

from pathlib import Path

from dreamlog.core.config import get_config
from dreamlog.core.types import AnalysisResult, JournalSummary


def format_summary(summary: JournalSummary) -> list[str]:
    """Render the summary block, one string per line."""
    return [
        f"Total Dreams Analyzed: {summary.count}",
        f"Average Dream Score: {float(summary.average_score)}",
        f"Most Common Emotion: {summary.most_common_tag}",
    ]


def render_report(result: AnalysisResult) -> str:
    """Render ranked entries followed by a blank line and the summary."""
    lines = [entry.format_line() for entry in result.entries]
    lines.append("")
    lines.extend(format_summary(result.summary))
    return "".join(f"{line}\n" for line in lines)


def write_report(result: AnalysisResult, output_path: Path) -> Path:
    """
    Write the report to a file.

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    output_path.write_text(render_report(result), encoding=get_config().report.encoding)
    return output_path
