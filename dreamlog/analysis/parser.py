# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Journal parser - splits a flat stream of lines into dated records.

A line that is exactly a date (YYYY-MM-DD) starts a new entry. Every
other line belongs to the entry that is currently open. Text before the
first date line has no entry to belong to and is dropped.
"""

import io
import re
from typing import Iterable

from dreamlog.core.types import DreamRecord

DATE_LINE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_date_line(line: str) -> bool:
    """Check if a line is an entry delimiter."""
    return DATE_LINE.fullmatch(line) is not None


def parse_lines(lines: Iterable[str]) -> list[DreamRecord]:
    """
    Parse journal lines into dream records.

    Args:
        lines: Journal lines, with or without trailing newlines

    Returns:
        One record per date line, in input order
    """
    records: list[DreamRecord] = []
    date: str | None = None
    body: list[str] = []

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if is_date_line(line):
            if date is not None:
                records.append(DreamRecord(date=date, body="".join(body)))
            date = line
            body = []
        else:
            body.append(line + " ")

    # The last entry has no closing date line
    if date is not None:
        records.append(DreamRecord(date=date, body="".join(body)))

    return records


def parse_text(text: str) -> list[DreamRecord]:
    """Parse a whole journal held in a string."""
    # Only "\n" ends a line; form feeds and other separators stay in the body
    return parse_lines(io.StringIO(text))
