"""Shared sample records for the clippings tests"""

import io
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kindle_clippings.line_reader import LineReader

SEPARATOR = "==========\r\n"


def record(title, info, *content_lines, newline="\r\n"):
    """Build one clippings record with Kindle's blank line after the header"""
    lines = [title, info, ""] + list(content_lines) + ["=========="]
    return "".join(line + newline for line in lines)


def info_line(kind="Highlight", location="location 100-105", date="Monday, 1 January 2024 10:00:00"):
    return f"- Your {kind} on {location} | Added on {date}"


def make_reader(text):
    return LineReader(io.StringIO(text, newline=""))
