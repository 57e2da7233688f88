"""
MyClippings.txt Parser - Kindle Clippings File
Decodes one record at a time from a LineReader:

    <title line>
    - Your <Kind> ... location|page <start>[-<end>] | Added on <date>
    <content lines>
    ==========

A record that cannot be decoded is skipped up to and including its
separator before the error is raised, so the next call starts at the
following record's title line.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from .config import CONFIG
from .errors import (
    DateCaptureError,
    EndedPrematurelyError,
    InfoLineMatchError,
    KindCaptureError,
    LocationCaptureError,
    OtherParseError,
)
from .line_reader import LineReader
from .models import Clipping, ClippingKind, LocationOrPage

logger = logging.getLogger(__name__)

ENTRY_INFO_RE = re.compile(CONFIG.info_line_pattern)

# Titles may start with a byte order mark, decoded or as latin-1 bytes
BOM_PREFIXES = ("\ufeff", "\xef\xbb\xbf")

BLANK_LINES = ("\r\n", "\n", "\r")

# Locations and pages are signed 32-bit values
MAX_LOCATION = 2 ** 31 - 1


def read_entry(reader: LineReader) -> Optional[Clipping]:
    """
    Read the next record from the clippings file

    Args:
        reader: Line reader positioned at a record's title line

    Returns:
        The decoded clipping, or None at end of file

    Raises:
        ClippingParseError: If the record is malformed
    """
    doc_title = _read_entry_line(reader)
    if doc_title is None:
        return None

    info_line = _read_entry_line(reader)
    if info_line is None:
        # Title spanning several lines, or a truncated file
        move_to_next_entry(reader)
        raise OtherParseError()

    info_match = ENTRY_INFO_RE.search(info_line)
    if not info_match:
        move_to_next_entry(reader)
        raise InfoLineMatchError(doc_title)

    kind_label = info_match.group("kind")
    try:
        kind = ClippingKind.from_label(kind_label)
    except ValueError:
        move_to_next_entry(reader)
        raise KindCaptureError(kind_label)

    location_or_page = _clipping_location_or_page(reader, info_match)
    date = _clipping_date(reader, info_match.group("date"))
    content = _clipping_content(reader)

    return Clipping(
        doc_title=doc_title,
        kind=kind,
        location_or_page=location_or_page,
        date=date,
        content=content,
    )


def move_to_next_entry(reader: LineReader) -> None:
    """Discard lines up to and including the next separator (or end of file)"""
    while True:
        line = reader.read_line()
        if line is None or is_separator(line):
            return


def is_separator(line: str) -> bool:
    return trim_newline(line) == CONFIG.separator


def trim_newline(text: str) -> str:
    """Remove a single trailing line terminator"""
    if text.endswith("\n"):
        text = text[:-1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def parse_location_number(token: str) -> int:
    """
    Parse a location or page token as a 32-bit integer

    Raises:
        ValueError: For anything but ASCII digits, or values out of range
    """
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"Not a location number: {token!r}")
    value = int(token)
    if value > MAX_LOCATION:
        raise ValueError(f"Location number out of range: {token!r}")
    return value


def _read_entry_line(reader: LineReader) -> Optional[str]:
    line = reader.read_line()
    if line is None:
        return None

    line = trim_newline(line)
    for bom in BOM_PREFIXES:
        if line.startswith(bom):
            line = line[len(bom):]
            break
    return line.strip()


def _clipping_location_or_page(reader: LineReader, info_match: re.Match) -> LocationOrPage:
    start_token = info_match.group("start")
    try:
        start = parse_location_number(start_token)
    except ValueError:
        # Roman numeral and other textual page numbers
        logger.debug(f"Non-numeric location {start_token!r}, using 0")
        start = 0

    end_token = info_match.group("end")
    if end_token is None:
        return LocationOrPage.from_bounds(start)

    try:
        return LocationOrPage.from_bounds(start, parse_location_number(end_token))
    except ValueError:
        move_to_next_entry(reader)
        raise LocationCaptureError(f"{start_token}-{end_token}")


def _clipping_date(reader: LineReader, date_str: str) -> datetime:
    try:
        return datetime.strptime(date_str.strip(), CONFIG.date_format)
    except ValueError:
        if CONFIG.resync_on_date_error:
            move_to_next_entry(reader)
        raise DateCaptureError(date_str)


def _clipping_content(reader: LineReader) -> str:
    lines = []
    while True:
        line = reader.read_line()
        if line is None:
            raise EndedPrematurelyError()
        if line in BLANK_LINES:
            continue
        if is_separator(line):
            break
        lines.append(line)
    return trim_newline("".join(lines))
