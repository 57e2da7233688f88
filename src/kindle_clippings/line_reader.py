"""
Line Reader - sequential access to a clippings file
Reads one line at a time, keeping line terminators and counting lines
for error reports.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

import chardet

from .config import CONFIG

logger = logging.getLogger(__name__)


class LineReader:
    """Line-at-a-time reader over a text stream"""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.current_line = 0

    def read_line(self) -> Optional[str]:
        """
        Read the next raw line

        Returns:
            The line including its terminator, or None at end of stream
        """
        line = self.stream.readline()
        if not line:
            return None
        self.current_line += 1
        return line


def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a clippings file

    Args:
        file_path: Path to the file

    Returns:
        Detected encoding name
    """
    with open(file_path, 'rb') as f:
        raw_data = f.read(CONFIG.encoding_sample_size)

    result = chardet.detect(raw_data)
    encoding = result.get('encoding') or CONFIG.default_encoding
    confidence = result.get('confidence') or 0

    logger.debug(f"Detected encoding for {file_path}: {encoding} (confidence: {confidence:.2f})")

    if confidence < CONFIG.min_encoding_confidence:
        return CONFIG.default_encoding

    # The sample may be plain ASCII while later records are not
    if encoding.lower() == 'ascii':
        return CONFIG.default_encoding

    return encoding


@contextmanager
def open_clippings(file_path: str, encoding: Optional[str] = None) -> Iterator[LineReader]:
    """
    Open a clippings file for line-by-line reading

    Args:
        file_path: Path to the My Clippings.txt file
        encoding: Specific encoding to use (detected when omitted)

    Raises:
        OSError: If the file cannot be opened
    """
    path = Path(file_path)
    if not encoding:
        encoding = detect_file_encoding(str(path))

    logger.info(f"Reading {path} as {encoding}")

    # newline="" keeps "\r\n" intact, record separators are matched with it
    with open(path, 'r', encoding=encoding, errors='replace', newline='') as stream:
        yield LineReader(stream)
