"""Tunable constants for reading Kindle clippings files."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class ClippingsConfig:
    """Configuration for the My Clippings.txt reader and exporters."""

    # Record boundary, on its own line
    separator: str = "=========="

    # "- Your Highlight on page 12 | location 170-172 | Added on Monday, 1 January 2024 10:00:00"
    info_line_pattern: str = (
        r"- Your (?P<kind>\w+).+?(?:location|page) (?P<start>\w+)"
        r"(?:-(?P<end>\w+))? \| Added on (?P<date>.*)"
    )
    date_format: str = "%A, %d %B %Y %H:%M:%S"

    # Bookmarks are parsed and deduplicated but never exported
    exported_kinds: Tuple[str, ...] = ("highlight", "note")

    # Encoding detection
    default_encoding: str = "utf-8"
    encoding_sample_size: int = 10000
    min_encoding_confidence: float = 0.5

    # Skip the rest of a record whose date cannot be parsed
    resync_on_date_error: bool = True


# Global configuration instance
CONFIG = ClippingsConfig()
