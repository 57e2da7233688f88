"""
Clippings Collection - run the parser over a whole file
Malformed records are reported and skipped; duplicate clippings
(same title, kind, location and content) are kept once.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set, Union

from .clippings_parser import read_entry
from .errors import ClippingParseError
from .line_reader import LineReader, open_clippings
from .models import Clipping, IdentityKey, identity_key

logger = logging.getLogger(__name__)


@dataclass
class ParseFailure:
    """A skipped record and the line where the problem was noticed"""

    line: int
    error: ClippingParseError

    def __str__(self) -> str:
        return f"Error parsing clippings entry at line {self.line}: {self.error}. Skipping."


@dataclass
class CollectionResult:
    doc_titles: Set[str] = field(default_factory=set)
    clippings: List[Clipping] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)


def iter_entries(reader: LineReader) -> Iterator[Union[Clipping, ParseFailure]]:
    """
    Yield every record of the file until end of stream

    Args:
        reader: Line reader at the start of the file

    Yields:
        Decoded clippings, and a ParseFailure for every skipped record
    """
    while True:
        try:
            clipping = read_entry(reader)
        except ClippingParseError as e:
            failure = ParseFailure(reader.current_line, e)
            logger.warning(str(failure))
            yield failure
            continue

        if clipping is None:
            return
        yield clipping


def collect_doc_titles(reader: LineReader) -> CollectionResult:
    """Collect the distinct document titles found in the file"""
    result = CollectionResult()
    for entry in iter_entries(reader):
        if isinstance(entry, ParseFailure):
            result.failures.append(entry)
        else:
            result.doc_titles.add(entry.doc_title)

    logger.info(f"Found {len(result.doc_titles)} documents, skipped {len(result.failures)} records")
    return result


def collect_clippings(reader: LineReader, doc_titles: Iterable[str]) -> CollectionResult:
    """
    Collect the clippings of the requested documents, without duplicates

    Args:
        reader: Line reader at the start of the file
        doc_titles: Titles of the documents to keep

    Returns:
        Result with clippings in file order; of several copies differing
        only in date the first one is kept
    """
    wanted = set(doc_titles)
    result = CollectionResult()
    seen: Set[IdentityKey] = set()
    duplicates = 0

    for entry in iter_entries(reader):
        if isinstance(entry, ParseFailure):
            result.failures.append(entry)
            continue
        if entry.doc_title not in wanted:
            continue

        key = identity_key(entry)
        if key in seen:
            duplicates += 1
            logger.debug(f"Skipped duplicate: {entry.kind.value} at {entry.location_or_page.to_json()}")
            continue

        seen.add(key)
        result.doc_titles.add(entry.doc_title)
        result.clippings.append(entry)

    logger.info(f"Collected {len(result.clippings)} clippings "
                f"({duplicates} duplicates, {len(result.failures)} records skipped)")
    return result


def parse_clippings_file(file_path: str, doc_titles: Optional[Iterable[str]] = None,
                         encoding: Optional[str] = None) -> CollectionResult:
    """
    Convenience function to parse a My Clippings.txt file

    Args:
        file_path: Path to the clippings file
        doc_titles: Documents to collect clippings for; when omitted only
            the document titles are collected
        encoding: Specific encoding to use (optional)

    Returns:
        Collection result
    """
    with open_clippings(file_path, encoding) as reader:
        if doc_titles is None:
            return collect_doc_titles(reader)
        return collect_clippings(reader, doc_titles)
