"""
Clipping Models - decoded My Clippings.txt entries
A clipping keeps its capture date as data, but the date is not part of
its identity: Kindle re-emits a clipping with a fresh date whenever the
device syncs it again.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class ClippingKind(Enum):
    """Annotation kinds named in the "- Your <Kind> ..." header"""

    BOOKMARK = "bookmark"
    HIGHLIGHT = "highlight"
    NOTE = "note"

    @classmethod
    def from_label(cls, label: str) -> "ClippingKind":
        """Decode the header word, e.g. "Highlight" (case-sensitive)"""
        if label == "Bookmark":
            return cls.BOOKMARK
        if label == "Highlight":
            return cls.HIGHLIGHT
        if label == "Note":
            return cls.NOTE
        raise ValueError(f"Unknown clipping kind: {label!r}")


class LocationOrPage(ABC):
    """
    Position of a clipping in its document: a single location/page or a range.

    Ordering:
        - Singular vs Singular compares the numbers.
        - Singular(a) vs Ranged(s, e) is Less when a <= s, else Greater.
          Only the start of the range is looked at.
        - Ranged vs Ranged compares starts, then ends.
    """

    @staticmethod
    def from_bounds(start: int, end: Optional[int] = None) -> "LocationOrPage":
        """Build a location, collapsing an "N-N" range into Singular(N)"""
        if end is None or end == start:
            return Singular(start)
        return Ranged(start, end)

    def compare(self, other: "LocationOrPage") -> int:
        """Three-way comparison: -1, 0 or 1"""
        if isinstance(self, Singular):
            if isinstance(other, Singular):
                return (self.value > other.value) - (self.value < other.value)
            return -1 if self.value <= other.start else 1

        if isinstance(other, Singular):
            return -other.compare(self)

        self_key = (self.start, self.end)
        other_key = (other.start, other.end)
        return (self_key > other_key) - (self_key < other_key)

    def __lt__(self, other):
        if not isinstance(other, LocationOrPage):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, LocationOrPage):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, LocationOrPage):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, LocationOrPage):
            return NotImplemented
        return self.compare(other) >= 0

    @abstractmethod
    def to_json(self) -> Union[int, List[int]]:
        """Integer for a single location, [start, end] for a range"""


@dataclass(frozen=True, eq=True, order=False)
class Singular(LocationOrPage):
    value: int

    def to_json(self) -> int:
        return self.value


@dataclass(frozen=True, eq=True, order=False)
class Ranged(LocationOrPage):
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after its end {self.end}")

    def to_json(self) -> List[int]:
        return [self.start, self.end]


@dataclass(frozen=True)
class Clipping:
    """One decoded clipping (highlight, note or bookmark)"""

    doc_title: str
    kind: ClippingKind
    location_or_page: LocationOrPage
    date: datetime
    content: str

    def to_dict(self) -> Dict[str, Any]:
        """JSON payload; title and date are left out"""
        return {
            "kind": self.kind.value,
            "locationOrPage": self.location_or_page.to_json(),
            "content": self.content,
        }


IdentityKey = Tuple[str, ClippingKind, LocationOrPage, str]


def identity_key(clipping: Clipping) -> IdentityKey:
    """Fields deciding whether two clippings are the same annotation (date excluded)"""
    return (
        clipping.doc_title,
        clipping.kind,
        clipping.location_or_page,
        clipping.content,
    )
