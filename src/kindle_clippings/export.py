"""
Clippings Export - group collected clippings per document and serialize
them as JSON or org-mode text.
"""

import json
import logging
from typing import Dict, Iterable, List, Tuple

from .config import CONFIG
from .formatting import to_org_text
from .models import Clipping

logger = logging.getLogger(__name__)

DocumentGroup = Tuple[str, List[Clipping]]


def group_clippings(clippings: Iterable[Clipping], doc_titles: Iterable[str] = ()) -> List[DocumentGroup]:
    """
    Group exportable clippings by document

    Args:
        clippings: Collected clippings
        doc_titles: Requested titles; groups follow this order, other
            titles come after them sorted alphabetically

    Returns:
        List of (document title, clippings) ordered by location
    """
    exported = [c for c in clippings if c.kind.value in CONFIG.exported_kinds]

    # Both sorts are stable, equal locations keep date order
    exported.sort(key=lambda c: c.date)
    exported.sort(key=lambda c: c.location_or_page)

    groups: Dict[str, List[Clipping]] = {}
    for clipping in exported:
        groups.setdefault(clipping.doc_title, []).append(clipping)

    order = list(dict.fromkeys(doc_titles))
    order += sorted(title for title in groups if title not in order)

    return [(title, groups[title]) for title in order if title in groups]


def to_json(groups: List[DocumentGroup]) -> str:
    """Serialize groups as a JSON array of {documentTitle, clippings}"""
    data = [
        {
            "documentTitle": title,
            "clippings": [clipping.to_dict() for clipping in clippings],
        }
        for title, clippings in groups
    ]
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_org(groups: List[DocumentGroup]) -> str:
    """Serialize groups as org-mode quote blocks, one header per document"""
    documents = []
    for title, clippings in groups:
        blocks = "\n".join(to_org_text(clipping) for clipping in clippings)
        documents.append(f"DOCUMENT: {title}\n{blocks}\n")
    return "\n".join(documents)


def format_doc_titles(doc_titles: Iterable[str]) -> str:
    """Sorted, newline-separated list of distinct titles"""
    return "\n".join(sorted(set(doc_titles)))


EXPORTERS = {
    "json": to_json,
    "org": to_org,
}


def export_clippings(clippings: Iterable[Clipping], doc_titles: Iterable[str], output_format: str) -> str:
    """Group and serialize clippings in the given format ("json" or "org")"""
    try:
        exporter = EXPORTERS[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format!r}")

    groups = group_clippings(clippings, doc_titles)
    logger.info(f"Exporting {sum(len(c) for _, c in groups)} clippings "
                f"from {len(groups)} documents as {output_format}")
    return exporter(groups)
