"""
Parses generated answers into visible text and cited sources.
"""

from typing import List, Optional, Sequence, Set, Tuple

from .context_builder import CITATION_PATTERN
from ..models import AskResponse, DocumentRecord, SourceCitation


def _resolve_document_id(filename: str, documents: Sequence[DocumentRecord]) -> Optional[str]:
    # Duplicate filenames bind to the first document in selection order.
    for record in documents:
        if record.filename == filename:
            return record.id
    return None


def extract_sources(text: str, documents: Sequence[DocumentRecord]) -> List[SourceCitation]:
    """Collect cited pages, deduplicated by (filename, page) in first-seen order."""
    sources = []
    seen: Set[Tuple[str, int]] = set()

    for match in CITATION_PATTERN.finditer(text):
        filename = match.group(1).strip()
        page_number = int(match.group(2))

        key = (filename, page_number)
        if key in seen:
            continue
        seen.add(key)
        sources.append(SourceCitation(
            document_id=_resolve_document_id(filename, documents),
            filename=filename,
            page_number=page_number
        ))

    return sources


def strip_citations(text: str) -> str:
    """Remove every citation marker from the text."""
    return CITATION_PATTERN.sub('', text).strip()


def parse_answer(text: str, documents: Sequence[DocumentRecord], confidence: float) -> AskResponse:
    """
    Turn raw model output into an AskResponse.

    ``documents`` are the records the question was scoped to; they are used
    to resolve cited filenames back to document IDs. ``confidence`` is
    attached as-is.
    """
    return AskResponse(
        answer=strip_citations(text),
        sources=extract_sources(text, documents),
        confidence=confidence
    )
