"""
Builds the source-annotated context sent to the language model.
"""

import re
from typing import Iterable, Union

from .document_store import DocumentStore

CITATION_TEMPLATE = "[Document: {filename}, Page: {page}]"
CITATION_PATTERN = re.compile(
    re.escape(CITATION_TEMPLATE)
    .replace(re.escape("{filename}"), r"([^,]+)")
    .replace(re.escape("{page}"), r"(\d+)")
)


def format_citation(filename: str, page: Union[int, str]) -> str:
    """Render the citation marker for a document page."""
    return CITATION_TEMPLATE.format(filename=filename, page=page)


def build_context(store: DocumentStore, document_ids: Iterable[str]) -> str:
    """
    Concatenate the page texts of the given documents.

    Documents are visited in the given order and their pages in ascending
    page order. Each page becomes a block headed by its citation marker;
    blocks are separated by a blank line. IDs missing from the store are
    skipped.

    Args:
        store: Document store to read from
        document_ids: IDs of the documents to include

    Returns:
        The context string, empty if no page text was found
    """
    blocks = []
    for document_id in document_ids:
        if not store.contains(document_id):
            continue
        record = store.get(document_id)
        pages = store.get_pages(document_id)
        for page_number in sorted(pages):
            blocks.append(
                f"{format_citation(record.filename, page_number)}\n{pages[page_number]}\n"
            )
    return "\n\n".join(blocks)
