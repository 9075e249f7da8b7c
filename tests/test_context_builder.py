from doc_qa.models import DocumentRecord
from doc_qa.services.context_builder import build_context, format_citation
from doc_qa.services.document_store import InMemoryDocumentStore


def _put(store: InMemoryDocumentStore, document_id: str, filename: str, pages: dict) -> None:
    store.put(
        DocumentRecord(
            id=document_id,
            filename=filename,
            upload_time="2024-01-01T00:00:00+00:00",
            pages=len(pages),
            size_mb=0.0,
        ),
        pages,
    )


def test_single_document_blocks_are_in_page_order(store: InMemoryDocumentStore) -> None:
    _put(store, "doc_1", "a.pdf", {2: "B", 1: "A"})

    context = build_context(store, ["doc_1"])

    assert context == "[Document: a.pdf, Page: 1]\nA\n\n\n[Document: a.pdf, Page: 2]\nB\n"
    assert context.count("[Document: ") == 2


def test_documents_follow_requested_order(store: InMemoryDocumentStore) -> None:
    _put(store, "doc_1", "first.pdf", {1: "one"})
    _put(store, "doc_2", "second.pdf", {1: "two"})

    context = build_context(store, ["doc_2", "doc_1"])

    assert context.index("second.pdf") < context.index("first.pdf")


def test_unknown_and_empty_documents_contribute_nothing(store: InMemoryDocumentStore) -> None:
    _put(store, "doc_1", "blank.pdf", {})

    assert build_context(store, ["doc_1", "missing"]) == ""


def test_format_citation() -> None:
    assert format_citation("geo.pdf", 3) == "[Document: geo.pdf, Page: 3]"
