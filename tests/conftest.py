"""Shared fixtures: in-memory PDFs, a fake LLM and a wired-up test client."""
from __future__ import annotations

import os
from io import BytesIO
from typing import List, Optional, Sequence

import pytest

os.environ.setdefault("GOOGLE_API_KEY", "test-api-key")

from fastapi.testclient import TestClient  # noqa: E402
from PyPDF2 import PdfWriter  # noqa: E402

from doc_qa.errors import ExternalServiceError  # noqa: E402
from doc_qa.main import app, get_document_service  # noqa: E402
from doc_qa.services import DocumentService, InMemoryDocumentStore, TextGenerator  # noqa: E402


def make_pdf(page_texts: Sequence[str]) -> bytes:
    """Build a PDF with one line of Helvetica text per page."""
    page_ids = [4 + 2 * index for index in range(len(page_texts))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(page_texts)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, page_texts):
        objects.append(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents {page_id + 1} 0 R "
            f"/Resources << /Font << /F1 3 0 R >> >> >>".encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


def make_blank_pdf(page_count: int) -> bytes:
    """Build a PDF of blank pages."""
    writer = PdfWriter()
    for _ in range(page_count):
        writer.add_blank_page(width=72, height=72)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class FakeLLM(TextGenerator):
    """Deterministic TextGenerator recording every prompt it receives."""

    def __init__(self, response: str = "", error: Optional[str] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        self.calls.append({"prompt": prompt, "model": model})
        if self.error is not None:
            raise ExternalServiceError(self.error)
        return self.response


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def blank_pdf_factory():
    return make_blank_pdf


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def service(store: InMemoryDocumentStore, fake_llm: FakeLLM) -> DocumentService:
    return DocumentService(store=store, llm=fake_llm)


@pytest.fixture
def client(service: DocumentService):
    app.dependency_overrides[get_document_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
