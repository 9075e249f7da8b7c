import logging
from io import BytesIO

import pytest
from PyPDF2 import PdfWriter

from doc_qa.errors import ExtractionError
from doc_qa.services.pdf_processor import PDFProcessor


def test_extract_pages_returns_text_per_page(pdf_factory) -> None:
    content = pdf_factory(["Paris is the capital of France", "Berlin is the capital of Germany"])

    extracted = PDFProcessor().extract_pages(content, "geo.pdf")

    assert extracted.total_pages == 2
    assert sorted(extracted.pages) == [1, 2]
    assert "Paris" in extracted.pages[1]
    assert "Berlin" in extracted.pages[2]
    assert isinstance(extracted.info, dict)


def test_blank_pages_are_counted_but_not_stored(blank_pdf_factory) -> None:
    extracted = PDFProcessor().extract_pages(blank_pdf_factory(3), "blank.pdf")

    assert extracted.total_pages == 3
    assert extracted.pages == {}


def test_invalid_pdf_raises_extraction_error() -> None:
    with pytest.raises(ExtractionError) as exc_info:
        PDFProcessor().extract_pages(b"this is not a pdf", "broken.pdf")

    assert exc_info.value.message.startswith("Error processing PDF:")


def test_empty_content_raises_extraction_error() -> None:
    with pytest.raises(ExtractionError):
        PDFProcessor().extract_pages(b"", "empty.pdf")


@pytest.mark.parametrize(
    ("text", "expected"),
    (
        ("A\fB", {1: "A", 2: "B"}),
        ("  first  \f\n\f third ", {1: "first", 3: "third"}),
        ("no page breaks here", {1: "no page breaks here"}),
        ("   ", {}),
    ),
)
def test_split_pages(text: str, expected: dict) -> None:
    assert PDFProcessor.split_pages(text) == expected


def test_form_feed_inside_page_text_keeps_page_numbers(pdf_factory) -> None:
    content = pdf_factory(["Alpha\\fBeta", "Gamma"])

    extracted = PDFProcessor().extract_pages(content, "breaks.pdf")

    assert extracted.total_pages == 2
    assert sorted(extracted.pages) == [1, 2]
    assert "Alpha" in extracted.pages[1]
    assert "Beta" in extracted.pages[1]
    assert extracted.pages[2] == "Gamma"


def test_metadata_is_returned_and_logged(caplog) -> None:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    writer.add_metadata({"/Title": "Quarterly report"})
    buffer = BytesIO()
    writer.write(buffer)
    caplog.set_level(logging.INFO, logger="doc_qa.utils")

    extracted = PDFProcessor().extract_pages(buffer.getvalue(), "report.pdf")

    assert extracted.info["Title"] == "Quarterly report"
    completed = [r.getMessage() for r in caplog.records if r.getMessage().startswith("PDF extraction completed")]
    assert len(completed) == 1
    assert "Quarterly report" in completed[0]
