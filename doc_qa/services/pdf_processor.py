"""
PDF processing service for extracting page text from PDF files.
"""

import PyPDF2
from io import BytesIO
from typing import Dict

from ..errors import ExtractionError
from ..models import ExtractedPDF
from ..utils import (
    measure_time,
    log_processing_info,
    handle_processing_error
)
import logging

logger = logging.getLogger(__name__)

PAGE_BREAK = "\f"


class PDFProcessor:
    """Service for processing PDF files and extracting text."""

    @measure_time
    def extract_pages(self, file_content: bytes, filename: str = "") -> ExtractedPDF:
        """
        Extract text from PDF file content, keyed by page number.

        Page texts are joined with form-feed characters and split again, so
        a page whose text is blank is dropped from the mapping while still
        counting towards ``total_pages``.

        Args:
            file_content: PDF file content as bytes
            filename: Name of the PDF file

        Returns:
            ExtractedPDF with page count, metadata and page texts

        Raises:
            ExtractionError: If the content cannot be parsed as a PDF
        """
        if not file_content:
            raise ExtractionError("Error processing PDF: file is empty")

        try:
            pdf_reader = PyPDF2.PdfReader(BytesIO(file_content))
            total_pages = len(pdf_reader.pages)

            log_processing_info("PDF extraction started", {
                "filename": filename,
                "total_pages": total_pages,
                "file_size": len(file_content)
            })

            # A page break inside one page would shift every later page number.
            full_text = PAGE_BREAK.join(
                (page.extract_text() or "").replace(PAGE_BREAK, "\n")
                for page in pdf_reader.pages
            )
            info = self._read_metadata(pdf_reader)

        except Exception as e:
            handle_processing_error(
                "pdf_extraction",
                e,
                {"filename": filename, "file_size": len(file_content)}
            )
            raise ExtractionError(f"Error processing PDF: {e}") from e

        pages = self.split_pages(full_text)

        log_processing_info("PDF extraction completed", {
            "filename": filename,
            "pages_with_text": len(pages),
            "total_pages": total_pages,
            "info": info
        })

        return ExtractedPDF(total_pages=total_pages, info=info, pages=pages)

    @staticmethod
    def split_pages(text: str) -> Dict[int, str]:
        """Split full-document text on page breaks, dropping blank pages."""
        pages = {}
        for index, page_text in enumerate(text.split(PAGE_BREAK)):
            stripped = page_text.strip()
            if stripped:
                pages[index + 1] = stripped
        return pages

    @staticmethod
    def _read_metadata(pdf_reader: PyPDF2.PdfReader) -> Dict[str, str]:
        metadata = pdf_reader.metadata
        if not metadata:
            return {}
        return {
            key.lstrip('/'): str(value)
            for key, value in metadata.items()
            if value is not None
        }
