"""
Main document service that orchestrates PDF processing, storage, and chat functionality.
"""

from typing import Any, List, Optional

from .pdf_processor import PDFProcessor
from .document_store import DocumentStore, InMemoryDocumentStore
from .context_builder import build_context
from .chat_service import ChatService
from .llm_client import TextGenerator
from ..config import settings
from ..errors import NotFoundError, ValidationError
from ..models import (
    AskResponse,
    DocumentRecord,
    PageResponse,
    TranslateResponse,
    UploadResponse
)
from ..utils import (
    format_timestamp,
    generate_document_id,
    log_processing_info,
    size_in_mb
)
import logging

logger = logging.getLogger(__name__)


class DocumentService:
    """Main service for document processing and question answering."""

    def __init__(
        self,
        store: Optional[DocumentStore] = None,
        llm: Optional[TextGenerator] = None,
        pdf_processor: Optional[PDFProcessor] = None
    ):
        """Initialize the document service."""
        self.store = store if store is not None else InMemoryDocumentStore()
        self.pdf_processor = pdf_processor or PDFProcessor()
        self.chat_service = ChatService(llm)

    def upload_document(self, filename: str, content: bytes) -> UploadResponse:
        """
        Extract a PDF and store its pages.

        Nothing is stored unless extraction succeeds and the page count is
        within ``settings.max_pages``.

        Args:
            filename: Original filename
            content: PDF file content as bytes

        Returns:
            UploadResponse describing the stored document

        Raises:
            ExtractionError: If the PDF cannot be parsed
            ValidationError: If the PDF has too many pages
        """
        extracted = self.pdf_processor.extract_pages(content, filename)

        if extracted.total_pages > settings.max_pages:
            raise ValidationError(f"Document must have less than {settings.max_pages} pages")

        record = DocumentRecord(
            id=generate_document_id(),
            filename=filename,
            upload_time=format_timestamp(),
            pages=extracted.total_pages,
            size_mb=size_in_mb(len(content))
        )
        self.store.put(record, extracted.pages)

        log_processing_info("Document stored", {
            "document_id": record.id,
            "filename": filename,
            "pages": record.pages,
            "pages_with_text": len(extracted.pages),
            "size_mb": record.size_mb
        })

        return UploadResponse(
            document_id=record.id,
            filename=filename,
            pages=record.pages,
            message="Document uploaded successfully"
        )

    def list_documents(self) -> List[DocumentRecord]:
        """Return all stored document records."""
        return self.store.list()

    def delete_document(self, document_id: str) -> None:
        """Delete a document and its pages; NotFoundError if unknown."""
        self.store.delete(document_id)
        log_processing_info("Document deleted", {"document_id": document_id})

    def get_page(self, document_id: str, page_number: int) -> PageResponse:
        """Return the stored text of one page."""
        record = self.store.get(document_id)
        pages = self.store.get_pages(document_id)

        text = pages.get(page_number)
        if text is None:
            raise NotFoundError("Page not found")

        return PageResponse(
            document_id=document_id,
            filename=record.filename,
            page_number=page_number,
            text=text
        )

    async def ask(self, question: Optional[str], document_ids: Optional[List[str]] = None) -> AskResponse:
        """
        Answer a question from the selected documents.

        Args:
            question: User's question
            document_ids: Documents to search; all stored documents when omitted or empty

        Returns:
            AskResponse with answer, sources and confidence

        Raises:
            ValidationError: If the question is missing, no documents are
                available or the selected documents have no text
            NotFoundError: If a selected document does not exist
            ExternalServiceError: If the LLM call fails
        """
        if not question or not question.strip():
            raise ValidationError("Question is required")

        selected_ids = list(document_ids) if document_ids else [record.id for record in self.store.list()]

        if not selected_ids:
            raise ValidationError("No documents available")

        for document_id in selected_ids:
            if not self.store.contains(document_id):
                raise NotFoundError(f"Document {document_id} not found")

        context = build_context(self.store, selected_ids)
        if not context:
            raise ValidationError("No content found in selected documents")

        log_processing_info("Chat query started", {
            "documents": len(selected_ids),
            "question_length": len(question),
            "context_length": len(context)
        })

        documents = [self.store.get(document_id) for document_id in selected_ids]
        return await self.chat_service.answer_question(question, context, documents)

    async def translate(self, text: Any, target_language: str = "en") -> TranslateResponse:
        """Translate arbitrary text; ValidationError unless it is a non-empty string."""
        if not text or not isinstance(text, str):
            raise ValidationError("Text is required")

        translated = await self.chat_service.translate(text, target_language)

        return TranslateResponse(
            original=text,
            translated=translated,
            target_language=target_language
        )

    def health_check(self) -> dict:
        """Report service status without calling the LLM."""
        return {
            "status": "healthy",
            "documents": len(self.store),
            "chat_model": settings.google_chat_model
        }
