"""
Services package for the Multilingual Document QA service.
"""

from .pdf_processor import PDFProcessor
from .document_store import DocumentStore, InMemoryDocumentStore
from .llm_client import GeminiClient, TextGenerator
from .chat_service import ChatService
from .document_service import DocumentService

__all__ = [
    "PDFProcessor",
    "DocumentStore",
    "InMemoryDocumentStore",
    "GeminiClient",
    "TextGenerator",
    "ChatService",
    "DocumentService"
]
