"""
Pydantic models for request/response validation.
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, Field


class DocumentRecord(BaseModel):
    """Metadata stored for an uploaded document."""
    id: str = Field(..., description="Document ID")
    filename: str = Field(..., description="Original filename")
    upload_time: str = Field(..., description="Upload timestamp in ISO format")
    pages: int = Field(..., ge=0, description="Number of pages in the PDF")
    size_mb: float = Field(..., ge=0.0, description="File size in megabytes")


class ExtractedPDF(BaseModel):
    """Result of extracting text from a PDF."""
    total_pages: int = Field(..., ge=0, description="Number of pages reported by the PDF")
    info: Dict[str, str] = Field(default_factory=dict, description="Document metadata such as title or author")
    pages: Dict[int, str] = Field(default_factory=dict, description="Page number to extracted text")


class RootResponse(BaseModel):
    """Response model for the root endpoint."""
    message: str = Field(..., description="Service name")
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = Field(..., description="Health status")
    message: str = Field(..., description="Status message")
    version: str = Field(..., description="Application version")
    timestamp: str = Field(..., description="Current timestamp")


class UploadResponse(BaseModel):
    """Response model for PDF upload."""
    document_id: str = Field(..., description="ID of the stored document")
    filename: str = Field(..., description="Original filename")
    pages: int = Field(..., description="Number of pages in the PDF")
    message: str = Field(..., description="Success message")


class DocumentsListResponse(BaseModel):
    """Response model for listing documents."""
    documents: List[DocumentRecord] = Field(default_factory=list, description="Stored documents")


class MessageResponse(BaseModel):
    """Response model carrying a single message."""
    message: str = Field(..., description="Result message")


class AskRequest(BaseModel):
    """Request model for questions about the stored documents."""
    question: Optional[str] = Field(default=None, description="User's question")
    document_ids: Optional[List[str]] = Field(
        default=None,
        description="Documents to search; all stored documents when omitted or empty"
    )


class SourceCitation(BaseModel):
    """A page cited by a generated answer."""
    document_id: Optional[str] = Field(default=None, description="Resolved document ID, if any")
    filename: str = Field(..., description="Cited filename")
    page_number: int = Field(..., description="Cited page number")


class AskResponse(BaseModel):
    """Response model for questions."""
    answer: str = Field(..., description="Generated answer without citation markers")
    sources: List[SourceCitation] = Field(default_factory=list, description="Cited pages")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence score")


class PageResponse(BaseModel):
    """Response model for page retrieval."""
    document_id: str = Field(..., description="Document ID")
    filename: str = Field(..., description="Document filename")
    page_number: int = Field(..., description="Page number")
    text: str = Field(..., description="Extracted page text")


class TranslateResponse(BaseModel):
    """Response model for translation."""
    original: str = Field(..., description="Text that was translated")
    translated: str = Field(..., description="Translated text")
    target_language: str = Field(..., description="Target language code")


class ErrorResponse(BaseModel):
    """Response model for errors."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(default=None, description="Detailed error information")
    status_code: int = Field(..., description="HTTP status code")
