"""
FastAPI application for the Multilingual Document QA service.
"""

from typing import Any, Optional
from fastapi import FastAPI, File, UploadFile, Depends, Body, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .config import Settings, settings, get_settings, validate_required_settings
from .errors import DocumentQAError, ValidationError
from .models import (
    RootResponse, HealthResponse, UploadResponse, DocumentsListResponse,
    MessageResponse, AskRequest, AskResponse, PageResponse,
    TranslateResponse, ErrorResponse
)
from .services import DocumentService
from .utils import format_timestamp, validate_file_type, validate_file_size

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Validate required settings on startup
try:
    validate_required_settings()
except ValueError as e:
    logger.error(f"Configuration validation failed: {e}")
    raise

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Ask questions about uploaded PDFs in any language and get cited answers in English",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
document_service = DocumentService()


def get_document_service() -> DocumentService:
    """Return the process-wide document service."""
    return document_service


def _error_response(status_code: int, error: str, detail: Optional[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail, status_code=status_code).model_dump()
    )


@app.exception_handler(DocumentQAError)
async def document_qa_exception_handler(request, exc: DocumentQAError):
    """Render service errors with their status code and message."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _error_response(exc.status_code, exc.error, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as bad requests."""
    messages = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return _error_response(400, ValidationError.error, messages or "Invalid request")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}")
    return _error_response(
        500,
        "Internal server error",
        str(exc) if settings.debug else "An unexpected error occurred"
    )


@app.get("/", response_model=RootResponse)
async def root(app_settings: Settings = Depends(get_settings)):
    """Root endpoint."""
    return RootResponse(
        message=app_settings.app_name,
        status="running",
        version=app_settings.app_version
    )


@app.get("/health", response_model=HealthResponse)
async def health_check(
    service: DocumentService = Depends(get_document_service),
    app_settings: Settings = Depends(get_settings)
):
    """Health check endpoint; does not call the LLM."""
    health_info = service.health_check()

    return HealthResponse(
        status=health_info.get("status", "unknown"),
        message=f"{health_info['documents']} document(s) loaded",
        version=app_settings.app_version,
        timestamp=format_timestamp()
    )


@app.post("/upload", response_model=UploadResponse)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    service: DocumentService = Depends(get_document_service)
):
    """
    Upload a PDF and extract its page text.

    The PDF is processed in memory and never written to disk.
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    if not validate_file_type(file.filename, file.content_type):
        raise ValidationError(f"Invalid file type: {file.filename}. Only PDF files are allowed.")

    content = await file.read()

    if not validate_file_size(len(content)):
        file_size_mb = len(content) / (1024 * 1024)
        raise ValidationError(
            f"File {file.filename} is too large: {file_size_mb:.1f}MB. "
            f"Maximum size is {settings.max_file_size_mb}MB."
        )

    # PDF parsing is CPU-bound; keep it off the event loop.
    return await run_in_threadpool(service.upload_document, file.filename, content)


@app.get("/documents", response_model=DocumentsListResponse)
async def list_documents(service: DocumentService = Depends(get_document_service)):
    """List all uploaded documents."""
    return DocumentsListResponse(documents=service.list_documents())


@app.delete("/documents/{document_id}", response_model=MessageResponse)
async def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Delete a document and its extracted pages."""
    service.delete_document(document_id)
    return MessageResponse(message="Document deleted successfully")


@app.post("/ask", response_model=AskResponse)
async def ask_question(
    request: Optional[AskRequest] = None,
    service: DocumentService = Depends(get_document_service)
):
    """Answer a question from the selected documents, or all documents if none are selected."""
    request = request or AskRequest()
    return await service.ask(request.question, request.document_ids)


@app.get("/documents/{document_id}/page/{page_number}", response_model=PageResponse)
async def get_page(
    document_id: str,
    page_number: int,
    service: DocumentService = Depends(get_document_service)
):
    """Get the extracted text of a single page."""
    return service.get_page(document_id, page_number)


@app.post("/translate", response_model=TranslateResponse)
async def translate_text(
    text: Any = Body(None),
    target_language: str = Query(default="en"),
    service: DocumentService = Depends(get_document_service)
):
    """Translate a JSON string body to the target language."""
    return await service.translate(text, target_language)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "doc_qa.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
