"""
Error types raised by the document QA services.

Each error carries the HTTP status code it is rendered with by the API layer.
"""


class DocumentQAError(Exception):
    """Base class for all service errors."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DocumentQAError):
    """Bad or missing input, oversized document or empty context."""

    status_code = 400
    error = "Validation error"


class NotFoundError(DocumentQAError):
    """Unknown document or page."""

    status_code = 404
    error = "Not found"


class ExtractionError(DocumentQAError):
    """The uploaded buffer could not be parsed as a PDF."""

    status_code = 500
    error = "Extraction error"


class ExternalServiceError(DocumentQAError):
    """The generative-language service call failed."""

    status_code = 500
    error = "External service error"
