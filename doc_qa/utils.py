"""
Utility functions for the Multilingual Document QA service.
"""

import random
import string
import time
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import logging

from .config import settings

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_document_id() -> str:
    """Generate a document ID from the current time and a random suffix."""
    suffix = ''.join(random.choices(_ID_ALPHABET, k=9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"


def validate_file_type(filename: Optional[str], content_type: Optional[str] = None) -> bool:
    """Validate if the file type is allowed."""
    if content_type == "application/pdf":
        return True
    if not filename or '.' not in filename:
        return False

    file_extension = filename.lower().split('.')[-1]
    return file_extension in settings.allowed_file_types


def validate_file_size(file_size: int) -> bool:
    """Validate if the file size is within limits."""
    max_size_bytes = settings.max_file_size_mb * 1024 * 1024
    return file_size <= max_size_bytes


def size_in_mb(file_size: int) -> float:
    """Convert a byte count to megabytes rounded to two decimals."""
    return round(file_size / (1024 * 1024), 2)


def format_timestamp() -> str:
    """Get current timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def measure_time(func):
    """Decorator to measure function execution time."""
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        execution_time = end_time - start_time

        logger.info(f"{func.__name__} executed in {execution_time:.2f} seconds")
        return result
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def log_processing_info(operation: str, details: Dict[str, Any]) -> None:
    """Log processing information."""
    logger.info(f"{operation}: {details}")


def handle_processing_error(operation: str, error: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
    """Handle and log processing errors."""
    error_info = {
        'operation': operation,
        'error_type': type(error).__name__,
        'error_message': str(error),
        'timestamp': format_timestamp()
    }

    if context:
        error_info.update(context)

    logger.error(f"Processing error: {error_info}")
    return error_info
