"""Exceptions module"""

from .custom_exceptions import (
    RemittanceServiceException,
    ValidationError,
    IncompleteCompanyError,
    FileProcessingError,
    PDFExtractionError,
    NoDarfsFoundError
)

from .handlers import register_error_handlers

__all__ = [
    "RemittanceServiceException",
    "ValidationError",
    "IncompleteCompanyError",
    "FileProcessingError",
    "PDFExtractionError",
    "NoDarfsFoundError",
    "register_error_handlers"
]
