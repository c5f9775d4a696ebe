"""
Centralized error handling for the DataCV document service.

Defines the domain exception taxonomy raised by the services and a
context manager for logging store failures without swallowing them.
The API layer is responsible for translating these exceptions into
HTTP responses.
"""

import logging
from typing import Optional


class DataCVError(Exception):
    """Base class for all domain errors raised by DataCV services."""


class TemplateNotFoundError(DataCVError):
    """Raised when a template is absent, or not active and public where required."""

    def __init__(self, template_id: str, require_accessible: bool = False):
        self.template_id = template_id
        self.require_accessible = require_accessible
        if require_accessible:
            message = f"Template not found or not accessible: {template_id}"
        else:
            message = f"Template not found: {template_id}"
        super().__init__(message)


class DocumentTypeMismatchError(DataCVError):
    """Raised when the requested document type disagrees with the template's type."""

    def __init__(self, template_id: str, template_type: Optional[str], requested_type: str):
        self.template_id = template_id
        self.template_type = template_type
        self.requested_type = requested_type
        super().__init__(
            f"Document type mismatch with template {template_id}: "
            f"template is '{template_type}', requested '{requested_type}'"
        )


class InvalidDocumentTypeError(DataCVError):
    """Raised when a document type is not one the materializer knows."""

    def __init__(self, document_type: object):
        self.document_type = document_type
        super().__init__(f"Invalid document type: {document_type!r}")


class SampleContentNotFoundError(DataCVError):
    """Raised when a sample content record does not exist."""

    def __init__(self, sample_id: str):
        self.sample_id = sample_id
        super().__init__(f"Sample content not found: {sample_id}")


class DocumentNotFoundError(DataCVError):
    """Raised when a document does not exist or is not owned by the caller."""

    def __init__(self, document_type: str, document_id: str):
        self.document_type = document_type
        self.document_id = document_id
        super().__init__(f"{document_type} not found: {document_id}")


def log_on_exception(
    logger: logging.Logger,
    operation: str,
    level: int = logging.WARNING,
    include_traceback: bool = False,
):
    """
    Context manager for logging exceptions without swallowing them silently.

    Usage:
        with log_on_exception(logger, "MongoDB insert", level=logging.ERROR, include_traceback=True):
            collection.insert_one(...)

    Args:
        logger: Logger instance to use
        operation: Operation description for the log message
        level: Log level (default: WARNING)
        include_traceback: Whether to include stack trace in log
    """

    class ExceptionLogger:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None:
                if include_traceback:
                    logger.log(level, f"[{operation}] Failed: {exc_val}", exc_info=True)
                else:
                    logger.log(level, f"[{operation}] Failed: {exc_val}")
            # Return False to not suppress the exception
            return False

    return ExceptionLogger()
