"""
Error handling utilities shared by the client services, the scripts and the stub backend
"""

import json
import uuid
import traceback
import logging
from typing import Optional
from datetime import datetime, timezone

import httpx

logger = logging.getLogger(__name__)

class ErrorContext:
    """Context object describing the outbound call an error happened in"""

    def __init__(self, method: str, url: str, operation: Optional[str] = None):
        self.request_id = str(uuid.uuid4())
        self.method = method
        self.url = url
        self.operation = operation or f"{method} {url}"
        self.timestamp = datetime.now(timezone.utc)

class ServiceError(Exception):
    """Custom exception for failures inside a client service"""
    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", original_error: Optional[Exception] = None):
        self.message = message
        self.error_code = error_code
        self.original_error = original_error
        super().__init__(self.message)

class MigrationError(Exception):
    """Custom exception for database migration failures"""
    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

class ErrorHandler:
    """Centralized error classification and logging"""

    @staticmethod
    def get_error_code(error: Exception) -> str:
        """Classify an exception into a stable error code"""
        if isinstance(error, httpx.HTTPStatusError):
            return f"HTTP_{error.response.status_code}"
        elif isinstance(error, (httpx.TransportError, OSError)):
            return "NETWORK_ERROR"
        elif isinstance(error, (json.JSONDecodeError, UnicodeDecodeError)):
            return "PARSE_ERROR"
        elif isinstance(error, ServiceError):
            return error.error_code
        elif isinstance(error, MigrationError):
            return "MIGRATION_ERROR"
        else:
            return "INTERNAL_ERROR"

    @staticmethod
    def get_error_message(error: Exception, default: str) -> str:
        """Message to surface for an unexpected exception"""
        if isinstance(error, (ServiceError, MigrationError)):
            return error.message
        return str(error) or default

    @staticmethod
    def log_error(context: ErrorContext, error: Exception, level: int = logging.ERROR):
        """Log error with its call context"""
        logger.log(
            level,
            f"Error {context.request_id}: {type(error).__name__} during {context.operation}",
            extra={
                "request_id": context.request_id,
                "method": context.method,
                "url": context.url,
                "error_code": ErrorHandler.get_error_code(error),
                "error_type": type(error).__name__,
                "error_message": str(error),
                "stack_trace": traceback.format_exc()
            }
        )
