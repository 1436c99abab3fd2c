"""
Custom exception classes for the application
"""
from typing import Optional, Dict, Any


class ResumeEngineException(Exception):
    """Base exception for the resume structuring service"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ResumeEngineException):
    """Request validation errors"""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)


class ProcessingError(ResumeEngineException):
    """Resume processing errors"""

    def __init__(self, message: str = "Processing failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=422, details=details)
