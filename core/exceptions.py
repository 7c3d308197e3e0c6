"""
Custom exceptions for the statement conversion pipeline.
"""
from typing import Any, Dict, Optional


class ConverterException(Exception):
    """Base exception for all conversion errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.
        
        Args:
            message: Error message, shown to the user as-is
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FileReadError(ConverterException):
    """Raised when an input file cannot be read or decoded."""
    pass


class InvalidFormatError(ConverterException):
    """Raised when a file is not a Lydia statement export."""
    pass


class MalformedRowError(ConverterException):
    """Raised in strict mode when a data row has an unexpected field count."""
    pass


class ConfigurationError(ConverterException):
    """Raised when configuration is invalid."""
    pass
