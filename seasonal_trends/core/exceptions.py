"""
Custom exceptions for the application

This module defines the application error hierarchy used by the seasonal
trends services and converted to HTTP responses by the API layer.
"""
from typing import Any, Dict, Optional
from datetime import datetime

from fastapi import HTTPException


class ApplicationError(Exception):
    """Base class for all application errors

    Carries structured context, the original cause and a timestamp so that
    errors can be logged and serialized consistently.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the application error

        Args:
            message: Human-readable error message
            context: Additional context about the error (e.g. parameters, state)
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and serialization

        Returns:
            Dict containing error details
        """
        result = {
            "error_type": self.__class__.__name__,
            "message": str(self),
            "timestamp": self.timestamp,
            **self.context
        }

        if self.cause:
            result["cause"] = {
                "type": self.cause.__class__.__name__,
                "message": str(self.cause)
            }

        return result

    def to_http_exception(self, status_code: int = 500) -> HTTPException:
        """Convert to HTTPException for API responses

        Args:
            status_code: HTTP status code to use

        Returns:
            HTTPException: Exception to return from API endpoints
        """
        return HTTPException(
            status_code=status_code,
            detail={
                "error_type": self.__class__.__name__,
                "message": str(self),
                "context": {
                    k: v for k, v in self.context.items()
                    if not k.startswith("_")  # Don't expose internal details
                }
            }
        )


class DataError(ApplicationError):
    """Error in data operations"""
    pass


class ValidationError(ApplicationError):
    """Error in data validation"""
    pass


class CacheError(ApplicationError):
    """Error in cache operations"""
    pass


class ConfigurationError(ApplicationError):
    """Error in service configuration"""
    pass
