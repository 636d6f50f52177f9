"""
Exceptions raised by the scanner and its shells.
Each carries an error code and HTTP status so the API can render it directly.
"""
from typing import Any, Dict, Optional


class A11yScanError(Exception):
    """Base exception for all scanner errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(A11yScanError):
    """Raised when the caller passes unusable input (scan target, hex color, rule id)"""

    def __init__(self, message: str, field: Optional[str] = None, **details):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details={"field": field, **details} if field else details,
            status_code=400,
        )


class FetchError(A11yScanError):
    """Raised when a page cannot be retrieved (network error, timeout, non-2xx)"""

    def __init__(self, url: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(
            message=message,
            error_code="FETCH_ERROR",
            details={"url": url, "cause": repr(cause) if cause else None},
            status_code=502,
        )
        self.url = url
        self.cause = cause
