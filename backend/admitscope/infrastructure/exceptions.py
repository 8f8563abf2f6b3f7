"""
Custom Exceptions for AdmitScope

Hierarchical exception classes for the layers around the scoring engine.
The engine itself never raises: it degrades to documented defaults.
"""

from typing import Optional, Dict, Any, List


class AdmitScopeError(Exception):
    """Base exception for all AdmitScope errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(AdmitScopeError):
    """Raised when input validation fails."""
    pass


class RecordValidationError(ValidationError):
    """Raised when a persisted record does not fit its contract."""

    def __init__(
        self,
        message: str,
        record_type: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        original_error: Optional[Exception] = None
    ):
        details: Dict[str, Any] = {}
        if record_type:
            details["record_type"] = record_type
        if errors:
            details["errors"] = errors
        super().__init__(message, details, original_error)


class NotFoundError(AdmitScopeError):
    """Raised when a required record was not supplied by the caller."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        identifier: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if resource:
            details["resource"] = resource
        if identifier:
            details["identifier"] = identifier
        super().__init__(message, details, original_error)


class ProfileNotFoundError(NotFoundError):
    """Raised when an applicant profile is missing."""

    def __init__(
        self,
        message: str = "Profile not found. Please complete your profile first.",
        identifier: Optional[str] = None,
    ):
        super().__init__(message, resource="profile", identifier=identifier)
