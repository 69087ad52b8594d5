"""
Error module - application exception classes and their HTTP statuses
"""
from enum import Enum
from typing import Optional, Any, Dict
from fastapi import status


class ErrorCode(str, Enum):
    """Error codes"""
    # Client errors
    INVALID_INPUT = "INVALID_INPUT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    DOCUMENT_PARSE_FAILED = "DOCUMENT_PARSE_FAILED"
    COMPARISON_SUPERSEDED = "COMPARISON_SUPERSEDED"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TAXONOMY_MISCONFIGURED = "TAXONOMY_MISCONFIGURED"


class BaseApplicationError(Exception):
    """Base class for application errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


# Client errors (4xx)
class InvalidInputError(BaseApplicationError):
    """Input validation error"""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_INPUT,
            details=details,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )


class ResourceNotFoundError(BaseApplicationError):
    """Requested resource does not exist"""
    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        message = f"{resource_type} not found"
        details = {"resource_type": resource_type}
        if resource_id:
            details["resource_id"] = resource_id
            message = f"{resource_type} with id '{resource_id}' not found"

        super().__init__(
            message=message,
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
            details=details,
            status_code=status.HTTP_404_NOT_FOUND
        )


class UnsupportedFormatError(BaseApplicationError):
    """No reader handles the file type"""
    def __init__(self, filename: str):
        super().__init__(
            message=f"Unsupported document format: {filename}",
            error_code=ErrorCode.UNSUPPORTED_FORMAT,
            details={"filename": filename},
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
        )


class DocumentParseError(BaseApplicationError):
    """A reader could not extract any text"""
    def __init__(self, filename: str, reason: Optional[str] = None):
        details = {"filename": filename}
        message = f"Could not read document '{filename}'"
        if reason:
            details["reason"] = reason
            message = f"{message}: {reason}"

        super().__init__(
            message=message,
            error_code=ErrorCode.DOCUMENT_PARSE_FAILED,
            details=details,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )


class ComparisonSupersededError(BaseApplicationError):
    """A newer comparison or a dismiss arrived before this run finished"""
    def __init__(self, run_id: str):
        super().__init__(
            message=f"Comparison run '{run_id}' was superseded before it completed",
            error_code=ErrorCode.COMPARISON_SUPERSEDED,
            details={"run_id": run_id},
            status_code=status.HTTP_409_CONFLICT
        )


# Server errors (5xx)
class TaxonomyConfigurationError(BaseApplicationError):
    """The static topic taxonomy is malformed"""
    def __init__(self, message: str, topic: Optional[str] = None):
        details = {}
        if topic is not None:
            details["topic"] = topic

        super().__init__(
            message=f"Invalid taxonomy: {message}",
            error_code=ErrorCode.TAXONOMY_MISCONFIGURED,
            details=details,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
