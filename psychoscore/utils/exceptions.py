"""Exception classes for the PsychoScore engine.

The scoring pipeline itself degrades gracefully on sparse input and does not
raise. These exceptions cover what happens around it: structural rejection of
malformed test definitions or response sets, misconfigured scorer registries
and configuration problems.
"""

from typing import Any, Dict, List, Optional


class PsychoScoreError(Exception):
    """Base exception class for all PsychoScore errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize PsychoScore error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(PsychoScoreError):
    """Raised when a test definition or response set is structurally invalid."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            value: Invalid value
            validation_errors: List of specific validation errors
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details") or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class ScoringError(PsychoScoreError):
    """Raised when the scoring pipeline is wired incorrectly."""

    def __init__(
        self,
        message: str,
        test_kind: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details") or {}
        if test_kind:
            details["test_kind"] = test_kind

        kwargs["details"] = details
        super().__init__(message, **kwargs)

        self.test_kind = test_kind


class ConfigurationError(PsychoScoreError):
    """Exception for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.get("details") or {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        kwargs["details"] = details
        super().__init__(message, **kwargs)

        self.config_key = config_key
        self.config_value = config_value


def handle_exception_chain(exception: Exception) -> List[Dict[str, Any]]:
    """Flatten an exception and its causes into a list of error records.

    Args:
        exception: Exception to process

    Returns:
        List[Dict[str, Any]]: One entry per exception in the chain, outermost first
    """
    errors = []
    current_exception = exception

    while current_exception:
        error_info = {
            "type": current_exception.__class__.__name__,
            "message": str(current_exception),
        }

        if isinstance(current_exception, PsychoScoreError):
            error_info.update({
                "error_code": current_exception.error_code,
                "details": current_exception.details,
            })

        errors.append(error_info)

        if isinstance(current_exception, PsychoScoreError) and current_exception.cause:
            current_exception = current_exception.cause
        else:
            current_exception = getattr(current_exception, "__cause__", None)

    return errors


__all__ = [
    "PsychoScoreError",
    "ValidationError",
    "ScoringError",
    "ConfigurationError",
    "handle_exception_chain",
]
