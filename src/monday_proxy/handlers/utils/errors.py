"""
Error handling utilities for the lookup handler.

This module defines the service error hierarchy and the helpers that turn
errors into API Gateway responses. Every failure is logged and counted
before a response is built.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import BaseModel, Field

from monday_proxy.handlers.utils.observability import logger, metrics, tracer
from monday_proxy.models.output import ErrorOutput

class ErrorSeverity(str, Enum):
    """Error severity levels for classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class ErrorContext(BaseModel):
    """Context information for errors."""

    request_id: str = Field(description="Unique request identifier")
    operation: str = Field(description="Operation being performed")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
        context: Optional[ErrorContext] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.context = context
        self.user_message = user_message or f"Server error: {message}"
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context.model_dump(mode="json") if self.context else None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ValidationError(BaseServiceError):
    """Raised when the caller supplied a malformed request."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            severity=ErrorSeverity.LOW,
            category=ErrorCategory.VALIDATION,
            context=context,
            user_message=message,
        )


class ConfigurationError(BaseServiceError):
    """Raised when the deployment is missing required configuration."""

    def __init__(
        self,
        message: str = "Monday.com API key not configured",
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            context=context,
            user_message=message,
        )


class UpstreamError(BaseServiceError):
    """Raised when a call to the upstream API fails or returns garbage."""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(
            message=message,
            error_code="UPSTREAM_ERROR",
            severity=ErrorSeverity.HIGH,
            category=ErrorCategory.EXTERNAL_SERVICE,
            context=context,
        )
        self.original_error = original_error


def create_error_context(request_id: str, operation: str) -> ErrorContext:
    """Create an error context for consistent error handling."""
    return ErrorContext(request_id=request_id, operation=operation)


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value.title().replace('_', '')}Count", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.severity.value.title()}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_annotation("error_category", error.category.value)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_severity": error.severity.value,
            "error_category": error.category.value,
            "error_message": error.message,
            "user_message": error.user_message,
            "context": error.context.model_dump(mode="json") if error.context else None,
        }
    )


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format error for API response."""
    return ErrorOutput(error=error.user_message).model_dump()


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "VALIDATION_ERROR": 400,
        "CONFIGURATION_ERROR": 500,
        "UPSTREAM_ERROR": 500,
    }

    return status_mapping.get(error.error_code, 500)


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
    allow_origin: str = "*",
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Create standardized API Gateway response."""

    default_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": allow_origin,
        "X-Request-ID": request_id or str(uuid.uuid4()),
    }

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else str(body),
    }
