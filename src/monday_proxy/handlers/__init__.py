"""
AWS Lambda Handlers Module.

This module contains the Lambda function handler that serves as the entry
point for item lookups. The handler uses AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection

Entry point: ``monday_proxy.handlers.lookup_handler.lambda_handler``
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from monday_proxy.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
