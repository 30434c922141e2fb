"""
Centralized observability utilities for the lookup handler.

Shared AWS Lambda Powertools instances used by the handler, logic and data
access layers, so every log line, trace segment and metric carries the same
service name.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'MondayProxy'

# Structured JSON logs; level from LOG_LEVEL, service from POWERTOOLS_SERVICE_NAME
logger: Logger = Logger()

# X-Ray tracing, off outside Lambda or when POWERTOOLS_TRACE_DISABLED is "true"
tracer: Tracer = Tracer()

# EMF metrics flushed by the handler's log_metrics decorator
metrics = Metrics(namespace=METRICS_NAMESPACE)
