"""
Lookup Handler - Lambda function proxying item lookups to Monday.com.

This module implements the handler layer for item lookups: it validates the
``itemIds`` query parameter, resolves configuration, delegates to the logic
layer and turns the outcome or any failure into an API Gateway response.
"""

import json
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from monday_proxy.dal.monday_handler import MondayHandler
from monday_proxy.handlers.models.env_vars import LookupHandlerEnvVars, get_lookup_env_vars
from monday_proxy.handlers.utils.errors import (
    BaseServiceError,
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ValidationError,
    create_api_response,
    create_error_context,
    format_error_response,
    get_http_status_code,
    log_error_metrics,
)
from monday_proxy.handlers.utils.observability import logger, metrics, tracer
from monday_proxy.logic.item_lookup import ItemLookupService
from monday_proxy.models.input import ITEM_IDS_PARAMETER, LookupRequest
from monday_proxy.models.output import LookupItemsOutput

DEFAULT_ALLOW_ORIGIN = '*'


def build_items_handler(env_vars: LookupHandlerEnvVars) -> MondayHandler:
    """Create the Monday.com data access handler from configuration."""
    return MondayHandler(
        api_key=env_vars.MONDAY_API_KEY,
        api_url=env_vars.MONDAY_API_URL,
        timeout_seconds=env_vars.MONDAY_REQUEST_TIMEOUT_SECONDS,
        numbers_column=env_vars.MONDAY_NUMBERS_COLUMN,
        estimation_column=env_vars.MONDAY_ESTIMATION_COLUMN,
    )


def load_env_vars(context: ErrorContext) -> LookupHandlerEnvVars:
    """
    Resolve configuration and make sure the API key is present.

    Raises:
        ConfigurationError: If the environment is invalid or has no API key
    """
    try:
        env_vars = get_lookup_env_vars()
    except PydanticValidationError as e:
        logger.error("Invalid environment configuration", extra={
            "validation_errors": str(e),
            "error_count": e.error_count(),
        })
        raise ConfigurationError(message="Invalid Monday.com proxy configuration", context=context)

    if not env_vars.api_key_configured:
        raise ConfigurationError(context=context)

    return env_vars


def parse_lookup_request(raw_item_ids: str, context: ErrorContext) -> LookupRequest:
    """
    Parse the ``itemIds`` query parameter.

    Raises:
        ValidationError: If the value is not a URL-encoded JSON array
    """
    try:
        return LookupRequest.from_query_parameter(raw_item_ids)
    except ValueError:  # includes pydantic.ValidationError
        raise ValidationError(message="Invalid itemIds format", context=context)


@tracer.capture_method
def process_lookup_request(event: APIGatewayProxyEvent, context: ErrorContext) -> LookupItemsOutput:
    """
    Validate the request and look the items up.

    Args:
        event: API Gateway proxy event
        context: Error context for tracing

    Returns:
        Merged items from both boards
    """
    query_params = event.query_string_parameters or {}
    raw_item_ids = query_params.get(ITEM_IDS_PARAMETER)
    if not raw_item_ids:
        raise ValidationError(message="Missing itemIds parameter", context=context)

    env_vars = load_env_vars(context)
    lookup_request = parse_lookup_request(raw_item_ids, context)

    tracer.put_annotation("requested_id_count", len(lookup_request.item_ids))

    with build_items_handler(env_vars) as items_handler:
        lookup_service = ItemLookupService(
            items_handler=items_handler,
            board_id=env_vars.MONDAY_BOARD_ID,
            item_id_column=env_vars.MONDAY_ITEM_ID_COLUMN,
            max_workers=env_vars.MONDAY_MAX_WORKERS,
        )
        result = lookup_service.lookup_items(lookup_request.item_ids, context=context)

    metrics.add_metric(name="ItemsReturned", unit=MetricUnit.Count, value=len(result.items))

    return LookupItemsOutput.from_items(result.items)


def _allow_origin() -> str:
    try:
        return get_lookup_env_vars().CORS_ALLOW_ORIGIN
    except PydanticValidationError:
        return DEFAULT_ALLOW_ORIGIN


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Item lookup Lambda function handler.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    request_id = context.aws_request_id
    tracer.put_annotation("correlation_id", request_id)

    error_context = create_error_context(request_id=request_id, operation="lookup_items")
    allow_origin = _allow_origin()

    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        logger.info("Lambda invocation started", extra={
            "request_id": request_id,
            "function_name": context.function_name,
        })

        response = process_lookup_request(APIGatewayProxyEvent(event), error_context)

        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
        logger.info("Lambda invocation completed successfully", extra={
            "item_count": len(response.data.items),
        })

        return create_api_response(
            status_code=200,
            body=response.model_dump_json(),
            allow_origin=allow_origin,
            request_id=request_id,
        )

    except BaseServiceError as e:
        log_error_metrics(e)

        return create_api_response(
            status_code=get_http_status_code(e),
            body=json.dumps(format_error_response(e)),
            allow_origin=allow_origin,
            request_id=request_id,
        )

    except Exception as e:
        logger.exception("Unexpected error in lookup handler", extra={
            "error": str(e),
            "request_id": request_id,
        })

        unexpected_error = BaseServiceError(
            message=str(e),
            error_code="INTERNAL_SERVER_ERROR",
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.INFRASTRUCTURE,
            context=error_context,
        )
        log_error_metrics(unexpected_error)

        return create_api_response(
            status_code=500,
            body=json.dumps(format_error_response(unexpected_error)),
            allow_origin=allow_origin,
            request_id=request_id,
        )
