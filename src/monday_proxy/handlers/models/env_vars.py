"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables used by the
lookup handler. The model is resolved once at request entry and passed down to
the logic and data access layers.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class LookupHandlerEnvVars(BaseModel):
    """Environment variables for the item lookup handler."""

    # Raw Monday.com API token, checked per request rather than at parse time
    MONDAY_API_KEY: Annotated[Optional[str], Field(
        default=None,
        description='Monday.com API token sent as the raw Authorization header'
    )] = None

    MONDAY_API_URL: Annotated[str, Field(
        default='https://api.monday.com/v2',
        description='Monday.com GraphQL endpoint',
        min_length=1
    )] = 'https://api.monday.com/v2'

    # Board holding the TBUS- prefixed items
    MONDAY_BOARD_ID: Annotated[str, Field(
        default='5088989923',
        description='Board searched for prefixed identifiers',
        pattern=r'^[0-9]+$'
    )] = '5088989923'

    MONDAY_ITEM_ID_COLUMN: Annotated[str, Field(
        default='item_id',
        description='Indexed column holding the prefixed identifier',
        min_length=1
    )] = 'item_id'

    MONDAY_NUMBERS_COLUMN: Annotated[str, Field(
        default='numbers',
        description='Column selected for numeric identifiers',
        min_length=1
    )] = 'numbers'

    MONDAY_ESTIMATION_COLUMN: Annotated[str, Field(
        default='task_estimation',
        description='Column selected for prefixed identifiers',
        min_length=1
    )] = 'task_estimation'

    MONDAY_REQUEST_TIMEOUT_SECONDS: Annotated[float, Field(
        default=5.0,
        description='Timeout in seconds for each upstream call',
        gt=0,
        le=900
    )] = 5.0

    MONDAY_MAX_WORKERS: Annotated[int, Field(
        default=1,
        description='Maximum concurrent lookups for prefixed identifiers; 1 keeps them sequential',
        ge=1,
        le=16
    )] = 1

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='monday-proxy',
        description='Service name for AWS Powertools'
    )] = 'monday-proxy'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origin for API responses'
    )] = '*'

    @property
    def api_key_configured(self) -> bool:
        """Check if a non-empty Monday.com API key is present."""
        return bool(self.MONDAY_API_KEY)


def get_lookup_env_vars() -> LookupHandlerEnvVars:
    """
    Get typed environment variables for the lookup handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=LookupHandlerEnvVars)
