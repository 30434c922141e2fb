"""
Monday.com Item Lookup Proxy Service Module.

This package contains a single Lambda endpoint that looks up Monday.com items
for a frontend, following a three-layer architecture:

- handlers: Lambda entry point, configuration and error responses
- logic: Identifier classification, fetch branches and reshaping
- dal: GraphQL access to the Monday.com API
- models: Request, upstream and response schemas

Items from the legacy board (ten digit ids) and from the newer board
(``TBUS-`` prefixed ids) are returned in one uniform shape.
"""

__version__ = "1.0.0"
__description__ = "Monday.com item lookup proxy for AWS Lambda"

from monday_proxy.models.output import LookupItemsOutput, NormalizedItem
from monday_proxy.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "LookupItemsOutput",
    "NormalizedItem",
    "logger",
    "tracer",
    "metrics",
]
