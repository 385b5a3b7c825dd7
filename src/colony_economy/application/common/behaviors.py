"""
Pipeline behaviors (middleware) for the mediator.

Behaviors intercept requests before/after handler execution.
They form a pipeline where each behavior can:
- Pre-process the request
- Call the next behavior/handler
- Post-process the response
- Handle exceptions
"""
import logging
from typing import Any

from ...mediator import PipelineBehavior

logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Logs command/query failures and re-raises them.

    Success is not logged here; the planner logs its own results.
    """

    async def handle(self, request: Any, next_handler):
        request_name = type(request).__name__

        try:
            return await next_handler()
        except Exception as e:
            logger.error(f"Failed executing {request_name}: {e}", exc_info=True)
            raise


class ValidationBehavior(PipelineBehavior):
    """
    Validates requests before handler execution.

    If the request has a validate() method, calls it.
    """

    async def handle(self, request: Any, next_handler):
        """
        Raises:
            ValueError: If validation fails
        """
        validate = getattr(request, 'validate', None)
        if callable(validate):
            validate()

        return await next_handler()
