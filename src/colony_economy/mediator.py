"""
Request/handler mediator used by the application layer.

Commands and queries are frozen dataclasses deriving from Request. Each
request type is routed to exactly one RequestHandler, passing through the
registered PipelineBehavior instances first.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, List, TypeVar

TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')


class Request(Generic[TResponse], ABC):
    """
    Base class for all requests (commands and queries).

    Example:
        @dataclass(frozen=True)
        class FindViableChainsQuery(Request[List[Chain]]):
            tick: int
    """
    pass


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """Base class for request handlers, one async handle() per request type"""

    @abstractmethod
    async def handle(self, request: TRequest) -> TResponse:
        pass


class PipelineBehavior(ABC):
    """
    Middleware wrapped around every handler invocation.

    A behavior may pre-process the request, call the next stage,
    post-process the response or translate exceptions.
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler):
        pass


class Mediator:
    """Routes requests through the behavior pipeline to their handler"""

    def __init__(self):
        self._handlers: Dict[type, Callable[[], RequestHandler]] = {}
        self._behaviors: List[PipelineBehavior] = []

    def register_handler(self, request_type: type, handler_factory):
        """
        Register a handler factory for a request type.

        Args:
            request_type: The request class to handle
            handler_factory: Callable that returns a handler instance
        """
        self._handlers[request_type] = handler_factory

    def register_behavior(self, behavior: PipelineBehavior):
        """Append a behavior; behaviors run in registration order"""
        self._behaviors.append(behavior)

    async def send_async(self, request: Request[TResponse]) -> TResponse:
        """
        Send a request through the pipeline to its handler.

        Raises:
            ValueError: If no handler is registered for the request type
        """
        request_type = type(request)

        if request_type not in self._handlers:
            raise ValueError(f"No handler registered for {request_type.__name__}")

        async def final_handler():
            handler = self._handlers[request_type]()
            return await handler.handle(request)

        # Wrap in reverse so the first registered behavior runs outermost
        pipeline = final_handler
        for behavior in reversed(self._behaviors):
            next_pipeline = pipeline
            pipeline = lambda b=behavior, n=next_pipeline: b.handle(request, n)

        return await pipeline()
