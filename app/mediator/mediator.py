"""
==============================================================================
Mediator Module
==============================================================================

Type-keyed query dispatch.

Controllers send query objects to the Mediator without knowing which
handler serves them. Each query class maps to exactly one handler.

Lifecycle:
----------
1. Build a Mediator and register one handler per query class at startup.
2. Serve: call send() for each request.

The registration table is a plain dict and is not locked. Registering
while send() is running on another thread is unsupported.

Usage:
------
    mediator = Mediator()
    mediator.register(GetProductQuery, GetProductHandler(catalog))
    mediator.register(PingQuery, lambda query: "pong")

    product = mediator.send(GetProductQuery(id="PHONE001"))

==============================================================================
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Union

from app.core.exceptions import UnregisteredHandlerError


# Module logger
logger = logging.getLogger(__name__)


class Handler(ABC):
    """
    Handles one kind of query.

    Subclasses implement handle(); the mediator calls it with the query
    instance and returns whatever it returns.
    """

    @abstractmethod
    def handle(self, query: Any) -> Any:
        """Process the query and return its result."""


class HandlerFunc(Handler):
    """
    Adapts a plain function to the Handler interface.

    Example:
        >>> handler = HandlerFunc(lambda query: query.id)
        >>> handler.handle(GetProductQuery(id="PHONE001"))
        'PHONE001'
    """

    def __init__(self, func: Callable[[Any], Any]) -> None:
        if not callable(func):
            raise TypeError(f"HandlerFunc expects a callable, got {type(func).__name__}")
        self._func = func

    def handle(self, query: Any) -> Any:
        return self._func(query)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"HandlerFunc({name})"


HandlerLike = Union[Handler, Callable[[Any], Any]]


def _type_name(query_type: type) -> str:
    return f"{query_type.__module__}.{query_type.__qualname__}"


class Mediator:
    """
    Routes queries to handlers by the query's exact class.

    A subclass of a registered query class does not inherit its parent's
    handler; it needs its own registration.

    Example:
        >>> mediator = Mediator()
        >>> mediator.register(GetBrandsQuery, GetBrandsHandler(catalog))
        >>> mediator.send(GetBrandsQuery())
        ['Samsung', 'Apple']
    """

    def __init__(self) -> None:
        self._handlers: Dict[type, Handler] = {}

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(self, query_type: Union[type, Any], handler: HandlerLike) -> None:
        """
        Register the handler for a query class.

        A later registration for the same class replaces the earlier one.

        Args:
            query_type: Query class, or a sample instance of it
            handler: Handler instance or plain callable taking the query

        Raises:
            TypeError: If handler is neither a Handler nor callable
        """
        if not isinstance(query_type, type):
            query_type = type(query_type)

        if not isinstance(handler, Handler):
            handler = HandlerFunc(handler)

        if query_type in self._handlers:
            logger.debug(f"Replacing handler for {_type_name(query_type)}")

        self._handlers[query_type] = handler
        logger.debug(f"Registered {handler!r} for {_type_name(query_type)}")

    def is_registered(self, query_type: Union[type, Any]) -> bool:
        """Check whether a handler exists for a query class or instance."""
        if not isinstance(query_type, type):
            query_type = type(query_type)
        return query_type in self._handlers

    @property
    def registered_types(self) -> List[type]:
        """Query classes with a registered handler, in registration order."""
        return list(self._handlers)

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def send(self, query: Any) -> Any:
        """
        Dispatch a query to its handler.

        The handler's result is returned and its exceptions propagate
        unchanged.

        Args:
            query: Query instance

        Returns:
            Whatever the handler returns

        Raises:
            UnregisteredHandlerError: If no handler is registered for
                the query's class
        """
        handler = self._handlers.get(type(query))
        if handler is None:
            raise UnregisteredHandlerError(_type_name(type(query)))

        return handler.handle(query)

    def __len__(self) -> int:
        return len(self._handlers)
