"""
==============================================================================
Mediator Package
==============================================================================

Query dispatch decoupling the API layer from the query handlers.

==============================================================================
"""

from .mediator import Handler, HandlerFunc, Mediator

__all__ = [
    "Handler",
    "HandlerFunc",
    "Mediator",
]
