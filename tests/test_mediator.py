"""
==============================================================================
Mediator Tests
==============================================================================

Tests for type-keyed query dispatch.

==============================================================================
"""

import pytest
from pydantic import BaseModel

from app.core.exceptions import UnregisteredHandlerError
from app.mediator import Handler, HandlerFunc, Mediator


class PingQuery(BaseModel):
    value: str = "ping"


class OtherQuery(BaseModel):
    number: int = 0


class LoudPingQuery(PingQuery):
    pass


class RecordingHandler(Handler):
    """Handler that records calls and returns a fixed result."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def handle(self, query):
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.result


class TestRegistration:
    """Tests for handler registration."""

    def test_new_mediator_is_empty(self):
        """Test a new mediator has no handlers."""
        mediator = Mediator()
        assert len(mediator) == 0
        assert mediator.registered_types == []

    def test_register_by_class_or_instance(self):
        """Test a sample instance registers its class."""
        mediator = Mediator()
        mediator.register(PingQuery, RecordingHandler())
        mediator.register(OtherQuery(), RecordingHandler())

        assert mediator.is_registered(PingQuery)
        assert mediator.is_registered(OtherQuery)
        assert mediator.is_registered(OtherQuery(number=5))
        assert mediator.registered_types == [PingQuery, OtherQuery]

    def test_last_registration_wins(self):
        """Test re-registering a class replaces its handler."""
        first = RecordingHandler(result="first")
        second = RecordingHandler(result="second")
        mediator = Mediator()
        mediator.register(PingQuery, first)
        mediator.register(PingQuery, second)

        assert mediator.send(PingQuery()) == "second"
        assert first.calls == []
        assert len(mediator) == 1

    def test_non_callable_handler_rejected(self):
        """Test registering something that cannot handle queries fails."""
        with pytest.raises(TypeError):
            Mediator().register(PingQuery, 42)


class TestSend:
    """Tests for query dispatch."""

    def test_unregistered_query(self):
        """Test sending an unknown query type names the type."""
        with pytest.raises(UnregisteredHandlerError) as exc_info:
            Mediator().send(PingQuery())
        assert "PingQuery" in exc_info.value.query_type
        assert "PingQuery" in str(exc_info.value)

    def test_handler_invoked_once_with_query(self):
        """Test send calls the handler exactly once and returns its result."""
        result = {"answer": 42}
        handler = RecordingHandler(result=result)
        mediator = Mediator()
        mediator.register(PingQuery, handler)

        query = PingQuery(value="hello")
        assert mediator.send(query) is result
        assert handler.calls == [query]

    def test_handler_error_passes_through(self):
        """Test handler exceptions reach the caller unchanged."""
        error = ValueError("handler error")
        mediator = Mediator()
        mediator.register(PingQuery, RecordingHandler(error=error))

        with pytest.raises(ValueError) as exc_info:
            mediator.send(PingQuery())
        assert exc_info.value is error

    def test_routes_by_type(self):
        """Test each query type reaches its own handler."""
        ping = RecordingHandler(result="ping")
        other = RecordingHandler(result="other")
        mediator = Mediator()
        mediator.register(PingQuery, ping)
        mediator.register(OtherQuery, other)

        assert mediator.send(OtherQuery()) == "other"
        assert mediator.send(PingQuery()) == "ping"
        assert len(ping.calls) == 1
        assert len(other.calls) == 1

    def test_subclass_needs_its_own_handler(self):
        """Test dispatch uses the exact class, not its parents."""
        mediator = Mediator()
        mediator.register(PingQuery, RecordingHandler(result="ping"))

        with pytest.raises(UnregisteredHandlerError):
            mediator.send(LoudPingQuery())


class TestFunctionHandlers:
    """Tests for plain functions as handlers."""

    def test_plain_function_registered(self):
        """Test a bare function is adapted automatically."""
        mediator = Mediator()
        mediator.register(PingQuery, lambda query: query.value.upper())
        assert mediator.send(PingQuery(value="abc")) == "ABC"

    def test_handler_func_adapter(self):
        """Test HandlerFunc satisfies the Handler interface."""
        def double(query):
            return query.number * 2

        handler = HandlerFunc(double)
        assert isinstance(handler, Handler)
        assert handler.handle(OtherQuery(number=4)) == 8
        assert "double" in repr(handler)

    def test_function_and_object_interchangeable(self):
        """Test a function handler can replace an object handler."""
        mediator = Mediator()
        mediator.register(PingQuery, RecordingHandler(result="object"))
        mediator.register(PingQuery, HandlerFunc(lambda query: "function"))
        assert mediator.send(PingQuery()) == "function"

    def test_function_errors_pass_through(self):
        """Test exceptions from function handlers propagate."""
        def fail(query):
            raise KeyError("missing")

        mediator = Mediator()
        mediator.register(OtherQuery, fail)
        with pytest.raises(KeyError):
            mediator.send(OtherQuery())

    def test_handler_func_requires_callable(self):
        """Test HandlerFunc rejects non-callables."""
        with pytest.raises(TypeError):
            HandlerFunc("not callable")
