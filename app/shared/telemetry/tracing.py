"""Tracing helpers: span decorator, span attributes, traced context manager."""

import asyncio
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import context, trace
from opentelemetry.trace import Status, StatusCode


def _record_outcome(span: trace.Span, error: BaseException | None) -> None:
    """Mark span OK, or ERROR with the exception recorded."""
    if error is None:
        span.set_status(Status(StatusCode.OK))
        return
    span.set_status(Status(StatusCode.ERROR, str(error)))
    span.record_exception(error)


def traced(operation_name: str | None = None) -> Callable:
    """Decorator to create a span around a function (sync or async).

    Args:
        operation_name: Span name (defaults to module.funcname).

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _record_outcome(span, e)
                    raise
                _record_outcome(span, None)
                return result

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _record_outcome(span, e)
                    raise
                _record_outcome(span, None)
                return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span (no-op when not recording)."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


class TracedOperation:
    """Async context manager wrapping a block in its own span.

    The span is made current for the block, so spans started inside it
    (e.g. per-category fetches during a refresh) become its children.
    """

    def __init__(self, operation_name: str, attributes: dict | None = None) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self.tracer = trace.get_tracer(__name__)
        self.span: trace.Span | None = None
        self._token: object | None = None

    async def __aenter__(self) -> "TracedOperation":
        self.span = self.tracer.start_span(self.operation_name, attributes=self.attributes)
        self._token = context.attach(trace.set_span_in_context(self.span))
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self.span is None:
            return
        if self._token is not None:
            context.detach(self._token)
            self._token = None
        _record_outcome(self.span, exc_val)
        self.span.end()
