from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from nodechain.application.port import TraceProvider

_current_trace: ContextVar[str | None] = ContextVar("nodechain_trace_id", default=None)


class ContextVarTraceProvider(TraceProvider):
    """Trace ids scoped to the current thread or task via a context variable."""

    def current_trace_id(self) -> str | None:
        return _current_trace.get()

    @contextmanager
    def use(self, trace_id: str) -> Iterator[str]:
        token = _current_trace.set(trace_id)
        try:
            yield trace_id
        finally:
            _current_trace.reset(token)
