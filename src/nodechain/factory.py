from collections.abc import Iterable, Mapping
from typing import Any

import requests

from nodechain.application.port import StepLogger, TraceProvider
from nodechain.client import Client
from nodechain.config import Settings
from nodechain.domain.port import ComponentBase
from nodechain.infrastructure.adapter.in_memory.cache import TTLCache
from nodechain.infrastructure.adapter.in_memory.component_registry import InMemoryComponentRegistry
from nodechain.infrastructure.adapter.in_memory.workflow_engine import SequentialWorkflowEngine
from nodechain.infrastructure.adapter.logging.step_logger import LoggingStepLogger
from nodechain.infrastructure.provider import get_components


def create(
    components: Iterable[ComponentBase] | None = None,
    configs: Mapping[str, Mapping[str, Any]] | None = None,
    settings: Settings | None = None,
    step_logger: StepLogger | None = None,
    trace_provider: TraceProvider | None = None,
    session: requests.Session | None = None,
) -> Client:
    """
    Factory function wiring a registry, an engine and a Client.

    Args:
        components: Components to register; the built-in set when omitted
        configs: Per-component configuration keyed by component name
        settings: Process settings; defaults apply when omitted
        step_logger: Sink for step lifecycle messages; standard logging when omitted
        trace_provider: Source of trace ids for outbound HTTP calls
        session: HTTP session shared by the built-in httpRequest component

    Returns:
        A configured Client instance

    Raises:
        DuplicateComponent: If two components share a name
    """
    settings = settings if settings is not None else Settings()
    if components is None:
        components = get_components(settings=settings, trace_provider=trace_provider, session=session)

    registry = InMemoryComponentRegistry(components, configs)
    engine = SequentialWorkflowEngine(registry, step_logger if step_logger is not None else LoggingStepLogger())
    return Client(engine=engine, registry=registry)


def create_cache(settings: Settings | None = None) -> TTLCache:
    """Response cache sized from settings (100 entries, 10 minutes by default)."""
    settings = settings if settings is not None else Settings()
    return TTLCache(max_size=settings.cache_max_size, ttl_seconds=settings.cache_ttl_seconds)
