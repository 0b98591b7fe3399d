import logging
from typing import TYPE_CHECKING, Any

import msgspec

from nodechain.application.port import Cache
from nodechain.domain.entity import WorkflowDefinition, WorkflowSpec
from nodechain.domain.errors import ComponentFailed, ComponentNotFound, InvalidWorkflow
from nodechain.domain.service import validate_workflow

if TYPE_CHECKING:
    from nodechain.client import Client

log = logging.getLogger(__name__)


def load_workflow(data: dict | WorkflowDefinition) -> WorkflowDefinition:
    """Decodes and validates a workflow from a Python dictionary.

    Args:
        data: The workflow as a dictionary of the form
            ``{"steps": [{"component": ..., "input": ..., "output": ..., "stop_when": {...}}]}``,
            or an already built WorkflowDefinition.

    Returns:
        A validated WorkflowDefinition.
    """
    if isinstance(data, WorkflowDefinition):
        validate_workflow(data)
        return data

    try:
        spec = msgspec.convert(data, type=WorkflowSpec)
    except msgspec.ValidationError as exc:
        raise InvalidWorkflow(f"Invalid workflow definition: {exc}") from exc
    workflow = spec.to_definition()
    validate_workflow(workflow)
    return workflow


def problem_details(error: Exception) -> dict[str, Any]:
    """Maps a failed run to the error body returned by inbound triggers."""
    if isinstance(error, ComponentFailed):
        component = error.component
        detail = str(error.cause) if error.cause is not None else str(error)
    elif isinstance(error, ComponentNotFound):
        component = error.name
        detail = str(error)
    else:
        component = None
        detail = str(error)
    return {
        "type": "about:blank",
        "title": "Component failed",
        "component": component,
        "detail": detail,
    }


class CachedWorkflowService:
    """Runs a fixed workflow over single inputs and caches the produced output per input."""

    def __init__(
        self,
        client: "Client",
        workflow: dict | WorkflowDefinition,
        cache: Cache,
        input_key: str = "input",
        output_key: str = "output",
        key_prefix: str = "business:",
    ):
        self.client = client
        self.workflow = load_workflow(workflow)
        self.cache = cache
        self.input_key = input_key
        self.output_key = output_key
        self.key_prefix = key_prefix

    def process(self, value: str) -> Any:
        cache_key = f"{self.key_prefix}{value}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            log.debug("Cache hit for %s", cache_key)
            return cached
        run = self.client.run(self.workflow, inputs={self.input_key: value})
        result = run.get(self.output_key)
        if result is not None:
            self.cache.put(cache_key, result)
        return result

    def invalidate(self, value: str) -> None:
        self.cache.invalidate(f"{self.key_prefix}{value}")
