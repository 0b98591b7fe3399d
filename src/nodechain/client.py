import logging
import uuid
from collections.abc import Mapping
from typing import Any

from nodechain.application.port import ComponentResolver, WorkflowEngine
from nodechain.application.service import load_workflow, problem_details
from nodechain.domain.entity import WorkflowDefinition, WorkflowRun
from nodechain.domain.errors import WorkflowError

log = logging.getLogger(__name__)


class Client:
    """
    Facade over a workflow engine and its component registry.

    Callers hand it a workflow (a WorkflowDefinition or its dict form) and
    optional initial context values; it assigns a correlation id when none is
    given and runs the workflow.
    """

    def __init__(self, engine: WorkflowEngine, registry: ComponentResolver):
        """
        Args:
            engine: The workflow engine implementation (e.g., SequentialWorkflowEngine)
            registry: The registry the engine resolves components from
        """
        self.engine = engine
        self.registry = registry

    def run(
        self,
        workflow: dict | WorkflowDefinition,
        correlation_id: str | None = None,
        inputs: Mapping[str, Any] | None = None,
    ) -> WorkflowRun:
        """
        Execute a workflow.

        Args:
            workflow: The workflow definition or its dictionary form
            correlation_id: Optional run identifier; a random one is generated if omitted
            inputs: Values placed in the context before the first step

        Returns:
            The workflow run result

        Raises:
            ComponentFailed: If a component fails
            ComponentNotFound: If a step names an unregistered component
            InvalidWorkflow: If the definition is malformed
        """
        definition = load_workflow(workflow)
        return self.engine.run(correlation_id or uuid.uuid4().hex, definition, inputs)

    def trigger(
        self,
        workflow: dict | WorkflowDefinition,
        correlation_id: str | None = None,
        inputs: Mapping[str, Any] | None = None,
    ) -> tuple[int, dict[str, Any]]:
        """
        Run a workflow on behalf of an inbound trigger and return ``(status_code, body)``.

        Failures map to 500 with a ``type``/``title``/``component``/``detail`` body:
        workflow errors (invalid definitions included) and run results whose
        context holds values that cannot be serialized.
        """
        try:
            run = self.run(workflow, correlation_id, inputs)
        except WorkflowError as exc:
            log.error("Workflow failed: %s", exc)
            return 500, problem_details(exc)
        try:
            body = run.to_dict()
        except TypeError as exc:
            log.error("Workflow %s result could not be serialized: %s", run.id, exc)
            return 500, problem_details(exc)
        return 200, body

    def components(self) -> list[str]:
        """
        Names of all registered components.
        """
        return self.registry.names()
