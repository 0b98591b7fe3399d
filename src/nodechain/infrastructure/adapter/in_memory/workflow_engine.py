import logging
from collections.abc import Mapping
from typing import Any

from nodechain.application.adapter import ExecutionContext
from nodechain.application.port import ComponentResolver, StepLogger, WorkflowEngine
from nodechain.domain.entity import WorkflowDefinition, WorkflowRun
from nodechain.domain.value_object import DISCARD, NO_INPUT, RunStatus

log = logging.getLogger(__name__)


class SequentialWorkflowEngine(WorkflowEngine):
    """Workflow engine that runs steps one after another in a single context."""

    def __init__(self, registry: ComponentResolver, step_logger: StepLogger):
        self.registry = registry
        self.step_logger = step_logger

    def run(
        self,
        correlation_id: str,
        definition: WorkflowDefinition,
        inputs: Mapping[str, Any] | None = None,
    ) -> WorkflowRun:
        """Executes each step in order and returns a WorkflowRun.

        A step's branch predicate returning True, or a component calling
        ``ctx.abort()``, stops the run early. ComponentFailed and
        ComponentNotFound propagate to the caller untouched.
        """
        ctx = ExecutionContext(correlation_id, self.step_logger.bind(correlation_id), inputs)
        executed: list[str] = []
        log.info("Workflow %s started with %d steps", correlation_id, len(definition.steps))

        for step in definition.steps:
            component = self.registry.get(step.component)
            value = None if step.input_key == NO_INPUT else ctx.get(step.input_key)
            output = component.execute(ctx, value)
            executed.append(step.component)
            if step.output_key != DISCARD:
                ctx.put(step.output_key, output)

            if step.branch(ctx) or ctx.is_aborted():
                log.info("Workflow %s stopped after %s", correlation_id, step.component)
                return WorkflowRun(
                    id=correlation_id,
                    status=RunStatus.STOPPED,
                    executed=executed,
                    variables=ctx.variables(),
                    stopped_at=step.component,
                )

        log.info("Workflow %s completed", correlation_id)
        return WorkflowRun(
            id=correlation_id,
            status=RunStatus.COMPLETED,
            executed=executed,
            variables=ctx.variables(),
        )
