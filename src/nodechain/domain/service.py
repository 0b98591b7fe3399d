from typing import Any

from nodechain.domain.entity import (
    BranchPredicate,
    WhenAborted,
    WhenEmpty,
    WhenEquals,
    WhenPresent,
    WorkflowDefinition,
    never,
)
from nodechain.domain.errors import InvalidWorkflow

__all__ = ["validate_workflow", "never", "when_empty", "when_present", "when_equals", "when_aborted"]


def validate_workflow(data: WorkflowDefinition) -> bool:
    """Validates the workflow structure and contents.

    Args:
        data: The WorkflowDefinition instance to validate.

    Returns:
        True if the workflow is valid, raises InvalidWorkflow otherwise.
    """
    if not data.steps:
        raise InvalidWorkflow("Workflow has no steps")
    for index, step in enumerate(data.steps):
        if not step.component or not isinstance(step.component, str):
            raise InvalidWorkflow(f"Step {index} has an invalid component name: {step.component!r}")
        if not isinstance(step.input_key, str) or not isinstance(step.output_key, str):
            raise InvalidWorkflow(f"Step {index} ({step.component}) must use string context keys")
        if not callable(step.branch):
            raise InvalidWorkflow(f"Step {index} ({step.component}) branch predicate is not callable")
    return True


def when_empty(key: str) -> BranchPredicate:
    """Stop once ``key`` is absent or an empty sequence."""
    return WhenEmpty(key=key).predicate()


def when_present(key: str) -> BranchPredicate:
    """Stop once ``key`` holds a non-empty value."""
    return WhenPresent(key=key).predicate()


def when_equals(key: str, value: Any) -> BranchPredicate:
    return WhenEquals(key=key, value=value).predicate()


def when_aborted() -> BranchPredicate:
    return WhenAborted().predicate()
