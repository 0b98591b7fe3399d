from abc import abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import msgspec

from nodechain.domain.value_object import DISCARD, NO_INPUT, RunStatus

if TYPE_CHECKING:
    from nodechain.application.adapter import ExecutionContext

BranchPredicate = Callable[["ExecutionContext"], bool]


def never(ctx: "ExecutionContext") -> bool:
    """Branch predicate that lets the run continue."""
    return False


@dataclass(frozen=True)
class WorkflowStep:
    """One scheduled invocation of a named component.

    ``branch`` is evaluated against the context after the step's output has
    been stored; returning True stops the run.
    """

    component: str
    input_key: str = NO_INPUT
    output_key: str = DISCARD
    branch: BranchPredicate = field(default=never, compare=False)


@dataclass(frozen=True)
class WorkflowDefinition:
    """An ordered, immutable sequence of workflow steps."""

    steps: tuple[WorkflowStep, ...]

    def __init__(self, steps: Iterable[WorkflowStep]):
        object.__setattr__(self, "steps", tuple(steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)


class StopCondition(msgspec.Struct, tag_field="kind", forbid_unknown_fields=True, frozen=True):
    """Declarative branch predicate for workflows loaded from plain data."""

    @abstractmethod
    def predicate(self) -> BranchPredicate: ...


class Never(StopCondition, tag="never", frozen=True):
    def predicate(self) -> BranchPredicate:
        return never


class WhenEmpty(StopCondition, tag="empty", frozen=True):
    key: str

    def predicate(self) -> BranchPredicate:
        key = self.key
        return lambda ctx: ctx.is_empty(key)


class WhenPresent(StopCondition, tag="present", frozen=True):
    key: str

    def predicate(self) -> BranchPredicate:
        key = self.key
        return lambda ctx: not ctx.is_empty(key)


class WhenEquals(StopCondition, tag="equals", frozen=True):
    """Stops when the bound value at ``key`` (dotted paths allowed) equals ``value``."""

    key: str
    value: Any

    def predicate(self) -> BranchPredicate:
        key, expected = self.key, self.value

        def _equals(ctx: "ExecutionContext") -> bool:
            bindings = ctx.bindings()
            return key in bindings and bindings[key] == expected

        return _equals


class WhenAborted(StopCondition, tag="aborted", frozen=True):
    def predicate(self) -> BranchPredicate:
        return lambda ctx: ctx.is_aborted()


StopConditionTypes = Never | WhenEmpty | WhenPresent | WhenEquals | WhenAborted


class StepSpec(msgspec.Struct, forbid_unknown_fields=True):
    """Plain-data form of a workflow step."""

    component: str
    input: str = NO_INPUT
    output: str = DISCARD
    stop_when: StopConditionTypes | None = None

    def to_step(self) -> WorkflowStep:
        branch = self.stop_when.predicate() if self.stop_when is not None else never
        return WorkflowStep(self.component, self.input, self.output, branch)


class WorkflowSpec(msgspec.Struct, forbid_unknown_fields=True):
    """Plain-data form of a workflow definition."""

    steps: list[StepSpec]

    def to_definition(self) -> WorkflowDefinition:
        return WorkflowDefinition(spec.to_step() for spec in self.steps)


class WorkflowRun(msgspec.Struct, forbid_unknown_fields=True):
    """Result of running a workflow to completion or to an early stop."""

    id: str
    status: RunStatus
    executed: list[str]
    variables: dict[str, Any]
    stopped_at: str | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.variables.get(key, default)

    def to_dict(self):
        """Convert the WorkflowRun to a dictionary."""
        return msgspec.to_builtins(self)

    def to_json(self) -> str:
        """Convert the WorkflowRun to a JSON string."""
        return msgspec.json.encode(self).decode()

    def to_yaml(self) -> str:
        """Convert the WorkflowRun to a YAML string."""
        return msgspec.yaml.encode(self).decode()
