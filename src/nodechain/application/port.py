from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from nodechain.domain.entity import WorkflowDefinition, WorkflowRun
from nodechain.domain.port import WorkflowComponent


class StepLogger(ABC):
    """Sink for per-step lifecycle messages."""

    @abstractmethod
    def info(self, step: str, message: str) -> None: ...

    @abstractmethod
    def error(self, step: str, message: str, cause: BaseException | None = None) -> None: ...

    def bind(self, correlation_id: str) -> "StepLogger":
        """Returns a logger tagged with a run's correlation id. Defaults to self."""
        return self


class ComponentResolver(ABC):
    """Looks up registered components by exact name."""

    @abstractmethod
    def get(self, name: str) -> WorkflowComponent:
        """Returns the component registered as ``name`` or raises ComponentNotFound."""
        ...

    @abstractmethod
    def names(self) -> list[str]: ...


class WorkflowEngine(ABC):
    @abstractmethod
    def run(
        self,
        correlation_id: str,
        definition: WorkflowDefinition,
        inputs: Mapping[str, Any] | None = None,
    ) -> WorkflowRun: ...


class Cache(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None: ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def invalidate(self, key: str) -> None: ...


class TraceProvider(ABC):
    @abstractmethod
    def current_trace_id(self) -> str | None:
        """Returns the active trace id, or None outside a traced scope."""
        ...


class PrivilegeService(ABC):
    @abstractmethod
    def permission_ids(self, user_id: str) -> list[str]:
        """Returns the permission identifiers granted to a user."""
        ...
