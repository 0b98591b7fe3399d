from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from nodechain.domain.value_object import ComponentConfig

if TYPE_CHECKING:
    from nodechain.application.adapter import ExecutionContext


class WorkflowComponent(ABC):
    """Capability set every registered node exposes: identity, configuration and execution."""

    name: str

    @abstractmethod
    def configure(self, config: ComponentConfig) -> None:
        """Receives the component's configuration once, before the first execution."""
        ...

    @abstractmethod
    def execute(self, ctx: "ExecutionContext", input: Any) -> Any:
        """Runs the component against a context and returns its output."""
        ...


class ComponentBase(ABC):
    """Base class for concrete nodes. Implements configuration storage and requires 'do_execute'.

    Subclasses must not define 'execute': the public entry point is supplied by
    the execution wrapper so logging, timing and failure handling stay uniform.
    """

    name: str = ""

    def __init_subclass__(cls, **kwargs):
        """Rejects subclasses that try to provide their own 'execute'."""
        super().__init_subclass__(**kwargs)

        if "execute" in cls.__dict__:
            raise TypeError(f"{cls.__name__} must define 'do_execute', not 'execute'")

    @property
    def config(self) -> ComponentConfig:
        return getattr(self, "_config", None) or ComponentConfig()

    @property
    def configured(self) -> bool:
        return getattr(self, "_config", None) is not None

    def configure(self, config: ComponentConfig | None) -> None:
        """Stores the configuration for later use by 'do_execute'."""
        self._config = config if isinstance(config, ComponentConfig) else ComponentConfig(config)

    @abstractmethod
    def do_execute(self, ctx: "ExecutionContext", input: Any) -> Any:
        """Component-specific logic. May raise; the wrapper translates failures."""
        ...
