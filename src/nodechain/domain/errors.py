class WorkflowError(Exception):
    """Base class for every failure raised by the workflow core."""


class ComponentNotFound(WorkflowError, KeyError):
    """Raised when no component is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Component not found: {self.name}"


class DuplicateComponent(WorkflowError, ValueError):
    """Raised when two components declare the same name."""

    def __init__(self, name: str):
        super().__init__(f"Component name registered twice: {name}")
        self.name = name


class ComponentFailed(WorkflowError):
    """Raised by the execution wrapper when a component's logic fails.

    The original exception is kept as ``cause`` and as ``__cause__``.
    """

    def __init__(self, component: str, cause: BaseException):
        super().__init__(f"Component '{component}' failed: {cause}")
        self.component = component
        self.cause = cause


class InvalidWorkflow(WorkflowError, ValueError):
    """Raised when a workflow definition cannot be loaded or validated."""
