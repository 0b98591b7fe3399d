"""
nodechain - linear workflow core for node-based automations

Named components are chained through a shared per-run context. Every
component runs behind the same wrapper, so start/finish/failure logging,
timing and failure types never differ between components.
"""

from nodechain.application.adapter import ExecutionContext, PlaceholderResolver, instrument, resolve
from nodechain.client import Client
from nodechain.config import Settings, load_settings
from nodechain.domain.entity import WorkflowDefinition, WorkflowRun, WorkflowStep
from nodechain.domain.errors import ComponentFailed, ComponentNotFound, DuplicateComponent, InvalidWorkflow
from nodechain.domain.port import ComponentBase, WorkflowComponent
from nodechain.domain.value_object import DISCARD, NO_INPUT, ComponentConfig, RunStatus, ValueKind
from nodechain.factory import create

__all__ = [
    "Client",
    "create",
    "Settings",
    "load_settings",
    "ComponentBase",
    "WorkflowComponent",
    "ComponentConfig",
    "ExecutionContext",
    "PlaceholderResolver",
    "resolve",
    "instrument",
    "WorkflowStep",
    "WorkflowDefinition",
    "WorkflowRun",
    "RunStatus",
    "ValueKind",
    "NO_INPUT",
    "DISCARD",
    "ComponentFailed",
    "ComponentNotFound",
    "DuplicateComponent",
    "InvalidWorkflow",
]
