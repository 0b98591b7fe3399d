import logging
import re
import time
from collections.abc import Mapping, Sequence, Set
from typing import Any

import msgspec

from nodechain.application.port import StepLogger
from nodechain.domain.errors import ComponentFailed
from nodechain.domain.port import ComponentBase, WorkflowComponent
from nodechain.domain.value_object import ComponentConfig, ValueKind

log = logging.getLogger(__name__)

STARTED = "Started"
FINISHED = "Finished"
FAILED = "Failed"


class ExecutionContext:
    """Per-run blackboard shared by every step of a single workflow run."""

    def __init__(self, correlation_id: str, logger: StepLogger, variables: Mapping[str, Any] | None = None):
        self._correlation_id = correlation_id
        self._logger = logger
        self._variables: dict[str, Any] = dict(variables or {})
        self._aborted = False

    @property
    def correlation_id(self) -> str:
        return self._correlation_id

    def logger(self) -> StepLogger:
        return self._logger

    def get(self, key: str, default: Any = None) -> Any:
        return self._variables.get(key, default)

    def get_typed(self, key: str, kind: ValueKind | type) -> Any:
        """Returns the value under ``key`` only if it is of the expected kind, else None."""
        value = self._variables.get(key)
        if isinstance(kind, ValueKind):
            return value if kind.matches(value) else None
        if isinstance(kind, type):
            return value if isinstance(value, kind) else None
        return None

    def put(self, key: str, value: Any) -> None:
        self._variables[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._variables

    def is_empty(self, key: str) -> bool:
        value = self._variables.get(key)
        if value is None:
            return True
        if isinstance(value, (str, bytes, bytearray, Mapping)):
            return False
        if isinstance(value, (Sequence, Set)):
            return len(value) == 0
        return False

    def abort(self) -> None:
        self._aborted = True

    def is_aborted(self) -> bool:
        return self._aborted

    def variables(self) -> dict[str, Any]:
        return dict(self._variables)

    def bindings(self) -> dict[str, Any]:
        """Flattens the context into dotted keys usable as placeholder names.

        ``{"payload": {"rows": [{"id": 1}]}}`` binds ``payload``, ``payload.rows``,
        ``payload.rows.0`` and ``payload.rows.0.id``.
        """
        flat: dict[str, Any] = {}
        for key, value in self._variables.items():
            flat[key] = value
            _flatten(key, value, flat)
        return flat


def _flatten(prefix: str, value: Any, out: dict[str, Any]) -> None:
    if isinstance(value, msgspec.Struct):
        value = msgspec.to_builtins(value)
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = enumerate(value)
    else:
        return
    for key, item in items:
        path = f"{prefix}.{key}"
        out[path] = item
        _flatten(path, item, out)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return msgspec.json.encode(value).decode()
    except TypeError:
        return str(value)


class PlaceholderResolver:
    """Resolves ${name} placeholders against a flat mapping of bindings.

    Rules:
    - Names match ``[a-zA-Z0-9_.-]+``; unbound names resolve to "".
    - Substitution is a single pass: replacement text is inserted literally and never re-scanned.
    - In ``resolve_any``, a string that is exactly one placeholder returns the bound value as-is (preserve type).
    """

    _pattern = re.compile(r"\$\{([a-zA-Z0-9_.-]+)\}")

    def resolve(self, template: str, bindings: Mapping[str, Any]) -> str:
        def repl(match: re.Match) -> str:
            return _to_text(bindings.get(match.group(1)))

        return self._pattern.sub(repl, template)

    def resolve_any(self, value: Any, bindings: Mapping[str, Any]) -> Any:
        if isinstance(value, Mapping):
            return {k: self.resolve_any(v, bindings) for k, v in value.items()}
        if isinstance(value, list):
            return [self.resolve_any(v, bindings) for v in value]
        if isinstance(value, str):
            m = self._pattern.fullmatch(value.strip())
            if m and m.group(1) in bindings:
                return bindings[m.group(1)]
            return self.resolve(value, bindings)
        return value


_default_resolver = PlaceholderResolver()


def resolve(template: str, bindings: Mapping[str, Any]) -> str:
    """Substitutes every ${name} in ``template`` with its binding, or "" when unbound."""
    return _default_resolver.resolve(template, bindings)


def resolve_any(value: Any, bindings: Mapping[str, Any]) -> Any:
    return _default_resolver.resolve_any(value, bindings)


class InstrumentedComponent(WorkflowComponent):
    """Wraps a component with start/finish/fail logging, timing and failure translation."""

    def __init__(self, component: ComponentBase):
        self.component = component
        self.name = component.name

    def configure(self, config: ComponentConfig | Mapping[str, Any] | None) -> None:
        self.component.configure(config if isinstance(config, ComponentConfig) else ComponentConfig(config))

    def execute(self, ctx: ExecutionContext, input: Any) -> Any:
        """Runs the wrapped component's 'do_execute'; any exception surfaces as ComponentFailed."""
        start = time.perf_counter()
        try:
            ctx.logger().info(self.name, STARTED)
            output = self.component.do_execute(ctx, input)
            ctx.logger().info(self.name, FINISHED)
            return output
        except Exception as exc:
            ctx.logger().error(self.name, FAILED, exc)
            raise ComponentFailed(self.name, exc) from exc
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            log.debug("%s finished in %.3f ms", self.name, elapsed_ms)

    def __repr__(self) -> str:
        return f"InstrumentedComponent({self.component!r})"


def instrument(component: ComponentBase | InstrumentedComponent) -> InstrumentedComponent:
    """Returns ``component`` wrapped for execution; already wrapped components are returned unchanged."""
    if isinstance(component, InstrumentedComponent):
        return component
    if not isinstance(component, ComponentBase):
        raise TypeError(f"{type(component).__name__} is not a ComponentBase subclass")
    return InstrumentedComponent(component)
