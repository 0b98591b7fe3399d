from collections.abc import Iterable, Mapping
from typing import Any

from nodechain.application.adapter import InstrumentedComponent, instrument
from nodechain.application.port import ComponentResolver
from nodechain.domain.errors import ComponentNotFound, DuplicateComponent
from nodechain.domain.port import ComponentBase
from nodechain.domain.value_object import ComponentConfig


class InMemoryComponentRegistry(ComponentResolver):
    """Name-keyed table of instrumented components, built once and read-only afterwards."""

    def __init__(
        self,
        components: Iterable[ComponentBase | InstrumentedComponent],
        configs: Mapping[str, ComponentConfig | Mapping[str, Any]] | None = None,
    ):
        """Instruments, configures and indexes each component; raises DuplicateComponent on a name clash.

        A component is configured from ``configs`` when it has an entry there,
        and with an empty config when it has neither an entry nor a prior configuration.
        """
        configs = configs or {}
        self._registry: dict[str, InstrumentedComponent] = {}
        for component in components:
            wrapped = instrument(component)
            if wrapped.name in self._registry:
                raise DuplicateComponent(wrapped.name)
            self._registry[wrapped.name] = wrapped
        for name, wrapped in self._registry.items():
            # Components configured by the caller keep their settings unless overridden here.
            if name in configs or not wrapped.component.configured:
                wrapped.configure(configs.get(name))

    def get(self, name: str) -> InstrumentedComponent:
        """Returns the component registered under exactly ``name``."""
        try:
            return self._registry[name]
        except KeyError:
            raise ComponentNotFound(name) from None

    def names(self) -> list[str]:
        return list(self._registry)

    def __contains__(self, name: str) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)
