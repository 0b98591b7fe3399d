"""
Tests for in-memory component registry.
"""

from unittest.mock import Mock

import pytest

from nodechain.application.adapter import InstrumentedComponent, instrument
from nodechain.domain.errors import ComponentNotFound, DuplicateComponent
from nodechain.domain.port import ComponentBase
from nodechain.domain.value_object import ComponentConfig
from nodechain.infrastructure.adapter.in_memory.component_registry import InMemoryComponentRegistry


class GreetComponent(ComponentBase):
    name = "greet"

    def do_execute(self, ctx, input):
        return f"{self.config.get_str('greeting', 'Hello')}, {input}!"


class TestInMemoryComponentRegistry:
    """Test cases for InMemoryComponentRegistry."""

    def test_create_registry_empty(self):
        registry = InMemoryComponentRegistry([])

        assert len(registry) == 0
        assert registry.names() == []

    def test_components_are_indexed_by_name(self, echo_factory):
        registry = InMemoryComponentRegistry([echo_factory("a"), echo_factory("b")])

        assert registry.names() == ["a", "b"]
        assert "a" in registry
        assert "c" not in registry

    def test_get_returns_instrumented_component(self, echo_factory):
        component = echo_factory("a")
        registry = InMemoryComponentRegistry([component])

        wrapped = registry.get("a")

        assert isinstance(wrapped, InstrumentedComponent)
        assert wrapped.component is component

    def test_get_returns_same_instance_each_time(self, echo_factory):
        registry = InMemoryComponentRegistry([echo_factory("a")])

        assert registry.get("a") is registry.get("a")

    def test_already_instrumented_components_are_kept(self, echo_factory):
        wrapped = instrument(echo_factory("a"))
        registry = InMemoryComponentRegistry([wrapped])

        assert registry.get("a") is wrapped

    def test_get_missing_component(self, echo_factory):
        registry = InMemoryComponentRegistry([echo_factory("a")])

        with pytest.raises(ComponentNotFound, match="Component not found: missing") as info:
            registry.get("missing")

        assert info.value.name == "missing"

    @pytest.mark.parametrize("near_miss", ["X", "x ", " x", "xx", "x.", ""])
    def test_lookup_is_exact_match(self, echo_factory, near_miss):
        registry = InMemoryComponentRegistry([echo_factory("x")])

        with pytest.raises(ComponentNotFound):
            registry.get(near_miss)

    def test_component_not_found_is_a_key_error(self, echo_factory):
        registry = InMemoryComponentRegistry([echo_factory("a")])

        with pytest.raises(KeyError):
            registry.get("b")

    def test_duplicate_names_fail_at_construction(self, echo_factory):
        with pytest.raises(DuplicateComponent, match="registered twice: dup"):
            InMemoryComponentRegistry([echo_factory("dup"), echo_factory("dup")])

    def test_components_are_configured_once(self):
        component = GreetComponent()
        component.configure = Mock(wraps=component.configure)

        InMemoryComponentRegistry([component], {"greet": {"greeting": "Hi"}})

        component.configure.assert_called_once()
        assert component.config["greeting"] == "Hi"

    def test_components_without_config_get_empty_config(self):
        component = GreetComponent()

        InMemoryComponentRegistry([component])

        assert component.configured
        assert component.config == ComponentConfig()

    def test_preconfigured_component_keeps_its_config(self, ctx):
        """Test that registering without a config entry leaves an earlier configuration in place."""
        component = GreetComponent()
        component.configure({"greeting": "Hi"})
        component.configure = Mock(wraps=component.configure)

        registry = InMemoryComponentRegistry([component])

        component.configure.assert_not_called()
        assert registry.get("greet").execute(ctx, "Ari") == "Hi, Ari!"

    def test_configs_entry_overrides_preconfigured_component(self, ctx):
        component = GreetComponent()
        component.configure({"greeting": "Hi"})

        registry = InMemoryComponentRegistry([component], {"greet": {"greeting": "Yo"}})

        assert registry.get("greet").execute(ctx, "Ari") == "Yo, Ari!"

    def test_configs_accept_component_config(self, ctx):
        config = ComponentConfig({"greeting": "Hey"})
        component = GreetComponent()
        registry = InMemoryComponentRegistry([component], {"greet": config})

        assert component.config is config
        assert registry.get("greet").execute(ctx, "Ari") == "Hey, Ari!"

    def test_registry_isolation(self, echo_factory):
        registry1 = InMemoryComponentRegistry([echo_factory("a")])
        registry2 = InMemoryComponentRegistry([echo_factory("b")])

        registry1.get("a")
        registry2.get("b")
        with pytest.raises(ComponentNotFound):
            registry1.get("b")
        with pytest.raises(ComponentNotFound):
            registry2.get("a")
