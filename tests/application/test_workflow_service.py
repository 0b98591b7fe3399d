"""
Tests for application services: workflow loading, error mapping and the cached workflow service.
"""

from unittest.mock import Mock

import pytest

from nodechain.application.port import Cache
from nodechain.application.service import CachedWorkflowService, load_workflow, problem_details
from nodechain.client import Client
from nodechain.domain.entity import WorkflowDefinition, WorkflowRun, WorkflowStep
from nodechain.domain.errors import ComponentFailed, ComponentNotFound, InvalidWorkflow, WorkflowError
from nodechain.domain.value_object import RunStatus


class TestLoadWorkflow:
    """Test cases for load_workflow."""

    def test_load_from_dict(self):
        workflow = load_workflow(
            {
                "steps": [
                    {"component": "webhook", "input": "request", "output": "payload"},
                    {"component": "logger", "input": "payload"},
                ]
            }
        )

        assert isinstance(workflow, WorkflowDefinition)
        assert [s.component for s in workflow.steps] == ["webhook", "logger"]

    def test_load_passes_definitions_through(self):
        definition = WorkflowDefinition([WorkflowStep("a")])

        assert load_workflow(definition) is definition

    def test_load_validates_definitions(self):
        with pytest.raises(InvalidWorkflow):
            load_workflow(WorkflowDefinition([]))

    def test_unknown_fields_are_rejected(self):
        with pytest.raises(InvalidWorkflow, match="Invalid workflow definition"):
            load_workflow({"steps": [{"component": "a", "unexpected": 1}]})

    def test_missing_component_is_rejected(self):
        with pytest.raises(InvalidWorkflow):
            load_workflow({"steps": [{"input": "payload"}]})

    def test_unknown_stop_condition_is_rejected(self):
        with pytest.raises(InvalidWorkflow):
            load_workflow({"steps": [{"component": "a", "stop_when": {"kind": "sometimes"}}]})

    def test_empty_steps_are_rejected(self):
        with pytest.raises(InvalidWorkflow, match="no steps"):
            load_workflow({"steps": []})


class TestProblemDetails:
    """Test cases for problem_details."""

    def test_component_failed(self):
        error = ComponentFailed("httpRequest", ConnectionError("connection refused"))

        assert problem_details(error) == {
            "type": "about:blank",
            "title": "Component failed",
            "component": "httpRequest",
            "detail": "connection refused",
        }

    def test_component_not_found(self):
        body = problem_details(ComponentNotFound("ghost"))

        assert body["component"] == "ghost"
        assert body["detail"] == "Component not found: ghost"

    def test_other_workflow_errors(self):
        body = problem_details(WorkflowError("generic"))

        assert body["component"] is None
        assert body["detail"] == "generic"


class TestCachedWorkflowService:
    """Test cases for CachedWorkflowService."""

    def setup_method(self):
        self.client = Mock(spec=Client)
        self.cache = Mock(spec=Cache)
        self.workflow = {"steps": [{"component": "uppercase", "input": "input", "output": "output"}]}
        self.service = CachedWorkflowService(self.client, self.workflow, self.cache)

    def _run(self, output):
        return WorkflowRun(id="r", status=RunStatus.COMPLETED, executed=["uppercase"], variables={"output": output})

    def test_cache_hit_skips_the_workflow(self):
        self.cache.get.return_value = "CACHED"

        assert self.service.process("abc") == "CACHED"
        self.cache.get.assert_called_once_with("business:abc")
        self.client.run.assert_not_called()

    def test_cache_miss_runs_and_stores(self):
        self.cache.get.return_value = None
        self.client.run.return_value = self._run("ABC")

        assert self.service.process("abc") == "ABC"
        self.client.run.assert_called_once_with(self.service.workflow, inputs={"input": "abc"})
        self.cache.put.assert_called_once_with("business:abc", "ABC")

    def test_none_output_is_not_cached(self):
        self.cache.get.return_value = None
        self.client.run.return_value = self._run(None)

        assert self.service.process("abc") is None
        self.cache.put.assert_not_called()

    def test_invalidate(self):
        self.service.invalidate("abc")

        self.cache.invalidate.assert_called_once_with("business:abc")
