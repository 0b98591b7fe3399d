from typing import Any

import pytest

from nodechain.application.adapter import ExecutionContext
from nodechain.application.port import StepLogger
from nodechain.domain.port import ComponentBase


class RecordingStepLogger(StepLogger):
    """Keeps every step message in memory as (level, step, message, cause) tuples."""

    def __init__(self):
        self.records: list[tuple[str, str, str, BaseException | None]] = []
        self.bound_to: list[str] = []

    def info(self, step: str, message: str) -> None:
        self.records.append(("info", step, message, None))

    def error(self, step: str, message: str, cause: BaseException | None = None) -> None:
        self.records.append(("error", step, message, cause))

    def bind(self, correlation_id: str) -> "RecordingStepLogger":
        self.bound_to.append(correlation_id)
        return self

    def messages(self, step: str | None = None) -> list[str]:
        return [message for _, s, message, _ in self.records if step is None or s == step]


class EchoComponent(ComponentBase):
    """Returns its input unchanged and counts calls."""

    def __init__(self, name: str = "echo"):
        self.name = name
        self.calls: list[Any] = []

    def do_execute(self, ctx: ExecutionContext, input: Any) -> Any:
        self.calls.append(input)
        return input


class BoomComponent(ComponentBase):
    """Always raises the configured exception."""

    def __init__(self, name: str = "boom", error: Exception | None = None):
        self.name = name
        self.error = error if error is not None else RuntimeError("boom")

    def do_execute(self, ctx: ExecutionContext, input: Any) -> Any:
        raise self.error


@pytest.fixture
def step_logger() -> RecordingStepLogger:
    return RecordingStepLogger()


@pytest.fixture
def ctx(step_logger) -> ExecutionContext:
    return ExecutionContext("test-run", step_logger)


@pytest.fixture
def echo_factory():
    return EchoComponent


@pytest.fixture
def boom_factory():
    return BoomComponent
