from collections.abc import Iterator, Mapping, Sequence, Set
from enum import Enum
from types import MappingProxyType
from typing import Any

import msgspec

# A step input key of "-" feeds ``None``; an output key of "-" drops the result.
NO_INPUT = "-"
DISCARD = "-"


class RunStatus(str, Enum):
    COMPLETED = "completed"
    STOPPED = "stopped"


class ResultStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ValueKind(str, Enum):
    """The kinds of values a context or config is expected to carry."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    MAPPING = "mapping"
    SEQUENCE = "sequence"

    @classmethod
    def of(cls, value: Any) -> "ValueKind | None":
        """Classifies a value, or returns None for anything outside the known kinds."""
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
            return cls.SEQUENCE
        return None

    def matches(self, value: Any) -> bool:
        return ValueKind.of(value) is self


class ComponentConfig(Mapping):
    """Read-only configuration handed to a component once, before it runs."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ComponentConfig({dict(self._values)!r})"

    def get_str(self, key: str, default: str | None = None) -> str | None:
        value = self._values.get(key)
        return default if value is None else str(value)

    def get_bool(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        return value if isinstance(value, bool) else default

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return default
        try:
            return int(value)
        except ValueError:
            return default


class ComponentResult(msgspec.Struct, frozen=True, forbid_unknown_fields=True):
    """Outcome of a component that reports upstream errors as values instead of raising."""

    status: ResultStatus
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any) -> "ComponentResult":
        return cls(status=ResultStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, message: str) -> "ComponentResult":
        return cls(status=ResultStatus.ERROR, error=message)

    @property
    def is_error(self) -> bool:
        return self.status is ResultStatus.ERROR
