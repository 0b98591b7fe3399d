from typing import Any

from nodechain.application.adapter import ExecutionContext
from nodechain.domain.port import ComponentBase

DEFAULT_RECORDS = ({"id": 1, "name": "Test User"},)


class FetchDataComponent(ComponentBase):
    """Returns the configured ``records`` (a stub data source)."""

    name = "fetchData"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> list[dict[str, Any]]:
        records = self.config.get("records", DEFAULT_RECORDS)
        return [dict(record) for record in records]


class TransformDataComponent(ComponentBase):
    """Maps records to their upper-cased ``field`` (default ``name``)."""

    name = "transformData"

    def do_execute(self, ctx: ExecutionContext, input: list[dict[str, Any]]) -> list[str]:
        field = self.config.get_str("field", "name")
        return [str(record[field]).upper() for record in input]


class LoggerComponent(ComponentBase):
    name = "logger"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> None:
        ctx.logger().info(self.name, f"Logged input: {input}")
        return None
