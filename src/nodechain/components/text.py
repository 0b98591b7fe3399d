from typing import Any

from nodechain.application.adapter import ExecutionContext
from nodechain.domain.port import ComponentBase


class TrimComponent(ComponentBase):
    name = "trim"

    def do_execute(self, ctx: ExecutionContext, input: str | None) -> str | None:
        return None if input is None else input.strip()


class UppercaseComponent(ComponentBase):
    name = "uppercase"

    def do_execute(self, ctx: ExecutionContext, input: str | None) -> str | None:
        return None if input is None else input.upper()


class SuffixComponent(ComponentBase):
    """Appends the configured ``suffix`` (default " - PROCESSED")."""

    name = "suffix"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> str | None:
        if input is None:
            return None
        return f"{input}{self.config.get_str('suffix', ' - PROCESSED')}"
