"""Webhook-style flow nodes: receive a payload, test it, set values, respond."""

from collections.abc import Mapping
from typing import Any

from nodechain.application.adapter import ExecutionContext, resolve_any
from nodechain.domain.port import ComponentBase


class WebhookComponent(ComponentBase):
    """Entry node. Passes the received payload through unchanged."""

    name = "webhook"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> Any:
        return input


class IfComponent(ComponentBase):
    """Compares ``value1`` with ``value2`` and returns ``{"condition": bool}``.

    Both settings may contain placeholders, resolved against the context.
    Without a ``value1`` setting the step input is compared instead. A missing
    left-hand value never matches.
    """

    name = "if"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> dict[str, bool]:
        bindings = ctx.bindings()
        left = resolve_any(self.config["value1"], bindings) if "value1" in self.config else input
        right = resolve_any(self.config.get("value2"), bindings)
        return {"condition": left is not None and left == right}


class SetComponent(ComponentBase):
    """Writes the configured ``values`` (or the input mapping) into the context and returns them."""

    name = "set"

    def do_execute(self, ctx: ExecutionContext, input: Any) -> dict[str, Any]:
        values = self.config.get("values", input)
        if values is None:
            values = {}
        if not isinstance(values, Mapping):
            raise TypeError(f"set expects a mapping of values, got {type(values).__name__}")
        resolved = resolve_any(dict(values), ctx.bindings())
        for key, value in resolved.items():
            ctx.put(key, value)
        return resolved


class RespondToWebhookComponent(ComponentBase):
    """Builds the webhook response ``{"httpStatus": code, "body": body}``.

    Settings:
        responseCode: status code, default 200.
        body: response body; placeholders are resolved. Defaults to the step input.
        when / equals: optional guard. When the bound value at ``when`` differs
            from ``equals`` (default True) nothing is produced and None is returned.
    """

    name = "respondToWebhook"

    def __init__(self, name: str | None = None):
        if name:
            self.name = name

    def do_execute(self, ctx: ExecutionContext, input: Any) -> dict[str, Any] | None:
        bindings = ctx.bindings()
        guard = self.config.get_str("when")
        if guard is not None and bindings.get(guard) != self.config.get("equals", True):
            return None
        code = self.config.get_int("responseCode", 200)
        body = resolve_any(self.config["body"], bindings) if "body" in self.config else input
        return {"httpStatus": code, "body": body}
