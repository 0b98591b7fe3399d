import logging
from typing import Any

import requests

from nodechain.application.adapter import ExecutionContext, resolve
from nodechain.application.port import TraceProvider
from nodechain.config import Settings
from nodechain.domain.port import ComponentBase
from nodechain.domain.value_object import ComponentResult

log = logging.getLogger(__name__)

RESPONSE_KEY = "http_response"


class HttpRequestComponent(ComponentBase):
    """HTTP Request node for calling external services.

    Settings:
        url: target URL, may contain ${...} placeholders resolved against the context.
        method: HTTP method, defaults to Settings.http_method.
        headers: extra request headers.
        timeout: seconds, defaults to Settings.http_timeout.
        traceHeader: header carrying the current trace id, defaults to Settings.trace_header.
        failOnError: raise on transport or HTTP errors instead of returning an error result.

    The step input, when present, is sent as the JSON body. On success the
    response text is also stored in the context under ``http_response``.
    """

    name = "httpRequest"

    def __init__(
        self,
        session: requests.Session | None = None,
        trace_provider: TraceProvider | None = None,
        settings: Settings | None = None,
    ):
        self.session = session if session is not None else requests.Session()
        self.trace_provider = trace_provider
        self.settings = settings if settings is not None else Settings()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        headers.update(self.config.get("headers") or {})
        trace_id = self.trace_provider.current_trace_id() if self.trace_provider is not None else None
        if trace_id:
            headers[self.config.get_str("traceHeader", self.settings.trace_header)] = trace_id
        return headers

    def do_execute(self, ctx: ExecutionContext, input: Any) -> ComponentResult:
        template = self.config.get_str("url")
        if not template:
            raise ValueError("httpRequest requires a 'url' setting")
        url = resolve(template, ctx.bindings())
        method = (self.config.get_str("method") or self.settings.http_method).upper()

        request_kwargs: dict[str, Any] = {
            "headers": self._headers(),
            "timeout": self.config.get("timeout", self.settings.http_timeout),
        }
        if input is not None and method not in ("GET", "HEAD"):
            request_kwargs["json"] = input

        try:
            response = self.session.request(method, url, **request_kwargs)
            response.raise_for_status()
        except requests.RequestException as exc:
            if self.config.get_bool("failOnError", False):
                raise
            log.warning("%s %s failed: %s", method, url, exc)
            return ComponentResult.failure(str(exc))

        ctx.put(RESPONSE_KEY, response.text)
        return ComponentResult.ok(response.text)
