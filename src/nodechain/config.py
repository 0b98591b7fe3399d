import os
from collections.abc import Mapping

import msgspec

ENV_PREFIX = "NODECHAIN_"


class Settings(msgspec.Struct, kw_only=True, frozen=True):
    """Process-wide settings. Per-component settings live in ComponentConfig."""

    log_level: str = "INFO"
    trace_header: str = "X-Trace-Id"
    cache_max_size: int = 100
    cache_ttl_seconds: float = 600.0
    http_timeout: float = 30.0
    http_method: str = "POST"


def load_settings(environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX) -> Settings:
    """Builds Settings from ``NODECHAIN_*`` environment variables.

    ``NODECHAIN_CACHE_MAX_SIZE=50`` sets ``cache_max_size``; values are coerced
    from strings and unknown variables are ignored.
    """
    environ = os.environ if environ is None else environ
    raw = {key[len(prefix) :].lower(): value for key, value in environ.items() if key.startswith(prefix)}
    return msgspec.convert(raw, type=Settings, strict=False)
