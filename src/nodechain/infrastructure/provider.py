import requests

from nodechain.application.port import TraceProvider
from nodechain.components import (
    FetchDataComponent,
    HttpRequestComponent,
    IfComponent,
    LoggerComponent,
    RespondToWebhookComponent,
    SetComponent,
    SuffixComponent,
    TransformDataComponent,
    TrimComponent,
    UppercaseComponent,
    WebhookComponent,
)
from nodechain.config import Settings
from nodechain.domain.port import ComponentBase


def get_components(
    settings: Settings | None = None,
    trace_provider: TraceProvider | None = None,
    session: requests.Session | None = None,
) -> list[ComponentBase]:
    """Returns fresh instances of every built-in component."""
    return [
        WebhookComponent(),
        IfComponent(),
        SetComponent(),
        RespondToWebhookComponent(),
        HttpRequestComponent(session=session, trace_provider=trace_provider, settings=settings),
        FetchDataComponent(),
        TransformDataComponent(),
        LoggerComponent(),
        TrimComponent(),
        UppercaseComponent(),
        SuffixComponent(),
    ]
