"""
Built-in workflow components.
"""

from nodechain.components.data import FetchDataComponent, LoggerComponent, TransformDataComponent
from nodechain.components.flow import IfComponent, RespondToWebhookComponent, SetComponent, WebhookComponent
from nodechain.components.http import HttpRequestComponent
from nodechain.components.text import SuffixComponent, TrimComponent, UppercaseComponent

__all__ = [
    "WebhookComponent",
    "IfComponent",
    "SetComponent",
    "RespondToWebhookComponent",
    "HttpRequestComponent",
    "FetchDataComponent",
    "TransformDataComponent",
    "LoggerComponent",
    "TrimComponent",
    "UppercaseComponent",
    "SuffixComponent",
]
