"""Data Manager Python SDK.

Client for the topics and event types held by a Data Manager metadata server.
"""

from __future__ import annotations

from datamanager_sdk.client import DataManagerClient
from datamanager_sdk.exceptions import (
    DMAPIError,
    DMConnectionError,
    DMError,
    DMInvalidParameterError,
    DMNotAuthorizedError,
    DMNotFoundError,
    DMPropertyServerError,
)
from datamanager_sdk.models import EventBrokerScope, TemplateProperties, TopicScope
from datamanager_sdk.resources.event_types import EventTypeElement, EventTypeProperties
from datamanager_sdk.resources.topics import TopicElement, TopicProperties
from datamanager_sdk.settings import DataManagerSettings

__version__ = "0.1.0"

__all__ = [
    "DataManagerClient",
    "DataManagerSettings",
    "DMError",
    "DMAPIError",
    "DMConnectionError",
    "DMInvalidParameterError",
    "DMNotAuthorizedError",
    "DMNotFoundError",
    "DMPropertyServerError",
    "EventBrokerScope",
    "EventTypeElement",
    "EventTypeProperties",
    "TemplateProperties",
    "TopicElement",
    "TopicProperties",
    "TopicScope",
]
