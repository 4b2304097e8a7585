"""Data Manager SDK resource modules."""

from __future__ import annotations

from datamanager_sdk.resources.base import EntityResource, Invoker, ResourcePaths
from datamanager_sdk.resources.event_types import EventTypeElement, EventTypeProperties, EventTypeResource
from datamanager_sdk.resources.topics import TopicElement, TopicProperties, TopicResource

__all__ = [
    "EntityResource",
    "EventTypeElement",
    "EventTypeProperties",
    "EventTypeResource",
    "Invoker",
    "ResourcePaths",
    "TopicElement",
    "TopicProperties",
    "TopicResource",
]
