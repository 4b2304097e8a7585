"""Topic resource API."""

from __future__ import annotations

from datamanager_sdk.models import EventBrokerScope, MetadataElement, ReferenceableProperties
from datamanager_sdk.resources.base import SERVICE_URL_ROOT, EntityResource, ResourcePaths

_EDIT_ROOT = SERVICE_URL_ROOT + "/event-brokers/{event_broker_guid}/{event_broker_name}/topics"
_RETRIEVE_ROOT = SERVICE_URL_ROOT + "/topics"

TOPIC_PATHS = ResourcePaths(
    create=_EDIT_ROOT,
    create_from_template=_EDIT_ROOT + "/from-template/{template_guid}",
    update=_EDIT_ROOT + "/{guid}",
    remove=_EDIT_ROOT + "/{guid}/{qualified_name}/delete",
    publish=_RETRIEVE_ROOT + "/{guid}/publish",
    withdraw=_RETRIEVE_ROOT + "/{guid}/withdraw",
    find=_RETRIEVE_ROOT + "/by-search-string/{search_string}",
    by_name=_RETRIEVE_ROOT + "/by-name/{name}",
    for_parent=_EDIT_ROOT,
    by_guid=_RETRIEVE_ROOT + "/{guid}",
)


class TopicProperties(ReferenceableProperties):
    """Topic properties."""

    display_name: str | None = None
    description: str | None = None
    topic_type: str | None = None


class TopicElement(MetadataElement):
    """Topic model."""

    properties: TopicProperties | None = None


class TopicResource(EntityResource[TopicProperties, TopicElement, EventBrokerScope]):
    """Topic resource manager.

    Topics are created, updated and removed under the event broker that
    hosts them.

    Example:
        >>> broker = EventBrokerScope(event_broker_guid="b1", event_broker_name="kafka-prod")
        >>> guid = client.topics.create(
        ...     "erinoverview",
        ...     broker,
        ...     TopicProperties(qualified_name="kafka-prod.orders", display_name="orders"),
        ... )
    """

    paths = TOPIC_PATHS
    element_model = TopicElement
    entity_name = "topic"
    entity_plural = "topics"
