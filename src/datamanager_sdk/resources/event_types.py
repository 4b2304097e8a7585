"""Event type resource API."""

from __future__ import annotations

from datamanager_sdk.models import MetadataElement, ReferenceableProperties, TopicScope
from datamanager_sdk.resources.base import SERVICE_URL_ROOT, EntityResource, ResourcePaths

_BROKER_ROOT = SERVICE_URL_ROOT + "/event-brokers/{event_broker_guid}/{event_broker_name}/topics"
_RETRIEVE_ROOT = SERVICE_URL_ROOT + "/topics"

EVENT_TYPE_PATHS = ResourcePaths(
    create=_BROKER_ROOT + "/{topic_guid}/event-types",
    create_from_template=_BROKER_ROOT + "/{topic_guid}/event-types/from-template/{template_guid}",
    update=_BROKER_ROOT + "/event-types/{guid}",
    remove=_BROKER_ROOT + "/event-types/{guid}/{qualified_name}/delete",
    publish=_RETRIEVE_ROOT + "/event-types/{guid}/publish",
    withdraw=_RETRIEVE_ROOT + "/event-types/{guid}/withdraw",
    find=_RETRIEVE_ROOT + "/event-types/by-search-string/{search_string}",
    by_name=_RETRIEVE_ROOT + "/event-types/by-name/{name}",
    for_parent=_RETRIEVE_ROOT + "/{topic_guid}/event-types",
    by_guid=_RETRIEVE_ROOT + "/event-types/{guid}",
)

EVENT_SET_EVENT_TYPES_PATH = SERVICE_URL_ROOT + "/event-sets/{event_set_guid}/event-types"


class EventTypeProperties(ReferenceableProperties):
    """Event type (event schema) properties."""

    display_name: str | None = None
    description: str | None = None
    version_number: str | None = None
    author: str | None = None
    usage: str | None = None
    encoding_standard: str | None = None
    namespace: str | None = None
    is_deprecated: bool | None = None


class EventTypeElement(MetadataElement):
    """Event type model."""

    properties: EventTypeProperties | None = None


class EventTypeResource(EntityResource[EventTypeProperties, EventTypeElement, TopicScope]):
    """Event type resource manager.

    Event types belong to a topic, so their parent scope is the topic together
    with the event broker that hosts it.
    """

    paths = EVENT_TYPE_PATHS
    element_model = EventTypeElement
    entity_name = "event_type"
    entity_plural = "event_types"

    def list_for_event_set(
        self,
        user_id: str,
        event_set_guid: str,
        start_from: int = 0,
        page_size: int = 50,
    ) -> list[EventTypeElement]:
        """List the event types collected in an event set.

        Args:
            user_id: Calling user
            event_set_guid: GUID of the event set
            start_from: Index of the first result
            page_size: Maximum number of results

        Returns:
            List of event types

        Example:
            >>> event_types = client.event_types.list_for_event_set("erinoverview", event_set_guid)
        """
        method_name = "get_event_types_for_event_set"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_guid(event_set_guid, "event_set_guid", method_name)
        page_size = self.validator.validate_paging(start_from, page_size, method_name)

        return self._get_page(
            method_name,
            EVENT_SET_EVENT_TYPES_PATH,
            self._path_params(user_id, event_set_guid=event_set_guid),
            start_from,
            page_size,
        )
