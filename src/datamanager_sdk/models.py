"""Shared metadata models and parent scopes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from datamanager_sdk.validation import InvalidParameterHandler

NULL_REQUEST_BODY: dict[str, Any] = {"class": "NullRequestBody"}


class MetadataModel(BaseModel):
    """Base for wire models.

    Fields use camelCase on the wire. Attributes the SDK does not model are
    kept and sent back unchanged.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_request_body(self) -> dict[str, Any]:
        """Serialize with the class discriminator the server expects."""
        return {"class": type(self).__name__, **self.model_dump(by_alias=True, exclude_none=True)}


class ElementType(MetadataModel):
    """Open metadata type of an element."""

    type_name: str | None = None
    type_id: str | None = None
    super_type_names: list[str] | None = None


class ElementHeader(MetadataModel):
    """Header common to every element returned by the server."""

    guid: str
    type: ElementType | None = None
    origin: dict[str, Any] | None = None
    zone_membership: list[str] = []
    classifications: list[dict[str, Any]] = []


class ReferenceableProperties(MetadataModel):
    """Properties shared by every referenceable element."""

    qualified_name: str | None = None
    additional_properties: dict[str, str] | None = None
    type_name: str | None = None
    extended_properties: dict[str, Any] | None = None
    vendor_properties: dict[str, str] | None = None


class TemplateProperties(MetadataModel):
    """Overrides applied when a new element is cloned from a template."""

    qualified_name: str | None = None
    display_name: str | None = None
    description: str | None = None
    network_address: str | None = None


class MetadataElement(MetadataModel):
    """Element header plus its properties."""

    element_header: ElementHeader

    @property
    def guid(self) -> str:
        return self.element_header.guid


class EventBrokerScope(BaseModel):
    """Event broker that owns a set of topics."""

    model_config = ConfigDict(frozen=True)

    event_broker_guid: str
    event_broker_name: str

    def validate_scope(self, handler: InvalidParameterHandler, method_name: str) -> None:
        handler.validate_guid(self.event_broker_guid, "event_broker_guid", method_name)
        handler.validate_name(self.event_broker_name, "event_broker_name", method_name)

    def path_params(self) -> dict[str, str]:
        return {
            "event_broker_guid": self.event_broker_guid,
            "event_broker_name": self.event_broker_name,
        }


class TopicScope(EventBrokerScope):
    """Topic, within its event broker, that owns a set of event types."""

    topic_guid: str

    def validate_scope(self, handler: InvalidParameterHandler, method_name: str) -> None:
        super().validate_scope(handler, method_name)
        handler.validate_guid(self.topic_guid, "topic_guid", method_name)

    def path_params(self) -> dict[str, str]:
        return {**super().path_params(), "topic_guid": self.topic_guid}
