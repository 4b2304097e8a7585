"""Generic paged-CRUD resource shared by every entity kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from datamanager_sdk.exceptions import DMNotFoundError, DMPropertyServerError
from datamanager_sdk.models import NULL_REQUEST_BODY, MetadataElement, ReferenceableProperties, TemplateProperties
from datamanager_sdk.validation import InvalidParameterHandler

SERVICE_URL_ROOT = "/servers/{server}/open-metadata/access-services/data-manager/users/{user_id}"


class Invoker(Protocol):
    """What a resource needs from the client that sends its requests."""

    server_name: str
    max_page_size: int

    def request(
        self,
        http_method: str,
        method_name: str,
        url_template: str,
        *,
        path_params: dict[str, Any],
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...


class ParentScope(Protocol):
    def validate_scope(self, handler: InvalidParameterHandler, method_name: str) -> None: ...

    def path_params(self) -> dict[str, str]: ...


@dataclass(frozen=True)
class ResourcePaths:
    """URL templates for one entity kind, declared once."""

    create: str
    create_from_template: str
    update: str
    remove: str
    publish: str
    withdraw: str
    find: str
    by_name: str
    for_parent: str
    by_guid: str


PropertiesT = TypeVar("PropertiesT", bound=ReferenceableProperties)
ElementT = TypeVar("ElementT", bound=MetadataElement)
ScopeT = TypeVar("ScopeT", bound=ParentScope)


class EntityResource(Generic[PropertiesT, ElementT, ScopeT]):
    """Validate, fill in a URL template, call the server, unwrap the response.

    Subclasses declare ``paths``, ``element_model`` and the singular and
    plural entity names used in operation names.
    """

    paths: ClassVar[ResourcePaths]
    element_model: ClassVar[type[MetadataElement]]
    entity_name: ClassVar[str]
    entity_plural: ClassVar[str]

    def __init__(self, client: Invoker):
        self.client = client
        self.validator = InvalidParameterHandler(client.max_page_size)

    def create(self, user_id: str, parent_scope: ScopeT, properties: PropertiesT) -> str:
        """Create a new element under its parent.

        Returns:
            GUID of the new element
        """
        method_name = f"create_{self.entity_name}"
        self._validate_edit(user_id, parent_scope, properties, "properties", method_name)

        data = self.client.request(
            "POST",
            method_name,
            self.paths.create,
            path_params=self._path_params(user_id, **parent_scope.path_params()),
            json=properties.to_request_body(),
        )
        return self._unwrap_guid(data, method_name)

    def create_from_template(
        self,
        user_id: str,
        parent_scope: ScopeT,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> str:
        """Create a new element by copying an existing template element.

        Returns:
            GUID of the new element
        """
        method_name = f"create_{self.entity_name}_from_template"
        self._validate_edit(user_id, parent_scope, template_properties, "template_properties", method_name)
        self.validator.validate_guid(template_guid, "template_guid", method_name)

        data = self.client.request(
            "POST",
            method_name,
            self.paths.create_from_template,
            path_params=self._path_params(user_id, template_guid=template_guid, **parent_scope.path_params()),
            json=template_properties.to_request_body(),
        )
        return self._unwrap_guid(data, method_name)

    def update(
        self,
        user_id: str,
        parent_scope: ScopeT,
        guid: str,
        is_merge_update: bool,
        properties: PropertiesT,
    ) -> None:
        """Update an element's properties.

        With ``is_merge_update`` the supplied properties are merged into the
        stored ones, otherwise they replace them.
        """
        method_name = f"update_{self.entity_name}"
        self._validate_edit(user_id, parent_scope, properties, "properties", method_name)
        self.validator.validate_guid(guid, "guid", method_name)

        self.client.request(
            "POST",
            method_name,
            self.paths.update,
            path_params=self._path_params(user_id, guid=guid, **parent_scope.path_params()),
            params={"isMergeUpdate": str(is_merge_update).lower()},
            json=properties.to_request_body(),
        )

    def publish(self, user_id: str, guid: str) -> None:
        """Move the element into the published zones."""
        self._zone_transition(user_id, guid, self.paths.publish, f"publish_{self.entity_name}")

    def withdraw(self, user_id: str, guid: str) -> None:
        """Move the element back into the default zones."""
        self._zone_transition(user_id, guid, self.paths.withdraw, f"withdraw_{self.entity_name}")

    def remove(self, user_id: str, parent_scope: ScopeT, guid: str, qualified_name: str) -> None:
        """Delete the element. Its GUID is no longer valid afterwards."""
        method_name = f"remove_{self.entity_name}"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_object(parent_scope, "parent_scope", method_name)
        parent_scope.validate_scope(self.validator, method_name)
        self.validator.validate_guid(guid, "guid", method_name)
        self.validator.validate_name(qualified_name, "qualified_name", method_name)

        self.client.request(
            "POST",
            method_name,
            self.paths.remove,
            path_params=self._path_params(
                user_id, guid=guid, qualified_name=qualified_name, **parent_scope.path_params()
            ),
            json=NULL_REQUEST_BODY,
        )

    def find(self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 50) -> list[ElementT]:
        """Return elements whose names match a regular expression."""
        method_name = f"find_{self.entity_plural}"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_search_string(search_string, "search_string", method_name)
        page_size = self.validator.validate_paging(start_from, page_size, method_name)

        return self._get_page(
            method_name,
            self.paths.find,
            self._path_params(user_id, search_string=search_string),
            start_from,
            page_size,
        )

    def get_by_name(self, user_id: str, name: str, start_from: int = 0, page_size: int = 50) -> list[ElementT]:
        """Return elements whose name or qualified name is exactly ``name``."""
        method_name = f"get_{self.entity_plural}_by_name"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_name(name, "name", method_name)
        page_size = self.validator.validate_paging(start_from, page_size, method_name)

        return self._get_page(
            method_name,
            self.paths.by_name,
            self._path_params(user_id, name=name),
            start_from,
            page_size,
        )

    def list_for_parent(
        self, user_id: str, parent_scope: ScopeT, start_from: int = 0, page_size: int = 50
    ) -> list[ElementT]:
        """Return the elements owned by ``parent_scope``."""
        method_name = f"get_{self.entity_plural}_for_parent"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_object(parent_scope, "parent_scope", method_name)
        parent_scope.validate_scope(self.validator, method_name)
        page_size = self.validator.validate_paging(start_from, page_size, method_name)

        return self._get_page(
            method_name,
            self.paths.for_parent,
            self._path_params(user_id, **parent_scope.path_params()),
            start_from,
            page_size,
        )

    def get_by_guid(self, user_id: str, guid: str) -> ElementT:
        """Return the element with this GUID.

        Raises:
            DMNotFoundError: If the server has no such element
        """
        method_name = f"get_{self.entity_name}_by_guid"
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_guid(guid, "guid", method_name)

        data = self.client.request(
            "GET",
            method_name,
            self.paths.by_guid,
            path_params=self._path_params(user_id, guid=guid),
        )
        element = data.get("element")
        if element is None:
            raise DMNotFoundError(f"No {self.entity_name} found for GUID {guid}", 404, data)
        return self.element_model.model_validate(element)  # type: ignore[return-value]

    def _validate_edit(
        self,
        user_id: str,
        parent_scope: ScopeT,
        properties: ReferenceableProperties | TemplateProperties | None,
        properties_parameter_name: str,
        method_name: str,
    ) -> None:
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_object(parent_scope, "parent_scope", method_name)
        parent_scope.validate_scope(self.validator, method_name)
        self.validator.validate_object(properties, properties_parameter_name, method_name)
        self.validator.validate_name(properties.qualified_name, "qualified_name", method_name)  # type: ignore[union-attr]

    def _zone_transition(self, user_id: str, guid: str, url_template: str, method_name: str) -> None:
        self.validator.validate_user_id(user_id, method_name)
        self.validator.validate_guid(guid, "guid", method_name)

        self.client.request(
            "POST",
            method_name,
            url_template,
            path_params=self._path_params(user_id, guid=guid),
            json=NULL_REQUEST_BODY,
        )

    def _get_page(
        self,
        method_name: str,
        url_template: str,
        path_params: dict[str, Any],
        start_from: int,
        page_size: int,
    ) -> list[ElementT]:
        data = self.client.request(
            "GET",
            method_name,
            url_template,
            path_params=path_params,
            params={"startFrom": start_from, "pageSize": page_size},
        )
        elements = data.get("elementList") or []
        return [self.element_model.model_validate(item) for item in elements[:page_size]]  # type: ignore[misc]

    def _path_params(self, user_id: str, **extra: Any) -> dict[str, Any]:
        return {"server": self.client.server_name, "user_id": user_id, **extra}

    def _unwrap_guid(self, data: dict[str, Any], method_name: str) -> str:
        guid = data.get("guid")
        if not guid:
            raise DMPropertyServerError(f"No GUID returned by {method_name}", response_data=data)
        return guid
