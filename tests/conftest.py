"""Shared fixtures for the Data Manager SDK tests."""

from __future__ import annotations

import re
import threading
import uuid
from collections.abc import Iterator
from typing import Any, ClassVar

import pytest

from datamanager_sdk import DataManagerClient, DMNotFoundError, EventBrokerScope, TopicScope
from datamanager_sdk.resources import EventTypeResource, TopicResource

PLATFORM_URL = "http://localhost:9443"
SERVER_NAME = "mds1"


class StubInvoker:
    """In-memory stand-in for the metadata server.

    Dispatches on the operation name a resource passes to ``request``.
    """

    default_zones: ClassVar[list[str]] = ["data-lake"]
    published_zones: ClassVar[list[str]] = ["data-lake", "external-access"]

    def __init__(self, max_page_size: int = 1000):
        self.server_name = SERVER_NAME
        self.max_page_size = max_page_size
        self.calls: list[str] = []
        self._elements: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def request(
        self,
        http_method: str,
        method_name: str,
        url_template: str,
        *,
        path_params: dict[str, Any],
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        with self._lock:
            self.calls.append(method_name)
        kind = "event_type" if "event_type" in method_name else "topic"

        if method_name.startswith("create_"):
            return self._create(kind, path_params, json or {})
        if method_name.startswith("update_"):
            record = self._lookup(kind, path_params["guid"])
            body = {k: v for k, v in (json or {}).items() if k != "class"}
            if params and params.get("isMergeUpdate") == "true":
                record["properties"].update(body)
            else:
                record["properties"] = body
            return {}
        if method_name.startswith("publish_"):
            self._lookup(kind, path_params["guid"])["zones"] = list(self.published_zones)
            return {}
        if method_name.startswith("withdraw_"):
            self._lookup(kind, path_params["guid"])["zones"] = list(self.default_zones)
            return {}
        if method_name.startswith("remove_"):
            self._lookup(kind, path_params["guid"])
            with self._lock:
                del self._elements[path_params["guid"]]
            return {}
        if method_name.endswith("_by_guid"):
            return {"element": self._to_element(self._lookup(kind, path_params["guid"]))}

        if method_name.startswith("find_"):
            pattern = re.compile(path_params["search_string"])
            matches = [r for r in self._of_kind(kind) if pattern.search(r["properties"].get("qualifiedName", ""))]
        elif method_name.endswith("_by_name"):
            name = path_params["name"]
            matches = [
                r
                for r in self._of_kind(kind)
                if name in (r["properties"].get("qualifiedName"), r["properties"].get("displayName"))
            ]
        else:
            scope = {k: v for k, v in path_params.items() if k not in ("server", "user_id")}
            matches = [r for r in self._of_kind(kind) if r["scope"] == scope]

        start = params["startFrom"] if params else 0
        size = params["pageSize"] if params else len(matches)
        return {"elementList": [self._to_element(r) for r in matches[start : start + size]]}

    def _create(self, kind: str, path_params: dict[str, Any], body: dict[str, Any]) -> dict[str, Any]:
        guid = str(uuid.uuid4())
        scope = {
            k: v for k, v in path_params.items() if k not in ("server", "user_id", "template_guid")
        }
        properties = {k: v for k, v in body.items() if k != "class"}
        with self._lock:
            self._elements[guid] = {
                "guid": guid,
                "kind": kind,
                "scope": scope,
                "zones": list(self.default_zones),
                "properties": properties,
            }
        return {"guid": guid}

    def _lookup(self, kind: str, guid: str) -> dict[str, Any]:
        with self._lock:
            record = self._elements.get(guid)
        if record is None or record["kind"] != kind:
            raise DMNotFoundError(f"No {kind} found for GUID {guid}", 404)
        return record

    def _of_kind(self, kind: str) -> list[dict[str, Any]]:
        with self._lock:
            return [r for r in self._elements.values() if r["kind"] == kind]

    @staticmethod
    def _to_element(record: dict[str, Any]) -> dict[str, Any]:
        return {
            "elementHeader": {"guid": record["guid"], "zoneMembership": list(record["zones"])},
            "properties": dict(record["properties"]),
        }


@pytest.fixture
def client() -> Iterator[DataManagerClient]:
    with DataManagerClient(SERVER_NAME, PLATFORM_URL) as dm_client:
        yield dm_client


@pytest.fixture
def stub() -> StubInvoker:
    return StubInvoker()


@pytest.fixture
def stub_topics(stub: StubInvoker) -> TopicResource:
    return TopicResource(stub)


@pytest.fixture
def stub_event_types(stub: StubInvoker) -> EventTypeResource:
    return EventTypeResource(stub)


@pytest.fixture
def broker_scope() -> EventBrokerScope:
    return EventBrokerScope(event_broker_guid="b1", event_broker_name="kafka-prod")


@pytest.fixture
def topic_scope() -> TopicScope:
    return TopicScope(event_broker_guid="b1", event_broker_name="kafka-prod", topic_guid="t1")
