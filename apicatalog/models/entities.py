"""Catalog entity dataclasses.

SystemEntity <- ServiceEntity -> ApiEntity

Entities are immutable. The provided-API list of a service is filled in by
the graph assembler, which builds a new record with dataclasses.replace
rather than mutating the one produced during traversal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from apicatalog.config import (
    API_TYPE,
    COMPONENT_TYPE,
    DEFAULT_LIFECYCLE,
    DEFAULT_OWNER,
    LINK_TITLE,
)
from apicatalog.models.types import EntityKind

MANAGED_BY_LOCATION = "backstage.io/managed-by-location"
MANAGED_BY_ORIGIN_LOCATION = "backstage.io/managed-by-origin-location"


def _annotations(remote_url: str) -> dict[str, str]:
    location = f"url:{remote_url}"
    return {
        MANAGED_BY_LOCATION: location,
        MANAGED_BY_ORIGIN_LOCATION: location,
    }


@dataclass(frozen=True)
class EntityLink:
    """An external link shown on the entity page."""

    url: str
    title: str = LINK_TITLE

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "url": self.url}


@dataclass(frozen=True)
class SystemEntity:
    """One top-level API domain."""

    name: str
    remote_url: str
    link: EntityLink
    owner: str = DEFAULT_OWNER

    kind = EntityKind.SYSTEM

    @property
    def entity_ref(self) -> str:
        return f"system:{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": "backstage.io/v1beta1",
            "kind": self.kind.value,
            "metadata": {
                "name": self.name,
                "annotations": _annotations(self.remote_url),
                "links": [self.link.to_dict()],
            },
            "spec": {
                "owner": self.owner,
            },
        }


@dataclass(frozen=True)
class ServiceEntity:
    """One service directory, emitted as a catalog Component."""

    name: str
    system: str
    remote_url: str
    link: EntityLink
    title: str | None = None
    description: str = ""
    owner: str = DEFAULT_OWNER
    lifecycle: str = DEFAULT_LIFECYCLE
    provides_apis: tuple[str, ...] = ()

    kind = EntityKind.COMPONENT

    @property
    def entity_ref(self) -> str:
        return f"component:{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": "backstage.io/v1beta1",
            "kind": self.kind.value,
            "metadata": {
                "name": self.name,
                "title": self.title,
                "description": self.description,
                "annotations": _annotations(self.remote_url),
                "links": [self.link.to_dict()],
            },
            "spec": {
                "type": COMPONENT_TYPE,
                "lifecycle": self.lifecycle,
                "system": self.system,
                "owner": self.owner,
                "providesApis": list(self.provides_apis),
            },
        }


@dataclass(frozen=True)
class ApiFile:
    """A schema file referenced by an API through an import line."""

    file_name: str
    file_path: str

    def to_dict(self) -> dict[str, str]:
        return {"file_name": self.file_name, "file_path": self.file_path}


@dataclass(frozen=True)
class ApiEntity:
    """One schema-defined service interface."""

    name: str
    namespace: str
    remote_url: str
    definition_url: str
    files: tuple[ApiFile, ...] = field(default_factory=tuple)
    owner: str = DEFAULT_OWNER
    lifecycle: str = DEFAULT_LIFECYCLE

    kind = EntityKind.API

    @property
    def provided_ref(self) -> str:
        """Reference recorded in the owning service's provided-API list."""
        return f"{self.namespace}/{self.name}"

    @property
    def entity_ref(self) -> str:
        return f"api:{self.provided_ref}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": "backstage.io/v1alpha1",
            "kind": self.kind.value,
            "metadata": {
                "name": self.name,
                "namespace": self.namespace,
                "annotations": _annotations(self.remote_url),
            },
            "spec": {
                "type": API_TYPE,
                "lifecycle": self.lifecycle,
                "owner": self.owner,
                "definition": {
                    "$text": self.definition_url,
                },
                "files": [f.to_dict() for f in self.files],
            },
        }


CatalogEntity = SystemEntity | ServiceEntity | ApiEntity
