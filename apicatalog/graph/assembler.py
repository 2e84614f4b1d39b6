"""Catalog graph assembly and querying.

Turns a path-keyed DiscoveryResult into the final entity graph keyed by
entity reference, with partOf and providesApi edges between entities.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import networkx as nx

from apicatalog.discovery.walker import DiscoveryResult
from apicatalog.models.entities import (
    ApiEntity,
    CatalogEntity,
    ServiceEntity,
    SystemEntity,
)

logger = logging.getLogger(__name__)

PART_OF = "partOf"
PROVIDES_API = "providesApi"


class CatalogGraph:
    """Systems, services and APIs with their relationships.

    Nodes are entity references ("system:x", "component:y", "api:ns/z").
    Edges point from a component to its system (partOf) and from a
    component to each API it provides (providesApi).
    """

    def __init__(self) -> None:
        """Initialize an empty catalog graph."""
        self._graph: nx.DiGraph = nx.DiGraph()
        self._systems: dict[str, SystemEntity] = {}
        self._services: dict[str, ServiceEntity] = {}
        self._apis: dict[str, ApiEntity] = {}

    @classmethod
    def from_discovery(cls, result: DiscoveryResult) -> CatalogGraph:
        """Build a graph from one discovery run."""
        graph = cls()
        graph.assemble(result)
        return graph

    def assemble(self, result: DiscoveryResult) -> None:
        """Merge a discovery result into the graph.

        1. Apply (service path, API) associations to service records
        2. Re-key every entity by its entity reference
        3. Add relationship edges

        When two entities share a reference the first one wins and the
        later one is dropped with a warning. A dropped service hands its
        provided APIs to the surviving one, so every API keeps a provider.

        Args:
            result: Path-keyed output of TreeWalker.walk().
        """
        self._graph.clear()
        self._systems.clear()
        self._services.clear()
        self._apis.clear()

        provided: dict[Path, list[str]] = {}
        for association in result.associations:
            refs = provided.setdefault(association.service_path, [])
            if association.api_ref not in refs:
                refs.append(association.api_ref)

        for system in result.systems.values():
            self._add(self._systems, system)

        for service_path, service in result.services.items():
            refs = tuple(provided.get(service_path, ()))
            service = replace(service, provides_apis=refs)
            if not self._add(self._services, service):
                # The surviving record takes over the dropped record's APIs
                existing = self._services[service.entity_ref]
                merged = existing.provides_apis + tuple(
                    ref for ref in refs if ref not in existing.provides_apis
                )
                self._services[service.entity_ref] = replace(existing, provides_apis=merged)

        for api in result.apis:
            self._add(self._apis, api)

        for service in self._services.values():
            system_ref = f"system:{service.system}"
            if system_ref in self._graph:
                self._graph.add_edge(service.entity_ref, system_ref, relation=PART_OF)
            for api_ref in service.provides_apis:
                api_node = f"api:{api_ref}"
                if api_node in self._graph:
                    self._graph.add_edge(service.entity_ref, api_node, relation=PROVIDES_API)

    def _add(self, index: dict[str, CatalogEntity], entity: CatalogEntity) -> bool:
        ref = entity.entity_ref
        if ref in index:
            logger.warning("duplicate_entity ref=%s", ref)
            return False
        index[ref] = entity
        self._graph.add_node(ref, kind=entity.kind.value)
        return True

    def entities(self) -> list[CatalogEntity]:
        """All entities: systems, then services, then APIs."""
        return [
            *self._systems.values(),
            *self._services.values(),
            *self._apis.values(),
        ]

    def services_for_system(self, system_name: str) -> list[ServiceEntity]:
        """Services that are part of a system."""
        system_ref = f"system:{system_name}"
        if system_ref not in self._graph:
            return []
        return [self._services[ref] for ref in self._graph.predecessors(system_ref)]

    def apis_for_system(self, system_name: str) -> list[ApiEntity]:
        """APIs provided by any service of a system."""
        apis: list[ApiEntity] = []
        for service in self.services_for_system(system_name):
            for ref in self._graph.successors(service.entity_ref):
                if ref in self._apis:
                    apis.append(self._apis[ref])
        return apis

    def provider_of(self, api_ref: str) -> ServiceEntity | None:
        """Service providing an API, given its "<namespace>/<name>" reference."""
        node = f"api:{api_ref}"
        if node not in self._graph:
            return None
        for ref in self._graph.predecessors(node):
            return self._services[ref]
        return None

    def system_for_api(self, api_ref: str) -> SystemEntity | None:
        """System an API belongs to through its providing service."""
        service = self.provider_of(api_ref)
        if service is None:
            return None
        return self._systems.get(f"system:{service.system}")

    @property
    def systems(self) -> dict[str, SystemEntity]:
        """Return all systems keyed by entity reference."""
        return self._systems.copy()

    @property
    def services(self) -> dict[str, ServiceEntity]:
        """Return all services keyed by entity reference."""
        return self._services.copy()

    @property
    def apis(self) -> dict[str, ApiEntity]:
        """Return all APIs keyed by entity reference."""
        return self._apis.copy()

    @property
    def node_count(self) -> int:
        """Return the number of entities."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Return the number of relationships."""
        return self._graph.number_of_edges()
