"""TreeWalker: discovers systems, services and APIs in a mirrored tree.

Walks the domain root of the API tree in three phases:

1. Systems: one per direct subdirectory of the domain root
2. Services: depth-first per system; a directory holding a service
   descriptor is a service and its subtree is not entered
3. APIs: one per schema file directly inside a service directory that
   declares a service

Entities are keyed by directory path while walking. Re-keying by entity
reference happens in the graph assembler.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from apicatalog.config import SCHEMA_SUFFIX
from apicatalog.core.errors import DescriptorError
from apicatalog.core.paths import sorted_entries
from apicatalog.discovery.resolver import ImportResolver
from apicatalog.models.entities import ApiEntity, EntityLink, ServiceEntity, SystemEntity
from apicatalog.models.types import SourceTree
from apicatalog.parsing.descriptor import find_service_descriptor
from apicatalog.parsing.schema import parse_schema

logger = logging.getLogger(__name__)


@dataclass
class ApiAssociation:
    """A service directory providing an API, applied during assembly."""

    service_path: Path
    api_ref: str  # "<namespace>/<name>"


@dataclass
class DiscoveryResult:
    """Raw output of one walk, still keyed by filesystem path."""

    systems: dict[Path, SystemEntity] = field(default_factory=dict)
    services: dict[Path, ServiceEntity] = field(default_factory=dict)
    apis: list[ApiEntity] = field(default_factory=list)
    associations: list[ApiAssociation] = field(default_factory=list)


class TreeWalker:
    """Walks a source tree and builds catalog entities.

    Entries are visited in sorted order so repeated runs over the same
    tree produce the same entity order.
    """

    def __init__(self, tree: SourceTree, resolver: ImportResolver) -> None:
        self._tree = tree
        self._resolver = resolver

    def walk(self) -> DiscoveryResult:
        """Run all three discovery phases over the tree."""
        result = DiscoveryResult()
        result.systems = self.discover_systems()

        for system_path, system in result.systems.items():
            for service_path, service in self.discover_services(system_path, system):
                result.services[service_path] = service

        for service_path, service in result.services.items():
            for api in self.discover_apis(service_path, service):
                result.apis.append(api)
                result.associations.append(ApiAssociation(service_path, api.provided_ref))

        return result

    def discover_systems(self) -> dict[Path, SystemEntity]:
        """Create one system per direct subdirectory of the domain root."""
        systems: dict[Path, SystemEntity] = {}

        for entry in sorted_entries(self._tree.domain_root):
            if not entry.is_dir():
                continue

            logger.info("system_discovered name=%s path=%s", entry.name, entry)
            systems[entry] = SystemEntity(
                name=entry.name,
                remote_url=self._tree.remote_url,
                link=EntityLink(url=self._tree.browse_link(entry)),
            )

        return systems

    def discover_services(
        self, path: Path, system: SystemEntity
    ) -> Iterator[tuple[Path, ServiceEntity]]:
        """Yield (directory, service) pairs under path.

        A directory with a service descriptor yields one service and is not
        descended into. A directory with a malformed descriptor is logged
        and skipped together with its subtree.
        """
        try:
            descriptor = find_service_descriptor(path)
        except DescriptorError as e:
            logger.warning("descriptor_invalid path=%s reason=%s", e.path, e.reason)
            return

        if descriptor is not None:
            logger.info("service_discovered name=%s path=%s", descriptor.service_name, path)
            yield path, ServiceEntity(
                name=descriptor.service_name,
                system=system.name,
                remote_url=self._tree.remote_url,
                link=EntityLink(url=self._tree.browse_link(path)),
                title=descriptor.title,
                description=descriptor.description,
            )
            return

        for entry in sorted_entries(path):
            if entry.is_dir():
                yield from self.discover_services(entry, system)

    def discover_apis(self, path: Path, service: ServiceEntity) -> Iterator[ApiEntity]:
        """Yield one API per schema file in path that declares a service.

        Only files directly inside path are read. Files without a service
        line contribute nothing.
        """
        for entry in sorted_entries(path):
            if not entry.is_file() or entry.suffix != SCHEMA_SUFFIX:
                continue

            schema = parse_schema(entry.read_text(encoding="utf-8", errors="replace"))
            if schema.service_name is None:
                continue

            logger.debug(
                "api_discovered name=%s namespace=%s service=%s",
                schema.service_name,
                schema.namespace,
                service.name,
            )
            yield ApiEntity(
                name=schema.service_name,
                namespace=schema.namespace,
                remote_url=self._tree.remote_url,
                definition_url=self._tree.browse_link(entry),
                files=self._resolver.resolve_all(schema.imports),
            )
