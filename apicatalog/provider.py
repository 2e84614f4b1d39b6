"""GoogleapisProvider: publishes systems, services and APIs from googleapis.

One run mirrors the source trees, walks the API tree, assembles the
catalog graph and publishes it as a single full-replacement mutation.
Runs are sequential; a second run() while one is in progress is rejected.
"""

from __future__ import annotations

import logging
import threading

from apicatalog.config import (
    LOCATION_KEY_PREFIX,
    PRIMARY_TREE,
    SOURCE_NAME,
    SOURCE_TREES,
)
from apicatalog.core.errors import ProviderBusyError, ProviderNotConnectedError
from apicatalog.discovery.resolver import ImportResolver
from apicatalog.discovery.walker import TreeWalker
from apicatalog.graph.assembler import CatalogGraph
from apicatalog.mirror.git import ensure_tree
from apicatalog.models.types import SourceTree
from apicatalog.publish.protocols import EntityProviderConnection
from apicatalog.publish.snapshot import build_full_mutation

logger = logging.getLogger(__name__)


class GoogleapisProvider:
    """Entity provider backed by the googleapis and protobuf trees.

    Implements the EntityProvider protocol from apicatalog.publish.protocols.
    """

    def __init__(
        self,
        env: str,
        trees: dict[str, SourceTree] | None = None,
        primary: str = PRIMARY_TREE,
    ) -> None:
        """Create a provider for one environment.

        Args:
            env: Environment name, part of the provider identity
            trees: Source trees to mirror, keyed by name. The primary tree
                is walked; the first other tree backs import resolution.
            primary: Key of the tree to walk
        """
        self.env = env
        self._trees = dict(trees if trees is not None else SOURCE_TREES)
        self._primary = primary
        self._connection: EntityProviderConnection | None = None
        self._lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        """Stable provider name, e.g. "googleapis-production"."""
        return f"{SOURCE_NAME}-{self.env}"

    @property
    def location_key(self) -> str:
        """Location key every published entity is tagged with."""
        return f"{LOCATION_KEY_PREFIX}:{self.env}"

    def connect(self, connection: EntityProviderConnection) -> None:
        """Store the connection used by run()."""
        self._connection = connection

    def run(self) -> CatalogGraph:
        """Mirror, discover, assemble and publish.

        Returns:
            The published catalog graph

        Raises:
            ProviderNotConnectedError: If connect() was not called
            ProviderBusyError: If another run is in progress
            MirrorError: If a source tree could not be cloned
        """
        if self._connection is None:
            raise ProviderNotConnectedError(self.provider_name)

        if not self._lock.acquire(blocking=False):
            raise ProviderBusyError(self.provider_name)

        try:
            return self._run(self._connection)
        finally:
            self._lock.release()

    def _run(self, connection: EntityProviderConnection) -> CatalogGraph:
        for tree in self._trees.values():
            ensure_tree(tree)

        primary = self._trees[self._primary]
        walker = TreeWalker(primary, self._build_resolver(primary))
        result = walker.walk()
        graph = CatalogGraph.from_discovery(result)

        logger.info(
            "discovery_complete systems=%d services=%d apis=%d",
            len(graph.systems),
            len(graph.services),
            len(graph.apis),
        )

        mutation = build_full_mutation(graph, self.location_key)
        connection.apply_mutation(mutation)
        logger.info(
            "snapshot_published provider=%s entities=%d",
            self.provider_name,
            len(mutation.entities),
        )
        return graph

    def _build_resolver(self, primary: SourceTree) -> ImportResolver:
        fallbacks = [t for name, t in self._trees.items() if name != self._primary]
        secondary_root = fallbacks[0].import_root if fallbacks else primary.import_root
        return ImportResolver(primary.import_root, secondary_root)
