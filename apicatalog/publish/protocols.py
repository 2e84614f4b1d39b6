"""Provider and connection protocols (structural interfaces).

The catalog store is an external collaborator. Anything with a matching
apply_mutation method can receive the snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apicatalog.graph.assembler import CatalogGraph
    from apicatalog.publish.snapshot import FullMutation


class EntityProviderConnection(Protocol):
    """Handle to the catalog store handed to a provider on connect."""

    def apply_mutation(self, mutation: FullMutation) -> None:
        """Replace everything attributed to the provider with the mutation's entities."""
        ...


class EntityProvider(Protocol):
    """A source of catalog entities with a connect/run lifecycle."""

    @property
    def provider_name(self) -> str:
        """Stable name the store attributes entities to."""
        ...

    def connect(self, connection: EntityProviderConnection) -> None:
        """Store the connection used by run()."""
        ...

    def run(self) -> CatalogGraph:
        """Discover entities and publish them through the connection."""
        ...
