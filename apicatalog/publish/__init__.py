"""Snapshot publishing to the catalog store."""

from apicatalog.publish.protocols import EntityProvider, EntityProviderConnection
from apicatalog.publish.snapshot import (
    DeferredEntity,
    FullMutation,
    JsonFileConnection,
    build_full_mutation,
)

__all__ = [
    "DeferredEntity",
    "EntityProvider",
    "EntityProviderConnection",
    "FullMutation",
    "JsonFileConnection",
    "build_full_mutation",
]
